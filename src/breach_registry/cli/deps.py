"""Shared CLI dependency helpers."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from breach_registry.config import AppSettings
from breach_registry.container import ServiceContainer, build_container

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _load_env_file() -> None:
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path)


@lru_cache(maxsize=1)
def get_container() -> ServiceContainer:
    """Return a cached service container for CLI commands."""

    _load_env_file()
    settings = AppSettings.from_env()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    return build_container(settings)


def reset_container() -> None:
    """Clear the cached container (useful for tests)."""

    get_container.cache_clear()
