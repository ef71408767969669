"""Lightweight application configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no", ""}


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    database_url: str = "sqlite+aiosqlite:///breaches.db"
    conditional_writes: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("BREACH_ENV", cls.environment),
            database_url=os.getenv("BREACH_DATABASE_URL", cls.database_url),
            conditional_writes=_env_bool("BREACH_CONDITIONAL_WRITES", cls.conditional_writes),
            log_level=os.getenv("BREACH_LOG_LEVEL", cls.log_level).upper(),
        )


__all__ = ["AppSettings"]
