"""Service container wiring application components."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from breach_registry.api import AddAccountsHandler
from breach_registry.config import AppSettings
from breach_registry.persistence.sqlite import SQLiteAccountStore, create_sqlite_account_store
from breach_registry.services import AccountBreachMerger

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Aggregates constructed services with shared configuration."""

    settings: AppSettings
    account_store: SQLiteAccountStore
    merger: AccountBreachMerger
    add_accounts_handler: AddAccountsHandler


def _ensure_sqlite_directory(database_url: str) -> None:
    if not database_url.startswith("sqlite"):
        return
    try:
        _, path = database_url.split(":///", maxsplit=1)
    except ValueError:
        return
    if not path or path == ":memory:":
        return
    db_path = Path(path).expanduser()
    db_path.parent.mkdir(parents=True, exist_ok=True)


def build_container(settings: AppSettings | None = None) -> ServiceContainer:
    """Construct the primary service container."""

    resolved_settings = settings or AppSettings.from_env()

    _ensure_sqlite_directory(resolved_settings.database_url)
    account_store = create_sqlite_account_store(resolved_settings.database_url)
    merger = AccountBreachMerger(
        account_store,
        conditional_writes=resolved_settings.conditional_writes,
    )
    handler = AddAccountsHandler(merger)
    logger.debug(
        "Built container for %s (conditional writes: %s)",
        resolved_settings.environment,
        resolved_settings.conditional_writes,
    )

    return ServiceContainer(
        settings=resolved_settings,
        account_store=account_store,
        merger=merger,
        add_accounts_handler=handler,
    )


__all__ = ["ServiceContainer", "build_container"]
