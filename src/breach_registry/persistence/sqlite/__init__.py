"""SQLite persistence implementation."""

from .store import SQLiteAccountStore, create_sqlite_account_store

__all__ = ["SQLiteAccountStore", "create_sqlite_account_store"]
