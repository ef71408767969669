"""Versioned schema migrations for the ``breaches`` table."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from .models import AccountItemRecord

Migration = Callable[[AsyncConnection], Awaitable[None]]

VERSION_TABLE = "breach_schema_migrations"


async def _create_breaches_table(conn: AsyncConnection) -> None:
    await conn.run_sync(AccountItemRecord.__table__.create, checkfirst=True)


# Ordered by version; a database records every version it has applied.
MIGRATIONS: tuple[tuple[int, Migration], ...] = ((1, _create_breaches_table),)

SCHEMA_VERSION = MIGRATIONS[-1][0]


async def current_version(conn: AsyncConnection) -> int:
    result = await conn.execute(text(f"SELECT MAX(version) FROM {VERSION_TABLE}"))
    return result.scalar() or 0


async def apply_migrations(engine: AsyncEngine) -> int:
    """Apply pending migrations and return the resulting schema version."""
    async with engine.begin() as conn:
        await conn.execute(
            text(f"CREATE TABLE IF NOT EXISTS {VERSION_TABLE} (version INTEGER PRIMARY KEY)")
        )
        applied = await current_version(conn)
        for version, migration in MIGRATIONS:
            if version <= applied:
                continue
            await migration(conn)
            await conn.execute(
                text(f"INSERT INTO {VERSION_TABLE} (version) VALUES (:version)"),
                {"version": version},
            )
            applied = version
        return applied


__all__ = ["MIGRATIONS", "SCHEMA_VERSION", "apply_migrations", "current_version"]
