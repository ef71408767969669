"""Async SQLite account store implementation."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Any

from sqlalchemy import event, select
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from breach_registry.domain import AccountRecord, PartitionKey, SortKey
from breach_registry.persistence.errors import ConcurrencyError
from breach_registry.persistence.interfaces import (
    UNCONDITIONAL,
    AccountStore,
    ExpectedRecord,
)

from .migrations import apply_migrations
from .models import AccountItemRecord


def _to_domain(record: AccountItemRecord | None) -> AccountRecord | None:
    if record is None:
        return None
    return AccountRecord.model_validate(record.payload)


class SQLiteAccountStore(AccountStore):
    """Account store backed by a single SQLite table.

    Every call opens its own session and every ``put`` commits on its own;
    there is no transaction spanning several accounts. Transactions begin
    with ``BEGIN IMMEDIATE``, so a conditional ``put`` reads, compares and
    writes the item while holding the write lock.
    """

    def __init__(
        self,
        engine: AsyncEngine,
        session_factory: async_sessionmaker[AsyncSession],
        database_url: str,
    ) -> None:
        self._engine = engine
        self._session_factory = session_factory
        self._database_url = database_url
        self._migration_lock = asyncio.Lock()
        self._migrated = False

    @property
    def database_url(self) -> str:
        return self._database_url

    async def _ensure_migrated(self) -> None:
        async with self._migration_lock:
            if self._migrated:
                return
            await apply_migrations(self._engine)
            self._migrated = True

    async def get(
        self,
        partition_key: PartitionKey,
        sort_key: SortKey,
    ) -> AccountRecord | None:
        await self._ensure_migrated()
        async with self._session_factory() as session:
            record = await session.get(AccountItemRecord, (partition_key, sort_key))
            return _to_domain(record)

    async def put(
        self,
        record: AccountRecord,
        *,
        expected: ExpectedRecord = UNCONDITIONAL,
    ) -> None:
        await self._ensure_migrated()
        payload = record.to_item()
        async with self._session_factory() as session, session.begin():
            existing = await session.get(AccountItemRecord, record.key)
            if expected is not UNCONDITIONAL and _to_domain(existing) != expected:
                raise ConcurrencyError(record.partition_key, record.sort_key)
            if existing is None:
                session.add(
                    AccountItemRecord(
                        pk=record.partition_key,
                        sk=record.sort_key,
                        type=record.entity_type,
                        account=record.account,
                        payload=payload,
                    )
                )
            else:
                existing.type = record.entity_type
                existing.account = record.account
                existing.payload = payload

    async def list_partition(self, partition_key: PartitionKey) -> Sequence[AccountRecord]:
        await self._ensure_migrated()
        stmt = (
            select(AccountItemRecord)
            .where(AccountItemRecord.pk == partition_key)
            .order_by(AccountItemRecord.sk)
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [AccountRecord.model_validate(r.payload) for r in result.scalars().all()]

    async def close(self) -> None:
        await self._engine.dispose()


def _use_immediate_transactions(engine: AsyncEngine) -> None:
    """Take the database write lock when a transaction begins.

    The driver otherwise defers BEGIN until the first write, which would let
    the read-and-compare step of a conditional ``put`` run unlocked.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_begin(dbapi_connection: Any, connection_record: Any) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _begin_immediate(conn: Connection) -> None:
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_sqlite_account_store(database_url: str) -> SQLiteAccountStore:
    engine = create_async_engine(database_url, poolclass=NullPool)
    _use_immediate_transactions(engine)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    return SQLiteAccountStore(engine, session_factory, database_url)


__all__ = ["SQLiteAccountStore", "create_sqlite_account_store"]
