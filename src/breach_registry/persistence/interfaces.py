"""Persistence layer abstractions for the account store."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Final, Protocol

from breach_registry.domain import AccountRecord, PartitionKey, SortKey


class WriteCondition(Enum):
    """Sentinel for writes that do not check the stored item first."""

    UNCONDITIONAL = "unconditional"


UNCONDITIONAL: Final = WriteCondition.UNCONDITIONAL

ExpectedRecord = AccountRecord | None | WriteCondition


class AccountStore(Protocol):
    """Key-value access to account records by composite key.

    ``put`` replaces the whole item. When ``expected`` is given (a record, or
    ``None`` for "must not exist") the store raises ``ConcurrencyError``
    instead of writing if the stored item does not match it.
    """

    async def get(
        self,
        partition_key: PartitionKey,
        sort_key: SortKey,
    ) -> AccountRecord | None: ...

    async def put(
        self,
        record: AccountRecord,
        *,
        expected: ExpectedRecord = UNCONDITIONAL,
    ) -> None: ...

    async def list_partition(self, partition_key: PartitionKey) -> Sequence[AccountRecord]: ...
