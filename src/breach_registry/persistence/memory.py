"""In-memory account store for unit testing."""

from __future__ import annotations

from collections.abc import Sequence
from copy import deepcopy
from dataclasses import dataclass, field
from typing import TypeVar

from breach_registry.domain import AccountRecord, ItemKey, PartitionKey, SortKey
from breach_registry.persistence.errors import ConcurrencyError
from breach_registry.persistence.interfaces import (
    UNCONDITIONAL,
    AccountStore,
    ExpectedRecord,
)

T = TypeVar("T")


def _copy(value: T) -> T:
    return deepcopy(value)


@dataclass
class InMemoryAccountStore(AccountStore):
    _items: dict[ItemKey, AccountRecord] = field(default_factory=dict)

    async def get(
        self,
        partition_key: PartitionKey,
        sort_key: SortKey,
    ) -> AccountRecord | None:
        return _copy(self._items.get((partition_key, sort_key)))

    async def put(
        self,
        record: AccountRecord,
        *,
        expected: ExpectedRecord = UNCONDITIONAL,
    ) -> None:
        if expected is not UNCONDITIONAL and self._items.get(record.key) != expected:
            raise ConcurrencyError(record.partition_key, record.sort_key)
        self._items[record.key] = _copy(record)

    async def list_partition(self, partition_key: PartitionKey) -> Sequence[AccountRecord]:
        return [
            _copy(record)
            for (pk, _), record in sorted(self._items.items())
            if pk == partition_key
        ]

    def __len__(self) -> int:
        return len(self._items)
