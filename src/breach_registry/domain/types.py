"""Shared type aliases for the domain layer."""

from __future__ import annotations

from typing import NewType

PartitionKey = NewType("PartitionKey", str)
SortKey = NewType("SortKey", str)
ItemKey = tuple[PartitionKey, SortKey]
BreachName = str

__all__ = [
    "BreachName",
    "ItemKey",
    "PartitionKey",
    "SortKey",
]
