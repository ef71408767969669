"""Custom persistence exceptions."""

from __future__ import annotations


class RepositoryError(RuntimeError):
    """Base class for persistence layer errors."""


class StoreReadError(RepositoryError):
    """Raised when an item could not be fetched from the store."""

    def __init__(self, partition_key: str, sort_key: str, detail: object) -> None:
        self.partition_key = partition_key
        self.sort_key = sort_key
        super().__init__(f"Error reading account {partition_key}/{sort_key}: {detail}")


class StoreWriteError(RepositoryError):
    """Raised when an item could not be written to the store."""

    def __init__(self, partition_key: str, sort_key: str, detail: object) -> None:
        self.partition_key = partition_key
        self.sort_key = sort_key
        super().__init__(f"Error adding account {partition_key}/{sort_key} to breach: {detail}")


class ConcurrencyError(StoreWriteError):
    """Raised when a conditional write finds the item changed since it was read."""

    def __init__(self, partition_key: str, sort_key: str) -> None:
        super().__init__(partition_key, sort_key, "item was modified since it was read")
