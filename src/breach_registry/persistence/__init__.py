"""Account store abstractions and implementations."""

from .errors import ConcurrencyError, RepositoryError, StoreReadError, StoreWriteError
from .interfaces import UNCONDITIONAL, AccountStore, ExpectedRecord, WriteCondition
from .memory import InMemoryAccountStore

__all__ = [
    "UNCONDITIONAL",
    "AccountStore",
    "ConcurrencyError",
    "ExpectedRecord",
    "InMemoryAccountStore",
    "RepositoryError",
    "StoreReadError",
    "StoreWriteError",
    "WriteCondition",
]
