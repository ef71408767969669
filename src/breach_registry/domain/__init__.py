"""Domain models for breach/account associations."""

from .account import (
    EMAIL_PATTERN,
    ENTITY_TYPE,
    KEY_PREFIX,
    AccountRecord,
    EmailIdentity,
    merge_breach,
    parse_accounts,
    parse_email,
)
from .base import DomainModel, WireModel
from .exceptions import DomainError, InvalidEmailError
from .types import BreachName, ItemKey, PartitionKey, SortKey

__all__ = [
    "EMAIL_PATTERN",
    "ENTITY_TYPE",
    "KEY_PREFIX",
    "AccountRecord",
    "BreachName",
    "DomainError",
    "DomainModel",
    "EmailIdentity",
    "InvalidEmailError",
    "ItemKey",
    "PartitionKey",
    "SortKey",
    "WireModel",
    "merge_breach",
    "parse_accounts",
    "parse_email",
]
