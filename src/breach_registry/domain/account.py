"""Account identity and breach association models."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Annotated, Literal

from pydantic import Field, field_validator

from .base import DomainModel, WireModel
from .exceptions import InvalidEmailError
from .types import BreachName, ItemKey, PartitionKey, SortKey

ENTITY_TYPE = "Account"
KEY_PREFIX = "EMAIL#"

_LABEL = r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@" + _LABEL + r"(?:\." + _LABEL + r")*"
)


class EmailIdentity(DomainModel):
    """An email address split into the parts used to key its record."""

    alias: Annotated[str, Field(min_length=1)]
    domain: Annotated[str, Field(min_length=1)]

    @classmethod
    def parse(cls, raw: object) -> EmailIdentity:
        """Validate ``raw`` and split it at the ``@``.

        The grammar admits exactly one ``@``, so the split is unambiguous.
        Case is preserved.
        """

        if not isinstance(raw, str) or EMAIL_PATTERN.fullmatch(raw) is None:
            raise InvalidEmailError(raw)
        alias, domain = raw.split("@", 1)
        return cls(alias=alias, domain=domain)

    @property
    def account(self) -> str:
        return f"{self.alias}@{self.domain}"

    @property
    def partition_key(self) -> PartitionKey:
        return PartitionKey(f"{KEY_PREFIX}{self.domain}")

    @property
    def sort_key(self) -> SortKey:
        return SortKey(f"{KEY_PREFIX}{self.alias}")

    @property
    def key(self) -> ItemKey:
        return (self.partition_key, self.sort_key)

    def __str__(self) -> str:
        return self.account


class AccountRecord(WireModel):
    """Persisted association between one account and its breaches.

    Serialised with ``by_alias=True`` the record produces the stored item
    shape (``PK``, ``SK``, ``Type``, ``Account``, ``Breaches``).
    """

    partition_key: PartitionKey = Field(alias="PK")
    sort_key: SortKey = Field(alias="SK")
    entity_type: Literal["Account"] = Field(default=ENTITY_TYPE, alias="Type")
    account: str = Field(alias="Account")
    breaches: tuple[BreachName, ...] = Field(default=(), alias="Breaches")

    @field_validator("breaches", mode="before")
    @classmethod
    def dedupe_breaches(cls, value: object) -> object:
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        if isinstance(value, Iterable):
            # dict.fromkeys keeps first-seen order
            return tuple(dict.fromkeys(value))
        return value

    @classmethod
    def for_identity(
        cls,
        identity: EmailIdentity,
        breaches: Iterable[BreachName],
    ) -> AccountRecord:
        return cls(
            partition_key=identity.partition_key,
            sort_key=identity.sort_key,
            account=identity.account,
            breaches=tuple(breaches),
        )

    @property
    def key(self) -> ItemKey:
        return (self.partition_key, self.sort_key)

    def has_breach(self, breach_name: BreachName) -> bool:
        return breach_name in self.breaches

    def to_item(self) -> dict[str, object]:
        """Return the stored item mapping."""

        return self.model_dump(mode="json", by_alias=True)


def parse_email(raw: object) -> EmailIdentity:
    return EmailIdentity.parse(raw)


def parse_accounts(raw_emails: Iterable[object]) -> tuple[EmailIdentity, ...]:
    """Parse a whole batch, failing on the first invalid entry."""

    return tuple(EmailIdentity.parse(raw) for raw in raw_emails)


def merge_breach(
    existing: AccountRecord | None,
    breach_name: BreachName,
) -> tuple[BreachName, ...]:
    """Return the breach list of ``existing`` with ``breach_name`` added once."""

    if existing is None:
        return (breach_name,)
    if existing.has_breach(breach_name):
        return existing.breaches
    return (*existing.breaches, breach_name)


__all__ = [
    "ENTITY_TYPE",
    "EMAIL_PATTERN",
    "KEY_PREFIX",
    "AccountRecord",
    "EmailIdentity",
    "merge_breach",
    "parse_accounts",
    "parse_email",
]
