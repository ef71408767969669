"""Merge breach names into the stored records of a batch of accounts."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from breach_registry.domain import (
    AccountRecord,
    BreachName,
    EmailIdentity,
    merge_breach,
    parse_accounts,
)
from breach_registry.persistence import (
    UNCONDITIONAL,
    AccountStore,
    StoreReadError,
    StoreWriteError,
)


def describe_update(count: int, breach_name: BreachName) -> str:
    return f"Successfully added/updated {count} accounts to the {breach_name} breach."


class AccountBreachMerger:
    """Adds a breach to the records of a batch of accounts.

    Every email is validated before the store is touched. Accounts are then
    read, merged and written one at a time in input order; the first failure
    aborts the batch and writes already made for earlier accounts stay in
    place.

    With ``conditional_writes`` enabled each write is guarded by the record
    read just before it, so a concurrent update of the same account surfaces
    as ``ConcurrencyError`` instead of being overwritten.
    """

    def __init__(
        self,
        store: AccountStore,
        *,
        conditional_writes: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self._store = store
        self._conditional_writes = conditional_writes
        self._logger = logger or logging.getLogger(__name__)

    @property
    def conditional_writes(self) -> bool:
        return self._conditional_writes

    async def apply(self, raw_emails: Sequence[object], breach_name: BreachName) -> int:
        """Associate ``breach_name`` with every account and return the count."""

        identities = parse_accounts(raw_emails)
        for identity in identities:
            await self.merge_account(identity, breach_name)
        self._logger.info(
            "Added/updated %d accounts for breach %s",
            len(identities),
            breach_name,
        )
        return len(identities)

    async def merge_account(
        self,
        identity: EmailIdentity,
        breach_name: BreachName,
    ) -> AccountRecord:
        partition_key, sort_key = identity.key
        try:
            existing = await self._store.get(partition_key, sort_key)
        except StoreReadError:
            raise
        except Exception as exc:
            self._logger.warning("Reading account %s failed: %s", identity, exc)
            raise StoreReadError(partition_key, sort_key, exc) from exc

        record = AccountRecord.for_identity(identity, merge_breach(existing, breach_name))
        expected = existing if self._conditional_writes else UNCONDITIONAL
        try:
            await self._store.put(record, expected=expected)
        except StoreWriteError:
            raise
        except Exception as exc:
            self._logger.warning("Writing account %s failed: %s", identity, exc)
            raise StoreWriteError(partition_key, sort_key, exc) from exc

        self._logger.debug(
            "Account %s now in %d breaches (%s)",
            identity,
            len(record.breaches),
            "new" if existing is None else "updated",
        )
        return record


__all__ = ["AccountBreachMerger", "describe_update"]
