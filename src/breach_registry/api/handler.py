"""Adapter turning add-accounts events into JSON gateway responses."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from breach_registry.domain import InvalidEmailError
from breach_registry.persistence import ConcurrencyError, StoreReadError, StoreWriteError
from breach_registry.services import AccountBreachMerger, describe_update

from .exceptions import SerializationError
from .models import AddAccountsEvent, GatewayResponse

BodyEncoder = Callable[[Mapping[str, Any]], str]


class AddAccountsHandler:
    """Runs the merger for one event and reports the outcome as a response.

    Failures never escape ``handle``; each error kind maps to a status code
    and a ``{"message", "error"}`` body.
    """

    def __init__(
        self,
        merger: AccountBreachMerger,
        *,
        encoder: BodyEncoder = json.dumps,
        logger: logging.Logger | None = None,
    ) -> None:
        self._merger = merger
        self._encoder = encoder
        self._logger = logger or logging.getLogger(__name__)

    async def handle(self, event: AddAccountsEvent | Mapping[str, Any]) -> GatewayResponse:
        if not isinstance(event, AddAccountsEvent):
            try:
                event = AddAccountsEvent.model_validate(event)
            except ValidationError as exc:
                self._logger.warning("Rejected malformed event: %s", exc)
                return _failure(400, "InvalidEventError", f"Invalid request: {exc}")

        try:
            count = await self._merger.apply(event.accounts, event.breach_name)
            body = self._encode_success(count, event.breach_name)
        except InvalidEmailError as exc:
            self._logger.warning("Rejected batch for breach %s: %s", event.breach_name, exc)
            return _failure(400, type(exc).__name__, f"Invalid email: {exc}")
        except ConcurrencyError as exc:
            self._logger.warning("Write conflict for breach %s: %s", event.breach_name, exc)
            return _failure(409, type(exc).__name__, str(exc))
        except (StoreReadError, StoreWriteError) as exc:
            self._logger.warning("Store failure for breach %s: %s", event.breach_name, exc)
            return _failure(500, type(exc).__name__, str(exc))
        except SerializationError as exc:
            self._logger.exception("Could not encode response for breach %s", event.breach_name)
            return _failure(500, type(exc).__name__, str(exc))

        return GatewayResponse(status_code=200, body=body)

    def _encode_success(self, count: int, breach_name: str) -> str:
        payload = {"message": describe_update(count, breach_name), "updated": count}
        try:
            return self._encoder(payload)
        except (TypeError, ValueError) as exc:
            msg = f"Error encoding response body: {exc}"
            raise SerializationError(msg) from exc


def _failure(status_code: int, error: str, message: str) -> GatewayResponse:
    return GatewayResponse(
        status_code=status_code,
        body=json.dumps({"message": message, "error": error}),
    )


__all__ = ["AddAccountsHandler", "BodyEncoder"]
