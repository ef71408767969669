"""Inbound event and outbound response shapes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

JSON_HEADERS = {"Content-Type": "application/json"}


class PathParameters(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    breach_name: Annotated[str, Field(alias="breachName", min_length=1)]


class AddAccountsEvent(BaseModel):
    """Request to associate a batch of raw emails with one breach."""

    model_config = ConfigDict(populate_by_name=True)

    # entries are validated as emails by the merger, so a non-string entry is
    # reported as an invalid email rather than a malformed event
    accounts: list[object] = Field(default_factory=list)
    path_parameters: PathParameters = Field(alias="pathParameters")

    @property
    def breach_name(self) -> str:
        return self.path_parameters.breach_name

    @classmethod
    def build(cls, accounts: Sequence[object], breach_name: str) -> AddAccountsEvent:
        return cls(accounts=list(accounts), path_parameters=PathParameters(breach_name=breach_name))


class GatewayResponse(BaseModel):
    """Proxy-integration style response with a JSON body."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status_code: int = Field(alias="statusCode")
    body: str = ""
    headers: dict[str, str] = Field(default_factory=lambda: dict(JSON_HEADERS))
    is_base64_encoded: bool = Field(default=False, alias="isBase64Encoded")

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def to_dict(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)


__all__ = ["JSON_HEADERS", "AddAccountsEvent", "GatewayResponse", "PathParameters"]
