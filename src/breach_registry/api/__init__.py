"""Request/response adapter in front of the merger."""

from .exceptions import ApiError, SerializationError
from .handler import AddAccountsHandler, BodyEncoder
from .models import JSON_HEADERS, AddAccountsEvent, GatewayResponse, PathParameters

__all__ = [
    "JSON_HEADERS",
    "AddAccountsEvent",
    "AddAccountsHandler",
    "ApiError",
    "BodyEncoder",
    "GatewayResponse",
    "PathParameters",
    "SerializationError",
]
