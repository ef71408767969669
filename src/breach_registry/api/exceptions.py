"""Transport adapter exceptions."""

from __future__ import annotations


class ApiError(RuntimeError):
    """Base class for request/response adapter failures."""


class SerializationError(ApiError):
    """Raised when a response body could not be serialized."""
