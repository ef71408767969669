"""Domain-level validation errors."""

from __future__ import annotations


class DomainError(ValueError):
    """Base class for invalid domain input."""


class InvalidEmailError(DomainError):
    """Raised when a raw string is not an acceptable email address."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"not a valid email address: {value}")
