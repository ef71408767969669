"""Application services."""

from .merger import AccountBreachMerger, describe_update

__all__ = ["AccountBreachMerger", "describe_update"]
