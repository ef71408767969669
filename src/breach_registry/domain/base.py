"""Core base classes for domain models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable domain model base with strict validation."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_assignment=True)


class WireModel(BaseModel):
    """Immutable model whose persisted field names differ from attribute names."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)
