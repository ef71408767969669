"""SQLAlchemy ORM models for the SQLite account store."""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.dialects.sqlite import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):  # type: ignore[misc]
    pass


class AccountItemRecord(Base):
    __tablename__ = "breaches"

    pk: Mapped[str] = mapped_column(String, primary_key=True)
    sk: Mapped[str] = mapped_column(String, primary_key=True)
    type: Mapped[str] = mapped_column(String, nullable=False)
    account: Mapped[str] = mapped_column(String, nullable=False)
    payload: Mapped[dict] = mapped_column(JSON, nullable=False)
