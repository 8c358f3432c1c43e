"""
Base class and shared column helpers for all SQLAlchemy ORM models.
"""

from __future__ import annotations

import uuid
from enum import Enum

from sqlalchemy import Enum as SQLEnum, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


def enum_type(enum_cls: type[Enum], name: str) -> SQLEnum:
    """
    Closed database enumeration stored by member value (lowercase name).

    ``name`` is the database type name (e.g. ``cistatus``).
    """
    return SQLEnum(
        enum_cls,
        name=name,
        values_callable=lambda members: [member.value for member in members],
        validate_strings=True,
    )


class UUIDPrimaryKeyMixin:
    """Generated UUID primary key."""

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"
