"""
Configuration Models: ConfigItem, CIChange.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shared.config.constants import CIStatus, EnumTypeNames, Limits

from .base import Base, UUIDPrimaryKeyMixin, enum_type


class ConfigItem(UUIDPrimaryKeyMixin, Base):
    """A managed component of the IT infrastructure (server, service, device...)."""

    __tablename__ = "configitems"

    name: Mapped[str] = mapped_column(String(Limits.MAX_TITLE_LENGTH), nullable=False)
    status: Mapped[CIStatus] = mapped_column(
        enum_type(CIStatus, EnumTypeNames.CI_STATUS), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    type: Mapped[Optional[str]] = mapped_column(Text)
    owner: Mapped[Optional[str]] = mapped_column(Text)
    description: Mapped[str] = mapped_column(Text, nullable=False)


class CIChange(UUIDPrimaryKeyMixin, Base):
    """A dated documentation record of a change applied to one configuration item."""

    __tablename__ = "ci_changes"

    ci_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("configitems.id", ondelete="CASCADE"), nullable=False
    )
    implementation_timedate: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    documentation: Mapped[str] = mapped_column(Text, nullable=False)

    __table_args__ = (
        # Listing a CI's changes, newest first
        Index("ix_ci_changes_ci_implementation", "ci_id", "implementation_timedate"),
    )
