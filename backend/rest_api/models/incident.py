"""
Incident Models: Incident, IncidentCIRelation.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shared.config.constants import (
    EnumTypeNames,
    IncidentImpact,
    IncidentStatus,
    IncidentUrgency,
    Limits,
)

from .base import Base, UUIDPrimaryKeyMixin, enum_type


class Incident(UUIDPrimaryKeyMixin, Base):
    """
    An unplanned interruption or degradation of a service.
    Priority is derived from impact and urgency and never stored.
    """

    __tablename__ = "incidents"

    title: Mapped[str] = mapped_column(String(Limits.MAX_TITLE_LENGTH), nullable=False)
    status: Mapped[IncidentStatus] = mapped_column(
        enum_type(IncidentStatus, EnumTypeNames.INCIDENT_STATUS), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    resolved_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    impact: Mapped[IncidentImpact] = mapped_column(
        enum_type(IncidentImpact, EnumTypeNames.INCIDENT_IMPACT), nullable=False
    )
    urgency: Mapped[IncidentUrgency] = mapped_column(
        enum_type(IncidentUrgency, EnumTypeNames.INCIDENT_URGENCY), nullable=False
    )
    owner: Mapped[Optional[str]] = mapped_column(Text)
    assignee: Mapped[Optional[str]] = mapped_column(Text)
    description: Mapped[str] = mapped_column(Text, nullable=False)


class IncidentCIRelation(Base):
    """Links an incident to an affected configuration item."""

    __tablename__ = "incidents_ci_relations"

    incident_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("incidents.id", ondelete="CASCADE"), primary_key=True
    )
    ci_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("configitems.id", ondelete="CASCADE"), primary_key=True
    )
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
