"""
Change Models: RFC (request for change), RFCIncidentRelation, RFCProblemRelation.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shared.config.constants import EnumTypeNames, Limits, RFCStatus

from .base import Base, UUIDPrimaryKeyMixin, enum_type


class RFC(UUIDPrimaryKeyMixin, Base):
    """A request for change."""

    __tablename__ = "rfcs"

    title: Mapped[str] = mapped_column(String(Limits.MAX_TITLE_LENGTH), nullable=False)
    status: Mapped[RFCStatus] = mapped_column(
        enum_type(RFCStatus, EnumTypeNames.RFC_STATUS), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    finished_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    requester: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)


class RFCIncidentRelation(UUIDPrimaryKeyMixin, Base):
    """Links a change request to an incident. Identified by its own id."""

    __tablename__ = "rfc_incident_relations"

    rfc_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("rfcs.id", ondelete="CASCADE"), nullable=False
    )
    incident_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("incidents.id", ondelete="CASCADE"), nullable=False
    )
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    __table_args__ = (Index("ix_rfc_incident_relations_rfc", "rfc_id"),)


class RFCProblemRelation(UUIDPrimaryKeyMixin, Base):
    """Links a change request to a problem. Identified by its own id."""

    __tablename__ = "rfc_problem_relations"

    rfc_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("rfcs.id", ondelete="CASCADE"), nullable=False
    )
    problem_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("problems.id", ondelete="CASCADE"), nullable=False
    )
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    __table_args__ = (Index("ix_rfc_problem_relations_rfc", "rfc_id"),)
