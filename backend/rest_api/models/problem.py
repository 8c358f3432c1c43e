"""
Problem Models: Problem, ProblemIncidentRelation.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shared.config.constants import EnumTypeNames, Limits, ProblemStatus

from .base import Base, UUIDPrimaryKeyMixin, enum_type


class Problem(UUIDPrimaryKeyMixin, Base):
    """The underlying cause of one or more incidents."""

    __tablename__ = "problems"

    title: Mapped[str] = mapped_column(String(Limits.MAX_TITLE_LENGTH), nullable=False)
    status: Mapped[ProblemStatus] = mapped_column(
        enum_type(ProblemStatus, EnumTypeNames.PROBLEM_STATUS), nullable=False
    )
    detection_timedate: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    causes: Mapped[str] = mapped_column(Text, nullable=False)
    workarounds: Mapped[Optional[str]] = mapped_column(Text)
    resolutions: Mapped[Optional[str]] = mapped_column(Text)


class ProblemIncidentRelation(Base):
    """Links a problem to one of the incidents it caused."""

    __tablename__ = "problem_incident_relations"

    problem_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("problems.id", ondelete="CASCADE"), primary_key=True
    )
    incident_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("incidents.id", ondelete="CASCADE"), primary_key=True
    )
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
