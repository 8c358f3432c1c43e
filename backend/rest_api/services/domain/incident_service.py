"""
Incident Service.

Priority is not stored; it is computed from impact and urgency when the
incident is serialized (see IncidentOutput.priority).
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from rest_api.models import Incident
from rest_api.services.base_service import BaseCRUDService
from shared.config.constants import EntityKind
from shared.utils.schemas import IncidentOutput


class IncidentService(BaseCRUDService[Incident, IncidentOutput]):
    """Service for incidents. New incidents default to status ``open``."""

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=Incident,
            output_schema=IncidentOutput,
            entity_name="Incident",
            kind=EntityKind.INCIDENT,
        )
