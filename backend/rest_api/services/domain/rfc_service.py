"""
Change Request (RFC) Service.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from rest_api.models import RFC
from rest_api.services.base_service import BaseCRUDService
from shared.config.constants import EntityKind
from shared.utils.schemas import RFCOutput


class RFCService(BaseCRUDService[RFC, RFCOutput]):
    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=RFC,
            output_schema=RFCOutput,
            entity_name="Change request",
            kind=EntityKind.RFC,
        )
