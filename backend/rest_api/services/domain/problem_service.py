"""
Problem Service.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from rest_api.models import Problem
from rest_api.services.base_service import BaseCRUDService
from shared.config.constants import EntityKind
from shared.utils.schemas import ProblemOutput


class ProblemService(BaseCRUDService[Problem, ProblemOutput]):
    """
    Service for problems.

    Problems record their detection time instead of a creation time;
    it defaults to now when omitted.
    """

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=Problem,
            output_schema=ProblemOutput,
            entity_name="Problem",
            kind=EntityKind.PROBLEM,
            timestamp_field="detection_timedate",
        )
