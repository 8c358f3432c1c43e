"""
Relation Services: links between incidents, configuration items, problems
and change requests.

Each service is a RelationService bound to one link table:

    Service                        Parent    Child      Link identified by
    IncidentCIRelationService      incident  CI         ci_id
    ProblemIncidentRelationService problem   incident   incident_id
    RFCIncidentRelationService     rfc       incident   relation id
    RFCProblemRelationService      rfc       problem    relation id
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from rest_api.models import (
    RFC,
    Incident,
    IncidentCIRelation,
    Problem,
    ProblemIncidentRelation,
    RFCIncidentRelation,
    RFCProblemRelation,
)
from rest_api.services.base_service import RelationService
from shared.utils.schemas import (
    IncidentCIRelationOutput,
    ProblemIncidentRelationOutput,
    RFCIncidentRelationOutput,
    RFCProblemRelationOutput,
)


class IncidentCIRelationService(RelationService[IncidentCIRelation, IncidentCIRelationOutput]):
    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=IncidentCIRelation,
            output_schema=IncidentCIRelationOutput,
            entity_name="Incident-CI relation",
            parent_model=Incident,
            parent_name="Incident",
            parent="incident_id",
            child="ci_id",
            key="ci_id",
        )


class ProblemIncidentRelationService(
    RelationService[ProblemIncidentRelation, ProblemIncidentRelationOutput]
):
    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=ProblemIncidentRelation,
            output_schema=ProblemIncidentRelationOutput,
            entity_name="Problem-incident relation",
            parent_model=Problem,
            parent_name="Problem",
            parent="problem_id",
            child="incident_id",
            key="incident_id",
        )


class RFCIncidentRelationService(RelationService[RFCIncidentRelation, RFCIncidentRelationOutput]):
    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=RFCIncidentRelation,
            output_schema=RFCIncidentRelationOutput,
            entity_name="Change-incident relation",
            parent_model=RFC,
            parent_name="Change request",
            parent="rfc_id",
            child="incident_id",
            key="id",
        )


class RFCProblemRelationService(RelationService[RFCProblemRelation, RFCProblemRelationOutput]):
    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=RFCProblemRelation,
            output_schema=RFCProblemRelationOutput,
            entity_name="Change-problem relation",
            parent_model=RFC,
            parent_name="Change request",
            parent="rfc_id",
            child="problem_id",
            key="id",
        )
