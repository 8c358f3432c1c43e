"""
Relation endpoints.

- /incidents/{incident_id}/configitems[/{ci_id}]
- /problems/{problem_id}/incidents[/{incident_id}]
- /changes/{rfc_id}/incidents[/{relation_id}]
- /changes/{rfc_id}/problems[/{relation_id}]

Creating a link checks the parent (path) first: a missing parent is 404, a
missing child (body) is 422. New links start with an empty description.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rest_api.services.domain import (
    IncidentCIRelationService,
    ProblemIncidentRelationService,
    RFCIncidentRelationService,
    RFCProblemRelationService,
)
from shared.infrastructure.db import get_db
from shared.utils.schemas import (
    IncidentCIRelationCreate,
    IncidentCIRelationOutput,
    ProblemIncidentRelationCreate,
    ProblemIncidentRelationOutput,
    RelationUpdate,
    RFCIncidentRelationCreate,
    RFCIncidentRelationOutput,
    RFCProblemRelationCreate,
    RFCProblemRelationOutput,
)


router = APIRouter(tags=["relations"])


# =============================================================================
# Incident ↔ Configuration Item
# =============================================================================


@router.get(
    "/incidents/{incident_id}/configitems",
    response_model=list[IncidentCIRelationOutput],
)
def list_incident_configitems(
    incident_id: UUID,
    db: Session = Depends(get_db),
) -> list[IncidentCIRelationOutput]:
    """List the configuration items affected by an incident."""
    return IncidentCIRelationService(db).list_for_parent(incident_id)


@router.post(
    "/incidents/{incident_id}/configitems",
    response_model=IncidentCIRelationOutput,
    status_code=status.HTTP_201_CREATED,
)
def relate_incident_configitem(
    incident_id: UUID,
    body: IncidentCIRelationCreate,
    db: Session = Depends(get_db),
) -> IncidentCIRelationOutput:
    return IncidentCIRelationService(db).create(incident_id, body.ci_id)


@router.put(
    "/incidents/{incident_id}/configitems/{ci_id}",
    response_model=IncidentCIRelationOutput,
)
def update_incident_configitem(
    incident_id: UUID,
    ci_id: UUID,
    body: RelationUpdate,
    db: Session = Depends(get_db),
) -> IncidentCIRelationOutput:
    return IncidentCIRelationService(db).update(incident_id, ci_id, body.description)


@router.delete(
    "/incidents/{incident_id}/configitems/{ci_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def unrelate_incident_configitem(
    incident_id: UUID,
    ci_id: UUID,
    db: Session = Depends(get_db),
) -> None:
    IncidentCIRelationService(db).delete(incident_id, ci_id)


# =============================================================================
# Problem ↔ Incident
# =============================================================================


@router.get(
    "/problems/{problem_id}/incidents",
    response_model=list[ProblemIncidentRelationOutput],
)
def list_problem_incidents(
    problem_id: UUID,
    db: Session = Depends(get_db),
) -> list[ProblemIncidentRelationOutput]:
    """List the incidents caused by a problem."""
    return ProblemIncidentRelationService(db).list_for_parent(problem_id)


@router.post(
    "/problems/{problem_id}/incidents",
    response_model=ProblemIncidentRelationOutput,
    status_code=status.HTTP_201_CREATED,
)
def relate_problem_incident(
    problem_id: UUID,
    body: ProblemIncidentRelationCreate,
    db: Session = Depends(get_db),
) -> ProblemIncidentRelationOutput:
    return ProblemIncidentRelationService(db).create(problem_id, body.incident_id)


@router.put(
    "/problems/{problem_id}/incidents/{incident_id}",
    response_model=ProblemIncidentRelationOutput,
)
def update_problem_incident(
    problem_id: UUID,
    incident_id: UUID,
    body: RelationUpdate,
    db: Session = Depends(get_db),
) -> ProblemIncidentRelationOutput:
    return ProblemIncidentRelationService(db).update(problem_id, incident_id, body.description)


@router.delete(
    "/problems/{problem_id}/incidents/{incident_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def unrelate_problem_incident(
    problem_id: UUID,
    incident_id: UUID,
    db: Session = Depends(get_db),
) -> None:
    ProblemIncidentRelationService(db).delete(problem_id, incident_id)


# =============================================================================
# Change Request ↔ Incident
# =============================================================================


@router.get(
    "/changes/{rfc_id}/incidents",
    response_model=list[RFCIncidentRelationOutput],
)
def list_change_incidents(
    rfc_id: UUID,
    db: Session = Depends(get_db),
) -> list[RFCIncidentRelationOutput]:
    return RFCIncidentRelationService(db).list_for_parent(rfc_id)


@router.post(
    "/changes/{rfc_id}/incidents",
    response_model=RFCIncidentRelationOutput,
    status_code=status.HTTP_201_CREATED,
)
def relate_change_incident(
    rfc_id: UUID,
    body: RFCIncidentRelationCreate,
    db: Session = Depends(get_db),
) -> RFCIncidentRelationOutput:
    return RFCIncidentRelationService(db).create(rfc_id, body.incident_id)


@router.put(
    "/changes/{rfc_id}/incidents/{relation_id}",
    response_model=RFCIncidentRelationOutput,
)
def update_change_incident(
    rfc_id: UUID,
    relation_id: UUID,
    body: RelationUpdate,
    db: Session = Depends(get_db),
) -> RFCIncidentRelationOutput:
    return RFCIncidentRelationService(db).update(rfc_id, relation_id, body.description)


@router.delete(
    "/changes/{rfc_id}/incidents/{relation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def unrelate_change_incident(
    rfc_id: UUID,
    relation_id: UUID,
    db: Session = Depends(get_db),
) -> None:
    RFCIncidentRelationService(db).delete(rfc_id, relation_id)


# =============================================================================
# Change Request ↔ Problem
# =============================================================================


@router.get(
    "/changes/{rfc_id}/problems",
    response_model=list[RFCProblemRelationOutput],
)
def list_change_problems(
    rfc_id: UUID,
    db: Session = Depends(get_db),
) -> list[RFCProblemRelationOutput]:
    return RFCProblemRelationService(db).list_for_parent(rfc_id)


@router.post(
    "/changes/{rfc_id}/problems",
    response_model=RFCProblemRelationOutput,
    status_code=status.HTTP_201_CREATED,
)
def relate_change_problem(
    rfc_id: UUID,
    body: RFCProblemRelationCreate,
    db: Session = Depends(get_db),
) -> RFCProblemRelationOutput:
    return RFCProblemRelationService(db).create(rfc_id, body.problem_id)


@router.put(
    "/changes/{rfc_id}/problems/{relation_id}",
    response_model=RFCProblemRelationOutput,
)
def update_change_problem(
    rfc_id: UUID,
    relation_id: UUID,
    body: RelationUpdate,
    db: Session = Depends(get_db),
) -> RFCProblemRelationOutput:
    return RFCProblemRelationService(db).update(rfc_id, relation_id, body.description)


@router.delete(
    "/changes/{rfc_id}/problems/{relation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def unrelate_change_problem(
    rfc_id: UUID,
    relation_id: UUID,
    db: Session = Depends(get_db),
) -> None:
    RFCProblemRelationService(db).delete(rfc_id, relation_id)
