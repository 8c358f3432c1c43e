"""
Incident endpoints.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rest_api.services.domain import IncidentService
from shared.infrastructure.db import get_db
from shared.utils.schemas import IncidentCreate, IncidentOutput, IncidentUpdate


router = APIRouter(prefix="/incidents", tags=["incidents"])


@router.get("", response_model=list[IncidentOutput])
def list_incidents(db: Session = Depends(get_db)) -> list[IncidentOutput]:
    """List all incidents. Each carries its computed priority."""
    return IncidentService(db).list_all()


@router.post("", response_model=IncidentOutput, status_code=status.HTTP_201_CREATED)
def create_incident(
    body: IncidentCreate,
    db: Session = Depends(get_db),
) -> IncidentOutput:
    """Open an incident. Status defaults to ``open`` and created_at to now."""
    return IncidentService(db).create(body)


@router.get("/{incident_id}", response_model=IncidentOutput)
def get_incident(incident_id: UUID, db: Session = Depends(get_db)) -> IncidentOutput:
    return IncidentService(db).get_by_id(incident_id)


@router.api_route("/{incident_id}", methods=["PUT", "PATCH"], response_model=IncidentOutput)
def update_incident(
    incident_id: UUID,
    body: IncidentUpdate,
    db: Session = Depends(get_db),
) -> IncidentOutput:
    """
    Update an incident.

    Omitted fields are left unchanged; ``null`` clears an optional field.
    """
    return IncidentService(db).update(incident_id, body)


@router.delete("/{incident_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_incident(incident_id: UUID, db: Session = Depends(get_db)) -> None:
    IncidentService(db).delete(incident_id)
