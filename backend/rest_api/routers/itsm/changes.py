"""
Change request (RFC) endpoints.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rest_api.services.domain import RFCService
from shared.infrastructure.db import get_db
from shared.utils.schemas import RFCCreate, RFCOutput, RFCUpdate


router = APIRouter(prefix="/changes", tags=["changes"])


@router.get("", response_model=list[RFCOutput])
def list_changes(db: Session = Depends(get_db)) -> list[RFCOutput]:
    return RFCService(db).list_all()


@router.post("", response_model=RFCOutput, status_code=status.HTTP_201_CREATED)
def create_change(
    body: RFCCreate,
    db: Session = Depends(get_db),
) -> RFCOutput:
    """Submit a change request. Status defaults to ``open`` and created_at to now."""
    return RFCService(db).create(body)


@router.get("/{rfc_id}", response_model=RFCOutput)
def get_change(rfc_id: UUID, db: Session = Depends(get_db)) -> RFCOutput:
    return RFCService(db).get_by_id(rfc_id)


@router.api_route("/{rfc_id}", methods=["PUT", "PATCH"], response_model=RFCOutput)
def update_change(
    rfc_id: UUID,
    body: RFCUpdate,
    db: Session = Depends(get_db),
) -> RFCOutput:
    return RFCService(db).update(rfc_id, body)


@router.delete("/{rfc_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_change(rfc_id: UUID, db: Session = Depends(get_db)) -> None:
    RFCService(db).delete(rfc_id)
