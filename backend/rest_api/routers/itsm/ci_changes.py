"""
Change records of a configuration item, nested under /configitems/{ci_id}/changes.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rest_api.services.domain import CIChangeService
from shared.infrastructure.db import get_db
from shared.utils.schemas import CIChangeCreate, CIChangeOutput, CIChangeUpdate


router = APIRouter(prefix="/configitems/{ci_id}/changes", tags=["configitems"])


@router.get("", response_model=list[CIChangeOutput])
def list_ci_changes(ci_id: UUID, db: Session = Depends(get_db)) -> list[CIChangeOutput]:
    """List the changes of a configuration item, newest implementation first."""
    return CIChangeService(db).list_for_ci(ci_id)


@router.post("", response_model=CIChangeOutput, status_code=status.HTTP_201_CREATED)
def create_ci_change(
    ci_id: UUID,
    body: CIChangeCreate,
    db: Session = Depends(get_db),
) -> CIChangeOutput:
    return CIChangeService(db).create_for_ci(ci_id, body)


@router.get("/{change_id}", response_model=CIChangeOutput)
def get_ci_change(
    ci_id: UUID,
    change_id: UUID,
    db: Session = Depends(get_db),
) -> CIChangeOutput:
    return CIChangeService(db).get_for_ci(ci_id, change_id)


@router.api_route("/{change_id}", methods=["PUT", "PATCH"], response_model=CIChangeOutput)
def update_ci_change(
    ci_id: UUID,
    change_id: UUID,
    body: CIChangeUpdate,
    db: Session = Depends(get_db),
) -> CIChangeOutput:
    return CIChangeService(db).update_for_ci(ci_id, change_id, body)


@router.delete("/{change_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_ci_change(
    ci_id: UUID,
    change_id: UUID,
    db: Session = Depends(get_db),
) -> None:
    CIChangeService(db).delete_for_ci(ci_id, change_id)
