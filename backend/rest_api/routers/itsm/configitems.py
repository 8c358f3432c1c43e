"""
Configuration item endpoints.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rest_api.services.domain import ConfigItemService
from shared.infrastructure.db import get_db
from shared.utils.schemas import ConfigItemCreate, ConfigItemOutput, ConfigItemUpdate


router = APIRouter(prefix="/configitems", tags=["configitems"])


@router.get("", response_model=list[ConfigItemOutput])
def list_configitems(db: Session = Depends(get_db)) -> list[ConfigItemOutput]:
    """List all configuration items."""
    return ConfigItemService(db).list_all()


@router.post("", response_model=ConfigItemOutput, status_code=status.HTTP_201_CREATED)
def create_configitem(
    body: ConfigItemCreate,
    db: Session = Depends(get_db),
) -> ConfigItemOutput:
    """Create a configuration item. Status defaults to ``inactive``."""
    return ConfigItemService(db).create(body)


@router.get("/{ci_id}", response_model=ConfigItemOutput)
def get_configitem(ci_id: UUID, db: Session = Depends(get_db)) -> ConfigItemOutput:
    return ConfigItemService(db).get_by_id(ci_id)


@router.api_route("/{ci_id}", methods=["PUT", "PATCH"], response_model=ConfigItemOutput)
def update_configitem(
    ci_id: UUID,
    body: ConfigItemUpdate,
    db: Session = Depends(get_db),
) -> ConfigItemOutput:
    """
    Update a configuration item.

    Omitted fields are left unchanged; ``null`` clears an optional field.
    """
    return ConfigItemService(db).update(ci_id, body)


@router.delete("/{ci_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_configitem(ci_id: UUID, db: Session = Depends(get_db)) -> None:
    """Delete a configuration item together with its changes and incident links."""
    ConfigItemService(db).delete(ci_id)
