"""
CI Change Service.

Changes are nested under a configuration item: every operation is scoped by
the parent CI id, and create/list first check that the CI exists.

Usage:
    from rest_api.services.domain import CIChangeService

    service = CIChangeService(db)
    changes = service.list_for_ci(ci_id)  # newest implementation first
"""

from __future__ import annotations

import uuid

from sqlalchemy.orm import Session

from rest_api.models import CIChange, ConfigItem
from rest_api.services.base_service import BaseCRUDService
from rest_api.services.crud.repository import BaseRepository
from shared.config.constants import EntityKind
from shared.config.logging import get_logger
from shared.infrastructure.db import safe_commit, storage_errors
from shared.utils.exceptions import NotFoundError
from shared.utils.schemas import CIChangeCreate, CIChangeOutput, CIChangeUpdate

logger = get_logger(__name__)


class CIChangeService(BaseCRUDService[CIChange, CIChangeOutput]):
    """
    Service for the change records of a configuration item.

    Business rules:
    - A change always belongs to an existing CI
    - Changes are listed newest implementation first
    - implementation_timedate and documentation cannot be cleared
    """

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=CIChange,
            output_schema=CIChangeOutput,
            entity_name="CI change",
            kind=EntityKind.CI_CHANGE,
            timestamp_field=None,
        )
        self._ci_repo = BaseRepository(ConfigItem, db)

    def _ensure_ci(self, ci_id: uuid.UUID) -> None:
        if not self._ci_repo.exists(ci_id):
            raise NotFoundError("Configuration item", ci_id)

    # =========================================================================
    # Query Methods
    # =========================================================================

    def list_for_ci(self, ci_id: uuid.UUID) -> list[CIChangeOutput]:
        with storage_errors(self._db, "list CI changes", ci_id=str(ci_id)):
            self._ensure_ci(ci_id)
            changes = self._repo.find_all(
                CIChange.ci_id == ci_id,
                order_by=CIChange.implementation_timedate.desc(),
            )
            return [self.to_output(change) for change in changes]

    def get_for_ci(self, ci_id: uuid.UUID, change_id: uuid.UUID) -> CIChangeOutput:
        with storage_errors(self._db, "read CI change", ci_id=str(ci_id)):
            change = self._repo.find_one(CIChange.id == change_id, CIChange.ci_id == ci_id)

        if change is None:
            raise NotFoundError(self._entity_name, change_id, ci_id=str(ci_id))

        return self.to_output(change)

    # =========================================================================
    # Command Methods
    # =========================================================================

    def create_for_ci(self, ci_id: uuid.UUID, data: CIChangeCreate) -> CIChangeOutput:
        """
        Raises:
            NotFoundError: If the CI does not exist (nothing is written).
        """
        with storage_errors(self._db, "create CI change", ci_id=str(ci_id)):
            self._ensure_ci(ci_id)
            change = self._repo.add(CIChange(ci_id=ci_id, **data.model_dump()))
            safe_commit(self._db)
            self._db.refresh(change)

        logger.info("CI change created", ci_id=str(ci_id), change_id=str(change.id))

        return self.to_output(change)

    def update_for_ci(
        self,
        ci_id: uuid.UUID,
        change_id: uuid.UUID,
        data: CIChangeUpdate,
    ) -> CIChangeOutput:
        self._validate_update(data)

        changes = data.changes()
        if not changes:
            return self.get_for_ci(ci_id, change_id)

        with storage_errors(self._db, "update CI change", ci_id=str(ci_id)):
            change = self._repo.update_where(
                changes, CIChange.id == change_id, CIChange.ci_id == ci_id
            )
            if change is None:
                raise NotFoundError(self._entity_name, change_id, ci_id=str(ci_id))
            output = self.to_output(change)
            safe_commit(self._db)

        logger.info("CI change updated", ci_id=str(ci_id), change_id=str(change_id))

        return output

    def delete_for_ci(self, ci_id: uuid.UUID, change_id: uuid.UUID) -> None:
        with storage_errors(self._db, "delete CI change", ci_id=str(ci_id)):
            deleted = self._repo.delete_where(CIChange.id == change_id, CIChange.ci_id == ci_id)
            if not deleted:
                raise NotFoundError(self._entity_name, change_id, ci_id=str(ci_id))
            safe_commit(self._db)

        logger.info("CI change deleted", ci_id=str(ci_id), change_id=str(change_id))
