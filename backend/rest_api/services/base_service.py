"""
Base Service Classes for Clean Architecture.

Provides base classes for application services that:
- Use Repository for data access (not direct queries)
- Turn SQLAlchemy failures into the application error taxonomy
- Handle business logic and orchestration

Architecture:
    Router (thin) → Service (business logic) → Repository (data access) → Model

Usage:
    from rest_api.services.base_service import BaseCRUDService

    class IncidentService(BaseCRUDService[Incident, IncidentOutput]):
        def __init__(self, db: Session):
            super().__init__(
                db=db,
                model=Incident,
                output_schema=IncidentOutput,
                entity_name="Incident",
                kind=EntityKind.INCIDENT,
            )
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar, Type

from pydantic import BaseModel
from sqlalchemy.orm import Session

from rest_api.models import Base
from rest_api.services.crud.repository import BaseRepository, RelationRepository
from shared.config.constants import CREATE_DEFAULTS, EntityKind
from shared.config.logging import get_logger
from shared.infrastructure.db import safe_commit, storage_errors
from shared.utils.exceptions import NotFoundError, RequiredFieldNullError
from shared.utils.patch import UpdateSet

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)
OutputT = TypeVar("OutputT", bound=BaseModel)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BaseService(Generic[ModelT]):
    """
    Base service for domain operations.

    Provides common infrastructure (session, repository access).
    """

    def __init__(self, db: Session, model: Type[ModelT]):
        self._db = db
        self._model = model
        self._repo = BaseRepository(model, db)

    @property
    def db(self) -> Session:
        """Database session."""
        return self._db

    @property
    def repo(self) -> BaseRepository[ModelT]:
        """Repository for data access."""
        return self._repo


class BaseCRUDService(BaseService[ModelT], Generic[ModelT, OutputT]):
    """
    Base service for entities with CRUD operations.

    Responsibilities:
    - Default substitution on create (status from CREATE_DEFAULTS, creation time = now)
    - Partial merge on update, with required attributes guarded against null
    - NotFound / Constraint / Storage errors for every operation
    """

    def __init__(
        self,
        db: Session,
        model: Type[ModelT],
        output_schema: Type[OutputT],
        entity_name: str,
        *,
        kind: EntityKind,
        timestamp_field: str | None = "created_at",
    ):
        super().__init__(db, model)
        self._output_schema = output_schema
        self._entity_name = entity_name
        self._kind = kind
        self._timestamp_field = timestamp_field

    @property
    def entity_name(self) -> str:
        """Human-readable entity name for messages."""
        return self._entity_name

    # =========================================================================
    # Read Operations
    # =========================================================================

    def get_by_id(self, entity_id: uuid.UUID) -> OutputT:
        """
        Get entity by ID.

        Raises:
            NotFoundError: If entity not found.
            StorageError: If the query fails.
        """
        with storage_errors(self._db, f"read {self._entity_name}", entity_id=str(entity_id)):
            entity = self._repo.find_by_id(entity_id)

        if entity is None:
            raise NotFoundError(self._entity_name, entity_id)

        return self.to_output(entity)

    def list_all(self, *, order_by: Any | None = None) -> list[OutputT]:
        """List all entities. Order is unspecified unless ``order_by`` is given."""
        with storage_errors(self._db, f"list {self._entity_name}"):
            entities = self._repo.find_all(order_by=order_by)
        return [self.to_output(e) for e in entities]

    def exists(self, entity_id: uuid.UUID) -> bool:
        """Check if entity exists."""
        with storage_errors(self._db, f"read {self._entity_name}", entity_id=str(entity_id)):
            return self._repo.exists(entity_id)

    # =========================================================================
    # Write Operations
    # =========================================================================

    def create(self, data: BaseModel) -> OutputT:
        """
        Create new entity from a createset.

        Omitted defaults (status, creation time) are substituted before insert.

        Raises:
            ValidationError: If data is invalid.
            ConstraintError: If the insert violates a storage constraint.
            StorageError: If creation fails.
        """
        values = self._apply_create_defaults(data.model_dump())
        self._validate_create(values)

        with storage_errors(self._db, f"create {self._entity_name}"):
            entity = self._repo.add(self._model(**values))
            safe_commit(self._db)
            self._db.refresh(entity)

        logger.info(f"{self._entity_name} created", entity_id=str(entity.id))

        return self.to_output(entity)

    def update(self, entity_id: uuid.UUID, data: UpdateSet) -> OutputT:
        """
        Merge an updateset into the stored entity.

        Missing fields keep the stored value, null clears it, a value replaces it.
        The merge runs as a single UPDATE ... RETURNING statement and the
        result is the row it returned; an updateset that changes nothing just
        reads the entity back.

        Raises:
            NotFoundError: If entity not found.
            ValidationError: If a required attribute is set to null.
            StorageError: If the update fails.
        """
        self._validate_update(data)

        changes = data.changes()
        if not changes:
            return self.get_by_id(entity_id)

        with storage_errors(self._db, f"update {self._entity_name}", entity_id=str(entity_id)):
            entity = self._repo.update_where(changes, self._model.id == entity_id)
            if entity is None:
                raise NotFoundError(self._entity_name, entity_id)
            # Built before commit expires the instance
            output = self.to_output(entity)
            safe_commit(self._db)

        logger.info(
            f"{self._entity_name} updated",
            entity_id=str(entity_id),
            fields=sorted(changes),
        )

        return output

    def delete(self, entity_id: uuid.UUID) -> None:
        """
        Delete entity. Dependent relations are removed by the storage layer.

        Raises:
            NotFoundError: If entity not found.
            StorageError: If deletion fails.
        """
        with storage_errors(self._db, f"delete {self._entity_name}", entity_id=str(entity_id)):
            deleted = self._repo.delete_where(self._model.id == entity_id)
            if not deleted:
                raise NotFoundError(self._entity_name, entity_id)
            safe_commit(self._db)

        logger.info(f"{self._entity_name} deleted", entity_id=str(entity_id))

    # =========================================================================
    # Transformation
    # =========================================================================

    def to_output(self, entity: ModelT) -> OutputT:
        """
        Convert entity to output DTO.

        Override this method for custom transformation logic.
        """
        return self._output_schema.model_validate(entity)

    # =========================================================================
    # Validation Hooks (override in subclasses)
    # =========================================================================

    def _validate_create(self, values: dict[str, Any]) -> None:
        """
        Validate values before create. Field bounds are checked by the createset.

        Raises:
            ValidationError: If validation fails.
        """
        pass

    def _validate_update(self, data: UpdateSet) -> None:
        """
        Validate an updateset before any write.

        Raises:
            RequiredFieldNullError: If a required attribute is explicitly null.
        """
        null_fields = data.null_required_fields()
        if null_fields:
            raise RequiredFieldNullError(self._entity_name, null_fields[0], fields=null_fields)

    # =========================================================================
    # Internal Helpers
    # =========================================================================

    def _apply_create_defaults(self, values: dict[str, Any]) -> dict[str, Any]:
        for field_name, default in CREATE_DEFAULTS[self._kind].items():
            if values.get(field_name) is None:
                values[field_name] = default
        if self._timestamp_field and values.get(self._timestamp_field) is None:
            values[self._timestamp_field] = utc_now()
        return values


class RelationService(BaseService[ModelT], Generic[ModelT, OutputT]):
    """
    Service for links between a parent record and another record.

    Every operation is scoped by the parent id; create and list check that the
    parent exists within the same transaction.
    """

    def __init__(
        self,
        db: Session,
        model: Type[ModelT],
        output_schema: Type[OutputT],
        entity_name: str,
        *,
        parent_model: Type[Base],
        parent_name: str,
        parent: str,
        child: str,
        key: str,
    ):
        super().__init__(db, model)
        self._repo = RelationRepository(model, db, parent=parent, key=key)
        self._parent_repo = BaseRepository(parent_model, db)
        self._output_schema = output_schema
        self._entity_name = entity_name
        self._parent_name = parent_name
        self._parent = parent
        self._child = child
        self._key = key

    @property
    def repo(self) -> RelationRepository[ModelT]:
        return self._repo

    def _ensure_parent(self, parent_id: uuid.UUID) -> None:
        if not self._parent_repo.exists(parent_id):
            raise NotFoundError(self._parent_name, parent_id)

    def list_for_parent(self, parent_id: uuid.UUID) -> list[OutputT]:
        """
        Raises:
            NotFoundError: If the parent does not exist.
        """
        with storage_errors(self._db, f"list {self._entity_name}", parent_id=str(parent_id)):
            self._ensure_parent(parent_id)
            links = self._repo.find_for_parent(parent_id)
            return [self._output_schema.model_validate(link) for link in links]

    def create(self, parent_id: uuid.UUID, child_id: uuid.UUID) -> OutputT:
        """
        Link ``child_id`` to the parent with an empty description.

        Raises:
            NotFoundError: If the parent does not exist (nothing is written).
            ConstraintError: If the child does not exist or the link is a duplicate.
        """
        values: dict[str, Any] = {
            self._parent: parent_id,
            self._child: child_id,
            "description": "",
        }
        if self._key == "id":
            values["id"] = uuid.uuid4()

        with storage_errors(
            self._db,
            f"create {self._entity_name}",
            parent_id=str(parent_id),
            child_id=str(child_id),
        ):
            self._ensure_parent(parent_id)
            self._repo.insert(values)
            safe_commit(self._db)

        logger.info(
            f"{self._entity_name} created",
            parent_id=str(parent_id),
            child_id=str(child_id),
        )

        return self._output_schema.model_validate(values)

    def update(self, parent_id: uuid.UUID, key: uuid.UUID, description: str) -> OutputT:
        """
        Replace the description of one link.

        Raises:
            NotFoundError: If the link does not exist under the parent.
        """
        with storage_errors(self._db, f"update {self._entity_name}", parent_id=str(parent_id)):
            link = self._repo.set_description(parent_id, key, description)
            if link is None:
                raise NotFoundError(self._entity_name, key, parent_id=str(parent_id))
            output = self._output_schema.model_validate(link)
            safe_commit(self._db)

        logger.info(f"{self._entity_name} updated", parent_id=str(parent_id), key=str(key))

        return output

    def delete(self, parent_id: uuid.UUID, key: uuid.UUID) -> None:
        """
        Raises:
            NotFoundError: If the link does not exist under the parent.
        """
        with storage_errors(self._db, f"delete {self._entity_name}", parent_id=str(parent_id)):
            if not self._repo.unlink(parent_id, key):
                raise NotFoundError(self._entity_name, key, parent_id=str(parent_id))
            safe_commit(self._db)

        logger.info(f"{self._entity_name} deleted", parent_id=str(parent_id), key=str(key))
