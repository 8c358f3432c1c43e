"""
Repository Pattern for database access.

Provides a clean abstraction layer between business logic and data access.
Repositories never commit; the calling service owns the transaction.

Usage:
    from rest_api.services.crud.repository import BaseRepository, RelationRepository

    incident_repo = BaseRepository(Incident, db)
    incident = incident_repo.find_by_id(incident_id)
    updated = incident_repo.update_where({"owner": None}, Incident.id == incident_id)

    ci_links = RelationRepository(IncidentCIRelation, db, parent="incident_id", key="ci_id")
    ci_links.find_for_parent(incident_id)
"""

from __future__ import annotations

import uuid
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import delete, exists as sql_exists, insert, select, update
from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

from rest_api.models import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """
    Base repository providing common database operations.

    The model must have an ``id`` primary key column.
    """

    def __init__(self, model: type[ModelT], session: Session):
        self._model = model
        self._session = session

    @property
    def model(self) -> type[ModelT]:
        """The SQLAlchemy model class."""
        return self._model

    @property
    def session(self) -> Session:
        """The database session."""
        return self._session

    def _base_query(self) -> Select:
        """Create base select query."""
        return select(self._model)

    def _apply_options(
        self, query: Select, options: list[Any] | None
    ) -> Select:
        """Apply eager loading options."""
        if options:
            query = query.options(*options)
        return query

    # =========================================================================
    # Reads
    # =========================================================================

    def find_by_id(
        self,
        entity_id: uuid.UUID,
        *,
        options: list[Any] | None = None,
    ) -> ModelT | None:
        """
        Find entity by primary key.

        Returns:
            Entity or None if not found.
        """
        query = self._base_query().where(self._model.id == entity_id)
        query = self._apply_options(query, options)
        return self._session.scalar(query)

    def find_one(self, *criteria: Any) -> ModelT | None:
        """Find the single entity matching all criteria."""
        return self._session.scalar(self._base_query().where(*criteria))

    def find_all(
        self,
        *criteria: Any,
        options: list[Any] | None = None,
        limit: int | None = None,
        offset: int | None = None,
        order_by: Any | None = None,
    ) -> Sequence[ModelT]:
        """
        Find all entities matching the (optional) criteria.

        Args:
            criteria: SQLAlchemy boolean expressions, combined with AND.
            options: SQLAlchemy loader options.
            limit: Maximum number of results.
            offset: Number of results to skip.
            order_by: Column or expression to order by.

        Returns:
            Sequence of entities.
        """
        query = self._base_query()
        if criteria:
            query = query.where(*criteria)
        query = self._apply_options(query, options)

        if order_by is not None:
            query = query.order_by(order_by)
        if offset is not None:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)

        return self._session.scalars(query).all()

    def exists(self, entity_id: uuid.UUID) -> bool:
        """Check if entity exists by ID."""
        return self.exists_where(self._model.id == entity_id)

    def exists_where(self, *criteria: Any) -> bool:
        query = select(sql_exists().where(*criteria))
        return self._session.scalar(query) or False

    # =========================================================================
    # Writes (not committed)
    # =========================================================================

    def add(self, entity: ModelT) -> ModelT:
        """Add entity to session and flush so defaults and constraints apply."""
        self._session.add(entity)
        self._session.flush()
        return entity

    def insert(self, values: dict[str, Any]) -> None:
        """Insert a single row without going through the identity map."""
        self._session.execute(insert(self._model).values(**values))

    def update_where(self, values: dict[str, Any], *criteria: Any) -> ModelT | None:
        """
        Apply ``values`` to the row matching ``criteria`` in one UPDATE ... RETURNING.

        Returns:
            The entity as stored after the update, or None if no row matched.
        """
        stmt = (
            update(self._model)
            .where(*criteria)
            .values(**values)
            .returning(self._model)
            .execution_options(synchronize_session=False, populate_existing=True)
        )
        return self._session.scalars(stmt).first()

    def delete_where(self, *criteria: Any) -> bool:
        """
        Delete the rows matching ``criteria``.

        Returns:
            True if at least one row was deleted.
        """
        stmt = (
            delete(self._model)
            .where(*criteria)
            .execution_options(synchronize_session=False)
        )
        return self._session.execute(stmt).rowcount > 0


class RelationRepository(BaseRepository[ModelT]):
    """
    Repository for many-to-many link tables scoped by a parent record.

    ``parent`` names the column holding the parent id (taken from the URL);
    ``key`` names the column identifying one link under that parent. For
    link tables keyed by (parent, child) ``key`` is the child column; for
    tables with their own id it is ``"id"``.

    Usage:
        repo = RelationRepository(RFCProblemRelation, db, parent="rfc_id", key="id")
        repo.set_description(rfc_id, relation_id, "Rollback plan")
    """

    def __init__(self, model: type[ModelT], session: Session, *, parent: str, key: str):
        super().__init__(model, session)
        self._parent_column = getattr(model, parent)
        self._key_column = getattr(model, key)

    def _link_criteria(self, parent_id: uuid.UUID, key: uuid.UUID) -> tuple[Any, Any]:
        return (self._parent_column == parent_id, self._key_column == key)

    def find_for_parent(self, parent_id: uuid.UUID) -> Sequence[ModelT]:
        return self.find_all(self._parent_column == parent_id)

    def set_description(
        self, parent_id: uuid.UUID, key: uuid.UUID, description: str
    ) -> ModelT | None:
        return self.update_where({"description": description}, *self._link_criteria(parent_id, key))

    def unlink(self, parent_id: uuid.UUID, key: uuid.UUID) -> bool:
        return self.delete_where(*self._link_criteria(parent_id, key))
