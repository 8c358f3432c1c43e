"""
Centralized HTTP exceptions for consistent error handling.

Every application error carries a ``kind`` tag from a closed set
(validation, not_found, constraint, storage) and logs itself on construction.

Usage:
    from shared.utils.exceptions import NotFoundError, ValidationError

    raise NotFoundError("Incident", incident_id)
    raise ValidationError("title must not be empty", field="title")
"""

from fastapi import HTTPException, status
from typing import Any

from shared.config.constants import ErrorKind
from shared.config.logging import get_logger

logger = get_logger(__name__)


class AppException(HTTPException):
    """
    Base exception with automatic logging.

    All custom exceptions should inherit from this class
    to ensure consistent logging and response format.
    """

    kind: str = ErrorKind.STORAGE

    def __init__(
        self,
        status_code: int,
        detail: str,
        log_level: str = "warning",
        headers: dict[str, str] | None = None,
        **log_context: Any,
    ):
        # Log the error with context
        log_fn = getattr(logger, log_level, logger.warning)
        log_fn(detail, status_code=status_code, kind=self.kind, **log_context)

        super().__init__(status_code=status_code, detail=detail, headers=headers)


# =============================================================================
# 404 Not Found Errors
# =============================================================================


class NotFoundError(AppException):
    """
    Entity or relation not found error (404).

    Usage:
        raise NotFoundError("Problem", problem_id)
        raise NotFoundError("Incident-CI relation", incident_id, ci_id=ci_id)
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity: str, entity_id: Any = None, **log_context: Any):
        if entity_id is not None:
            detail = f"{entity} with ID {entity_id} not found"
        else:
            detail = f"{entity} not found"

        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            log_level="warning",
            entity=entity,
            entity_id=str(entity_id) if entity_id is not None else None,
            **log_context,
        )


# =============================================================================
# 422 Unprocessable Errors
# =============================================================================


class ValidationError(AppException):
    """
    Input validation error (422).

    Usage:
        raise ValidationError("description is too long", field="description")
    """

    kind = ErrorKind.VALIDATION

    def __init__(self, detail: str, **log_context: Any):
        super().__init__(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=detail,
            log_level="warning",
            **log_context,
        )


class RequiredFieldNullError(ValidationError):
    """A required attribute was explicitly set to null in an update."""

    def __init__(self, entity: str, field: str, **log_context: Any):
        self.field = field
        super().__init__(
            f"{field} is required for {entity} and cannot be set to null",
            entity=entity,
            field=field,
            **log_context,
        )


class ConstraintError(AppException):
    """
    A write was rejected by a storage-level integrity constraint (422),
    e.g. a relation pointing at a record that does not exist.
    """

    kind = ErrorKind.CONSTRAINT

    def __init__(self, detail: str, **log_context: Any):
        super().__init__(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=detail,
            log_level="warning",
            **log_context,
        )


# =============================================================================
# 500 Internal Server Errors
# =============================================================================


class StorageError(AppException):
    """
    Database operation failed (500).

    The response body is opaque; the underlying cause is only logged.

    Usage:
        raise StorageError("update incident", incident_id=str(incident_id)) from e
    """

    kind = ErrorKind.STORAGE

    def __init__(self, operation: str, **log_context: Any):
        log_context.setdefault("exc_info", True)
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal storage error",
            log_level="error",
            operation=operation,
            **log_context,
        )
