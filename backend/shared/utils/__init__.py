"""
Utilities module: Exceptions, patch fields, incident priority, schemas.
"""

from shared.utils.exceptions import (
    AppException,
    NotFoundError,
    ValidationError,
    RequiredFieldNullError,
    ConstraintError,
    StorageError,
)
from shared.utils.patch import PatchField, PatchState, UpdateSet
from shared.utils.priority import incident_priority

__all__ = [
    # exceptions
    "AppException",
    "NotFoundError",
    "ValidationError",
    "RequiredFieldNullError",
    "ConstraintError",
    "StorageError",
    # patch fields
    "PatchField",
    "PatchState",
    "UpdateSet",
    # priority
    "incident_priority",
]
