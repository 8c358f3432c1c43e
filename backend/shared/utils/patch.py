"""
Tri-state patch fields for partial updates.

An update payload distinguishes three cases for every attribute:

- Missing: the key was absent, keep the stored value
- Null:    the key was present with ``null``, clear the stored value
- Value:   the key was present with a value, store it

``UpdateSet`` derives these states from pydantic's ``model_fields_set`` so
that request bodies keep their plain JSON shape.

Usage:
    class IncidentUpdate(UpdateSet):
        REQUIRED_FIELDS = frozenset({"title", "status"})
        title: Title | None = None
        owner: Text | None = None

    update = IncidentUpdate.model_validate({"owner": None})
    update.patch("title").is_missing   # True
    update.patch("owner").is_null      # True
    update.changes()                   # {"owner": None}
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, model_serializer

T = TypeVar("T")


class PatchState(str, Enum):
    MISSING = "missing"
    NULL = "null"
    VALUE = "value"


@dataclass(frozen=True)
class PatchField(Generic[T]):
    """A single attribute of an update payload."""

    state: PatchState
    value: T | None = None

    @classmethod
    def missing(cls) -> "PatchField[T]":
        return cls(PatchState.MISSING)

    @classmethod
    def null(cls) -> "PatchField[T]":
        return cls(PatchState.NULL)

    @classmethod
    def of(cls, value: T | None) -> "PatchField[T]":
        """Wrap a deserialized value; ``None`` means an explicit null."""
        if value is None:
            return cls.null()
        return cls(PatchState.VALUE, value)

    @property
    def is_missing(self) -> bool:
        return self.state is PatchState.MISSING

    @property
    def is_null(self) -> bool:
        return self.state is PatchState.NULL

    @property
    def has_value(self) -> bool:
        return self.state is PatchState.VALUE

    def resolve(self, current: T | None) -> T | None:
        """The value to store given the currently stored one."""
        if self.is_missing:
            return current
        return self.value


class UpdateSet(BaseModel):
    """
    Base class for update payloads.

    Every field must be declared optional with a ``None`` default; presence is
    read from ``model_fields_set``. Subclasses list their non-nullable
    attributes in ``REQUIRED_FIELDS``.
    """

    REQUIRED_FIELDS: ClassVar[frozenset[str]] = frozenset()

    def patch(self, name: str) -> PatchField[Any]:
        if name not in type(self).model_fields:
            raise KeyError(name)
        if name not in self.model_fields_set:
            return PatchField.missing()
        return PatchField.of(getattr(self, name))

    def patches(self) -> dict[str, PatchField[Any]]:
        return {name: self.patch(name) for name in type(self).model_fields}

    def changes(self) -> dict[str, Any]:
        """Column values to write: every non-missing field (nulls included)."""
        return {
            name: field.value
            for name, field in self.patches().items()
            if not field.is_missing
        }

    def is_empty(self) -> bool:
        """True when every field is missing."""
        return not self.model_fields_set

    def null_required_fields(self) -> list[str]:
        return sorted(
            name for name in self.REQUIRED_FIELDS if self.patch(name).is_null
        )

    @model_serializer(mode="wrap")
    def _omit_missing(self, handler) -> dict[str, Any]:
        # Missing fields are dropped; explicit nulls are kept
        data = handler(self)
        return {key: value for key, value in data.items() if key in self.model_fields_set}
