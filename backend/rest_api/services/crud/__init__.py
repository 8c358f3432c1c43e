"""
CRUD Services - Generic data access for entity management.

Provides:
- BaseRepository: Type-safe data access for entities keyed by UUID
- RelationRepository: Parent-scoped access to link tables
"""

from .repository import BaseRepository, RelationRepository

__all__ = [
    "BaseRepository",
    "RelationRepository",
]
