"""
Services module for business logic.

CLEAN ARCHITECTURE:
- domain/: Application services (business logic) - USE THESE
- crud/: Repository pattern

Usage:
    from rest_api.services.domain import ProblemService
    service = ProblemService(db)
    problem = service.get_by_id(problem_id)
"""

# Domain Services
from .domain import (
    ConfigItemService,
    CIChangeService,
    IncidentService,
    ProblemService,
    RFCService,
    IncidentCIRelationService,
    ProblemIncidentRelationService,
    RFCIncidentRelationService,
    RFCProblemRelationService,
)

# Base service classes for creating new domain services
from .base_service import (
    BaseService,
    BaseCRUDService,
    RelationService,
)

__all__ = [
    # Domain Services
    "ConfigItemService",
    "CIChangeService",
    "IncidentService",
    "ProblemService",
    "RFCService",
    "IncidentCIRelationService",
    "ProblemIncidentRelationService",
    "RFCIncidentRelationService",
    "RFCProblemRelationService",
    # Base service classes
    "BaseService",
    "BaseCRUDService",
    "RelationService",
]
