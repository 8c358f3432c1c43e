"""
Domain Services - Clean Architecture Application Layer.

Services contain business logic and orchestrate operations.
They use Repositories for data access.

Structure:
    Router (thin controller)
        ↓
    Service (business logic)  ← YOU ARE HERE
        ↓
    Repository (data access)
        ↓
    Model (entity)

Usage:
    from rest_api.services.domain import IncidentService

    # In router
    service = IncidentService(db)
    incidents = service.list_all()
"""

from .configitem_service import ConfigItemService
from .ci_change_service import CIChangeService
from .incident_service import IncidentService
from .problem_service import ProblemService
from .rfc_service import RFCService
from .relation_services import (
    IncidentCIRelationService,
    ProblemIncidentRelationService,
    RFCIncidentRelationService,
    RFCProblemRelationService,
)

__all__ = [
    # Entities
    "ConfigItemService",
    "CIChangeService",
    "IncidentService",
    "ProblemService",
    "RFCService",
    # Relations
    "IncidentCIRelationService",
    "ProblemIncidentRelationService",
    "RFCIncidentRelationService",
    "RFCProblemRelationService",
]
