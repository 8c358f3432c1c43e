"""
ITSM API router - combines all service-management sub-routers.

- configitems: Configuration item CRUD
- ci_changes: Change records nested under a configuration item
- incidents: Incident CRUD (priority computed on output)
- problems: Problem CRUD
- changes: Change request (RFC) CRUD
- relations: Links between incidents, CIs, problems and change requests

All routes are mounted under settings.api_prefix (/api/v1 by default).
"""

from fastapi import APIRouter

from .configitems import router as configitems_router
from .ci_changes import router as ci_changes_router
from .incidents import router as incidents_router
from .problems import router as problems_router
from .changes import router as changes_router
from .relations import router as relations_router


# Create the main ITSM router
router = APIRouter()

# Core entity management
router.include_router(configitems_router)
router.include_router(ci_changes_router)
router.include_router(incidents_router)
router.include_router(problems_router)
router.include_router(changes_router)

# Links between entities
router.include_router(relations_router)
