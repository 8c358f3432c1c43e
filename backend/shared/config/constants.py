"""
Centralized constants for the backend application.

Usage:
    from shared.config.constants import IncidentStatus, Limits, CREATE_DEFAULTS

    if incident.status == IncidentStatus.OPEN:
        ...
"""

from enum import Enum
from typing import Any, Final


# =============================================================================
# Entity Kinds
# =============================================================================


class EntityKind(str, Enum):
    """The top-level entities managed by the API."""

    CONFIG_ITEM = "configitem"
    INCIDENT = "incident"
    PROBLEM = "problem"
    RFC = "rfc"
    CI_CHANGE = "ci_change"


# =============================================================================
# Entity Status Enumerations
# =============================================================================
# Values are the lowercase member names; they are both the wire and the
# storage representation.


class CIStatus(str, Enum):
    """Configuration item lifecycle status."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    MAINTENANCE = "maintenance"
    TESTING = "testing"
    RETIRED = "retired"


class IncidentStatus(str, Enum):
    OPEN = "open"
    INPROGRESS = "inprogress"
    CLOSED = "closed"


class IncidentImpact(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class IncidentUrgency(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class IncidentPriority(str, Enum):
    """Derived from impact and urgency. Never stored."""

    CRITICAL = "critical"
    HIGH = "high"
    MODERATE = "moderate"
    LOW = "low"


class ProblemStatus(str, Enum):
    OPEN = "open"
    KNOWNERROR = "knownerror"
    RESOLVED = "resolved"
    CLOSED = "closed"


class RFCStatus(str, Enum):
    OPEN = "open"
    INPROGRESS = "inprogress"
    CLOSED = "closed"


# Database enumeration type names
class EnumTypeNames:
    CI_STATUS: Final[str] = "cistatus"
    INCIDENT_STATUS: Final[str] = "incident_status"
    INCIDENT_IMPACT: Final[str] = "incident_impact"
    INCIDENT_URGENCY: Final[str] = "incident_urgency"
    PROBLEM_STATUS: Final[str] = "problem_status"
    RFC_STATUS: Final[str] = "rfcstatus"


# =============================================================================
# Create Defaults
# =============================================================================

# Values substituted on create when the createset omits them.
# The creation timestamp is handled separately (defaults to now, UTC).
CREATE_DEFAULTS: Final[dict[EntityKind, dict[str, Any]]] = {
    EntityKind.CONFIG_ITEM: {"status": CIStatus.INACTIVE},
    EntityKind.INCIDENT: {"status": IncidentStatus.OPEN},
    EntityKind.PROBLEM: {"status": ProblemStatus.OPEN},
    EntityKind.RFC: {"status": RFCStatus.OPEN},
    EntityKind.CI_CHANGE: {},
}


# =============================================================================
# Validation Constants
# =============================================================================


class Limits:
    """Validation limits."""

    # Titles and names
    MIN_TITLE_LENGTH: Final[int] = 1
    MAX_TITLE_LENGTH: Final[int] = 255

    # Free text (description, owner, causes, documentation...)
    MAX_TEXT_LENGTH: Final[int] = 1024

    # Configuration item attributes
    MIN_CI_ATTRIBUTE_LENGTH: Final[int] = 1
    MAX_CI_TYPE_LENGTH: Final[int] = 31
    MAX_CI_OWNER_LENGTH: Final[int] = 63
    MAX_CI_DESCRIPTION_LENGTH: Final[int] = 255


# =============================================================================
# Error Kinds
# =============================================================================


class ErrorKind:
    """Tags carried by every application error."""

    VALIDATION: Final[str] = "validation"
    NOT_FOUND: Final[str] = "not_found"
    CONSTRAINT: Final[str] = "constraint"
    STORAGE: Final[str] = "storage"

    ALL: Final[list[str]] = [VALIDATION, NOT_FOUND, CONSTRAINT, STORAGE]
