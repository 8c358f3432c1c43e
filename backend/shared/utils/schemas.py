"""
Shared Pydantic schemas used across the application.

Each entity has three shapes:
- <Entity>Create: insert payload; status and creation time may be omitted
- <Entity>Update: patch payload, see shared.utils.patch.UpdateSet
- <Entity>Output: the persisted record
"""

from datetime import datetime
from typing import Annotated, ClassVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, StringConstraints, computed_field

from shared.config.constants import (
    CIStatus,
    IncidentImpact,
    IncidentPriority,
    IncidentStatus,
    IncidentUrgency,
    Limits,
    ProblemStatus,
    RFCStatus,
)
from shared.utils.patch import UpdateSet
from shared.utils.priority import incident_priority


# =============================================================================
# Common Types
# =============================================================================

Title = Annotated[
    str,
    StringConstraints(min_length=Limits.MIN_TITLE_LENGTH, max_length=Limits.MAX_TITLE_LENGTH),
]
Text = Annotated[str, StringConstraints(max_length=Limits.MAX_TEXT_LENGTH)]

CIType = Annotated[
    str,
    StringConstraints(
        min_length=Limits.MIN_CI_ATTRIBUTE_LENGTH, max_length=Limits.MAX_CI_TYPE_LENGTH
    ),
]
CIOwner = Annotated[
    str,
    StringConstraints(
        min_length=Limits.MIN_CI_ATTRIBUTE_LENGTH, max_length=Limits.MAX_CI_OWNER_LENGTH
    ),
]
CIDescription = Annotated[str, StringConstraints(max_length=Limits.MAX_CI_DESCRIPTION_LENGTH)]


class ErrorResponse(BaseModel):
    """Body of every application error response."""

    detail: str
    kind: str


# =============================================================================
# Configuration Item Schemas
# =============================================================================


class ConfigItemCreate(BaseModel):
    name: Title
    status: CIStatus | None = None
    created_at: datetime | None = None
    type: CIType | None = None
    owner: CIOwner | None = None
    description: CIDescription


class ConfigItemUpdate(UpdateSet):
    REQUIRED_FIELDS: ClassVar[frozenset[str]] = frozenset({"name", "status", "created_at", "description"})

    name: Title | None = None
    status: CIStatus | None = None
    created_at: datetime | None = None
    type: CIType | None = None
    owner: CIOwner | None = None
    description: CIDescription | None = None


class ConfigItemOutput(BaseModel):
    id: UUID
    name: str
    status: CIStatus
    created_at: datetime
    type: str | None = None
    owner: str | None = None
    description: str

    model_config = ConfigDict(from_attributes=True)


class CIChangeCreate(BaseModel):
    implementation_timedate: datetime
    documentation: Text


class CIChangeUpdate(UpdateSet):
    REQUIRED_FIELDS: ClassVar[frozenset[str]] = frozenset({"implementation_timedate", "documentation"})

    implementation_timedate: datetime | None = None
    documentation: Text | None = None


class CIChangeOutput(BaseModel):
    id: UUID
    ci_id: UUID
    implementation_timedate: datetime
    documentation: str

    model_config = ConfigDict(from_attributes=True)


# =============================================================================
# Incident Schemas
# =============================================================================


class IncidentCreate(BaseModel):
    title: Title
    status: IncidentStatus | None = None
    created_at: datetime | None = None
    resolved_at: datetime | None = None
    impact: IncidentImpact
    urgency: IncidentUrgency
    owner: Text | None = None
    assignee: Text | None = None
    description: Text


class IncidentUpdate(UpdateSet):
    REQUIRED_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"title", "status", "created_at", "impact", "urgency", "description"}
    )

    title: Title | None = None
    status: IncidentStatus | None = None
    created_at: datetime | None = None
    resolved_at: datetime | None = None
    impact: IncidentImpact | None = None
    urgency: IncidentUrgency | None = None
    owner: Text | None = None
    assignee: Text | None = None
    description: Text | None = None


class IncidentOutput(BaseModel):
    id: UUID
    title: str
    status: IncidentStatus
    created_at: datetime
    resolved_at: datetime | None = None
    impact: IncidentImpact
    urgency: IncidentUrgency
    owner: str | None = None
    assignee: str | None = None
    description: str

    model_config = ConfigDict(from_attributes=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def priority(self) -> IncidentPriority:
        return incident_priority(self.impact, self.urgency)


# =============================================================================
# Problem Schemas
# =============================================================================


class ProblemCreate(BaseModel):
    title: Title
    status: ProblemStatus | None = None
    detection_timedate: datetime | None = None
    description: Text
    causes: Text
    workarounds: Text | None = None
    resolutions: Text | None = None


class ProblemUpdate(UpdateSet):
    REQUIRED_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"title", "status", "detection_timedate", "description", "causes"}
    )

    title: Title | None = None
    status: ProblemStatus | None = None
    detection_timedate: datetime | None = None
    description: Text | None = None
    causes: Text | None = None
    workarounds: Text | None = None
    resolutions: Text | None = None


class ProblemOutput(BaseModel):
    id: UUID
    title: str
    status: ProblemStatus
    detection_timedate: datetime
    description: str
    causes: str
    workarounds: str | None = None
    resolutions: str | None = None

    model_config = ConfigDict(from_attributes=True)


# =============================================================================
# Change Request (RFC) Schemas
# =============================================================================


class RFCCreate(BaseModel):
    title: Title
    status: RFCStatus | None = None
    created_at: datetime | None = None
    finished_at: datetime | None = None
    requester: Text
    description: Text


class RFCUpdate(UpdateSet):
    REQUIRED_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"title", "status", "created_at", "requester", "description"}
    )

    title: Title | None = None
    status: RFCStatus | None = None
    created_at: datetime | None = None
    finished_at: datetime | None = None
    requester: Text | None = None
    description: Text | None = None


class RFCOutput(BaseModel):
    id: UUID
    title: str
    status: RFCStatus
    created_at: datetime
    finished_at: datetime | None = None
    requester: str
    description: str

    model_config = ConfigDict(from_attributes=True)


# =============================================================================
# Relation Schemas
# =============================================================================


class RelationUpdate(BaseModel):
    """Payload for changing the description of any relation."""

    description: Text


class IncidentCIRelationCreate(BaseModel):
    ci_id: UUID


class IncidentCIRelationOutput(BaseModel):
    incident_id: UUID
    ci_id: UUID
    description: str

    model_config = ConfigDict(from_attributes=True)


class ProblemIncidentRelationCreate(BaseModel):
    incident_id: UUID


class ProblemIncidentRelationOutput(BaseModel):
    problem_id: UUID
    incident_id: UUID
    description: str

    model_config = ConfigDict(from_attributes=True)


class RFCIncidentRelationCreate(BaseModel):
    incident_id: UUID


class RFCIncidentRelationOutput(BaseModel):
    id: UUID
    rfc_id: UUID
    incident_id: UUID
    description: str

    model_config = ConfigDict(from_attributes=True)


class RFCProblemRelationCreate(BaseModel):
    problem_id: UUID


class RFCProblemRelationOutput(BaseModel):
    id: UUID
    rfc_id: UUID
    problem_id: UUID
    description: str

    model_config = ConfigDict(from_attributes=True)
