"""
SQLAlchemy ORM Models Package.

All models are organized into domain-specific modules:
- base: Base class, UUID primary key mixin, enum column helper
- configuration: ConfigItem, CIChange
- incident: Incident, IncidentCIRelation
- problem: Problem, ProblemIncidentRelation
- change: RFC, RFCIncidentRelation, RFCProblemRelation
"""

# Base classes
from .base import Base, UUIDPrimaryKeyMixin, enum_type

# Configuration management
from .configuration import ConfigItem, CIChange

# Incident management
from .incident import Incident, IncidentCIRelation

# Problem management
from .problem import Problem, ProblemIncidentRelation

# Change management
from .change import RFC, RFCIncidentRelation, RFCProblemRelation

__all__ = [
    "Base",
    "UUIDPrimaryKeyMixin",
    "enum_type",
    "ConfigItem",
    "CIChange",
    "Incident",
    "IncidentCIRelation",
    "Problem",
    "ProblemIncidentRelation",
    "RFC",
    "RFCIncidentRelation",
    "RFCProblemRelation",
]
