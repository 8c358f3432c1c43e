"""
Incident priority derived from impact and urgency.

Each level weighs High=3, Medium=2, Low=1 and the product of both weights
maps onto a priority:

    1, 2 -> low
    3, 4 -> moderate
    6    -> high
    9    -> critical
"""

from typing import Final

from shared.config.constants import IncidentImpact, IncidentPriority, IncidentUrgency

LEVEL_WEIGHTS: Final[dict[str, int]] = {
    "high": 3,
    "medium": 2,
    "low": 1,
}

PRIORITY_BY_PRODUCT: Final[dict[int, IncidentPriority]] = {
    1: IncidentPriority.LOW,
    2: IncidentPriority.LOW,
    3: IncidentPriority.MODERATE,
    4: IncidentPriority.MODERATE,
    6: IncidentPriority.HIGH,
    9: IncidentPriority.CRITICAL,
}


def incident_priority(impact: IncidentImpact, urgency: IncidentUrgency) -> IncidentPriority:
    """
    Compute the priority of an incident.

    Every weight product of the closed impact/urgency enums is covered by the
    table; any other product is a defect, never a user error.
    """
    product = LEVEL_WEIGHTS[IncidentImpact(impact).value] * LEVEL_WEIGHTS[IncidentUrgency(urgency).value]
    priority = PRIORITY_BY_PRODUCT.get(product)
    if priority is None:
        raise AssertionError(f"no priority defined for weight product {product}")
    return priority
