"""
Tests for the incident priority matrix.
"""

import pytest

from shared.config.constants import IncidentImpact, IncidentPriority, IncidentUrgency
from shared.utils.priority import PRIORITY_BY_PRODUCT, incident_priority


class TestIncidentPriority:
    """Tests for incident_priority()."""

    @pytest.mark.parametrize(
        "impact,urgency,expected",
        [
            (IncidentImpact.HIGH, IncidentUrgency.HIGH, IncidentPriority.CRITICAL),
            (IncidentImpact.HIGH, IncidentUrgency.MEDIUM, IncidentPriority.HIGH),
            (IncidentImpact.MEDIUM, IncidentUrgency.HIGH, IncidentPriority.HIGH),
            (IncidentImpact.HIGH, IncidentUrgency.LOW, IncidentPriority.MODERATE),
            (IncidentImpact.LOW, IncidentUrgency.HIGH, IncidentPriority.MODERATE),
            (IncidentImpact.MEDIUM, IncidentUrgency.MEDIUM, IncidentPriority.MODERATE),
            (IncidentImpact.MEDIUM, IncidentUrgency.LOW, IncidentPriority.LOW),
            (IncidentImpact.LOW, IncidentUrgency.MEDIUM, IncidentPriority.LOW),
            (IncidentImpact.LOW, IncidentUrgency.LOW, IncidentPriority.LOW),
        ],
    )
    def test_matrix(self, impact, urgency, expected):
        assert incident_priority(impact, urgency) is expected

    def test_accepts_raw_values(self):
        """Stored values may come back as plain strings."""
        assert incident_priority("high", "high") is IncidentPriority.CRITICAL

    def test_every_combination_is_covered(self):
        results = {
            incident_priority(impact, urgency)
            for impact in IncidentImpact
            for urgency in IncidentUrgency
        }
        assert results == set(IncidentPriority)

    def test_table_has_no_unreachable_products(self):
        assert sorted(PRIORITY_BY_PRODUCT) == [1, 2, 3, 4, 6, 9]

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            incident_priority("severe", "high")
