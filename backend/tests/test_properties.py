"""
Property-based Testing with Hypothesis.

Covers the merge rules of partial updates and the priority matrix.
"""

from datetime import datetime

from hypothesis import HealthCheck, given, settings, strategies as st

from shared.config.constants import (
    CIStatus,
    IncidentImpact,
    IncidentPriority,
    IncidentUrgency,
)
from shared.utils.patch import PatchField
from shared.utils.priority import LEVEL_WEIGHTS, incident_priority
from shared.utils.schemas import ConfigItemCreate, ConfigItemUpdate

from rest_api.services.domain import ConfigItemService


printable = st.characters(blacklist_categories=("Cs", "Cc"))
text_values = st.text(alphabet=printable, max_size=50)

# A patch for one optional text field: absent, null or a value
optional_patch = st.one_of(
    st.just(PatchField.missing()),
    st.just(PatchField.null()),
    text_values.map(PatchField.of),
)

ci_update_payloads = st.fixed_dictionaries(
    {},
    optional={
        "name": st.text(alphabet=printable, min_size=1, max_size=50),
        "status": st.sampled_from([s.value for s in CIStatus]),
        "type": st.one_of(st.none(), st.text(alphabet=printable, min_size=1, max_size=31)),
        "owner": st.one_of(st.none(), st.text(alphabet=printable, min_size=1, max_size=63)),
        "description": text_values,
    },
)


class TestPatchProperties:
    """Property-based tests for patch resolution."""

    @given(field=optional_patch, current=st.one_of(st.none(), text_values))
    def test_resolve_matches_state(self, field, current):
        """Property: missing keeps, null clears, value replaces."""
        resolved = field.resolve(current)

        if field.is_missing:
            assert resolved == current
        elif field.is_null:
            assert resolved is None
        else:
            assert resolved == field.value

    @given(field=optional_patch, current=st.one_of(st.none(), text_values))
    def test_resolve_is_idempotent(self, field, current):
        """Property: applying the same patch twice equals applying it once."""
        once = field.resolve(current)
        assert field.resolve(once) == once

    @given(payload=ci_update_payloads)
    def test_changes_are_the_present_keys(self, payload):
        """Property: an update writes exactly the keys present in the payload."""
        update = ConfigItemUpdate.model_validate(payload)

        assert set(update.changes()) == set(payload)
        assert update.is_empty() == (not payload)

    @given(payload=ci_update_payloads)
    def test_serialization_keeps_presence(self, payload):
        """Property: re-decoding a serialized update preserves every field state."""
        update = ConfigItemUpdate.model_validate(payload)

        decoded = ConfigItemUpdate.model_validate(update.model_dump(mode="json"))

        assert decoded.patches() == update.patches()


class TestPriorityProperties:
    """Property-based tests for the priority matrix."""

    @given(
        impact=st.sampled_from(list(IncidentImpact)),
        urgency=st.sampled_from(list(IncidentUrgency)),
    )
    def test_priority_is_symmetric(self, impact, urgency):
        """Property: swapping impact and urgency gives the same priority."""
        swapped = incident_priority(IncidentImpact(urgency.value), IncidentUrgency(impact.value))
        assert incident_priority(impact, urgency) is swapped

    @given(
        impact=st.sampled_from(list(IncidentImpact)),
        urgency=st.sampled_from(list(IncidentUrgency)),
    )
    def test_priority_grows_with_urgency(self, impact, urgency):
        """Property: raising urgency to high never lowers the priority."""
        order = [
            IncidentPriority.LOW,
            IncidentPriority.MODERATE,
            IncidentPriority.HIGH,
            IncidentPriority.CRITICAL,
        ]
        current = incident_priority(impact, urgency)
        raised = incident_priority(impact, IncidentUrgency.HIGH)

        assert order.index(raised) >= order.index(current)

    @given(
        impact=st.sampled_from(list(IncidentImpact)),
        urgency=st.sampled_from(list(IncidentUrgency)),
    )
    def test_critical_only_when_both_high(self, impact, urgency):
        product = LEVEL_WEIGHTS[impact.value] * LEVEL_WEIGHTS[urgency.value]
        is_critical = incident_priority(impact, urgency) is IncidentPriority.CRITICAL
        assert is_critical == (product == 9)


class TestUpdateProperties:
    """Property-based tests for merge updates against the database."""

    @given(payload=ci_update_payloads)
    @settings(
        max_examples=30,
        deadline=None,
        suppress_health_check=[HealthCheck.function_scoped_fixture],
    )
    def test_update_is_idempotent(self, payload, db_session):
        """Property: applying the same update twice leaves the same record as once."""
        service = ConfigItemService(db_session)
        created = service.create(
            ConfigItemCreate(
                name="app-01",
                created_at=datetime(2024, 1, 1, 0, 0),
                owner="ops",
                description="Application server",
            )
        )
        update = ConfigItemUpdate.model_validate(payload)

        once = service.update(created.id, update)
        twice = service.update(created.id, update)

        assert twice == once
        for name, value in payload.items():
            assert getattr(once, name) == value

    @given(payload=ci_update_payloads)
    @settings(
        max_examples=30,
        deadline=None,
        suppress_health_check=[HealthCheck.function_scoped_fixture],
    )
    def test_missing_fields_are_preserved(self, payload, db_session):
        """Property: every field absent from the payload keeps its stored value."""
        service = ConfigItemService(db_session)
        created = service.create(
            ConfigItemCreate(
                name="app-02",
                type="vm",
                owner="ops",
                description="Batch worker",
            )
        )

        updated = service.update(created.id, ConfigItemUpdate.model_validate(payload))

        for name in ConfigItemUpdate.model_fields:
            if name not in payload:
                assert getattr(updated, name) == getattr(created, name)
