"""
Tests for the change records of a configuration item.
"""

import uuid

API = "/api/v1"


def _create_change(client, ci_id, when, documentation="Applied patch"):
    response = client.post(
        f"{API}/configitems/{ci_id}/changes",
        json={"implementation_timedate": when, "documentation": documentation},
    )
    assert response.status_code == 201
    return response.json()


class TestCIChanges:
    """Tests for /configitems/{ci_id}/changes."""

    def test_create(self, client, seed_configitem):
        data = _create_change(client, seed_configitem.id, "2024-04-01T08:00:00")

        uuid.UUID(data["id"])
        assert data["ci_id"] == str(seed_configitem.id)
        assert data["documentation"] == "Applied patch"
        assert data["implementation_timedate"].startswith("2024-04-01T08:00:00")

    def test_create_requires_implementation_timedate(self, client, seed_configitem):
        response = client.post(
            f"{API}/configitems/{seed_configitem.id}/changes",
            json={"documentation": "No date"},
        )
        assert response.status_code == 422

    def test_create_for_unknown_ci(self, client):
        response = client.post(
            f"{API}/configitems/{uuid.uuid4()}/changes",
            json={"implementation_timedate": "2024-04-01T08:00:00", "documentation": "x"},
        )

        assert response.status_code == 404
        assert response.json()["kind"] == "not_found"

    def test_list_newest_first(self, client, seed_configitem):
        """Changes are listed by implementation time, newest first."""
        middle = _create_change(client, seed_configitem.id, "2024-04-02T00:00:00", "second")
        oldest = _create_change(client, seed_configitem.id, "2024-04-01T00:00:00", "first")
        newest = _create_change(client, seed_configitem.id, "2024-04-03T00:00:00", "third")

        response = client.get(f"{API}/configitems/{seed_configitem.id}/changes")

        assert response.status_code == 200
        assert [c["id"] for c in response.json()] == [newest["id"], middle["id"], oldest["id"]]

    def test_list_for_unknown_ci(self, client):
        response = client.get(f"{API}/configitems/{uuid.uuid4()}/changes")
        assert response.status_code == 404

    def test_list_is_scoped_to_ci(self, client, seed_configitem):
        other = client.post(
            f"{API}/configitems",
            json={"name": "other", "description": "Another CI"},
        ).json()
        _create_change(client, other["id"], "2024-04-01T00:00:00")

        response = client.get(f"{API}/configitems/{seed_configitem.id}/changes")

        assert response.json() == []

    def test_get(self, client, seed_configitem):
        created = _create_change(client, seed_configitem.id, "2024-04-01T00:00:00")

        response = client.get(f"{API}/configitems/{seed_configitem.id}/changes/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_under_wrong_ci(self, client, seed_configitem):
        """A change is only reachable under its own CI."""
        created = _create_change(client, seed_configitem.id, "2024-04-01T00:00:00")

        response = client.get(f"{API}/configitems/{uuid.uuid4()}/changes/{created['id']}")

        assert response.status_code == 404

    def test_update(self, client, seed_configitem):
        created = _create_change(client, seed_configitem.id, "2024-04-01T00:00:00")

        response = client.patch(
            f"{API}/configitems/{seed_configitem.id}/changes/{created['id']}",
            json={"documentation": "Rolled back"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["documentation"] == "Rolled back"
        assert data["implementation_timedate"] == created["implementation_timedate"]

    def test_update_null_documentation_is_rejected(self, client, seed_configitem):
        created = _create_change(client, seed_configitem.id, "2024-04-01T00:00:00")

        response = client.put(
            f"{API}/configitems/{seed_configitem.id}/changes/{created['id']}",
            json={"documentation": None},
        )

        assert response.status_code == 422

    def test_delete(self, client, seed_configitem):
        created = _create_change(client, seed_configitem.id, "2024-04-01T00:00:00")
        url = f"{API}/configitems/{seed_configitem.id}/changes/{created['id']}"

        assert client.delete(url).status_code == 204
        assert client.get(url).status_code == 404
        assert client.delete(url).status_code == 404
