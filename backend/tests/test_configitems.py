"""
Tests for configuration item endpoints.
"""

import uuid

import pytest

API = "/api/v1"


class TestCreateConfigItem:
    """Tests for POST /configitems."""

    def test_create_with_all_fields(self, client):
        """Every supplied field is stored as given."""
        response = client.post(
            f"{API}/configitems",
            json={
                "name": "web-01",
                "status": "maintenance",
                "created_at": "2024-03-01T10:00:00",
                "type": "server",
                "owner": "ops",
                "description": "Frontend web node",
            },
        )

        assert response.status_code == 201
        data = response.json()
        uuid.UUID(data["id"])
        assert data["name"] == "web-01"
        assert data["status"] == "maintenance"
        assert data["created_at"].startswith("2024-03-01T10:00:00")
        assert data["type"] == "server"
        assert data["owner"] == "ops"
        assert data["description"] == "Frontend web node"

    def test_create_applies_defaults(self, client):
        """Status defaults to inactive and created_at to the current time."""
        response = client.post(
            f"{API}/configitems",
            json={"name": "web-02", "description": "Spare node"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "inactive"
        assert data["created_at"]
        assert data["type"] is None
        assert data["owner"] is None

    def test_create_requires_name(self, client):
        response = client.post(f"{API}/configitems", json={"description": "No name"})
        assert response.status_code == 422

    def test_create_rejects_empty_name(self, client):
        response = client.post(f"{API}/configitems", json={"name": "", "description": "x"})

        assert response.status_code == 422
        assert response.json()["kind"] == "validation"
        assert "name" in response.json()["detail"]

    def test_create_rejects_unknown_status(self, client):
        response = client.post(
            f"{API}/configitems",
            json={"name": "web-04", "status": "broken", "description": "x"},
        )
        assert response.status_code == 422
        assert response.json()["kind"] == "validation"

    def test_created_item_is_listed(self, client):
        created = client.post(
            f"{API}/configitems",
            json={"name": "web-05", "description": "Listed"},
        ).json()

        response = client.get(f"{API}/configitems")

        assert response.status_code == 200
        assert [item["id"] for item in response.json()] == [created["id"]]


class TestConfigItemBounds:
    """Length limits of configuration item attributes."""

    @pytest.mark.parametrize(
        "field,longest",
        [("name", 255), ("type", 31), ("owner", 63), ("description", 255)],
    )
    def test_longest_value_is_accepted(self, client, field, longest):
        payload = {"name": "web-06", "description": "Bounds", field: "x" * longest}

        response = client.post(f"{API}/configitems", json=payload)

        assert response.status_code == 201
        assert response.json()[field] == "x" * longest

    @pytest.mark.parametrize(
        "field,longest",
        [("name", 255), ("type", 31), ("owner", 63), ("description", 255)],
    )
    def test_one_past_the_limit_is_rejected(self, client, field, longest):
        payload = {"name": "web-07", "description": "Bounds", field: "x" * (longest + 1)}

        response = client.post(f"{API}/configitems", json=payload)

        assert response.status_code == 422
        assert response.json()["kind"] == "validation"
        assert field in response.json()["detail"]

    @pytest.mark.parametrize("field", ["type", "owner"])
    def test_empty_type_or_owner_is_rejected(self, client, field):
        payload = {"name": "web-08", "description": "Bounds", field: ""}

        response = client.post(f"{API}/configitems", json=payload)

        assert response.status_code == 422
        assert response.json()["kind"] == "validation"

    def test_empty_description_is_accepted(self, client):
        response = client.post(f"{API}/configitems", json={"name": "web-09", "description": ""})
        assert response.status_code == 201

    def test_update_applies_the_same_limits(self, client, seed_configitem):
        url = f"{API}/configitems/{seed_configitem.id}"

        assert client.put(url, json={"type": "x" * 32}).status_code == 422
        assert client.put(url, json={"owner": "x" * 64}).status_code == 422
        assert client.put(url, json={"description": "x" * 256}).status_code == 422
        assert client.put(url, json={"owner": ""}).status_code == 422

        stored = client.get(url).json()
        assert stored["owner"] == "dba-team"


class TestReadConfigItem:
    """Tests for GET /configitems and GET /configitems/{id}."""

    def test_list_empty(self, client):
        response = client.get(f"{API}/configitems")
        assert response.status_code == 200
        assert response.json() == []

    def test_get_by_id(self, client, seed_configitem):
        response = client.get(f"{API}/configitems/{seed_configitem.id}")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == str(seed_configitem.id)
        assert data["name"] == "db-01"
        assert data["status"] == "active"

    def test_get_unknown_returns_not_found(self, client):
        response = client.get(f"{API}/configitems/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json()["kind"] == "not_found"

    def test_get_malformed_id(self, client):
        response = client.get(f"{API}/configitems/not-a-uuid")
        assert response.status_code == 422


class TestUpdateConfigItem:
    """Tests for PUT/PATCH /configitems/{id}."""

    def test_update_changes_only_given_fields(self, client, seed_configitem):
        """Omitted fields keep their stored value."""
        response = client.put(
            f"{API}/configitems/{seed_configitem.id}",
            json={"status": "retired"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "retired"
        assert data["name"] == "db-01"
        assert data["owner"] == "dba-team"
        assert data["description"] == "Primary PostgreSQL server"

    def test_patch_is_accepted(self, client, seed_configitem):
        response = client.patch(
            f"{API}/configitems/{seed_configitem.id}",
            json={"owner": "platform"},
        )

        assert response.status_code == 200
        assert response.json()["owner"] == "platform"

    def test_null_clears_optional_field(self, client, seed_configitem):
        response = client.put(
            f"{API}/configitems/{seed_configitem.id}",
            json={"owner": None, "type": None},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["owner"] is None
        assert data["type"] is None

        # The change is persisted
        stored = client.get(f"{API}/configitems/{seed_configitem.id}").json()
        assert stored["owner"] is None

    def test_null_on_required_field_is_rejected(self, client, seed_configitem):
        """Clearing a required field fails and writes nothing."""
        response = client.put(
            f"{API}/configitems/{seed_configitem.id}",
            json={"name": None, "owner": "someone-else"},
        )

        assert response.status_code == 422
        assert response.json()["kind"] == "validation"
        assert "name" in response.json()["detail"]

        stored = client.get(f"{API}/configitems/{seed_configitem.id}").json()
        assert stored["name"] == "db-01"
        assert stored["owner"] == "dba-team"

    def test_empty_update_returns_record_unchanged(self, client, seed_configitem):
        before = client.get(f"{API}/configitems/{seed_configitem.id}").json()

        response = client.put(f"{API}/configitems/{seed_configitem.id}", json={})

        assert response.status_code == 200
        assert response.json() == before

    def test_update_unknown_returns_not_found(self, client):
        response = client.put(f"{API}/configitems/{uuid.uuid4()}", json={"owner": "x"})
        assert response.status_code == 404

    def test_empty_update_of_unknown_returns_not_found(self, client):
        response = client.put(f"{API}/configitems/{uuid.uuid4()}", json={})
        assert response.status_code == 404


class TestDeleteConfigItem:
    """Tests for DELETE /configitems/{id}."""

    def test_delete(self, client, seed_configitem):
        response = client.delete(f"{API}/configitems/{seed_configitem.id}")
        assert response.status_code == 204

        response = client.get(f"{API}/configitems/{seed_configitem.id}")
        assert response.status_code == 404

    def test_delete_twice(self, client, seed_configitem):
        client.delete(f"{API}/configitems/{seed_configitem.id}")

        response = client.delete(f"{API}/configitems/{seed_configitem.id}")

        assert response.status_code == 404
        assert response.json()["kind"] == "not_found"

    def test_delete_removes_changes(self, client, seed_configitem):
        """Deleting a CI cascades to its change records."""
        client.post(
            f"{API}/configitems/{seed_configitem.id}/changes",
            json={"implementation_timedate": "2024-04-01T00:00:00", "documentation": "Patch"},
        )

        client.delete(f"{API}/configitems/{seed_configitem.id}")

        response = client.get(f"{API}/configitems/{seed_configitem.id}/changes")
        assert response.status_code == 404
