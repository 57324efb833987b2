# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for client endpoints."""

import pytest

CLIENT = {
    "company_name": "Initech",
    "contact_person": "Bill Lumbergh",
    "email": "bill@initech.example",
    "phone": "+1 555 0100",
}


@pytest.fixture
def created_client(admin_client):
    response = admin_client.post("/api/v1/clients", json=CLIENT)
    assert response.status_code == 201
    return response.json()


class TestClientEndpoints:
    """Tests for /api/v1/clients."""

    def test_member_can_view_but_not_create(self, member_client):
        assert member_client.get("/api/v1/clients").status_code == 200
        assert member_client.post("/api/v1/clients", json=CLIENT).status_code == 403

    def test_create_validates_input(self, admin_client):
        response = admin_client.post(
            "/api/v1/clients", json={**CLIENT, "email": "invalid", "phone": ""}
        )
        assert response.status_code == 422

    def test_create_and_list(self, admin_client, created_client):
        assert created_client["version"] == 1
        assert created_client["deleted_at"] is None

        response = admin_client.get("/api/v1/clients", params={"search": "lumbergh"})

        assert [c["id"] for c in response.json()] == [created_client["id"]]

    def test_update_with_stale_version(self, admin_client, created_client):
        url = f"/api/v1/clients/{created_client['id']}"
        first = admin_client.put(url, json={"notes": "one", "version": 1})
        second = admin_client.put(url, json={"notes": "two", "version": 1})

        assert first.status_code == 200
        assert second.status_code == 409
        assert second.json()["message"] == (
            "Conflict: Client was modified by another user"
        )

    def test_soft_delete_detaches_projects(self, admin_client, created_client):
        project = admin_client.post(
            "/api/v1/projects",
            json={
                "name": "Website",
                "client_id": created_client["id"],
                "start_date": "2025-01-01T00:00:00",
            },
        ).json()
        client_projects = admin_client.get(
            f"/api/v1/clients/{created_client['id']}/projects"
        )
        assert [p["id"] for p in client_projects.json()] == [project["id"]]

        response = admin_client.delete(f"/api/v1/clients/{created_client['id']}")
        assert response.status_code == 204

        detached = admin_client.get(f"/api/v1/projects/{project['id']}").json()
        assert detached["client_id"] is None
        assert detached["version"] == 2
        assert admin_client.get("/api/v1/clients").json() == []
        listed = admin_client.get("/api/v1/clients", params={"include_deleted": True})
        assert len(listed.json()) == 1

    def test_delete_twice(self, admin_client, created_client):
        url = f"/api/v1/clients/{created_client['id']}"
        admin_client.delete(url)

        response = admin_client.delete(url)

        assert response.status_code == 422
        assert response.json()["message"] == "Client already deleted"

    def test_restore(self, admin_client, created_client):
        url = f"/api/v1/clients/{created_client['id']}"
        admin_client.delete(url)

        response = admin_client.post(f"{url}/restore")

        assert response.status_code == 200
        assert response.json()["deleted_at"] is None
        assert admin_client.post(f"{url}/restore").status_code == 422
