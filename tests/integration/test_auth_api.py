# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for authentication endpoints."""

import pytest

from adminboard.config import settings
from adminboard.services import auth_service


@pytest.fixture
def fixed_code(monkeypatch):
    monkeypatch.setattr(auth_service, "generate_login_code", lambda: "123456")
    return "123456"


class TestLoginFlow:
    """Tests for passwordless sign-in."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_request_code_response_does_not_reveal_users(self, client, member_user):
        known = client.post(
            "/api/v1/auth/login-code", json={"email": member_user.email}
        )
        unknown = client.post(
            "/api/v1/auth/login-code", json={"email": "nobody@example.com"}
        )

        assert known.status_code == 202
        assert unknown.status_code == 202
        assert known.json() == unknown.json()

    def test_request_code_rejects_invalid_email(self, client):
        response = client.post(
            "/api/v1/auth/login-code", json={"email": "not-an-email"}
        )
        assert response.status_code == 422

    def test_verify_sets_session_cookie(self, client, member_user, fixed_code):
        client.post("/api/v1/auth/login-code", json={"email": member_user.email})

        response = client.post(
            "/api/v1/auth/verify",
            json={"email": member_user.email, "code": fixed_code},
        )

        assert response.status_code == 200
        assert "session" in response.cookies
        data = response.json()
        assert data["user"]["email"] == member_user.email
        assert data["user"]["role"] == "member"
        assert data["permissions"] == sorted(
            ["clients.view", "profiles.edit", "profiles.view", "projects.view"]
        )

        me = client.get("/api/v1/auth/me")
        assert me.status_code == 200
        assert me.json()["user"]["id"] == str(member_user.id)

    def test_verify_wrong_code(self, client, member_user, fixed_code):
        client.post("/api/v1/auth/login-code", json={"email": member_user.email})

        response = client.post(
            "/api/v1/auth/verify",
            json={"email": member_user.email, "code": "654321"},
        )

        assert response.status_code == 401

    def test_verify_locks_code_after_repeated_failures(
        self, client, member_user, fixed_code
    ):
        client.post("/api/v1/auth/login-code", json={"email": member_user.email})
        for _ in range(settings.login_code_max_attempts):
            client.post(
                "/api/v1/auth/verify",
                json={"email": member_user.email, "code": "654321"},
            )

        response = client.post(
            "/api/v1/auth/verify",
            json={"email": member_user.email, "code": fixed_code},
        )

        assert response.status_code == 401

    @pytest.mark.parametrize("secure", [True, False])
    def test_session_cookie_secure_flag_follows_settings(
        self, client, member_user, fixed_code, monkeypatch, secure
    ):
        monkeypatch.setattr(settings, "session_cookie_secure", secure)
        client.post("/api/v1/auth/login-code", json={"email": member_user.email})

        response = client.post(
            "/api/v1/auth/verify",
            json={"email": member_user.email, "code": fixed_code},
        )

        assert response.status_code == 200
        cookie_header = response.headers["set-cookie"].lower()
        assert ("secure" in cookie_header.split("; ")) is secure

    def test_verify_malformed_code(self, client, member_user):
        response = client.post(
            "/api/v1/auth/verify",
            json={"email": member_user.email, "code": "12ab"},
        )
        assert response.status_code == 422


class TestSession:
    """Tests for session handling."""

    def test_me_requires_authentication(self, client):
        response = client.get("/api/v1/auth/me")
        assert response.status_code == 401

    def test_me_with_invalid_session(self, client):
        client.cookies.set("session", "bogus")
        response = client.get("/api/v1/auth/me")
        assert response.status_code == 401

    def test_superadmin_permissions(self, superadmin_client):
        response = superadmin_client.get("/api/v1/auth/me")
        assert response.status_code == 200
        assert response.json()["permissions"] == ["*"]

    def test_logout_ends_session(self, member_client):
        response = member_client.post("/api/v1/auth/logout")
        assert response.status_code == 204

        response = member_client.get("/api/v1/auth/me")
        assert response.status_code == 401
