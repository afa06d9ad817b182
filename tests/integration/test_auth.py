"""Integration tests for JWT authentication.

Validates:
  - /health is public (plain Django view, no DRF).
  - Protected DRF endpoints return 401 without or with a bad token.
  - A SimpleJWT access token grants access to /api/v1/me.
"""

import pytest

from modules.accounts.models import AccountInfo, AccountRole

pytestmark = pytest.mark.integration


class TestPublicEndpoints:
    def test_health_is_public(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"


class TestProtectedEndpoints:
    def test_no_token_returns_401(self, api_client):
        response = api_client.get("/api/v1/me")
        assert response.status_code == 401

    def test_invalid_token_returns_401(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION="Bearer invalid.token.here")
        response = api_client.get("/api/v1/me")
        assert response.status_code == 401

    def test_malformed_auth_header_returns_401(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION="Token some-token")
        response = api_client.get("/api/v1/me")
        assert response.status_code == 401

    def test_401_includes_www_authenticate_header(self, api_client):
        response = api_client.get("/api/v1/me")
        assert response.status_code == 401
        assert "Bearer" in response.get("WWW-Authenticate", "")


class TestTokenFlow:
    def test_obtained_token_grants_access(self, api_client, user):
        token = api_client.post(
            "/api/v1/auth/token/",
            {"username": "apiuser", "password": "testpass123"},
            format="json",
        )
        assert token.status_code == 200

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token.json()['access']}")
        response = api_client.get("/api/v1/me")

        assert response.status_code == 200
        assert response.json() == {"username": "apiuser", "account": None}

    def test_me_includes_account_profile(self, auth_client, user):
        AccountInfo.objects.create(
            username=user.username,
            role=AccountRole.STAFF,
            email="apiuser@example.com",
        )

        response = auth_client.get("/api/v1/me")

        account = response.json()["account"]
        assert account["role"] == "Staff"
        assert account["email"] == "apiuser@example.com"
