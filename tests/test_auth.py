# =============================================================================
# tests/test_auth.py - Authentication Tests
# =============================================================================
# Covers token verification, the admin gate and the /api/auth routes.
# =============================================================================

from uuid import UUID

import pytest
from fastapi import HTTPException

from app.auth.dependencies import decode_access_token, is_admin_claims, resolve_role
from tests.conftest import make_token

GAME = {"title": "Racer", "description": "Arcade racing game"}


# =============================================================================
# Admin Claims
# =============================================================================

class TestIsAdminClaims:
    """Tests for deciding whether a user is an admin."""

    def test_role_in_app_metadata(self):
        assert is_admin_claims("someone@example.com", {"role": "admin"}, {}) is True

    def test_role_in_user_metadata(self):
        assert is_admin_claims("someone@example.com", {}, {"role": "admin"}) is True

    def test_agency_domain_is_admin(self):
        assert is_admin_claims("Designer@Appective.net", {}, {}) is True

    def test_other_domain_is_not_admin(self):
        assert is_admin_claims("someone@example.com", {}, {}) is False

    def test_missing_email_is_not_admin(self):
        assert is_admin_claims(None, None, None) is False

    def test_resolve_role_prefers_metadata(self):
        assert resolve_role({"role": "editor"}, {}, True) == "editor"
        assert resolve_role({}, {}, True) == "admin"
        assert resolve_role({}, {}, False) == "user"


# =============================================================================
# Token Verification
# =============================================================================

class TestDecodeAccessToken:
    """Tests for verifying Supabase access tokens."""

    def test_valid_admin_token(self):
        # Arrange
        token = make_token(email="someone@example.com", app_metadata={"role": "admin"})

        # Act
        user = decode_access_token(token)

        # Assert
        assert isinstance(user.id, UUID)
        assert user.email == "someone@example.com"
        assert user.is_admin is True
        assert user.role == "admin"

    def test_expired_token_rejected(self):
        token = make_token(expires_in=-60)

        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(token)

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Token has expired"

    def test_wrong_secret_rejected(self):
        token = make_token(secret="not-the-secret")

        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(token)

        assert exc_info.value.status_code == 401

    def test_wrong_audience_rejected(self):
        token = make_token(aud="anon")

        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(token)

        assert exc_info.value.status_code == 401

    def test_malformed_subject_rejected(self):
        token = make_token(sub="not-a-uuid")

        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(token)

        assert exc_info.value.detail == "Invalid token: malformed user ID"


# =============================================================================
# Admin Gate
# =============================================================================

class TestAdminGate:
    """Every mutating endpoint needs an admin token."""

    def test_missing_token_is_401(self, client):
        response = client.post("/api/games", json=GAME)

        assert response.status_code == 401

    def test_garbage_token_is_401(self, client):
        response = client.post(
            "/api/games",
            json=GAME,
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401

    def test_non_admin_token_is_403(self, client, user_headers):
        response = client.post("/api/games", json=GAME, headers=user_headers)

        assert response.status_code == 403
        assert response.json()["detail"] == "Admin access required"

    def test_admin_token_passes(self, client, admin_headers):
        response = client.post("/api/games", json=GAME, headers=admin_headers)

        assert response.status_code == 201


# =============================================================================
# Auth Routes
# =============================================================================

class TestLogin:
    """Tests for POST /api/auth/login."""

    def test_admin_login_returns_session(self, client, fake_supabase):
        # Arrange
        fake_supabase.auth.add_user("ops@appective.net", "s3cret")

        # Act
        response = client.post(
            "/api/auth/login",
            json={"email": "ops@appective.net", "password": "s3cret"},
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["user"]["email"] == "ops@appective.net"
        assert body["user"]["role"] == "admin"
        assert body["session"]["access_token"] == "access-token"

    def test_wrong_password_is_401(self, client, fake_supabase):
        fake_supabase.auth.add_user("ops@appective.net", "s3cret")

        response = client.post(
            "/api/auth/login",
            json={"email": "ops@appective.net", "password": "wrong"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    def test_non_admin_is_signed_out_and_refused(self, client, fake_supabase):
        fake_supabase.auth.add_user("fan@example.com", "s3cret")

        response = client.post(
            "/api/auth/login",
            json={"email": "fan@example.com", "password": "s3cret"},
        )

        assert response.status_code == 403
        assert fake_supabase.auth.sign_out_calls == 1

    def test_password_sent_as_typed(self, client, fake_supabase):
        """Surrounding spaces are part of the password; only the email is trimmed."""
        # Arrange
        fake_supabase.auth.add_user("ops@appective.net", "  pass phrase  ")

        # Act
        response = client.post(
            "/api/auth/login",
            json={"email": "  ops@appective.net ", "password": "  pass phrase  "},
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["user"]["email"] == "ops@appective.net"

    def test_trimmed_password_does_not_match(self, client, fake_supabase):
        fake_supabase.auth.add_user("ops@appective.net", "  pass phrase  ")

        response = client.post(
            "/api/auth/login",
            json={"email": "ops@appective.net", "password": "pass phrase"},
        )

        assert response.status_code == 401

    def test_missing_password_is_400(self, client):
        response = client.post("/api/auth/login", json={"email": "ops@appective.net"})

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"


class TestLogoutAndStatus:
    """Tests for POST /api/auth/logout and GET /api/auth/status."""

    def test_logout_revokes_token(self, client, fake_supabase, admin_headers):
        response = client.post("/api/auth/logout", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"success": True}
        token = admin_headers["Authorization"].split(" ", 1)[1]
        assert fake_supabase.auth.admin.signed_out_tokens == [token]

    def test_logout_without_token_succeeds(self, client):
        response = client.post("/api/auth/logout")

        assert response.status_code == 200

    def test_logout_failure_is_500(self, client, fake_supabase, admin_headers):
        fake_supabase.auth.admin.fail = True

        response = client.post("/api/auth/logout", headers=admin_headers)

        assert response.status_code == 500
        assert response.json()["detail"] == "Logout failed"

    def test_status_without_token(self, client):
        response = client.get("/api/auth/status")

        assert response.json() == {"is_authenticated": False, "is_admin": False, "user": None}

    def test_status_with_admin_token(self, client, admin_headers):
        response = client.get("/api/auth/status", headers=admin_headers)

        body = response.json()
        assert body["is_authenticated"] is True
        assert body["is_admin"] is True
        assert body["user"]["email"] == "editor@appective.net"
