# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Swaps the Supabase client for an in-memory fake
# - Points the public/private/data directories at a temp directory
# - Signs admin and non-admin access tokens with the test JWT secret
# =============================================================================

import io
import os
import time
import zipfile
from uuid import uuid4

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from app.config import settings
from lib.supabase_client import SupabaseClient
from tests.fake_supabase import FakeSupabase


# =============================================================================
# Helpers
# =============================================================================

def make_token(
    email: str = "editor@appective.net",
    app_metadata: dict | None = None,
    expires_in: int = 3600,
    secret: str | None = None,
    **claims,
) -> str:
    """Sign a Supabase-style access token."""
    payload = {
        "sub": str(uuid4()),
        "email": email,
        "aud": "authenticated",
        "exp": int(time.time()) + expires_in,
        "app_metadata": app_metadata or {},
        "user_metadata": {},
    }
    payload.update(claims)
    return jwt.encode(payload, secret or settings.SUPABASE_JWT_SECRET, algorithm="HS256")


def make_zip(files: dict[str, bytes | str]) -> bytes:
    """Build a ZIP archive in memory from name -> content."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, content in files.items():
            archive.writestr(name, content)
    return buffer.getvalue()


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_supabase(monkeypatch):
    """Replace the shared and auth Supabase clients with one in-memory fake."""
    fake = FakeSupabase()
    monkeypatch.setattr(SupabaseClient, "_instance", fake)
    monkeypatch.setattr(SupabaseClient, "create_auth_client", lambda: fake)
    return fake


@pytest.fixture(autouse=True)
def site_dirs(tmp_path, monkeypatch):
    """Keep every file the app writes inside the test's temp directory."""
    public = tmp_path / "public"
    private = tmp_path / "private"
    data = tmp_path / "data"
    for directory in (public, private, data):
        directory.mkdir()

    monkeypatch.setattr(settings, "PUBLIC_DIR", str(public))
    monkeypatch.setattr(settings, "PRIVATE_DIR", str(private))
    monkeypatch.setattr(settings, "DATA_DIR", str(data))
    monkeypatch.setattr(settings, "MASTHEAD_MIRROR_TO_STORAGE", False)
    return {"public": public, "private": private, "data": data}


@pytest.fixture
def client(fake_supabase):
    """Test client with the fake database installed."""
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {make_token(app_metadata={'role': 'admin'})}"}


@pytest.fixture
def user_headers():
    """A valid token for an account that is not an admin."""
    return {"Authorization": f"Bearer {make_token(email='visitor@example.com')}"}


@pytest.fixture
def masthead_zip():
    """A well-formed HTML5 ad archive."""
    return make_zip({
        "index.html": "<html><body><script src='js/ad.js'></script></body></html>",
        "js/ad.js": "console.log('ad');",
        "img/logo.png": b"\x89PNG\r\n\x1a\n",
    })
