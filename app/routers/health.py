# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Liveness for the process, readiness for everything a page render or an
# admin upload depends on: the content tables, the storage bucket and the
# local directories uploads, CVs and site content are written to.
# =============================================================================

import os
from datetime import datetime, timezone
from pathlib import Path

from fastapi import APIRouter
from pydantic import BaseModel

from app.config import settings
from lib.supabase_client import SupabaseClient

router = APIRouter()

VERSION = "1.0.0"


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str


class ChecksResponse(BaseModel):
    database: str
    storage: str
    files: str


class ReadinessResponse(BaseModel):
    status: str
    checks: ChecksResponse
    timestamp: str


class LivenessResponse(BaseModel):
    status: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _site_directories() -> dict[str, Path]:
    """Roots the app writes to; subfolders are created on demand."""
    return {
        "public": settings.public_path,
        "private": settings.private_path,
        "data": settings.data_path,
    }


def _check_directories() -> str:
    unwritable = [
        name for name, path in _site_directories().items()
        if not (path.is_dir() and os.access(path, os.W_OK))
    ]
    if unwritable:
        return f"unhealthy: not writable: {', '.join(unwritable)}"
    return "healthy"


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic status for load balancers and monitoring."""
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
        version=VERSION,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check():
    """
    Readiness check endpoint.

    Reports "degraded" when any of these fails:
    - database: the partner_categories table answers a one-row select
    - storage: the site bucket can be listed
    - files: PUBLIC_DIR, PRIVATE_DIR and DATA_DIR exist and are writable
    """
    checks = ChecksResponse(database="unknown", storage="unknown", files="unknown")

    try:
        client = SupabaseClient.get_client()
        client.table("partner_categories").select("id").limit(1).execute()
        checks.database = "healthy"
    except Exception as e:
        checks.database = f"unhealthy: {str(e)[:50]}"

    try:
        client = SupabaseClient.get_client()
        client.storage.from_(settings.STORAGE_BUCKET).list("")
        checks.storage = "healthy"
    except Exception as e:
        checks.storage = f"unhealthy: {str(e)[:50]}"

    checks.files = _check_directories()

    all_healthy = all(
        value == "healthy" for value in (checks.database, checks.storage, checks.files)
    )

    return ReadinessResponse(
        status="ready" if all_healthy else "degraded",
        checks=checks,
        timestamp=_now(),
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    """Returns whether the service process is alive."""
    return LivenessResponse(status="alive", timestamp=_now())
