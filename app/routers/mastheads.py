# =============================================================================
# app/routers/mastheads.py - Interactive Masthead Endpoints
# =============================================================================
# Showcase entries for HTML5 ad creatives. The creative itself is uploaded
# through POST /upload (is_zip=true); these routes manage the entries
# pointing at it.
# =============================================================================

from fastapi import APIRouter

from core.models.masthead import MastheadCreate, MastheadResponse, MastheadUpdate
from core.services.portfolio_service import MastheadService
from app.routers.portfolio import register_crud_routes

router = APIRouter()

register_crud_routes(
    router, "/mastheads", MastheadService,
    MastheadCreate, MastheadUpdate, MastheadResponse,
    id_type=str,
)
