# =============================================================================
# app/routers/maintenance.py - Asset Maintenance Endpoints
# =============================================================================
# Admin tools for the HTML5 ad directories:
# - extract archives left as temp-*.zip
# - remove an extracted ad's directory
# - repair content types of ads already in storage
# - check whether a masthead file exists (public, used by the site)
# =============================================================================

from fastapi import APIRouter, Query

from app.dependencies import AdminUser
from core.models.upload import (
    CleanupRequest,
    CleanupResponse,
    ExtractZipsResponse,
    FixContentTypesResponse,
    MastheadFileCheck,
)
from core.services.asset_service import AssetService
from core.services.storage_service import HTML5_ADS_PREFIX, StorageService

router = APIRouter()


@router.post("/extract-zips", response_model=ExtractZipsResponse)
async def extract_zips(user: AdminUser):
    """Extract every pending temp-*.zip below the masthead directory."""
    return AssetService.extract_pending_zips()


@router.post("/cleanup", response_model=CleanupResponse)
async def cleanup_masthead(request: CleanupRequest, user: AdminUser):
    """
    Remove the directory of an extracted HTML5 ad.

    Raises:
        400: If file_path is not below /interactive_mastheads_zips/
    """
    return AssetService.remove_masthead_directory(request.file_path)


@router.get("/check-masthead-file", response_model=MastheadFileCheck)
async def check_masthead_file(
    path: str = Query(..., min_length=1, description="Site path starting with /interactive_mastheads_zips/"),
):
    """
    Raises:
        400: If path is missing or outside /interactive_mastheads_zips/
    """
    return AssetService.check_masthead_file(path)


@router.post("/admin/fix-content-types", response_model=FixContentTypesResponse)
async def fix_content_types(
    user: AdminUser,
    prefix: str = Query(default=HTML5_ADS_PREFIX),
):
    """Re-upload stored HTML5 ad files with the right content types."""
    return StorageService.fix_content_types(prefix)
