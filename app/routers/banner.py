# =============================================================================
# app/routers/banner.py - Top Banner Endpoints
# =============================================================================

import logging
from typing import Optional

from fastapi import APIRouter, File, Form, UploadFile

from app.dependencies import AdminUser
from core.models.banner import BannerUpdateResponse, BannerUploadResponse, TopBannerResponse
from core.services.banner_service import BannerService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/top-banner", response_model=TopBannerResponse)
async def get_top_banner():
    """
    Current banner image and link.

    Never fails: an unset or unreadable banner comes back as nulls.
    """
    return BannerService.get_banner()


@router.post("/top-banner", response_model=BannerUpdateResponse)
async def update_top_banner(
    user: AdminUser,
    target_url: Optional[str] = Form(default=None),
    image_url: Optional[str] = Form(default=None, description="URL from POST /upload-banner"),
    file: Optional[UploadFile] = File(default=None),
):
    """
    Update the banner link, and the image when one is sent.

    The image can be sent as a file, or as the URL returned by
    /upload-banner.

    Raises:
        400: If the file is not an image
        413: If the file is too large
    """
    if file is not None and file.filename:
        content = await file.read()
        uploaded = BannerService.upload_image(file.filename, content, file.content_type)
        image_url = uploaded["url"]

    return BannerService.update_banner(target_url=target_url or None, image_url=image_url or None)


@router.delete("/top-banner", response_model=BannerUpdateResponse)
async def clear_top_banner(user: AdminUser):
    """Remove the banner image and link."""
    return BannerService.clear_banner()


@router.post("/upload-banner", response_model=BannerUploadResponse)
async def upload_banner(user: AdminUser, file: UploadFile = File(...)):
    """
    Upload a banner image to storage and return its public URL.

    Raises:
        400: If the file is not an image
        413: If the file is larger than MAX_BANNER_SIZE_MB
    """
    content = await file.read()
    uploaded = BannerService.upload_image(file.filename or "banner", content, file.content_type)
    logger.info(f"Uploaded banner image {uploaded['path']}")
    return BannerUploadResponse(url=uploaded["url"], path=uploaded["path"])
