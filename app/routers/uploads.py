# =============================================================================
# app/routers/uploads.py - Asset Upload Endpoint
# =============================================================================
# One endpoint for everything the dashboard uploads:
# - images are saved below /uploads/images/
# - ZIP archives of HTML5 ads are extracted below /interactive_mastheads_zips/
#
# Usage (multipart form):
#   file=<ad.zip>  category=Online  brand=Acme  type=masthead  is_zip=true
# =============================================================================

import logging
from typing import Optional

from fastapi import APIRouter, File, Form, UploadFile

from app.dependencies import AdminUser
from core.models.upload import UploadKind, UploadResponse
from core.services.asset_service import AssetService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/upload", response_model=UploadResponse)
async def upload_asset(
    user: AdminUser,
    file: UploadFile = File(...),
    category: Optional[str] = Form(default=None),
    brand: Optional[str] = Form(default=None),
    type: UploadKind = Form(default=UploadKind.IMAGE),
    is_zip: bool = Form(default=False),
):
    """
    Upload an image or an HTML5 ad archive.

    ZIP uploads are extracted into a new directory named by a generated
    id; file_path then points at the extracted index.html.

    Raises:
        400: If the file type is wrong, the archive is unreadable or unsafe,
             or index.html is missing from the archive root
        413: If the file is too large
    """
    filename = file.filename or ""
    content = await file.read()

    if is_zip:
        result = AssetService.save_masthead_zip(content, filename, category=category, brand=brand)
        logger.info(f"Uploaded {type.value} archive {filename} -> {result['file_path']}")
        return UploadResponse(file_path=result["file_path"], storage_url=result["storage_url"])

    file_path = AssetService.save_image(content, filename, category=category, brand=brand)
    logger.info(f"Uploaded {type.value} image {filename} -> {file_path}")
    return UploadResponse(file_path=file_path)
