# =============================================================================
# core/models/upload.py - Upload & Maintenance Schemas
# =============================================================================
# Results returned by the asset pipeline and the maintenance endpoints.
# =============================================================================

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class UploadKind(str, Enum):
    """What an upload is for. Only mastheads accept ZIP archives."""
    IMAGE = "image"
    MASTHEAD = "masthead"
    PARTNER = "partner"
    TEAM = "team"
    PORTFOLIO = "portfolio"


class UploadResponse(BaseModel):
    """
    Where an uploaded file ended up.

    file_path is a site-relative URL path; for ZIP uploads it points
    at the extracted index.html.

    Example:
        {
            "success": true,
            "file_path": "/interactive_mastheads_zips/online/brand/<uuid>/index.html",
            "storage_url": null
        }
    """
    success: bool = True
    file_path: str
    storage_url: Optional[str] = None


class ExtractionError(BaseModel):
    file: str
    error: str


class ExtractZipsResponse(BaseModel):
    success: bool
    message: str
    extracted_count: int = 0
    error_count: int = 0
    errors: list[ExtractionError] = Field(default_factory=list)


class FixContentTypesResponse(BaseModel):
    success: bool = True
    total_files: int = 0
    fixed: int = 0
    errors: list[str] = Field(default_factory=list)


class CleanupRequest(BaseModel):
    file_path: str = Field(..., min_length=1)


class CleanupResponse(BaseModel):
    success: bool
    message: str


class MastheadFileCheck(BaseModel):
    exists: bool
    path: str
