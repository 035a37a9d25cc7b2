# =============================================================================
# core/models/masthead.py - Interactive Masthead Schemas
# =============================================================================
# An interactive masthead is an HTML5 ad creative showcased on the site.
# The creative itself is uploaded as a ZIP and extracted under
# /interactive_mastheads_zips/; popup_html_path points at its index.html.
# =============================================================================

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .update import PartialUpdate


class MastheadCreate(BaseModel):
    """
    Schema for creating a masthead entry.

    Example:
        {
            "category": "Finance & Banking",
            "brand": "Garanti Bankasi",
            "title": "Summer Campaign",
            "popup_html_path": "/interactive_mastheads_zips/finance---banking/garanti-bankasi/<uuid>/index.html",
            "banner_size": "970x250",
            "banner_platforms": "Desktop, Mobile"
        }
    """
    category: str = Field(..., min_length=1, max_length=255)
    brand: str = Field(..., min_length=1, max_length=255)
    title: str = Field(..., min_length=1, max_length=255)
    image: Optional[str] = Field(default=None, description="Preview image")
    popup_html_path: str = Field(..., min_length=1)
    popup_title: Optional[str] = None
    popup_description: Optional[str] = None
    banner_size: Optional[str] = None
    banner_platforms: Optional[str] = None

    model_config = {"str_strip_whitespace": True}


class MastheadUpdate(PartialUpdate):
    not_null = ("category", "brand", "title", "popup_html_path")

    category: Optional[str] = Field(default=None, min_length=1, max_length=255)
    brand: Optional[str] = Field(default=None, min_length=1, max_length=255)
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    image: Optional[str] = None
    popup_html_path: Optional[str] = Field(default=None, min_length=1)
    popup_title: Optional[str] = None
    popup_description: Optional[str] = None
    banner_size: Optional[str] = None
    banner_platforms: Optional[str] = None

    model_config = {"str_strip_whitespace": True}


class MastheadResponse(BaseModel):
    id: str
    category: str
    brand: str
    title: str
    image: Optional[str] = None
    popup_html_path: str
    popup_title: Optional[str] = None
    popup_description: Optional[str] = None
    banner_size: Optional[str] = None
    banner_platforms: Optional[str] = None
    created_at: Optional[datetime] = None
