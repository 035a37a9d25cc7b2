# =============================================================================
# core/models/banner.py - Top Banner Schemas
# =============================================================================
# The top banner is a single row (id = 1) holding the hero image and the
# link it points to.
# =============================================================================

from typing import Optional

from pydantic import BaseModel

BANNER_ROW_ID = 1

# Columns the table requires when the row is first created
BANNER_DEFAULTS = {
    "title": "Welcome to Appective",
    "subtitle": "Digital Marketing & Development",
    "description": "We create innovative digital solutions for your business",
    "button_text": "Get Started",
}


class TopBannerResponse(BaseModel):
    """What the home page needs to render the banner. Both are null when unset."""
    image_url: Optional[str] = None
    target_url: Optional[str] = None


class BannerUploadResponse(BaseModel):
    success: bool = True
    url: str
    path: str


class BannerUpdateResponse(TopBannerResponse):
    success: bool = True
