# =============================================================================
# core/models/partner.py - Partner Schemas
# =============================================================================
# Partners are shown on the home page as logo strips grouped by category:
# - PartnerCategory*: a named group ("Finance & Banking") and its image folder
# - PartnerLogo*: one partner logo belonging to a category
# - PartnerCategoryWithLogos: the nested shape the home page renders
# =============================================================================

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .update import PartialUpdate


# =============================================================================
# Categories
# =============================================================================

class PartnerCategoryCreate(BaseModel):
    """
    Schema for creating a partner category.

    Example:
        {"name": "Finance & Banking", "original_path": "/images/partners/finance"}
    """
    name: str = Field(..., min_length=1, max_length=255)
    original_path: str = Field(
        ...,
        min_length=1,
        description="Folder the category's logos were imported from"
    )

    model_config = {"str_strip_whitespace": True}


class PartnerCategoryUpdate(PartialUpdate):
    not_null = ("name", "original_path")

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    original_path: Optional[str] = Field(default=None, min_length=1)

    model_config = {"str_strip_whitespace": True}


class PartnerCategoryResponse(BaseModel):
    id: int
    name: str
    original_path: Optional[str] = None
    created_at: Optional[datetime] = None


# =============================================================================
# Logos
# =============================================================================

class PartnerLogoCreate(BaseModel):
    """
    Schema for adding a logo to a category.

    The category must already exist.
    """
    category_id: int
    alt: str = Field(..., min_length=1, description="Alt text, usually the partner name")
    image_path: str = Field(..., min_length=1)
    url: Optional[str] = Field(default=None, description="Partner website")

    model_config = {"str_strip_whitespace": True}


class PartnerLogoUpdate(PartialUpdate):
    not_null = ("category_id", "alt", "image_path")

    category_id: Optional[int] = None
    alt: Optional[str] = Field(default=None, min_length=1)
    image_path: Optional[str] = Field(default=None, min_length=1)
    url: Optional[str] = None

    model_config = {"str_strip_whitespace": True}


class PartnerLogoResponse(BaseModel):
    id: int
    category_id: int
    alt: str
    image_path: str
    url: Optional[str] = None
    created_at: Optional[datetime] = None


class PartnerCategoryWithLogos(PartnerCategoryResponse):
    """A category with its logos nested, as rendered on the home page."""
    logos: list[PartnerLogoResponse] = Field(default_factory=list)
