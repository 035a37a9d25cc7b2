# =============================================================================
# core/models/portfolio.py - Portfolio Schemas
# =============================================================================
# "Our Works" is split into one table per kind of project:
# - applications: mobile/desktop apps the agency shipped
# - games: game projects
# - web_portals: client websites
# - digital_marketing: campaign case studies
#
# Interactive mastheads live in masthead.py since they carry an HTML5 ad.
# =============================================================================

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .update import PartialUpdate


# =============================================================================
# Applications (apps)
# =============================================================================

class AppItemCreate(BaseModel):
    """
    Schema for an app in the portfolio.

    features and platforms are free text, e.g. "iOS, Android".
    """
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    image: Optional[str] = None
    features: Optional[str] = None
    platforms: Optional[str] = None
    project_url: Optional[str] = None

    model_config = {"str_strip_whitespace": True}


class AppItemUpdate(PartialUpdate):
    not_null = ("title", "description")

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, min_length=1)
    image: Optional[str] = None
    features: Optional[str] = None
    platforms: Optional[str] = None
    project_url: Optional[str] = None

    model_config = {"str_strip_whitespace": True}


class AppItemResponse(BaseModel):
    id: int
    title: str
    description: str
    image: Optional[str] = None
    features: Optional[str] = None
    platforms: Optional[str] = None
    project_url: Optional[str] = None
    created_at: Optional[datetime] = None


# =============================================================================
# Games
# =============================================================================

class GameCreate(BaseModel):
    """Schema for a game project. features is a list of short bullet points."""
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    image: Optional[str] = None
    features: list[str] = Field(default_factory=list)
    platforms: Optional[str] = None
    project_url: Optional[str] = None

    model_config = {"str_strip_whitespace": True}


class GameUpdate(PartialUpdate):
    not_null = ("title", "description")

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, min_length=1)
    image: Optional[str] = None
    features: Optional[list[str]] = None
    platforms: Optional[str] = None
    project_url: Optional[str] = None

    model_config = {"str_strip_whitespace": True}


class GameResponse(BaseModel):
    id: int
    title: str
    description: str
    image: Optional[str] = None
    features: list[str] = Field(default_factory=list)
    platforms: Optional[str] = None
    project_url: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_validator("features", mode="before")
    @classmethod
    def null_features_to_empty(cls, value):
        return value or []


# =============================================================================
# Web Portals
# =============================================================================

class WebPortalCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    client: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    image: Optional[str] = None
    project_url: Optional[str] = None

    model_config = {"str_strip_whitespace": True}


class WebPortalUpdate(PartialUpdate):
    not_null = ("title", "client")

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    client: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    image: Optional[str] = None
    project_url: Optional[str] = None

    model_config = {"str_strip_whitespace": True}


class WebPortalResponse(BaseModel):
    id: int
    title: str
    client: str
    description: Optional[str] = None
    image: Optional[str] = None
    project_url: Optional[str] = None
    created_at: Optional[datetime] = None


# =============================================================================
# Digital Marketing
# =============================================================================

class DigitalMarketingCreate(BaseModel):
    """
    Schema for a campaign case study.

    services lists what the agency delivered, e.g. ["SEO", "Social Ads"].
    """
    title: str = Field(..., min_length=1, max_length=255)
    client: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    image: Optional[str] = None
    services: list[str] = Field(default_factory=list)
    project_url: Optional[str] = None

    model_config = {"str_strip_whitespace": True}


class DigitalMarketingUpdate(PartialUpdate):
    not_null = ("title", "client")

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    client: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    image: Optional[str] = None
    services: Optional[list[str]] = None
    project_url: Optional[str] = None

    model_config = {"str_strip_whitespace": True}


class DigitalMarketingResponse(BaseModel):
    id: int
    title: str
    client: str
    description: Optional[str] = None
    image: Optional[str] = None
    services: list[str] = Field(default_factory=list)
    project_url: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_validator("services", mode="before")
    @classmethod
    def null_services_to_empty(cls, value):
        return value or []
