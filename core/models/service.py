# =============================================================================
# core/models/service.py - Service Schemas
# =============================================================================
# A service is one of the agency's offerings ("CPI", "Rich Media") shown as a
# card on the home page. Its id is a readable slug rather than a number.
# =============================================================================

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .update import PartialUpdate


class ServiceCreate(BaseModel):
    """
    Schema for creating a service.

    When id is omitted it is derived from the name.

    Example:
        {"name": "Rich Media", "description": "Interactive ad formats", "icon": "sparkles"}
    """
    id: Optional[str] = Field(default=None, min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    icon: Optional[str] = Field(default=None, description="Emoji or icon name")
    image_url: Optional[str] = None
    folder_name: Optional[str] = Field(
        default=None,
        description="Image folder used by the service pop-up"
    )

    model_config = {"str_strip_whitespace": True}


class ServiceUpdate(PartialUpdate):
    not_null = ("name",)

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    icon: Optional[str] = None
    image_url: Optional[str] = None
    folder_name: Optional[str] = None

    model_config = {"str_strip_whitespace": True}


class ServiceResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    image_url: Optional[str] = None
    folder_name: Optional[str] = None
    created_at: Optional[datetime] = None
