# =============================================================================
# core/models/team.py - Team Member Schemas
# =============================================================================

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .update import PartialUpdate


class TeamMemberCreate(BaseModel):
    """
    Schema for adding a team member.

    Members are listed by display_order; inactive members are hidden
    from the public site but kept for the dashboard.
    """
    name: str = Field(..., min_length=1, max_length=255)
    position: str = Field(..., min_length=1, max_length=255)
    image: str = Field(..., min_length=1, description="Public path or URL of the photo")
    bio: Optional[str] = None
    display_order: int = Field(default=0, ge=0)
    is_active: bool = True

    model_config = {"str_strip_whitespace": True}


class TeamMemberUpdate(PartialUpdate):
    not_null = ("name", "position", "image", "display_order", "is_active")

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    position: Optional[str] = Field(default=None, min_length=1, max_length=255)
    image: Optional[str] = Field(default=None, min_length=1)
    bio: Optional[str] = None
    display_order: Optional[int] = Field(default=None, ge=0)
    is_active: Optional[bool] = None

    model_config = {"str_strip_whitespace": True}


class TeamMemberResponse(BaseModel):
    id: int
    name: str
    position: str
    image: str
    bio: Optional[str] = None
    display_order: int = 0
    is_active: bool = True
    created_at: Optional[datetime] = None
