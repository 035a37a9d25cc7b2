# =============================================================================
# core/models/job.py - Job Opening & Application Schemas
# =============================================================================
# These models define the API contract for the careers section:
# - JobOpening*: open positions listed on the site
# - JobApplication*: candidate submissions with an attached CV
# - ApplicationStatus: Enum for where an application is in review
# =============================================================================

import re
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .update import PartialUpdate

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


# =============================================================================
# Job Openings
# =============================================================================

class JobOpeningCreate(BaseModel):
    """
    Schema for creating a job opening.

    The id is generated on insert (job_<epoch ms>_<random>).

    Example:
        {
            "title": "Frontend Developer",
            "full_title": "Senior Frontend Developer (React)",
            "is_remote": true,
            "what_you_will_do": ["Build ad formats", "Ship the dashboard"]
        }
    """
    title: str = Field(..., min_length=1, max_length=255)
    full_title: str = Field(..., min_length=1, max_length=255)
    icon_name: Optional[str] = None
    short_description: Optional[str] = None
    is_remote: bool = False
    is_tr: bool = Field(default=False, description="Position is based in Turkey")
    slug: Optional[str] = None
    description: Optional[str] = None
    what_you_will_do: list[str] = Field(default_factory=list)
    what_were_looking_for: list[str] = Field(default_factory=list)
    why_join_us: list[str] = Field(default_factory=list)
    apply_link: Optional[str] = None

    model_config = {"str_strip_whitespace": True}


class JobOpeningUpdate(PartialUpdate):
    not_null = ("title", "full_title", "is_remote", "is_tr")

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    full_title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    icon_name: Optional[str] = None
    short_description: Optional[str] = None
    is_remote: Optional[bool] = None
    is_tr: Optional[bool] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    what_you_will_do: Optional[list[str]] = None
    what_were_looking_for: Optional[list[str]] = None
    why_join_us: Optional[list[str]] = None
    apply_link: Optional[str] = None

    model_config = {"str_strip_whitespace": True}


class JobOpeningResponse(BaseModel):
    id: str
    title: str
    full_title: str
    icon_name: Optional[str] = None
    short_description: Optional[str] = None
    is_remote: bool = False
    is_tr: bool = False
    slug: Optional[str] = None
    description: Optional[str] = None
    what_you_will_do: list[str] = Field(default_factory=list)
    what_were_looking_for: list[str] = Field(default_factory=list)
    why_join_us: list[str] = Field(default_factory=list)
    apply_link: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_validator("what_you_will_do", "what_were_looking_for", "why_join_us", mode="before")
    @classmethod
    def null_list_to_empty(cls, value):
        return value or []


# =============================================================================
# Job Applications
# =============================================================================

class ApplicationStatus(str, Enum):
    """
    Review states for a job application.

    Flow: pending -> reviewed -> contacted -> accepted | rejected
    """
    PENDING = "pending"
    REVIEWED = "reviewed"
    CONTACTED = "contacted"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class JobApplicationCreate(BaseModel):
    """
    Candidate details submitted alongside a CV.

    Built from the multipart form of the public application endpoint;
    the CV itself is validated and stored separately.
    """
    job_id: str = Field(..., min_length=1)
    job_title: str = Field(..., min_length=1)
    full_name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255)
    phone: str = Field(..., min_length=1, max_length=50)
    message: Optional[str] = None

    model_config = {"str_strip_whitespace": True}

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        if not EMAIL_PATTERN.match(value):
            raise ValueError("Invalid email address")
        return value.lower()


class JobApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus


class JobApplicationResponse(BaseModel):
    id: str
    job_id: str
    job_title: str
    full_name: str
    email: str
    phone: str
    message: Optional[str] = None
    cv_file_path: Optional[str] = None
    status: ApplicationStatus = ApplicationStatus.PENDING
    created_at: Optional[datetime] = None
