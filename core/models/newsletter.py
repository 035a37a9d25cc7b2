# =============================================================================
# core/models/newsletter.py - Newsletter Schemas
# =============================================================================

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .job import EMAIL_PATTERN


class NewsletterSubscribe(BaseModel):
    """
    Schema for the public newsletter sign-up form.

    Emails are stored lowercased so duplicates are caught regardless of case.
    """
    email: str = Field(..., min_length=3, max_length=255)

    model_config = {"str_strip_whitespace": True}

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        if not EMAIL_PATTERN.match(value):
            raise ValueError("Invalid email address")
        return value.lower()


class NewsletterSubscriberResponse(BaseModel):
    id: int
    email: str
    subscribed_at: Optional[datetime] = None


class NewsletterDeleteRequest(BaseModel):
    """Bulk removal of subscribers selected in the dashboard."""
    ids: list[int] = Field(..., min_length=1)


class NewsletterDeleteResponse(BaseModel):
    success: bool = True
    deleted: int
