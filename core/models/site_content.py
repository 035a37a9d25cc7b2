# =============================================================================
# core/models/site_content.py - Site Content Schemas
# =============================================================================
# Contact details and social links are small documents edited from the
# dashboard and kept as JSON files rather than database tables.
# =============================================================================

from typing import Optional

from pydantic import BaseModel, Field


class ContactInfoItem(BaseModel):
    """
    One contact card in the footer.

    Example:
        {"icon": "mail", "title": "Email", "details": "hello@appective.net",
         "link": "mailto:hello@appective.net"}
    """
    icon: str = ""
    title: str = Field(..., min_length=1)
    details: str = ""
    link: Optional[str] = None

    model_config = {"str_strip_whitespace": True}


class SocialLink(BaseModel):
    platform: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)

    model_config = {"str_strip_whitespace": True}
