# =============================================================================
# app/routers/site_content.py - Contact Info & Social Links Endpoints
# =============================================================================

from fastapi import APIRouter

from app.dependencies import AdminUser
from core.models.site_content import ContactInfoItem, SocialLink
from core.services.site_content_service import SiteContentService

router = APIRouter()


@router.get("/contact-info", response_model=list[ContactInfoItem])
async def get_contact_info():
    return SiteContentService.get_contact_info()


@router.post("/contact-info")
async def save_contact_info(items: list[ContactInfoItem], user: AdminUser):
    """
    Replace the contact cards.

    Raises:
        400: If the body is not a list of contact cards
    """
    SiteContentService.save_contact_info([item.model_dump() for item in items])
    return {"success": True, "message": "Contact info updated successfully"}


@router.get("/social-links", response_model=list[SocialLink])
async def get_social_links():
    return SiteContentService.get_social_links()


@router.post("/social-links")
async def save_social_links(links: list[SocialLink], user: AdminUser):
    """
    Replace the social links.

    Raises:
        400: If the body is not a list of {platform, url}
    """
    SiteContentService.save_social_links([link.model_dump() for link in links])
    return {"success": True, "message": "Social links saved successfully"}
