# =============================================================================
# app/routers/newsletter.py - Newsletter Endpoints
# =============================================================================
# Anyone can subscribe; the subscriber list is personal data and stays
# behind the admin token.
# =============================================================================

from fastapi import APIRouter, status

from app.dependencies import AdminUser
from core.models.newsletter import (
    NewsletterDeleteRequest,
    NewsletterDeleteResponse,
    NewsletterSubscribe,
    NewsletterSubscriberResponse,
)
from core.services.newsletter_service import NewsletterService

router = APIRouter()


@router.get("/newsletter", response_model=list[NewsletterSubscriberResponse])
async def list_subscribers(user: AdminUser):
    """List subscribers, most recent first."""
    return NewsletterService.list_records()


@router.post(
    "/newsletter",
    response_model=NewsletterSubscriberResponse,
    status_code=status.HTTP_201_CREATED,
)
async def subscribe(request: NewsletterSubscribe):
    """
    Subscribe an email address.

    Raises:
        400: If the email is missing or invalid
        409: If the email is already subscribed
    """
    return NewsletterService.subscribe(request.email)


@router.delete("/newsletter", response_model=NewsletterDeleteResponse)
async def delete_subscribers(request: NewsletterDeleteRequest, user: AdminUser):
    """
    Remove the selected subscribers.

    Raises:
        400: If ids is missing or empty
    """
    deleted = NewsletterService.delete_many(request.ids)
    return NewsletterDeleteResponse(deleted=deleted)
