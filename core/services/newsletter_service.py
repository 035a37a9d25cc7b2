# =============================================================================
# core/services/newsletter_service.py - Newsletter Business Logic
# =============================================================================

import logging
from datetime import datetime, timezone
from typing import Any

from lib.supabase_client import SupabaseClient, SupabaseClientError
from app.exceptions import DatabaseError, DuplicateRecordError
from core.services.base import RecordService

logger = logging.getLogger(__name__)


class NewsletterService(RecordService):
    table = "newsletter_subscribers"
    resource = "Subscriber"
    order_by = "subscribed_at"
    descending = True
    unique_field = "email"

    @classmethod
    def prepare_create(cls, data: dict[str, Any]) -> dict[str, Any]:
        data["subscribed_at"] = datetime.now(timezone.utc).isoformat()
        return data

    @classmethod
    def subscribe(cls, email: str) -> dict[str, Any]:
        """
        Add an email to the newsletter.

        Raises:
            DuplicateRecordError: If the (lowercased) email is already subscribed
        """
        email = email.lower()

        try:
            existing = SupabaseClient.fetch_rows(
                cls.table, columns="id", filters={"email": email}, order_by=None, limit=1
            )
        except SupabaseClientError as e:
            logger.error(f"Failed to check newsletter subscription: {e}")
            raise DatabaseError("check subscription", e.message)

        if existing:
            raise DuplicateRecordError(cls.resource, "email", email)

        return cls.create_record({"email": email})

    @classmethod
    def delete_many(cls, ids: list[int]) -> int:
        """Remove the given subscribers. Returns how many rows were deleted."""
        try:
            deleted = SupabaseClient.delete_rows_in(cls.table, "id", ids)
        except SupabaseClientError as e:
            logger.error(f"Failed to delete newsletter subscribers: {e}")
            raise DatabaseError("delete subscribers", e.message)

        logger.info(f"Deleted {deleted} newsletter subscribers")
        return deleted
