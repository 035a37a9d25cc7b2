# =============================================================================
# core/services/banner_service.py - Top Banner Business Logic
# =============================================================================
# The banner is one row (id = 1). Reads never fail the page: a broken or
# missing row is reported as an empty banner.
# =============================================================================

import logging
from typing import Any

from lib.supabase_client import SupabaseClient, SupabaseClientError
from app.config import settings
from app.exceptions import DatabaseError, FileTooLargeError, InvalidFileTypeError
from core.models.banner import BANNER_DEFAULTS, BANNER_ROW_ID
from core.services.storage_service import StorageService

logger = logging.getLogger(__name__)

TABLE = "top_banner"


class BannerService:
    """Service for the home page top banner."""

    @staticmethod
    def get_banner() -> dict[str, Any]:
        """
        Current banner image and link.

        Returns:
            Dict with image_url and target_url, both None when unset
        """
        try:
            row = SupabaseClient.fetch_row(
                TABLE, BANNER_ROW_ID, columns="id, background_image, button_link"
            )
        except SupabaseClientError as e:
            logger.warning(f"Banner fetch failed: {e}")
            row = None

        if not row:
            return {"image_url": None, "target_url": None}
        return {
            "image_url": row.get("background_image"),
            "target_url": row.get("button_link"),
        }

    @staticmethod
    def upload_image(filename: str, content: bytes, content_type: str | None) -> dict[str, str]:
        """
        Upload a banner image to storage.

        Raises:
            InvalidFileTypeError: If the file is not an image
            FileTooLargeError: If it exceeds MAX_BANNER_SIZE_MB
        """
        if not (content_type or "").startswith("image/"):
            raise InvalidFileTypeError(filename, ["image/*"])
        if len(content) > settings.mb_to_bytes(settings.MAX_BANNER_SIZE_MB):
            raise FileTooLargeError(len(content) / (1024 * 1024), settings.MAX_BANNER_SIZE_MB)

        path, url = StorageService.upload_banner_image(filename, content, content_type)
        return {"url": url, "path": path}

    @staticmethod
    def update_banner(
        target_url: str | None,
        image_url: str | None = None,
    ) -> dict[str, Any]:
        """
        Point the banner at a new link and optionally a new image.

        Keeps the current image when none is given. Creates the row with
        its default texts when it does not exist yet.
        """
        try:
            current = SupabaseClient.fetch_row(TABLE, BANNER_ROW_ID)
        except SupabaseClientError as e:
            logger.error(f"Failed to read banner: {e}")
            raise DatabaseError("update banner", e.message)

        if image_url is None and current:
            image_url = current.get("background_image")

        data = {"background_image": image_url, "button_link": target_url}

        try:
            if current:
                SupabaseClient.update_row(TABLE, BANNER_ROW_ID, data)
            else:
                SupabaseClient.insert_row(TABLE, {"id": BANNER_ROW_ID, **BANNER_DEFAULTS, **data})
        except SupabaseClientError as e:
            logger.error(f"Failed to save banner: {e}")
            raise DatabaseError("update banner", e.message)

        logger.info(f"Updated top banner (image={image_url}, link={target_url})")
        return {"success": True, "image_url": image_url, "target_url": target_url}

    @staticmethod
    def clear_banner() -> dict[str, Any]:
        """Remove the banner image and link, keeping the row."""
        try:
            SupabaseClient.update_row(
                TABLE, BANNER_ROW_ID, {"background_image": None, "button_link": None}
            )
        except SupabaseClientError as e:
            logger.error(f"Failed to clear banner: {e}")
            raise DatabaseError("clear banner", e.message)

        logger.info("Cleared top banner")
        return {"success": True, "image_url": None, "target_url": None}
