# =============================================================================
# core/services/partner_service.py - Partner Business Logic
# =============================================================================
# Partner categories and their logos, plus the nested overview the home
# page renders.
# =============================================================================

import logging
from typing import Any

from lib.supabase_client import SupabaseClient, SupabaseClientError
from app.exceptions import DatabaseError
from core.services.base import RecordService

logger = logging.getLogger(__name__)


class PartnerCategoryService(RecordService):
    table = "partner_categories"
    resource = "Partner category"

    @classmethod
    def delete_record(cls, record_id: Any) -> None:
        """Delete a category together with its logos."""
        cls.get_record(record_id)

        try:
            removed = SupabaseClient.delete_rows_in(
                PartnerLogoService.table, "category_id", [record_id]
            )
        except SupabaseClientError as e:
            logger.error(f"Failed to delete logos of category {record_id}: {e}")
            raise DatabaseError("delete partner logos", e.message)

        if removed:
            logger.info(f"Deleted {removed} logos of partner category {record_id}")
        super().delete_record(record_id)


class PartnerLogoService(RecordService):
    table = "partner_logos"
    resource = "Partner logo"

    @classmethod
    def prepare_create(cls, data: dict[str, Any]) -> dict[str, Any]:
        # Raises RecordNotFoundError for an unknown category
        PartnerCategoryService.get_record(data["category_id"])
        return data

    @classmethod
    def update_record(cls, record_id: Any, data: dict[str, Any]) -> dict[str, Any]:
        if data.get("category_id") is not None:
            PartnerCategoryService.get_record(data["category_id"])
        return super().update_record(record_id, data)


class PartnerService:
    """Read-side helpers spanning both partner tables."""

    @staticmethod
    def get_overview() -> list[dict[str, Any]]:
        """
        Every category with its logos nested under "logos".

        Logos pointing at a missing category are left out.
        """
        categories = PartnerCategoryService.list_records()
        logos = PartnerLogoService.list_records()

        by_category: dict[Any, list[dict[str, Any]]] = {}
        for logo in logos:
            by_category.setdefault(logo.get("category_id"), []).append(logo)

        return [
            {**category, "logos": by_category.get(category["id"], [])}
            for category in categories
        ]
