# =============================================================================
# core/services/catalog_service.py - Service Catalog Business Logic
# =============================================================================
# The agency's service offerings. Ids are readable slugs ("rich-media")
# so they can double as image folder names.
# =============================================================================

import logging
from typing import Any

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import slugify
from app.exceptions import DatabaseError, DuplicateRecordError
from core.services.base import RecordService

logger = logging.getLogger(__name__)


class CatalogService(RecordService):
    table = "services"
    resource = "Service"

    @classmethod
    def prepare_create(cls, data: dict[str, Any]) -> dict[str, Any]:
        if not data.get("id"):
            data["id"] = slugify(data["name"], default="service")

        try:
            existing = SupabaseClient.fetch_row(cls.table, data["id"])
        except SupabaseClientError as e:
            logger.error(f"Failed to check service id {data['id']}: {e}")
            raise DatabaseError("create service", e.message)

        if existing:
            raise DuplicateRecordError(cls.resource, "id", data["id"])
        return data
