# =============================================================================
# core/services/site_content_service.py - JSON Site Content
# =============================================================================
# Contact info and social links are small lists edited from the dashboard.
# They are stored as JSON documents in DATA_DIR; a missing document is
# created empty on first access.
# =============================================================================

import json
import logging
from pathlib import Path
from typing import Any

from app.config import settings

logger = logging.getLogger(__name__)

CONTACT_INFO_FILE = "contact_info.json"
SOCIAL_LINKS_FILE = "social_links.json"


class SiteContentService:
    """Read and replace the JSON documents behind the footer."""

    @staticmethod
    def _document(name: str) -> Path:
        path = settings.data_path / name
        if not path.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("[]", encoding="utf-8")
            logger.info(f"Created empty site content document {path}")
        return path

    @staticmethod
    def _read(name: str) -> list[dict[str, Any]]:
        return json.loads(SiteContentService._document(name).read_text(encoding="utf-8"))

    @staticmethod
    def _write(name: str, items: list[dict[str, Any]]) -> None:
        path = SiteContentService._document(name)
        path.write_text(json.dumps(items, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.info(f"Saved {len(items)} items to {path.name}")

    @staticmethod
    def get_contact_info() -> list[dict[str, Any]]:
        return SiteContentService._read(CONTACT_INFO_FILE)

    @staticmethod
    def save_contact_info(items: list[dict[str, Any]]) -> list[dict[str, Any]]:
        SiteContentService._write(CONTACT_INFO_FILE, items)
        return items

    @staticmethod
    def get_social_links() -> list[dict[str, Any]]:
        return SiteContentService._read(SOCIAL_LINKS_FILE)

    @staticmethod
    def save_social_links(links: list[dict[str, Any]]) -> list[dict[str, Any]]:
        SiteContentService._write(SOCIAL_LINKS_FILE, links)
        return links
