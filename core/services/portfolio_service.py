# =============================================================================
# core/services/portfolio_service.py - Portfolio Business Logic
# =============================================================================
# One service per "Our Works" table. They are plain CRUD over RecordService;
# only the ordering differs.
# =============================================================================

from typing import Any
from uuid import uuid4

from core.services.base import RecordService


class AppItemService(RecordService):
    table = "applications"
    resource = "Application"


class GameService(RecordService):
    table = "games"
    resource = "Game"


class WebPortalService(RecordService):
    table = "web_portals"
    resource = "Web portal"
    order_by = "created_at"
    descending = True


class DigitalMarketingService(RecordService):
    table = "digital_marketing"
    resource = "Digital marketing item"


class MastheadService(RecordService):
    table = "interactive_mastheads"
    resource = "Masthead"

    @classmethod
    def prepare_create(cls, data: dict[str, Any]) -> dict[str, Any]:
        data["id"] = str(uuid4())
        return data
