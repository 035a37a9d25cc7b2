# =============================================================================
# core/services/team_service.py - Team Member Business Logic
# =============================================================================

from typing import Any

from core.services.base import RecordService


class TeamService(RecordService):
    table = "team_members"
    resource = "Team member"
    order_by = "display_order"

    @classmethod
    def list_members(cls, include_inactive: bool = False) -> list[dict[str, Any]]:
        """Members in display order; inactive ones only when asked for."""
        filters = None if include_inactive else {"is_active": True}
        return cls.list_records(filters=filters)
