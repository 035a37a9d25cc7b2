# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Provides JWT-based authentication using Supabase Auth.
#
# Usage:
#   from app.auth import require_admin, AuthUser
#
#   @router.delete("/games/{game_id}")
#   async def delete_game(game_id: int, user: AuthUser = Depends(require_admin)):
#       ...
# =============================================================================

from app.auth.dependencies import (
    get_current_user,
    get_current_user_optional,
    require_admin,
)
from app.auth.models import AuthUser

__all__ = [
    "get_current_user",
    "get_current_user_optional",
    "require_admin",
    "AuthUser",
]
