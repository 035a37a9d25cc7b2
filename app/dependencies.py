# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated, Optional

from fastapi import Depends

from app.auth import AuthUser, get_current_user_optional, require_admin

# Type aliases for dependency injection
AdminUser = Annotated[AuthUser, Depends(require_admin)]
OptionalUser = Annotated[Optional[AuthUser], Depends(get_current_user_optional)]
