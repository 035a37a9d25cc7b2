# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# API endpoints for the admin dashboard sign-in.
#
# Credentials are checked by Supabase Auth; these routes only proxy the
# sign-in, sign-out and a status check for the dashboard.
# =============================================================================

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials

from app.auth.dependencies import (
    get_current_user_optional,
    is_admin_claims,
    resolve_role,
    security,
)
from app.auth.models import (
    AuthStatusResponse,
    AuthUser,
    LoginRequest,
    LoginResponse,
    SessionTokens,
    UserSummary,
)
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest) -> LoginResponse:
    """
    Sign an admin in with email and password.

    Raises:
        400: If email or password is missing
        401: If the credentials are rejected
        403: If the account is not an admin
    """
    client = SupabaseClient.create_auth_client()

    try:
        result = client.auth.sign_in_with_password(
            {"email": request.email, "password": request.password}
        )
    except Exception as e:
        logger.warning(f"Sign-in failed for {request.email}: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    user = getattr(result, "user", None)
    session = getattr(result, "session", None)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    app_metadata = user.app_metadata or {}
    user_metadata = user.user_metadata or {}
    if not is_admin_claims(user.email, app_metadata, user_metadata):
        logger.warning(f"Non-admin sign-in refused: {user.email}")
        try:
            client.auth.sign_out()
        except Exception as e:
            logger.warning(f"Could not sign out refused user: {e}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied. Admin privileges required.",
        )

    logger.info(f"Admin signed in: {user.email}")
    return LoginResponse(
        user=UserSummary(
            id=str(user.id),
            email=user.email,
            role=resolve_role(app_metadata, user_metadata, True),
        ),
        session=SessionTokens(
            access_token=getattr(session, "access_token", None),
            refresh_token=getattr(session, "refresh_token", None),
        ),
    )


@router.post("/logout")
async def logout(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> dict:
    """
    Revoke the caller's session at the auth provider.

    Works without a token too, since the dashboard also drops its
    stored token locally.

    Raises:
        500: If the provider refuses the sign-out
    """
    if credentials is None:
        return {"success": True}

    try:
        SupabaseClient.get_client().auth.admin.sign_out(credentials.credentials)
    except Exception as e:
        logger.error(f"Sign-out failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Logout failed",
        )

    return {"success": True}


@router.get("/status", response_model=AuthStatusResponse)
async def auth_status(
    user: Optional[AuthUser] = Depends(get_current_user_optional)
) -> AuthStatusResponse:
    """Report whether the bearer token is valid and belongs to an admin."""
    if user is None:
        return AuthStatusResponse(is_authenticated=False, is_admin=False)

    return AuthStatusResponse(
        is_authenticated=True,
        is_admin=user.is_admin,
        user=UserSummary(id=str(user.id), email=user.email, role=user.role),
    )
