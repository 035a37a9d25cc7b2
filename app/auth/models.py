# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class AuthUser(BaseModel):
    """
    Authenticated user extracted from a Supabase JWT.

    This is the minimal user info available from the token itself,
    without calling the auth provider.
    """
    id: UUID
    email: Optional[str] = None
    role: str = "user"
    is_admin: bool = False

    class Config:
        frozen = True  # Make immutable


class LoginRequest(BaseModel):
    """Email/password credentials for the admin sign-in form.

    Only the email is trimmed; the password goes to the auth provider as typed.
    """
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, value):
        return value.strip() if isinstance(value, str) else value


class UserSummary(BaseModel):
    id: str
    email: Optional[str] = None
    role: str


class SessionTokens(BaseModel):
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None


class LoginResponse(BaseModel):
    """Returned after a successful admin sign-in."""
    success: bool = True
    user: UserSummary
    session: SessionTokens


class AuthStatusResponse(BaseModel):
    """Whether the caller's bearer token belongs to an admin."""
    is_authenticated: bool
    is_admin: bool
    user: Optional[UserSummary] = None
