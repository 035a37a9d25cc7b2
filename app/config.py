# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.SUPABASE_URL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
# =============================================================================

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Supabase Configuration
    # -------------------------------------------------------------------------
    # These are required - app won't start without them

    SUPABASE_URL: str = Field(
        ...,
        description="Supabase project URL (e.g., https://xxx.supabase.co)"
    )

    SUPABASE_ANON_KEY: str = Field(
        ...,
        description="Supabase anon/public API key (used for sign-in)"
    )

    SUPABASE_SERVICE_KEY: str = Field(
        ...,
        description="Supabase service_role key (bypasses RLS)"
    )

    SUPABASE_JWT_SECRET: str = Field(
        ...,
        description="Supabase JWT secret used to verify HS256 access tokens"
    )

    STORAGE_BUCKET: str = Field(
        default="appective-files",
        description="Public Supabase Storage bucket for banners and HTML5 ads"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, auto-reload)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # -------------------------------------------------------------------------
    # Security
    # -------------------------------------------------------------------------

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    ADMIN_EMAIL_DOMAIN: str = Field(
        default="@appective.net",
        description="Users whose email ends with this suffix are admins"
    )

    # -------------------------------------------------------------------------
    # Local File Storage
    # -------------------------------------------------------------------------

    PUBLIC_DIR: str = Field(
        default="public",
        description="Directory served publicly (uploaded images, extracted HTML5 ads)"
    )

    PRIVATE_DIR: str = Field(
        default="private",
        description="Directory for uploads that must not be public (CVs)"
    )

    DATA_DIR: str = Field(
        default="data",
        description="Directory holding JSON site content (contact info, social links)"
    )

    MASTHEAD_MIRROR_TO_STORAGE: bool = Field(
        default=False,
        description="Also publish extracted HTML5 ads to Supabase Storage"
    )

    # -------------------------------------------------------------------------
    # Upload Limits
    # -------------------------------------------------------------------------

    MAX_IMAGE_SIZE_MB: int = Field(default=5, ge=1, le=100)
    MAX_BANNER_SIZE_MB: int = Field(default=10, ge=1, le=100)
    MAX_ZIP_SIZE_MB: int = Field(default=50, ge=1, le=500)
    MAX_CV_SIZE_MB: int = Field(default=5, ge=1, le=50)

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://appective.net" -> ["http://localhost:3000", "https://appective.net"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def public_path(self) -> Path:
        return Path(self.PUBLIC_DIR).resolve()

    @property
    def private_path(self) -> Path:
        return Path(self.PRIVATE_DIR).resolve()

    @property
    def data_path(self) -> Path:
        return Path(self.DATA_DIR).resolve()

    @property
    def masthead_root(self) -> Path:
        """Directory that holds extracted HTML5 ad creatives."""
        return self.public_path / "interactive_mastheads_zips"

    @staticmethod
    def mb_to_bytes(size_mb: int) -> int:
        return size_mb * 1024 * 1024

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
