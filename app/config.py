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

    SUPABASE_SERVICE_KEY: str = Field(
        ...,
        description="Supabase service_role key (bypasses RLS)"
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
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="127.0.0.1",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=5000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # -------------------------------------------------------------------------
    # Security / Sessions
    # -------------------------------------------------------------------------

    SECRET_KEY: str = Field(
        default="dev-secret-change-me-please",
        min_length=16,
        description="Secret key for signing session tokens"
    )

    JWT_ALGORITHM: str = Field(
        default="HS256",
        description="Algorithm used to sign session tokens"
    )

    SESSION_COOKIE_NAME: str = Field(
        default="civic_session",
        description="Name of the httpOnly cookie carrying the session token"
    )

    SESSION_MAX_AGE_SECONDS: int = Field(
        default=60 * 60 * 24 * 7,
        ge=60,
        description="Session lifetime (defaults to one week)"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Content Defaults
    # -------------------------------------------------------------------------

    DEFAULT_PROJECT_IMAGE_URL: str = Field(
        default="https://placehold.co/800x400/cccccc/000000?text=Project",
        description="Image used when a project is created without one"
    )

    DEFAULT_EVENT_IMAGE_URL: str = Field(
        default="https://placehold.co/800x400/cccccc/000000?text=Event",
        description="Image used when an event is proposed without one"
    )

    # -------------------------------------------------------------------------
    # Certificates
    # -------------------------------------------------------------------------

    CERTIFICATE_TEMPLATE_PATH: str = Field(
        default="assets/certificate-main.png",
        description="PNG template the participant name and event title are drawn on"
    )

    CERTIFICATE_FONT_PATH: str | None = Field(
        default=None,
        description="TrueType font for certificate text (Pillow default font if unset)"
    )

    CERTIFICATE_BOLD_FONT_PATH: str | None = Field(
        default=None,
        description="Bold TrueType face for the participant name (regular font, stroked, if unset)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://civic.gov.bd" -> ["http://localhost:3000", "https://civic.gov.bd"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

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
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
