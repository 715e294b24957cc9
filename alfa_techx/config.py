# =============================================================================
# alfa_techx/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from alfa_techx.config import load_settings
#   settings = load_settings()
#   app = create_app(settings)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Settings are built once by the startup routine and passed explicitly into
# the pipeline assembly. There is no module-level settings instance.
# =============================================================================

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development
    """

    # -------------------------------------------------------------------------
    # Runtime
    # -------------------------------------------------------------------------

    NODE_ENV: Optional[str] = Field(
        default=None,
        description="Runtime mode; 'development' enables access logging and verbose errors"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug-level logging"
    )

    HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to (all interfaces by default)"
    )

    PORT: int = Field(
        default=5000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # -------------------------------------------------------------------------
    # Security
    # -------------------------------------------------------------------------

    FRONTEND_URL: str = Field(
        default="http://localhost:3000",
        description="The only origin allowed to make cross-origin requests"
    )

    RATE_LIMIT_WINDOW_MINUTES: int = Field(
        default=15,
        ge=1,
        description="Length of the rate limit window in minutes"
    )

    RATE_LIMIT_MAX_REQUESTS: int = Field(
        default=100,
        ge=1,
        description="Requests allowed per client IP in each window"
    )

    RATE_LIMIT_MESSAGE: str = Field(
        default=DEFAULT_RATE_LIMIT_MESSAGE,
        description="Body returned with 429 responses"
    )

    # -------------------------------------------------------------------------
    # Request Bodies & Static Files
    # -------------------------------------------------------------------------

    BODY_LIMIT_MB: int = Field(
        default=10,
        ge=1,
        description="Maximum JSON / urlencoded request body size in MB"
    )

    UPLOADS_DIR: str = Field(
        default="uploads",
        description="Local directory served under /uploads"
    )

    # -------------------------------------------------------------------------
    # Route Groups
    # -------------------------------------------------------------------------
    # "module.path:attribute" references to the APIRouter of each group.

    AUTH_ROUTES: str = Field(
        default="alfa_techx.routers.auth:router",
        description="Import reference of the auth route group"
    )

    ADMIN_ROUTES: str = Field(
        default="alfa_techx.routers.admin:router",
        description="Import reference of the admin route group"
    )

    PUBLIC_ROUTES: str = Field(
        default="alfa_techx.routers.public:router",
        description="Import reference of the public route group"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # Load from .env file in project root
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat empty variables as unset so defaults apply
        env_ignore_empty=True,
        # Case-sensitive environment variable names
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.NODE_ENV == "development"

    @property
    def body_limit_bytes(self) -> int:
        """
        Convert MB to bytes for body size validation.
        """
        return self.BODY_LIMIT_MB * 1024 * 1024

    @property
    def rate_limit_window_seconds(self) -> int:
        return self.RATE_LIMIT_WINDOW_MINUTES * 60


def load_settings(**overrides) -> Settings:
    """
    Build a Settings instance from the environment.

    Called once by the startup routine. Keyword overrides take precedence
    over environment variables, which is how tests pin specific values.

    Returns:
        Settings: The validated application settings
    """
    return Settings(**overrides)
