# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.OPENAI_MODEL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# The OpenAI credential and model are only defaults: every agent accepts its
# own api_key/model and validates them when it is constructed.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # OpenAI / LLM Configuration
    # -------------------------------------------------------------------------
    # Empty defaults so the library imports without credentials; agents
    # raise MissingCredentialError / MissingModelError when constructed.

    OPENAI_API_KEY: str = Field(
        default="",
        description="OpenAI API key used when an agent is built without one"
    )

    OPENAI_MODEL: str = Field(
        default="gpt-4o-mini",
        description="Default model for agents (must support function calling)"
    )

    OPENAI_BASE_URL: str | None = Field(
        default=None,
        description="Optional OpenAI-compatible API base URL"
    )

    # -------------------------------------------------------------------------
    # Agent Settings
    # -------------------------------------------------------------------------

    AGENT_TEMPERATURE: float = Field(
        default=0.0,
        ge=0.0,
        le=2.0,
        description="Temperature for structured agents (0 keeps outputs repeatable)"
    )

    DEVELOPER_TEMPERATURE: float = Field(
        default=0.2,
        ge=0.0,
        le=2.0,
        description="Temperature for the Python developer (code generation) agent"
    )

    # -------------------------------------------------------------------------
    # Sandbox Settings
    # -------------------------------------------------------------------------
    # Limits for evaluating model-generated code in a child interpreter

    SANDBOX_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        gt=0.0,
        le=300.0,
        description="Wall-clock limit for one generated-function evaluation"
    )

    SANDBOX_MEMORY_LIMIT_MB: int = Field(
        default=512,
        ge=64,
        le=16384,
        description="Address-space cap for the sandbox process (POSIX only)"
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

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # Load from .env file in project root
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat empty env vars as unset
        env_ignore_empty=True,
        # Case-sensitive environment variable names
        case_sensitive=True,
        # .env files often carry unrelated keys
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def has_openai_credentials(self) -> bool:
        """Check whether a default API key is configured."""
        return bool(self.OPENAI_API_KEY)

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"


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
