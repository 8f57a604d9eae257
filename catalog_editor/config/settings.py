"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management for the catalog editor using Pydantic Settings.

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

==============================================================================
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


SUPPORTED_LOCALES = ("en", "pt-BR")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name for the application
        app_env: Environment mode (development/staging/production)
        debug: Enable debug mode for verbose logging
        host: Server bind address
        port: Server port number
        category_locale: Label set used for the category selection control
        refilter_after_commit: Re-apply the search query after a commit
        cors_origins: Allowed CORS origins (JSON array string)

    Example:
        >>> settings = Settings()
        >>> settings.category_locale
        'en'
    """

    # =========================================================================
    # PYDANTIC SETTINGS CONFIGURATION
    # =========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Product Catalog Editor",
        description="Display name for the application"
    )

    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )

    debug: bool = Field(
        default=True,
        description="Enable debug mode for verbose logging"
    )

    # =========================================================================
    # SERVER SETTINGS
    # =========================================================================
    host: str = Field(
        default="0.0.0.0",
        description="Server bind address"
    )

    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Server port number"
    )

    # =========================================================================
    # CATALOG SETTINGS
    # =========================================================================
    category_locale: str = Field(
        default="en",
        description="Category label locale: en, pt-BR"
    )

    refilter_after_commit: bool = Field(
        default=False,
        description="Re-apply the current search query after insert/update"
    )

    # =========================================================================
    # CORS SETTINGS
    # =========================================================================
    cors_origins: str = Field(
        default='["*"]',
        description="Allowed CORS origins as JSON array string"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """Normalize the environment name, falling back to development."""
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()

        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"

        return normalized

    @field_validator("category_locale")
    @classmethod
    def validate_category_locale(cls, value: str) -> str:
        """
        Validate the category locale.

        Matching is case-insensitive; the canonical spelling is returned.

        Raises:
            ValueError: If the locale has no category labels
        """
        for locale in SUPPORTED_LOCALES:
            if value.strip().lower() == locale.lower():
                return locale

        raise ValueError(
            f"Unsupported category locale: {value}. "
            f"Supported: {', '.join(SUPPORTED_LOCALES)}"
        )

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from JSON string to list."""
        try:
            origins = json.loads(self.cors_origins)
            if isinstance(origins, list):
                return origins
            return ["*"]
        except json.JSONDecodeError:
            logger.warning(
                f"Invalid CORS origins JSON: {self.cors_origins}, "
                "defaulting to ['*']"
            )
            return ["*"]

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"app_env={self.app_env!r}, "
            f"category_locale={self.category_locale!r}, "
            f"debug={self.debug})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance (singleton pattern).

    Returns:
        Global Settings instance
    """
    settings = Settings()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
