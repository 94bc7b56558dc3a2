"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management for the catalog state engine using Pydantic Settings.

A single cached Settings instance is shared through ``get_settings()``.
Catalog state itself is never global: every CatalogService is an explicit
instance built from a Settings object.

Features:
---------
- Environment variable loading with type validation
- .env file support for local development
- Computed properties for derived values

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

from catalog_state.catalog.models import ViewMode
from catalog_state.catalog.query import DEFAULT_PAGE_SIZE


# Module logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name for the application
        app_env: Environment mode (development/staging/production)
        debug: Enable debug mode for verbose logging
        host: Server bind address for the HTTP shell
        port: Server port number for the HTTP shell
        page_size: Number of products per derived page
        search_debounce_ms: Quiet period before a search commit
        default_view_mode: Initial presentation mode ("list" or "card")
        load_sample_data: Seed new catalogs with the sample products
        cors_origins: Allowed CORS origins (JSON array string)

    Example:
        >>> settings = Settings()
        >>> settings.page_size
        6
        >>> settings.search_debounce_seconds
        0.5
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
        default="Product Catalog",
        description="Display name for the application"
    )

    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )

    # =========================================================================
    # SERVER SETTINGS
    # =========================================================================
    host: str = Field(
        default="127.0.0.1",
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
    page_size: int = Field(
        default=DEFAULT_PAGE_SIZE,
        ge=1,
        le=100,
        description="Products per page in the derived view"
    )

    search_debounce_ms: int = Field(
        default=500,
        ge=0,
        le=10000,
        description="Quiet period in milliseconds before a search commits"
    )

    default_view_mode: str = Field(
        default=ViewMode.LIST.value,
        description="Initial presentation mode: list or card"
    )

    load_sample_data: bool = Field(
        default=True,
        description="Seed new catalogs with the sample products"
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
        """
        Validate and normalize application environment.

        Unknown values fall back to 'development' with a warning.
        """
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()

        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"

        return normalized

    @field_validator("default_view_mode")
    @classmethod
    def validate_default_view_mode(cls, value: str) -> str:
        """
        Validate the initial view mode.

        Raises:
            ValueError: If mode is not one of the supported view modes
        """
        normalized = value.lower().strip()
        supported = [mode.value for mode in ViewMode]

        if normalized not in supported:
            raise ValueError(
                f"Unsupported view mode: {value}. "
                f"Supported: {', '.join(supported)}"
            )

        return normalized

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_staging(self) -> bool:
        """Check if running in staging mode."""
        return self.app_env == "staging"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    @property
    def search_debounce_seconds(self) -> float:
        """Get the search quiet period in seconds (scheduler units)."""
        return self.search_debounce_ms / 1000

    @property
    def view_mode(self) -> ViewMode:
        """Get the initial view mode as an enum member."""
        return ViewMode(self.default_view_mode)

    @property
    def cors_origins_list(self) -> List[str]:
        """
        Parse CORS origins from JSON string to list.

        Returns:
            List of allowed origin strings
        """
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
            f"page_size={self.page_size}, "
            f"debug={self.debug})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance.

    Uses lru_cache so configuration is read from the environment once.

    Returns:
        Global Settings instance
    """
    settings = Settings()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
