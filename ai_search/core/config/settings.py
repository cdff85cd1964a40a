#!/usr/bin/env python3
"""
Centralized Configuration Module using Pydantic Settings

This module provides type-safe, environment-based configuration for the
AI search service. All configuration is centralized here to ensure
consistency across modules.

Architectural Decision: Pydantic Settings for type safety and validation
- Environment variable loading with .env support
- Type validation at startup (fail fast on misconfiguration)
- IDE autocomplete for all settings
- Easy testing with override mechanisms
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeneratorSettings(BaseSettings):
    """
    Simulated response generator timing.

    STAGE-3: Response generation latency

    The generator stands in for a real inference backend. Delays are drawn
    uniformly from [MIN, MAX] seconds before each chunk is released.
    """

    GENERATOR_CHUNK_DELAY_MIN: float = Field(default=0.1, description="Minimum delay before a word chunk")
    GENERATOR_CHUNK_DELAY_MAX: float = Field(default=0.5, description="Maximum delay before a word chunk")
    GENERATOR_SUMMARY_DELAY_MIN: float = Field(default=0.3, description="Minimum delay before the summary chunk")
    GENERATOR_SUMMARY_DELAY_MAX: float = Field(default=0.8, description="Maximum delay before the summary chunk")

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=True)


class LoggingSettings(BaseSettings):
    """
    Logging configuration for structured logging.

    STAGE-L: Logging configuration

    Architectural Decision: structlog for production-grade logging
    """

    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: Literal["json", "console"] = Field(default="json", description="Log output format")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        return v.upper()

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=True)


class ApplicationSettings(BaseSettings):
    """
    General application settings.

    STAGE-0: Application initialization
    """

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment"
    )
    DEBUG: bool = Field(default=False, description="Debug mode")
    APP_NAME: str = Field(default="AI Search Service", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")

    # API settings
    API_HOST: str = Field(default="0.0.0.0", description="API host")
    API_PORT: int = Field(default=8000, description="API port")
    API_BASE_PATH: str = Field(default="/api", description="Prefix for all API routers")

    # CORS settings
    CORS_ORIGINS: list[str] = Field(default=["*"], description="Allowed CORS origins")

    ENABLE_DEMO_PAGE: bool = Field(default=True, description="Serve the HTML demo page at /")

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=True)


class Settings(BaseSettings):
    """
    Main settings class that aggregates all configuration sections.

    STAGE-0: Centralized configuration initialization

    Usage:
        from ai_search.core.config.settings import get_settings

        settings = get_settings()
        base_path = settings.app.API_BASE_PATH
        delay = settings.generator.GENERATOR_CHUNK_DELAY_MAX
    """

    # Application settings
    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment"
    )
    DEBUG: bool = Field(default=False, description="Debug mode")
    APP_NAME: str = Field(default="AI Search Service", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    API_HOST: str = Field(default="0.0.0.0", description="API host")
    API_PORT: int = Field(default=8000, description="API port")
    API_BASE_PATH: str = Field(default="/api", description="Prefix for all API routers")
    CORS_ORIGINS: list[str] = Field(default=["*"], description="Allowed CORS origins")
    ENABLE_DEMO_PAGE: bool = Field(default=True, description="Serve the HTML demo page at /")

    # Logging settings
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: Literal["json", "console"] = Field(default="json", description="Log output format")

    # Generator settings
    GENERATOR_CHUNK_DELAY_MIN: float = Field(default=0.1, description="Minimum delay before a word chunk")
    GENERATOR_CHUNK_DELAY_MAX: float = Field(default=0.5, description="Maximum delay before a word chunk")
    GENERATOR_SUMMARY_DELAY_MIN: float = Field(default=0.3, description="Minimum delay before the summary chunk")
    GENERATOR_SUMMARY_DELAY_MAX: float = Field(default=0.8, description="Maximum delay before the summary chunk")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        return v.upper()

    @field_validator("API_BASE_PATH")
    @classmethod
    def normalize_base_path(cls, v):
        """Strip the trailing slash so routers can be mounted with a plain prefix."""
        v = v.strip()
        if v and not v.startswith("/"):
            v = "/" + v
        return v.rstrip("/")

    # Nested configuration views
    @property
    def logging(self) -> 'LoggingSettings':
        """Get logging settings."""
        return LoggingSettings(
            LOG_LEVEL=self.LOG_LEVEL,
            LOG_FORMAT=self.LOG_FORMAT,
        )

    @property
    def app(self) -> 'ApplicationSettings':
        """Get application settings."""
        return ApplicationSettings(
            ENVIRONMENT=self.ENVIRONMENT,
            DEBUG=self.DEBUG,
            APP_NAME=self.APP_NAME,
            APP_VERSION=self.APP_VERSION,
            API_HOST=self.API_HOST,
            API_PORT=self.API_PORT,
            API_BASE_PATH=self.API_BASE_PATH,
            CORS_ORIGINS=self.CORS_ORIGINS,
            ENABLE_DEMO_PAGE=self.ENABLE_DEMO_PAGE,
        )

    @property
    def generator(self) -> 'GeneratorSettings':
        """Get response generator settings."""
        return GeneratorSettings(
            GENERATOR_CHUNK_DELAY_MIN=self.GENERATOR_CHUNK_DELAY_MIN,
            GENERATOR_CHUNK_DELAY_MAX=self.GENERATOR_CHUNK_DELAY_MAX,
            GENERATOR_SUMMARY_DELAY_MIN=self.GENERATOR_SUMMARY_DELAY_MIN,
            GENERATOR_SUMMARY_DELAY_MAX=self.GENERATOR_SUMMARY_DELAY_MAX,
        )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"  # Ignore extra environment variables
    )


# Global settings instance (singleton pattern)
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the global settings instance (singleton).

    STAGE-0.3: Settings initialization

    Returns:
        Settings: Global settings instance
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


def reload_settings() -> Settings:
    """
    Reload settings (useful for testing).

    Returns:
        Settings: New settings instance
    """
    global _settings
    _settings = Settings()
    return _settings
