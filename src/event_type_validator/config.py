"""Configuration management for Event Type Validator.

This module handles application configuration using Pydantic settings.
Configuration can be loaded from environment variables or .env files.
The validation functions themselves read no configuration; these settings
only affect the command-line tool.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support.

    All settings can be overridden via environment variables with
    the EVENT_TYPES_ prefix (e.g., EVENT_TYPES_LOG_LEVEL).
    """

    model_config = SettingsConfigDict(
        env_prefix="EVENT_TYPES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    json_logs: bool = Field(
        default=False,
        description="Render log lines as JSON instead of console output",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings: Application settings instance.
    """
    return Settings()
