"""Configuration management using Pydantic Settings.

This module provides type-safe configuration with automatic environment
variable loading and validation using Pydantic Settings v2.

The configuration is organized into logical groups:
- LoggingConfig: Logging levels and whether the library emits records at all
"""

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Logging configuration for console output."""

    console_level: str = "INFO"
    enabled: bool = False


class Settings(BaseSettings):
    """Library settings with environment variable support.

    Environment variables use nested naming:
    PUREOBJECT_LOGGING__CONSOLE_LEVEL, PUREOBJECT_LOGGING__ENABLED

    The .env file is loaded when present.
    """

    model_config = SettingsConfigDict(
        env_prefix="PUREOBJECT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    logging: LoggingConfig = LoggingConfig()


# Singleton instance for library use
settings = Settings()
