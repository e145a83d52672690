"""Configuration loading for the duedate system.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings

The working-hours policy itself is fixed and is not configurable here.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv. Variables are read with the
    DUEDATE_ prefix, e.g. DUEDATE_LOG_LEVEL=DEBUG.
    """

    model_config = SettingsConfigDict(
        env_prefix="DUEDATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )
    logger_name: str = Field(
        default="duedate",
        description="Name of the logger that receives calculator diagnostics",
    )

    @field_validator("logger_name")
    @classmethod
    def validate_logger_name(cls, v: str) -> str:
        """Ensure logger name is a non-empty string."""
        if not v or not v.strip():
            raise ValueError("logger_name must be a non-empty string")
        return v.strip()


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
