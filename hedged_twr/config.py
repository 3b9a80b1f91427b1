# hedged_twr/config.py
"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables with validation:
- ENVIRONMENT: Runtime mode (development, test, production)
- LOG_LEVEL: Logging level
- LOG_FORMAT: text (human-readable) or json (log aggregation)

Calculation rules (precision, annualization threshold) are NOT configurable
here; they are fixed in hedged_twr.services.constants.

Configuration is validated on import. Invalid configuration raises a
pydantic ValidationError with a descriptive message.

Usage:
    from hedged_twr.config import settings
    from hedged_twr.utils import setup_logging

    setup_logging(settings.log_level, settings.log_format)
"""
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "WARN", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Environment variables:
        - ENVIRONMENT: Runtime environment (development, test, production)
        - DEBUG: Enable debug mode (default: False)
        - LOG_LEVEL: Logging level (default: "INFO")
        - LOG_FORMAT: Log output format, text or json (default: "text")
    """

    environment: Literal["development", "test", "production"] = Field(
        default="development",
        description="Runtime environment (development, test, production)"
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_format: Literal["text", "json"] = Field(
        default="text",
        description="Log output format (text for development, json for aggregation)"
    )

    debug: bool = False

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper().strip()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: '{value}'. "
                f"Valid levels are: {', '.join(VALID_LOG_LEVELS)}"
            )
        return level

    @model_validator(mode="after")
    def validate_environment_config(self) -> "Settings":
        """
        Validate settings that depend on the environment.

        Rules:
        - production: debug mode is not allowed
        - debug: forces DEBUG log level
        """
        if self.environment == "production" and self.debug:
            raise ValueError("DEBUG must be disabled in production environment.")

        if self.debug:
            object.__setattr__(self, "log_level", "DEBUG")

        return self


# Create single instance
settings = Settings()
