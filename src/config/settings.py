"""Environment configuration and validation.

This module defines strongly-typed application settings loaded from environment variables
(optionally via a local `.env` file).
"""

from __future__ import annotations

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    load_sample_data: bool = Field(default=True, alias="LOAD_SAMPLE_DATA")
    prompt: str = Field(default="> ", alias="CLI_PROMPT")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that the log level is a standard `logging` level name."""

        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {value!r}")
        return level


def load_settings(**overrides: object) -> Settings:
    """Load and validate settings from environment variables.

    Keyword overrides (by field alias, e.g. `LOG_LEVEL="DEBUG"`) take precedence over the
    environment.

    Raises:
        RuntimeError: If the environment configuration is invalid.
    """

    try:
        return Settings(**overrides)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
