"""
Base configuration settings.

Shared settings every gamesdb config module inherits: which deployment
the store runs in and how loudly the package logs. Values come from
GAMESDB_* environment variables or a local .env file.

Dependencies: pydantic, pydantic_settings
System role: Foundation for all configuration classes
"""

import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class BaseSettings(PydanticBaseSettings):
    """Common settings for the games store."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GAMESDB_",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "test", "production"] = Field(
        default="development",
        description="Deployment the store serves; test runs use in-memory SQLite",
    )
    debug: bool = Field(
        default=False,
        description="Log every repository call at DEBUG",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level passed to configure_logging()",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept any case, reject names the logging module does not know."""
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level

    @property
    def effective_log_level(self) -> int:
        """Numeric log level; debug mode forces DEBUG."""
        if self.debug:
            return logging.DEBUG
        return logging.getLevelName(self.log_level)
