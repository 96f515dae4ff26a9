"""Application settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fixlog.constants.log_filter import LOG_SUPPRESSED_MESSAGES


class Settings(BaseSettings):
    """fixlog configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FIXLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Application
    app_name: str = Field(default="fixlog", description="Application name")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Minimum log level"
    )

    # Selective log filter
    log_suppressed_messages: bool = Field(
        default=LOG_SUPPRESSED_MESSAGES,
        description="Emit a debug event for every message the filter suppresses",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
