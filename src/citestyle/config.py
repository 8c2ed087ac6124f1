"""Configuration management for citestyle."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CITESTYLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Style used by the CLI when --style is not given. Parsed leniently,
    # so a stale value falls back to APA 7 instead of failing.
    default_style: str = "apa-7"

    # Emphasis markup for bibliography entries: "plain" or "markdown"
    markup: str = "plain"

    log_level: str = "WARNING"

    # Optional file that also receives package log records
    log_file: Optional[str] = None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
