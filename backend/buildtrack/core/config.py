"""
Application configuration using Pydantic Settings.

Values are read from environment variables (or a local .env file). The
milestone engine's constants (size baseline, milestone cap) are fixed in
code and not configurable here.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ===========================================
    # Logging
    # ===========================================
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # ===========================================
    # Milestone engine
    # ===========================================
    # Check template table ordering once when the service is built
    VALIDATE_TEMPLATES_ON_STARTUP: bool = True


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures settings are loaded only once.
    """
    return Settings()
