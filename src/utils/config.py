"""
Configuration Management

Uses Pydantic Settings for environment-based configuration.
Loads from .env file automatically.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Application Settings
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"
    LOG_LEVEL: str = "INFO"

    # Links
    CALENDAR_URL: str = "https://calendly.com/launchin7/website-consultation"
    PUBLIC_BASE_URL: str = "https://launchin7.com"

    # Leaderboard
    LEADERBOARD_MIN_SCORE: int = 90

    # Timeouts
    SCAN_TIMEOUT: int = 120

    # PageSpeed Insights (keyless requests are heavily rate limited)
    PAGESPEED_API_KEY: Optional[str] = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra fields in .env file
        case_sensitive = False  # Allow both UPPERCASE and lowercase


@lru_cache
def get_settings() -> Settings:
    """Get or create cached settings instance."""
    return Settings()
