"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "FitCoach: activity-driven workout and diet recommendations."
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["FitCoach contributors"]
    PROJECT_URL: str = "https://github.com/fitcoach/fitcoach"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Dashboard aggregation
    STATS_WINDOW_DAYS: int = 7

    # Live preview
    PREVIEW_MAX_TICKS: int = 3600
    DEFAULT_GOAL: str = "general_health"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
