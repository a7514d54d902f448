"""
Application configuration and environment settings.
"""
from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Optional, Union


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "MindSphere"
    DEBUG: bool = False

    # Local storage
    DATABASE_URL: str = "sqlite:///./mindsphere.db"
    DB_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None  # Also log to a rotating file when set

    # Statistics
    STREAK_WINDOW_DAYS: int = 30  # Number of days examined when counting a streak
    MOOD_TREND_LENGTH: int = 14  # Most recent mood entries plotted in the trend
    RECENT_MOOD_ENTRIES: int = 5  # Mood entries listed under the check-in

    # Diary
    PREVIEW_LENGTH: int = 100  # Characters shown in a diary entry preview

    # Check-in
    QUICK_ANSWERS: Union[List[str], str] = [
        "Relaxed",
        "Focused",
        "Overwhelmed",
        "Energetic",
        "Peaceful",
        "Anxious",
        "Motivated",
        "Drained",
    ]

    @field_validator("QUICK_ANSWERS", mode="before")
    @classmethod
    def parse_quick_answers(cls, v):
        """Parse QUICK_ANSWERS from comma-separated string or list."""
        if isinstance(v, str):
            return [answer.strip() for answer in v.split(",") if answer.strip()]
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
