"""
Pydantic schemas for application state snapshots.
"""
from pydantic import BaseModel
from typing import Optional, Tuple
from uuid import UUID
import enum

from mindsphere.schemas.diary import DiaryEntry
from mindsphere.schemas.mood import Mood, MoodEntry


class Screen(str, enum.Enum):
    """Top-level screens reachable from the navigation bar."""
    DAILY_CHECK_IN = "dailyCheckIn"
    DIARY = "diary"
    STATISTICS = "statistics"
    SETTINGS = "settings"


class StatisticsSummary(BaseModel):
    """Summary figures shown on the statistics screen."""
    total_mood_entries: int
    diary_entry_count: int
    current_streak: int
    most_common_mood: Optional[Mood] = None

    class Config:
        frozen = True


class StoreSnapshot(BaseModel):
    """Immutable copy of the application store."""
    has_completed_onboarding: bool
    current_screen: Screen
    mood_entries: Tuple[MoodEntry, ...]
    diary_entries: Tuple[DiaryEntry, ...]
    selected_mood: Optional[Mood] = None
    selected_quick_answers: Tuple[str, ...] = ()
    diary_text: str = ""
    editing_entry_id: Optional[UUID] = None

    class Config:
        frozen = True
