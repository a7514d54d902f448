"""
Statistics service for streaks and mood trends.
"""
from collections import Counter
from datetime import date
from typing import List, Optional, Sequence
from mindsphere.core.config import settings
from mindsphere.core.utils import local_day, days_back
from mindsphere.schemas.diary import DiaryEntry
from mindsphere.schemas.mood import Mood, MoodEntry, MoodTrendPoint
from mindsphere.schemas.state import StatisticsSummary


def calculate_streak(
    entries: Sequence[MoodEntry],
    today: date,
    window_days: Optional[int] = None
) -> int:
    """
    Count consecutive days with at least one mood entry, walking back from today.

    Only `window_days` days are examined (today included). A missing entry for
    today does not end the streak; the first missing day before today does.
    """
    if window_days is None:
        window_days = settings.STREAK_WINDOW_DAYS

    days_with_entries = {local_day(entry.date) for entry in entries}

    streak = 0
    for offset in range(window_days):
        if days_back(today, offset) in days_with_entries:
            streak += 1
        elif offset > 0:
            break
    return streak


def find_most_common_mood(entries: Sequence[MoodEntry]) -> Optional[Mood]:
    """
    Return the mood recorded most often, or None without entries.

    Ties go to the mood whose first entry was recorded earliest.
    """
    counts = Counter(entry.mood for entry in entries)
    if not counts:
        return None
    # Counter keeps first-seen order and max() returns the first maximum
    return max(counts, key=counts.get)


def build_mood_trend(
    entries: Sequence[MoodEntry],
    limit: Optional[int] = None
) -> List[MoodTrendPoint]:
    """Score points for the most recent mood entries, in recorded order."""
    if limit is None:
        limit = settings.MOOD_TREND_LENGTH
    if limit <= 0:
        return []
    return [
        MoodTrendPoint(date=entry.date, score=entry.mood.score)
        for entry in entries[-limit:]
    ]


def build_summary(
    mood_entries: Sequence[MoodEntry],
    diary_entries: Sequence[DiaryEntry],
    today: date
) -> StatisticsSummary:
    """Summary figures for the statistics screen."""
    return StatisticsSummary(
        total_mood_entries=len(mood_entries),
        diary_entry_count=len(diary_entries),
        current_streak=calculate_streak(mood_entries, today),
        most_common_mood=find_most_common_mood(mood_entries)
    )
