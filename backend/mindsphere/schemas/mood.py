"""
Pydantic schemas for Mood entity.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Dict, Tuple
from datetime import datetime
from uuid import UUID, uuid4
import enum

from mindsphere.core.utils import local_now, to_local, from_reference_seconds


class Mood(str, enum.Enum):
    """Mood enumeration. Values are the glyphs written to storage."""
    HAPPY = "😊"
    CALM = "😌"
    STRESSED = "😰"
    TIRED = "😴"
    EXCITED = "🤩"
    SAD = "😢"
    ANGRY = "😠"
    NEUTRAL = "😐"

    @property
    def display_name(self) -> str:
        """Human-readable mood name."""
        return MOOD_NAMES[self]

    @property
    def score(self) -> float:
        """Numeric score in [1.0, 5.0] used for trends."""
        return MOOD_SCORES[self]


MOOD_NAMES: Dict[Mood, str] = {
    Mood.HAPPY: "Happy",
    Mood.CALM: "Calm",
    Mood.STRESSED: "Stressed",
    Mood.TIRED: "Tired",
    Mood.EXCITED: "Excited",
    Mood.SAD: "Sad",
    Mood.ANGRY: "Angry",
    Mood.NEUTRAL: "Neutral",
}

MOOD_SCORES: Dict[Mood, float] = {
    Mood.HAPPY: 5.0,
    Mood.EXCITED: 4.5,
    Mood.CALM: 4.0,
    Mood.NEUTRAL: 3.0,
    Mood.TIRED: 2.5,
    Mood.SAD: 2.0,
    Mood.STRESSED: 1.5,
    Mood.ANGRY: 1.0,
}


class TimestampedEntry(BaseModel):
    """Base schema for locally created, immutable entries."""
    id: UUID = Field(default_factory=uuid4)
    date: datetime = Field(default_factory=local_now)

    @field_validator("date", mode="before")
    @classmethod
    def parse_reference_seconds(cls, v):
        """Accept numeric timestamps written by earlier app versions (seconds since 2001)."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            try:
                return from_reference_seconds(v)
            except OverflowError as e:
                raise ValueError("date out of range") from e
        return v

    @field_validator("date")
    @classmethod
    def ensure_local(cls, v: datetime) -> datetime:
        """Store dates in the local zone; naive datetimes are taken as local time."""
        try:
            return to_local(v)
        except OverflowError as e:
            raise ValueError("date out of range") from e

    class Config:
        frozen = True
        populate_by_name = True


class MoodEntry(TimestampedEntry):
    """Schema for a recorded mood."""
    mood: Mood
    quick_answers: Tuple[str, ...] = Field(default=(), alias="quickAnswers")


class MoodTrendPoint(BaseModel):
    """Single point of the mood trend chart."""
    date: datetime
    score: float

    class Config:
        frozen = True
