"""
Utility functions for the application.
"""
from datetime import date, datetime, timedelta, timezone
from typing import Union

# Epoch of numeric timestamps written by earlier app versions
REFERENCE_DATE = datetime(2001, 1, 1, tzinfo=timezone.utc)


def local_now() -> datetime:
    """Current time as a timezone-aware datetime in the local zone."""
    return datetime.now().astimezone()


def to_local(value: datetime) -> datetime:
    """Convert a datetime to the local zone; naive values are taken as local time."""
    return value.astimezone()


def local_day(value: datetime) -> date:
    """Calendar day of a datetime in the local zone."""
    return to_local(value).date()


def days_back(day: date, count: int) -> date:
    """Day that lies `count` days before `day`."""
    return day - timedelta(days=count)


def from_reference_seconds(seconds: Union[int, float]) -> datetime:
    """Convert seconds since 2001-01-01 UTC into an aware datetime."""
    return REFERENCE_DATE + timedelta(seconds=seconds)
