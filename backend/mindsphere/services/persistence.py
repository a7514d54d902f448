"""
Persistence adapter: serializes entries to and from the blob store.

All failures are logged and swallowed here. Callers always get a value back
(an empty list or False) and writes that cannot complete are skipped.
"""
import logging
from functools import lru_cache
from typing import List, Sequence, Type, TypeVar
from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError
from mindsphere.core.exceptions import PersistenceError
from mindsphere.schemas.diary import DiaryEntry
from mindsphere.schemas.mood import MoodEntry
from mindsphere.services.blob_store import KeyValueStore

logger = logging.getLogger(__name__)

MOOD_ENTRIES_KEY = "moodEntries"
DIARY_ENTRIES_KEY = "diaryEntries"
ONBOARDING_KEY = "hasCompletedOnboarding"

EntryType = TypeVar("EntryType", bound=BaseModel)


@lru_cache(maxsize=None)
def _list_adapter(entry_type: Type[BaseModel]) -> TypeAdapter:
    return TypeAdapter(List[entry_type])


class PersistenceAdapter:
    """Reads and writes entry sequences and flags under fixed keys."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def save(self, key: str, entries: Sequence[BaseModel], entry_type: Type[BaseModel]) -> None:
        """Serialize entries and write them under key. Failures are logged, not raised."""
        try:
            blob = _list_adapter(entry_type).dump_json(list(entries), by_alias=True).decode("utf-8")
        except (PydanticSerializationError, ValueError, TypeError) as e:
            logger.error(f"Could not serialize '{key}', skipping write: {e}")
            return

        try:
            self.store.set(key, blob)
        except PersistenceError as e:
            logger.error(f"Could not save '{key}': {e}")
            return
        logger.debug(f"Saved {len(entries)} entries under '{key}'")

    def load(self, key: str, entry_type: Type[EntryType]) -> List[EntryType]:
        """Read entries stored under key. Absent or unreadable data yields an empty list."""
        try:
            blob = self.store.get(key)
        except PersistenceError as e:
            logger.warning(f"Could not read '{key}', using empty list: {e}")
            return []

        if blob is None:
            return []

        try:
            return _list_adapter(entry_type).validate_json(blob)
        except ValidationError as e:
            logger.warning(f"Stored '{key}' is malformed, using empty list: {e.error_count()} errors")
            return []

    def save_flag(self, key: str, value: bool) -> None:
        """Write a boolean flag. Failures are logged, not raised."""
        try:
            self.store.set_bool(key, value)
        except PersistenceError as e:
            logger.error(f"Could not save flag '{key}': {e}")

    def load_flag(self, key: str) -> bool:
        """Read a boolean flag, defaulting to False."""
        try:
            return self.store.get_bool(key)
        except PersistenceError as e:
            logger.warning(f"Could not read flag '{key}', using False: {e}")
            return False

    def load_mood_entries(self) -> List[MoodEntry]:
        return self.load(MOOD_ENTRIES_KEY, MoodEntry)

    def save_mood_entries(self, entries: Sequence[MoodEntry]) -> None:
        self.save(MOOD_ENTRIES_KEY, entries, MoodEntry)

    def load_diary_entries(self) -> List[DiaryEntry]:
        return self.load(DIARY_ENTRIES_KEY, DiaryEntry)

    def save_diary_entries(self, entries: Sequence[DiaryEntry]) -> None:
        self.save(DIARY_ENTRIES_KEY, entries, DiaryEntry)

    def load_onboarding_completed(self) -> bool:
        return self.load_flag(ONBOARDING_KEY)

    def save_onboarding_completed(self, value: bool) -> None:
        self.save_flag(ONBOARDING_KEY, value)
