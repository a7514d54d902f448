"""
Application store: the single owner of journal state.

The store holds the recorded entries, the in-progress check-in and diary
draft, the current screen and the onboarding flag. Durable changes are written
through the persistence adapter right after they happen. Views read the store
(or a snapshot of it) and subscribe to be told when it changes.
"""
import logging
import threading
from datetime import date, datetime
from typing import Callable, List, Optional, Set, Tuple
from uuid import UUID
from mindsphere.core.config import settings
from mindsphere.core.utils import local_now, local_day
from mindsphere.schemas.diary import DiaryEntry
from mindsphere.schemas.mood import Mood, MoodEntry, MoodTrendPoint
from mindsphere.schemas.state import Screen, StatisticsSummary, StoreSnapshot
from mindsphere.services import statistics_service
from mindsphere.services.persistence import PersistenceAdapter

logger = logging.getLogger(__name__)

Listener = Callable[["AppStore"], None]


class AppStore:
    """Mutable application state with a single writer."""

    def __init__(
        self,
        persistence: PersistenceAdapter,
        clock: Callable[[], datetime] = local_now,
        quick_answer_options: Optional[List[str]] = None,
        hydrate: bool = True
    ):
        self.persistence = persistence
        self.clock = clock
        self._quick_answer_options = list(
            quick_answer_options if quick_answer_options is not None else settings.QUICK_ANSWERS
        )
        self._lock = threading.RLock()
        self._listeners: List[Listener] = []

        self._has_completed_onboarding = False
        self._current_screen = Screen.DAILY_CHECK_IN
        self._mood_entries: List[MoodEntry] = []
        self._diary_entries: List[DiaryEntry] = []
        self._selected_mood: Optional[Mood] = None
        self._selected_quick_answers: Set[str] = set()
        self._diary_text = ""
        self._editing_entry_id: Optional[UUID] = None

        if hydrate:
            self.hydrate()

    # Read model

    @property
    def has_completed_onboarding(self) -> bool:
        return self._has_completed_onboarding

    @property
    def current_screen(self) -> Screen:
        return self._current_screen

    @property
    def mood_entries(self) -> Tuple[MoodEntry, ...]:
        return tuple(self._mood_entries)

    @property
    def diary_entries(self) -> Tuple[DiaryEntry, ...]:
        return tuple(self._diary_entries)

    @property
    def selected_mood(self) -> Optional[Mood]:
        return self._selected_mood

    @property
    def selected_quick_answers(self) -> frozenset:
        return frozenset(self._selected_quick_answers)

    @property
    def diary_text(self) -> str:
        return self._diary_text

    @property
    def editing_entry_id(self) -> Optional[UUID]:
        return self._editing_entry_id

    @property
    def is_editing(self) -> bool:
        return self._editing_entry_id is not None

    @property
    def editing_entry(self) -> Optional[DiaryEntry]:
        """Diary entry currently being edited, if it still exists."""
        if self._editing_entry_id is None:
            return None
        return self._find_diary_entry(self._editing_entry_id)

    @property
    def quick_answer_options(self) -> Tuple[str, ...]:
        return tuple(self._quick_answer_options)

    @property
    def recent_mood_entries(self) -> List[MoodEntry]:
        """Latest mood entries, newest first."""
        limit = settings.RECENT_MOOD_ENTRIES
        if limit <= 0:
            return []
        return list(reversed(self._mood_entries[-limit:]))

    @property
    def diary_entries_newest_first(self) -> List[DiaryEntry]:
        return sorted(self._diary_entries, key=lambda entry: entry.date, reverse=True)

    # Derived statistics

    @property
    def today(self) -> date:
        return local_day(self.clock())

    @property
    def current_streak(self) -> int:
        return statistics_service.calculate_streak(self._mood_entries, self.today)

    @property
    def most_common_mood(self) -> Optional[Mood]:
        return statistics_service.find_most_common_mood(self._mood_entries)

    @property
    def mood_trend(self) -> List[MoodTrendPoint]:
        return statistics_service.build_mood_trend(self._mood_entries)

    @property
    def statistics(self) -> StatisticsSummary:
        return statistics_service.build_summary(
            self._mood_entries, self._diary_entries, self.today
        )

    def snapshot(self) -> StoreSnapshot:
        """Immutable copy of the whole state."""
        with self._lock:
            return StoreSnapshot(
                has_completed_onboarding=self._has_completed_onboarding,
                current_screen=self._current_screen,
                mood_entries=tuple(self._mood_entries),
                diary_entries=tuple(self._diary_entries),
                selected_mood=self._selected_mood,
                selected_quick_answers=tuple(sorted(self._selected_quick_answers)),
                diary_text=self._diary_text,
                editing_entry_id=self._editing_entry_id
            )

    # Change notification

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called after every change. Returns an unsubscribe function."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe():
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as e:
                logger.error(f"Store listener {listener!r} failed: {e}", exc_info=True)

    # Loading

    def hydrate(self) -> None:
        """Replace in-memory entries and the onboarding flag with stored values."""
        with self._lock:
            self._mood_entries = self.persistence.load_mood_entries()
            self._diary_entries = self.persistence.load_diary_entries()
            self._has_completed_onboarding = self.persistence.load_onboarding_completed()
            logger.info(
                f"Loaded {len(self._mood_entries)} mood entries and "
                f"{len(self._diary_entries)} diary entries"
            )
            self._notify()

    # Daily check-in

    def select_mood(self, mood: Mood) -> None:
        with self._lock:
            self._selected_mood = Mood(mood)
            self._notify()

    def clear_mood_selection(self) -> None:
        """Drop the in-progress mood and quick answers without recording them."""
        with self._lock:
            self._selected_mood = None
            self._selected_quick_answers.clear()
            self._notify()

    def toggle_quick_answer(self, answer: str) -> None:
        with self._lock:
            if answer in self._selected_quick_answers:
                self._selected_quick_answers.remove(answer)
            else:
                self._selected_quick_answers.add(answer)
            self._notify()

    def record_mood(self) -> Optional[MoodEntry]:
        """
        Record the selected mood with the selected quick answers.

        Does nothing and returns None when no mood is selected.
        """
        with self._lock:
            if self._selected_mood is None:
                return None

            entry = MoodEntry(
                date=self.clock(),
                mood=self._selected_mood,
                quick_answers=tuple(sorted(self._selected_quick_answers))
            )
            self._mood_entries.append(entry)
            self._selected_mood = None
            self._selected_quick_answers.clear()
            self.persistence.save_mood_entries(self._mood_entries)
            logger.info(f"Recorded mood {entry.mood.display_name} ({entry.id})")
            self._notify()
            return entry

    # Diary

    def set_diary_text(self, text: str) -> None:
        with self._lock:
            self._diary_text = text
            self._notify()

    def begin_editing_diary_entry(self, entry: DiaryEntry) -> None:
        """Make entry the edit target and load its content into the draft."""
        with self._lock:
            self._editing_entry_id = entry.id
            self._diary_text = entry.content
            self._notify()

    def cancel_editing(self) -> None:
        """Discard the draft and clear the edit target."""
        with self._lock:
            self._editing_entry_id = None
            self._diary_text = ""
            self._notify()

    def submit_diary_entry(self) -> Optional[DiaryEntry]:
        """
        Save the draft.

        While editing, the target entry gets the draft as its new content and
        keeps its id and date. Otherwise a new entry is appended. An empty
        draft with no edit in progress is ignored. Returns the saved entry, or
        None when nothing was written to the list.
        """
        with self._lock:
            if self._editing_entry_id is None and not self._diary_text:
                return None

            saved = None
            if self._editing_entry_id is not None:
                index = self._find_diary_index(self._editing_entry_id)
                if index is not None:
                    saved = self._diary_entries[index].with_content(self._diary_text)
                    self._diary_entries[index] = saved
                    logger.info(f"Updated diary entry {saved.id}")
                else:
                    logger.debug(f"Diary entry {self._editing_entry_id} no longer exists")
                self._editing_entry_id = None
            else:
                saved = DiaryEntry(date=self.clock(), content=self._diary_text)
                self._diary_entries.append(saved)
                logger.info(f"Created diary entry {saved.id}")

            self._diary_text = ""
            self.persistence.save_diary_entries(self._diary_entries)
            self._notify()
            return saved

    def delete_diary_entry(self, entry_id: UUID) -> bool:
        """Delete the diary entry with entry_id. Unknown ids are ignored."""
        with self._lock:
            index = self._find_diary_index(entry_id)
            if index is None:
                return False

            del self._diary_entries[index]
            self.persistence.save_diary_entries(self._diary_entries)
            logger.info(f"Deleted diary entry {entry_id}")
            self._notify()
            return True

    # Settings and navigation

    def reset_all(self) -> None:
        """Delete every mood and diary entry. Onboarding and selections are kept."""
        with self._lock:
            self._mood_entries.clear()
            self._diary_entries.clear()
            self.persistence.save_mood_entries(self._mood_entries)
            self.persistence.save_diary_entries(self._diary_entries)
            logger.info("All journal entries were reset")
            self._notify()

    def complete_onboarding(self) -> None:
        with self._lock:
            self._has_completed_onboarding = True
            self.persistence.save_onboarding_completed(True)
            self._notify()

    def navigate_to(self, screen: Screen) -> None:
        with self._lock:
            self._current_screen = Screen(screen)
            self._notify()

    # Helpers

    def _find_diary_index(self, entry_id: UUID) -> Optional[int]:
        for index, entry in enumerate(self._diary_entries):
            if entry.id == entry_id:
                return index
        return None

    def _find_diary_entry(self, entry_id: UUID) -> Optional[DiaryEntry]:
        index = self._find_diary_index(entry_id)
        return self._diary_entries[index] if index is not None else None
