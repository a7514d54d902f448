"""
Tests for the application store.
"""
from uuid import uuid4
from mindsphere.schemas.diary import DiaryEntry
from mindsphere.schemas.mood import Mood
from mindsphere.schemas.state import Screen
from mindsphere.services.app_store import AppStore
from conftest import FixedClock


def test_initial_state(store):
    """Test a fresh store starts empty on the check-in screen."""
    assert store.has_completed_onboarding is False
    assert store.current_screen is Screen.DAILY_CHECK_IN
    assert store.mood_entries == ()
    assert store.diary_entries == ()
    assert store.selected_mood is None
    assert store.diary_text == ""
    assert store.is_editing is False
    assert store.quick_answer_options[0] == "Relaxed"
    assert len(store.quick_answer_options) == 8


def test_record_mood_without_selection_is_noop(store, persistence):
    """Test recording with nothing selected changes nothing, however often."""
    assert store.record_mood() is None
    assert store.record_mood() is None
    assert store.mood_entries == ()
    assert persistence.store.get("moodEntries") is None


def test_record_mood(store, persistence, clock):
    """Test recording a mood stores selection and tags, then clears them."""
    store.select_mood(Mood.EXCITED)
    store.toggle_quick_answer("Motivated")
    store.toggle_quick_answer("Energetic")
    entry = store.record_mood()

    assert entry.mood is Mood.EXCITED
    assert entry.quick_answers == ("Energetic", "Motivated")
    assert entry.date == clock.now
    assert store.mood_entries == (entry,)
    assert store.selected_mood is None
    assert store.selected_quick_answers == frozenset()
    assert [saved.id for saved in persistence.load_mood_entries()] == [entry.id]


def test_toggle_quick_answer_twice_removes_it(store):
    """Test toggling a tag twice deselects it."""
    store.toggle_quick_answer("Anxious")
    assert store.selected_quick_answers == {"Anxious"}
    store.toggle_quick_answer("Anxious")
    assert store.selected_quick_answers == frozenset()


def test_clear_mood_selection(store):
    """Test clearing drops the mood and tags."""
    store.select_mood(Mood.SAD)
    store.toggle_quick_answer("Drained")
    store.clear_mood_selection()
    assert store.selected_mood is None
    assert store.selected_quick_answers == frozenset()
    assert store.record_mood() is None


def test_submit_new_diary_entry(store, persistence, clock):
    """Test submitting a draft appends an entry and clears the draft."""
    store.set_diary_text("Slept well.")
    entry = store.submit_diary_entry()

    assert entry.content == "Slept well."
    assert entry.date == clock.now
    assert store.diary_entries == (entry,)
    assert store.diary_text == ""
    assert [saved.id for saved in persistence.load_diary_entries()] == [entry.id]


def test_submit_empty_draft_is_noop(store, persistence):
    """Test an empty draft does not create an entry."""
    assert store.submit_diary_entry() is None
    assert store.diary_entries == ()
    assert persistence.store.get("diaryEntries") is None


def test_edit_preserves_date_and_id(store, clock):
    """Test editing days later replaces content but keeps the original date."""
    store.set_diary_text("Day one")
    original = store.submit_diary_entry()
    store.set_diary_text("Another day")
    other = store.submit_diary_entry()

    clock.advance(days=5)
    store.begin_editing_diary_entry(original)
    assert store.diary_text == "Day one"
    assert store.editing_entry == original

    store.set_diary_text("Day one, revised")
    edited = store.submit_diary_entry()

    assert edited.id == original.id
    assert edited.date == original.date
    assert edited.content == "Day one, revised"
    assert store.diary_entries == (edited, other)
    assert store.is_editing is False
    assert store.diary_text == ""


def test_edit_with_empty_draft_saves_empty_content(store):
    """Test clearing the draft while editing saves empty content."""
    store.set_diary_text("To be emptied")
    entry = store.submit_diary_entry()
    store.begin_editing_diary_entry(entry)
    store.set_diary_text("")
    edited = store.submit_diary_entry()
    assert edited.content == ""
    assert len(store.diary_entries) == 1


def test_edit_of_deleted_entry_changes_nothing(store):
    """Test submitting an edit whose target was deleted only clears the edit state."""
    store.set_diary_text("Short lived")
    entry = store.submit_diary_entry()
    store.begin_editing_diary_entry(entry)
    store.delete_diary_entry(entry.id)

    assert store.editing_entry is None
    assert store.submit_diary_entry() is None
    assert store.diary_entries == ()
    assert store.is_editing is False


def test_cancel_editing(store):
    """Test cancelling discards the draft and the edit target."""
    store.set_diary_text("Keep me")
    entry = store.submit_diary_entry()
    store.begin_editing_diary_entry(entry)
    store.set_diary_text("Unsaved change")
    store.cancel_editing()

    assert store.is_editing is False
    assert store.diary_text == ""
    assert store.diary_entries[0].content == "Keep me"


def test_delete_diary_entry(store, persistence):
    """Test deleting removes exactly the matching entry."""
    entries = []
    for text in ("one", "two", "three"):
        store.set_diary_text(text)
        entries.append(store.submit_diary_entry())

    assert store.delete_diary_entry(entries[1].id) is True
    assert store.diary_entries == (entries[0], entries[2])
    assert [saved.content for saved in persistence.load_diary_entries()] == ["one", "three"]


def test_delete_unknown_diary_entry_is_noop(store):
    """Test deleting an unknown id leaves the list unchanged."""
    store.set_diary_text("only")
    entry = store.submit_diary_entry()
    assert store.delete_diary_entry(uuid4()) is False
    assert store.diary_entries == (entry,)


def test_diary_entries_newest_first(store, clock):
    """Test entries can be listed newest first."""
    store.set_diary_text("older")
    older = store.submit_diary_entry()
    clock.advance(hours=2)
    store.set_diary_text("newer")
    newer = store.submit_diary_entry()
    assert store.diary_entries_newest_first == [newer, older]


def test_reset_all(store, persistence):
    """Test reset empties both lists and keeps onboarding and selections."""
    store.complete_onboarding()
    store.select_mood(Mood.CALM)
    store.record_mood()
    store.set_diary_text("entry")
    store.submit_diary_entry()
    store.select_mood(Mood.SAD)

    store.reset_all()

    assert store.mood_entries == ()
    assert store.diary_entries == ()
    assert store.has_completed_onboarding is True
    assert store.selected_mood is Mood.SAD
    assert persistence.load_mood_entries() == []
    assert persistence.load_diary_entries() == []
    assert persistence.load_onboarding_completed() is True


def test_complete_onboarding_persists(store, persistence):
    """Test the onboarding latch is set and stored."""
    store.complete_onboarding()
    assert store.has_completed_onboarding is True
    assert persistence.load_onboarding_completed() is True


def test_navigate_to(store, persistence):
    """Test navigation changes the screen without touching storage."""
    store.navigate_to(Screen.STATISTICS)
    assert store.current_screen is Screen.STATISTICS
    store.navigate_to("settings")
    assert store.current_screen is Screen.SETTINGS
    assert persistence.store.get("moodEntries") is None


def test_state_is_restored_on_start(persistence, clock):
    """Test a new store loads what an earlier one saved."""
    first = AppStore(persistence, clock=clock)
    first.complete_onboarding()
    first.select_mood(Mood.HAPPY)
    recorded = first.record_mood()
    first.set_diary_text("persisted")
    written = first.submit_diary_entry()

    second = AppStore(persistence, clock=clock)
    assert second.has_completed_onboarding is True
    assert [entry.id for entry in second.mood_entries] == [recorded.id]
    assert [entry.id for entry in second.diary_entries] == [written.id]
    assert second.current_screen is Screen.DAILY_CHECK_IN


def test_store_survives_storage_failure(broken_persistence):
    """Test the store keeps working in memory when storage is unavailable."""
    store = AppStore(broken_persistence, clock=FixedClock())
    store.select_mood(Mood.ANGRY)
    assert store.record_mood() is not None
    store.set_diary_text("still here")
    assert store.submit_diary_entry() is not None
    store.complete_onboarding()
    store.reset_all()
    assert store.has_completed_onboarding is True
    assert store.mood_entries == ()


def test_derived_statistics(store, clock):
    """Test streak, most common mood and trend read from recorded entries."""
    for mood in (Mood.CALM, Mood.SAD, Mood.CALM):
        store.select_mood(mood)
        store.record_mood()
        clock.advance(days=1)

    assert store.current_streak == 3
    assert store.most_common_mood is Mood.CALM
    assert [point.score for point in store.mood_trend] == [4.0, 2.0, 4.0]

    summary = store.statistics
    assert summary.total_mood_entries == 3
    assert summary.diary_entry_count == 0
    assert summary.current_streak == 3


def test_subscribers_are_notified(store):
    """Test listeners run after each change until they unsubscribe."""
    seen = []
    unsubscribe = store.subscribe(lambda s: seen.append(s.current_screen))
    store.navigate_to(Screen.DIARY)
    store.navigate_to(Screen.SETTINGS)
    unsubscribe()
    store.navigate_to(Screen.STATISTICS)
    assert seen == [Screen.DIARY, Screen.SETTINGS]


def test_failing_subscriber_does_not_break_store(store):
    """Test an exception in one listener does not stop others or the change."""
    calls = []

    def broken(_):
        raise RuntimeError("render failed")

    store.subscribe(broken)
    store.subscribe(lambda s: calls.append(s.selected_mood))
    store.select_mood(Mood.TIRED)
    assert store.selected_mood is Mood.TIRED
    assert calls == [Mood.TIRED]


def test_snapshot_is_immutable_copy(store):
    """Test snapshots do not follow later changes."""
    store.select_mood(Mood.NEUTRAL)
    store.toggle_quick_answer("Focused")
    store.set_diary_text("draft")
    snapshot = store.snapshot()

    store.record_mood()

    assert snapshot.selected_mood is Mood.NEUTRAL
    assert snapshot.selected_quick_answers == ("Focused",)
    assert snapshot.diary_text == "draft"
    assert snapshot.mood_entries == ()
    assert len(store.snapshot().mood_entries) == 1


def test_custom_quick_answer_options(persistence, clock):
    """Test quick answer options can be supplied."""
    store = AppStore(persistence, clock=clock, quick_answer_options=["Calm", "Busy"])
    assert store.quick_answer_options == ("Calm", "Busy")


def test_recent_mood_entries(store, clock):
    """Test the latest five mood entries are listed newest first."""
    recorded = []
    for mood in (Mood.ANGRY, Mood.SAD, Mood.TIRED, Mood.NEUTRAL, Mood.CALM, Mood.HAPPY):
        store.select_mood(mood)
        recorded.append(store.record_mood())
        clock.advance(hours=1)

    assert store.recent_mood_entries == list(reversed(recorded[1:]))
    assert store.recent_mood_entries[0].mood is Mood.HAPPY
