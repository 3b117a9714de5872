import pytest

pytest.importorskip("kivy")

from backend.set_tracker import SetEntry, SetTracker  # noqa: E402


def test_tracker_creates_numbered_entries():
    tracker = SetTracker(3)
    assert len(tracker) == 3
    assert [entry.index for entry in tracker.entries] == [0, 1, 2]
    assert all(entry.reps == 15 for entry in tracker.entries)
    assert tracker.completed_count == 0


def test_tap_card_toggles_done():
    tracker = SetTracker(2)
    assert tracker[0].tap_card() is True
    assert tracker.completed_count == 1
    assert tracker[0].tap_card() is False
    assert tracker.completed_count == 0


def test_tap_in_load_area_keeps_done():
    entry = SetEntry()
    entry.tap_card()
    assert entry.tap_card(in_load_area=True) is True
    assert entry.done


def test_load_is_free_text():
    entry = SetEntry()
    for text in ("12kg", "band", ""):
        entry.set_load(text)
        assert entry.load == text
    assert not entry.done


def test_all_done():
    tracker = SetTracker(2)
    for entry in tracker.entries:
        entry.tap_card()
    assert tracker.all_done


def test_rejects_empty_tracker():
    with pytest.raises(ValueError):
        SetTracker(0)
