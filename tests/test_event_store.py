"""Unit tests for the in-memory event store."""

from dataclasses import asdict
from datetime import date, datetime, timedelta, timezone

import pytest

from deskcal.core.events import (
    END_BEFORE_START,
    END_REQUIRED,
    INVALID_DATE,
    START_REQUIRED,
    TITLE_REQUIRED,
)
from deskcal.domain import CalendarEvent, EventDraft, EventNotFoundError, EventValidationError


def _snapshot(store):
    return [asdict(event) for event in store.events]


class TestAdd:
    def test_add_assigns_id_and_appends(self, store, draft):
        event = store.add(draft)

        assert len(store) == 1
        assert event.id.startswith("evt-")
        assert store.get_by_id(event.id) == CalendarEvent(id=event.id, **draft)

    def test_add_accepts_draft_objects(self, store, monday):
        event = store.add(EventDraft(title="Standup", start=monday, end=monday + timedelta(minutes=15)))
        assert event.description is None
        assert store.events == (event,)

    def test_add_parses_iso_strings(self, store):
        event = store.add({"title": "Call", "start": "2024-01-15T09:00:00", "end": "2024-01-15T09:45:00"})
        assert event.start == datetime(2024, 1, 15, 9)
        assert event.end == datetime(2024, 1, 15, 9, 45)

    def test_add_normalizes_aware_timestamps(self, store):
        start = datetime(2024, 1, 15, 9, tzinfo=timezone.utc)
        event = store.add({"title": "Call", "start": start, "end": start + timedelta(hours=1)})
        assert event.start.tzinfo is None
        assert event.start == start.astimezone().replace(tzinfo=None)

    def test_invalid_add_leaves_store_unchanged(self, store, draft):
        store.add(draft)
        before = _snapshot(store)

        with pytest.raises(EventValidationError) as excinfo:
            store.add({"title": " ", "start": draft["start"], "end": draft["start"]})

        assert excinfo.value.errors == {"title": TITLE_REQUIRED, "end": END_BEFORE_START}
        assert excinfo.value.messages == [TITLE_REQUIRED, END_BEFORE_START]
        assert _snapshot(store) == before

    def test_unknown_fields_are_rejected(self, store, draft):
        with pytest.raises(TypeError):
            store.add({**draft, "location": "Room 1"})
        assert len(store) == 0

    def test_each_add_gets_a_new_id(self, store, draft):
        ids = {store.add(draft).id for _ in range(5)}
        assert len(ids) == 5

    def test_empty_timestamps_are_reported_as_missing(self, store):
        with pytest.raises(EventValidationError) as excinfo:
            store.add({"title": "x", "start": "", "end": ""})
        assert excinfo.value.errors == {"start": START_REQUIRED, "end": END_REQUIRED}
        assert len(store) == 0

    def test_unparseable_timestamp_is_a_field_error(self, store):
        with pytest.raises(EventValidationError) as excinfo:
            store.add({"title": "x", "start": "next tuesday", "end": "2024-01-15T10:00:00"})
        assert excinfo.value.errors == {"start": INVALID_DATE}
        assert len(store) == 0


class TestUpdate:
    def test_missing_id_raises_and_changes_nothing(self, store, draft):
        store.add(draft)
        before = _snapshot(store)

        with pytest.raises(EventNotFoundError) as excinfo:
            store.update("evt-missing", {"title": "Renamed"})

        assert excinfo.value.event_id == "evt-missing"
        assert _snapshot(store) == before

    def test_patch_is_merged_in_place(self, store, draft, monday):
        first = store.add(draft)
        second = store.add({**draft, "title": "Second"})

        updated = store.update(first.id, {"title": "Renamed", "color": None})

        assert updated.id == first.id
        assert updated.title == "Renamed"
        assert updated.color is None
        assert updated.start == first.start
        assert [event.id for event in store] == [first.id, second.id]

    def test_invalid_merge_is_not_committed(self, store, draft):
        event = store.add(draft)
        before = _snapshot(store)

        with pytest.raises(EventValidationError) as excinfo:
            store.update(event.id, {"end": event.start})

        assert excinfo.value.errors == {"end": END_BEFORE_START}
        assert _snapshot(store) == before

    def test_id_in_patch_is_ignored(self, store, draft):
        event = store.add(draft)
        updated = store.update(event.id, {"id": "evt-other", "title": "Kept id"})
        assert updated.id == event.id
        assert store.get_by_id("evt-other") is None

    def test_empty_end_is_reported_as_missing(self, store, draft):
        event = store.add(draft)
        before = _snapshot(store)

        with pytest.raises(EventValidationError) as excinfo:
            store.update(event.id, {"end": ""})

        assert excinfo.value.errors == {"end": END_REQUIRED}
        assert _snapshot(store) == before

    def test_unparseable_end_is_a_field_error(self, store, draft):
        event = store.add(draft)
        with pytest.raises(EventValidationError) as excinfo:
            store.update(event.id, {"end": "15/01/2024 10:00"})
        assert excinfo.value.errors == {"end": INVALID_DATE}
        assert store.get_by_id(event.id) == event

    def test_unknown_patch_field(self, store, draft):
        event = store.add(draft)
        with pytest.raises(TypeError):
            store.update(event.id, {"location": "Room 1"})


class TestDeleteAndLookup:
    def test_delete_removes_event(self, store, draft):
        event = store.add(draft)
        store.delete(event.id)
        assert store.get_by_id(event.id) is None
        assert len(store) == 0

    def test_delete_absent_is_silent(self, store, draft):
        store.add(draft)
        before = _snapshot(store)
        assert store.delete("evt-missing") is None
        assert _snapshot(store) == before

    def test_get_by_id_unknown(self, store):
        assert store.get_by_id("nope") is None


class TestReschedule:
    def test_preserves_duration(self, store, draft):
        event = store.add(draft)
        moved = store.reschedule(event.id, date(2024, 1, 18), "08:30")
        assert moved.start == datetime(2024, 1, 18, 8, 30)
        assert moved.duration == event.duration
        assert store.get_by_id(event.id) == moved

    def test_unknown_event(self, store):
        with pytest.raises(EventNotFoundError):
            store.reschedule("evt-missing", date(2024, 1, 18), "08:30")

    def test_bad_slot_leaves_event(self, store, draft):
        event = store.add(draft)
        with pytest.raises(ValueError):
            store.reschedule(event.id, date(2024, 1, 18), "8:30")
        assert store.get_by_id(event.id) == event


class TestReplaceAll:
    def test_loads_events(self, store, make_event):
        events = [make_event(9), make_event(11)]
        store.replace_all(events)
        assert list(store) == events

    def test_rejects_duplicate_ids(self, store, make_event):
        store.replace_all([make_event(8)])
        before = _snapshot(store)
        with pytest.raises(EventValidationError):
            store.replace_all([make_event(9, event_id="dup"), make_event(10, event_id="dup")])
        assert _snapshot(store) == before

    def test_rejects_invalid_events(self, store, make_event):
        with pytest.raises(EventValidationError) as excinfo:
            store.replace_all([make_event(9, minutes=0)])
        assert "event evt-test" in str(excinfo.value)

    def test_to_records(self, store, make_event):
        store.replace_all([make_event(9, event_id="evt-1", color="#fff")])
        assert store.to_records() == [
            {
                "id": "evt-1",
                "title": "Meeting",
                "start": "2024-01-15T09:00:00",
                "end": "2024-01-15T09:30:00",
                "color": "#fff",
            }
        ]
