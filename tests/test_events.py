"""Unit tests for event filtering, grouping, overlap detection and validation."""

from datetime import date, datetime, timedelta, timezone

from deskcal.core.events import (
    END_BEFORE_START,
    END_REQUIRED,
    INVALID_DATE,
    START_REQUIRED,
    TITLE_REQUIRED,
    error_messages,
    events_for_date,
    events_for_slot,
    generate_id,
    group_by_date,
    overlaps,
    reschedule_patch,
    slot_span,
    sort_by_start,
    summarize,
    validate_event,
)
from deskcal.domain import EventDraft


class TestFiltering:
    def test_events_for_date_keeps_original_order(self, make_event, monday):
        late = make_event(16, event_id="late")
        other_day = make_event(9, day_offset=1, event_id="tomorrow")
        early = make_event(8, event_id="early")

        result = events_for_date([late, other_day, early], monday.date())

        assert [event.id for event in result] == ["late", "early"]

    def test_sort_by_start_is_stable(self, make_event):
        first = make_event(10, event_id="a")
        second = make_event(10, event_id="b")
        earliest = make_event(7, event_id="c")

        assert [event.id for event in sort_by_start([first, second, earliest])] == ["c", "a", "b"]

    def test_sort_by_start_returns_new_list(self, make_event):
        events = [make_event(12), make_event(8)]
        sort_by_start(events)
        assert events[0].start.hour == 12


class TestOverlaps:
    def test_intersecting_events_overlap_both_ways(self, make_event):
        first = make_event(9, 0, 30)
        second = make_event(9, 15, 30)
        events = [first, second]

        assert overlaps(first, events)
        assert overlaps(second, events)

    def test_touching_endpoints_do_not_overlap(self, make_event):
        first = make_event(9, 0, 30)
        second = make_event(9, 30, 30)
        events = [first, second]

        assert not overlaps(first, events)
        assert not overlaps(second, events)

    def test_event_never_overlaps_itself(self, make_event):
        event = make_event(9)
        assert not overlaps(event, [event])

    def test_containment_counts(self, make_event):
        outer = make_event(9, 0, 180)
        inner = make_event(10, 0, 15)
        assert overlaps(inner, [outer, inner])
        assert overlaps(outer, [outer, inner])

    def test_other_days_are_ignored(self, make_event):
        today = make_event(9, 0, 60)
        tomorrow = make_event(9, 0, 60, day_offset=1)
        assert not overlaps(today, [today, tomorrow])


class TestGroupByDate:
    def test_three_days_three_sorted_buckets(self, make_event, monday):
        events = [
            make_event(15, day_offset=2),
            make_event(11),
            make_event(9, day_offset=1),
            make_event(8),
            make_event(7, day_offset=2),
        ]

        grouped = group_by_date(events)

        assert len(grouped) == 3
        for bucket in grouped.values():
            starts = [event.start for event in bucket]
            assert starts == sorted(starts)
        assert [event.start.hour for event in grouped[monday.date()]] == [8, 11]

    def test_keys_follow_first_appearance(self, make_event, monday):
        events = [make_event(9, day_offset=2), make_event(9), make_event(9, day_offset=1)]
        keys = list(group_by_date(events))
        assert keys == [
            monday.date() + timedelta(days=2),
            monday.date(),
            monday.date() + timedelta(days=1),
        ]

    def test_keys_are_plain_dates(self, make_event):
        key = next(iter(group_by_date([make_event(9)])))
        assert type(key) is date


class TestValidateEvent:
    def test_empty_draft_reports_three_fields_in_order(self):
        errors = validate_event({})
        assert list(errors) == ["title", "start", "end"]
        assert error_messages(errors) == [TITLE_REQUIRED, START_REQUIRED, END_REQUIRED]

    def test_equal_timestamps_are_invalid(self, monday):
        errors = validate_event({"title": "A", "start": monday, "end": monday})
        assert errors == {"end": END_BEFORE_START}

    def test_end_before_start(self, monday):
        errors = validate_event({"title": "A", "start": monday, "end": monday - timedelta(minutes=1)})
        assert error_messages(errors) == [END_BEFORE_START]

    def test_blank_title(self, monday):
        errors = validate_event({"title": "   ", "start": monday, "end": monday + timedelta(hours=1)})
        assert errors == {"title": TITLE_REQUIRED}

    def test_missing_end_only(self, monday):
        errors = validate_event({"title": "A", "start": monday})
        assert errors == {"end": END_REQUIRED}

    def test_valid_draft_object(self, monday):
        draft = EventDraft(title="Standup", start=monday, end=monday + timedelta(minutes=15))
        assert validate_event(draft) == {}

    def test_existing_event(self, make_event):
        assert validate_event(make_event(9)) == {}

    def test_mixed_aware_and_naive_timestamps(self):
        start = datetime(2024, 1, 15, 9, tzinfo=timezone.utc)
        local_start = start.astimezone().replace(tzinfo=None)

        assert validate_event({"title": "A", "start": start, "end": local_start + timedelta(hours=1)}) == {}
        assert validate_event({"title": "A", "start": start, "end": local_start}) == {"end": END_BEFORE_START}

    def test_empty_strings_count_as_missing(self):
        errors = validate_event({"title": "A", "start": "", "end": ""})
        assert errors == {"start": START_REQUIRED, "end": END_REQUIRED}

    def test_unparseable_values(self):
        errors = validate_event({"title": "A", "start": "soon", "end": 42})
        assert errors == {"start": INVALID_DATE, "end": INVALID_DATE}

    def test_iso_strings_are_compared_as_timestamps(self):
        errors = validate_event({"title": "A", "start": "2024-01-15T10:00:00Z", "end": "2024-01-15T10:00:00+00:00"})
        assert errors == {"end": END_BEFORE_START}


class TestIdsAndSlots:
    def test_generate_id_is_unique(self):
        identifiers = {generate_id() for _ in range(1000)}
        assert len(identifiers) == 1000
        assert all(identifier.startswith("evt-") for identifier in identifiers)

    def test_events_for_slot(self, make_event, monday):
        standup = make_event(9, 15)
        lunch = make_event(12, 0)
        events = [standup, lunch]

        assert events_for_slot(events, monday.date(), "09:00") == [standup]
        assert events_for_slot(events, monday.date(), "09:30") == []
        assert events_for_slot(events, monday.date(), 24) == [lunch]
        assert events_for_slot(events, monday.date() + timedelta(days=1), "09:00") == []

    def test_slot_span(self, make_event):
        assert slot_span(make_event(9, 0, 90)) == 3.0
        assert slot_span(make_event(9, 0, 10)) == 0.5


class TestReschedulePatch:
    def test_keeps_duration(self, make_event):
        event = make_event(9, 0, 90)
        patch = reschedule_patch(event, date(2024, 1, 17), "14:30")
        assert patch == {
            "start": datetime(2024, 1, 17, 14, 30),
            "end": datetime(2024, 1, 17, 16, 0),
        }

    def test_accepts_datetime_target(self, make_event):
        event = make_event(9, 0, 30)
        patch = reschedule_patch(event, datetime(2024, 1, 18, 22, 0), "23:30")
        assert patch["end"] == datetime(2024, 1, 19, 0, 0)


class TestSummarize:
    def test_counts(self, make_event, monday):
        events = [
            make_event(9),
            make_event(9, day_offset=20),
            make_event(9, day_offset=-30),
        ]
        stats = summarize(events, monday, now=monday + timedelta(days=1))
        assert stats.total == 3
        assert stats.this_month == 1
        assert stats.upcoming == 1

    def test_empty(self, monday):
        stats = summarize([], monday, now=monday)
        assert (stats.total, stats.this_month, stats.upcoming) == (0, 0, 0)
