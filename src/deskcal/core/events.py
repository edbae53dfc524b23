from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union
from uuid import uuid4

from ..domain import CalendarEvent, EventDraft, parse_timestamp
from .dates import DateLike, SLOT_MINUTES, as_date, is_same_day, parse_slot, slot_index

TITLE_REQUIRED = "Title is required"
START_REQUIRED = "Start date is required"
END_REQUIRED = "End date is required"
END_BEFORE_START = "End date must be after start date"
INVALID_DATE = "Invalid date"

_SLOT = timedelta(minutes=SLOT_MINUTES)

Draft = Union[EventDraft, CalendarEvent, Mapping[str, Any]]


@dataclass(frozen=True)
class EventStats:
    total: int
    this_month: int
    upcoming: int


def events_for_date(events: Iterable[CalendarEvent], day: DateLike) -> List[CalendarEvent]:
    return [event for event in events if is_same_day(event.start, day)]


def sort_by_start(events: Iterable[CalendarEvent]) -> List[CalendarEvent]:
    return sorted(events, key=lambda event: event.start)


def overlaps(event: CalendarEvent, all_events: Iterable[CalendarEvent]) -> bool:
    """True when another event starting the same day intersects ``[start, end)``."""

    for other in events_for_date(all_events, event.start):
        if other.id == event.id:
            continue
        if event.start < other.end and other.start < event.end:
            return True
    return False


def group_by_date(events: Iterable[CalendarEvent]) -> Dict[date, List[CalendarEvent]]:
    grouped: Dict[date, List[CalendarEvent]] = {}
    for event in events:
        grouped.setdefault(as_date(event.start), []).append(event)
    return {key: sort_by_start(bucket) for key, bucket in grouped.items()}


def _field(draft: Draft, name: str) -> Any:
    if isinstance(draft, Mapping):
        return draft.get(name)
    return getattr(draft, name, None)


def _moment(value: Any, name: str, missing: str, errors: Dict[str, str]) -> Optional[datetime]:
    if not value:
        errors[name] = missing
        return None
    try:
        return parse_timestamp(value)
    except ValueError:
        errors[name] = INVALID_DATE
        return None


def validate_event(draft: Draft) -> Dict[str, str]:
    """Map each invalid field to the message the editor shows beside it.

    Every check runs; an empty mapping means the draft can be committed.
    """

    errors: Dict[str, str] = {}
    title = _field(draft, "title")
    start = _field(draft, "start")
    end = _field(draft, "end")

    if not str(title or "").strip():
        errors["title"] = TITLE_REQUIRED
    start_at = _moment(start, "start", START_REQUIRED, errors)
    end_at = _moment(end, "end", END_REQUIRED, errors)
    if start_at is not None and end_at is not None and start_at >= end_at:
        errors["end"] = END_BEFORE_START
    return errors


def error_messages(errors: Mapping[str, str]) -> List[str]:
    return list(errors.values())


def generate_id() -> str:
    return f"evt-{uuid4().hex}"


def events_for_slot(
    events: Iterable[CalendarEvent], day: DateLike, slot: Union[str, int]
) -> List[CalendarEvent]:
    """Events on ``day`` whose start falls inside the 30-minute ``slot``."""

    index = slot if isinstance(slot, int) else slot_index(slot)
    return [event for event in events_for_date(events, day) if slot_index(event.start) == index]


def slot_span(event: CalendarEvent) -> float:
    return max(event.duration / _SLOT, 0.5)


def reschedule_patch(event: CalendarEvent, target_day: DateLike, target_slot: str) -> Dict[str, datetime]:
    """Patch moving ``event`` to ``target_slot`` on ``target_day``, keeping its duration."""

    start = datetime.combine(as_date(target_day), parse_slot(target_slot))
    return {"start": start, "end": start + event.duration}


def summarize(
    events: Iterable[CalendarEvent], anchor: DateLike, *, now: Optional[datetime] = None
) -> EventStats:
    reference = now or datetime.now()
    month = as_date(anchor)
    total = this_month = upcoming = 0
    for event in events:
        total += 1
        if (event.start.year, event.start.month) == (month.year, month.month):
            this_month += 1
        if event.start > reference:
            upcoming += 1
    return EventStats(total=total, this_month=this_month, upcoming=upcoming)


__all__ = [
    "END_BEFORE_START",
    "END_REQUIRED",
    "INVALID_DATE",
    "EventStats",
    "START_REQUIRED",
    "TITLE_REQUIRED",
    "error_messages",
    "events_for_date",
    "events_for_slot",
    "generate_id",
    "group_by_date",
    "overlaps",
    "reschedule_patch",
    "slot_span",
    "sort_by_start",
    "summarize",
    "validate_event",
]
