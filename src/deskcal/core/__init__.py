"""Pure date/event utilities plus the calendar state and event store."""

from .calendar_state import CalendarState
from .dates import (
    add_months,
    calendar_grid,
    days_between,
    days_in_month,
    format_date,
    is_same_day,
    relative_day_label,
    slot_index,
    time_slots,
    week_dates,
    weekday_labels,
)
from .event_store import EventStore
from .events import (
    EventStats,
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

__all__ = [
    "CalendarState",
    "EventStats",
    "EventStore",
    "add_months",
    "calendar_grid",
    "days_between",
    "days_in_month",
    "error_messages",
    "events_for_date",
    "events_for_slot",
    "format_date",
    "generate_id",
    "group_by_date",
    "is_same_day",
    "overlaps",
    "relative_day_label",
    "reschedule_patch",
    "slot_index",
    "slot_span",
    "sort_by_start",
    "summarize",
    "time_slots",
    "validate_event",
    "week_dates",
    "weekday_labels",
]
