"""Domain models for the calendar."""

from __future__ import annotations

from .enums import CalendarView, EventCategory
from .errors import CalendarError, EventNotFoundError, EventValidationError
from .models import CalendarEvent, EventDraft, parse_timestamp, to_local

__all__ = [
    "CalendarError",
    "CalendarEvent",
    "CalendarView",
    "EventCategory",
    "EventDraft",
    "EventNotFoundError",
    "EventValidationError",
    "parse_timestamp",
    "to_local",
]
