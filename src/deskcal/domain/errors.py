from __future__ import annotations

from typing import Dict, List, Mapping


class CalendarError(RuntimeError):
    """Base class for errors raised by calendar mutations."""


class EventValidationError(CalendarError):
    """Raised when an event draft or merged update fails validation.

    ``errors`` maps a field name (``title``, ``start``, ``end``) to the
    message that belongs under that field in the editor form.
    """

    def __init__(self, errors: Mapping[str, str], *, context: str = "") -> None:
        self.errors: Dict[str, str] = dict(errors)
        self.context = context
        prefix = f"{context}: " if context else ""
        super().__init__(f"{prefix}Validation failed: {', '.join(self.messages)}")

    @property
    def messages(self) -> List[str]:
        return list(self.errors.values())


class EventNotFoundError(CalendarError, LookupError):
    """Raised when a mutation references an event id the store does not hold."""

    def __init__(self, event_id: str) -> None:
        self.event_id = event_id
        super().__init__(f"Event with id {event_id} not found")
