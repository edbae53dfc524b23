from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from ..domain import CalendarEvent, EventDraft, EventNotFoundError, EventValidationError, parse_timestamp
from .dates import DateLike
from .events import Draft, generate_id, reschedule_patch, validate_event

logger = logging.getLogger(__name__)

_EVENT_FIELDS = tuple(item.name for item in fields(CalendarEvent))


def _draft_values(draft: Draft) -> Dict[str, Any]:
    if isinstance(draft, Mapping):
        return EventDraft.from_mapping(draft).as_dict()
    if isinstance(draft, CalendarEvent):
        return draft.as_draft().as_dict()
    return draft.as_dict()


def _normalized(values: Dict[str, Any]) -> Dict[str, Any]:
    for key in ("start", "end"):
        raw = values.get(key)
        if not raw:
            values[key] = None
            continue
        try:
            values[key] = parse_timestamp(raw)
        except ValueError:
            # Left as-is; validate_event reports it against the field.
            continue
    return values


@dataclass
class EventStore:
    """Authoritative in-memory list of calendar events.

    ``add`` and ``update`` validate before touching the list, so a rejected
    mutation never leaves a partially applied event behind.
    """

    _events: List[CalendarEvent] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._events = list(self._events)

    @property
    def events(self) -> Tuple[CalendarEvent, ...]:
        return tuple(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[CalendarEvent]:
        return iter(tuple(self._events))

    def _index_of(self, event_id: str) -> Optional[int]:
        for index, event in enumerate(self._events):
            if event.id == event_id:
                return index
        return None

    def get_by_id(self, event_id: str) -> Optional[CalendarEvent]:
        index = self._index_of(event_id)
        return None if index is None else self._events[index]

    def add(self, draft: Draft) -> CalendarEvent:
        values = _normalized(_draft_values(draft))
        errors = validate_event(values)
        if errors:
            logger.debug("Rejected new event: %s", errors)
            raise EventValidationError(errors)
        event = CalendarEvent(id=generate_id(), **values)
        self._events.append(event)
        logger.debug("Added event %s (%s)", event.id, event.title)
        return event

    def update(self, event_id: str, patch: Mapping[str, Any]) -> CalendarEvent:
        index = self._index_of(event_id)
        if index is None:
            raise EventNotFoundError(event_id)
        unknown = sorted(set(patch) - set(_EVENT_FIELDS))
        if unknown:
            raise TypeError(f"Unknown event fields: {', '.join(unknown)}")

        current = self._events[index]
        merged = {name: getattr(current, name) for name in _EVENT_FIELDS if name != "id"}
        merged.update({key: value for key, value in patch.items() if key != "id"})
        merged = _normalized(merged)
        errors = validate_event(merged)
        if errors:
            logger.debug("Rejected update for %s: %s", event_id, errors)
            raise EventValidationError(errors)

        updated = CalendarEvent(id=current.id, **merged)
        self._events[index] = updated
        logger.debug("Updated event %s", event_id)
        return updated

    def delete(self, event_id: str) -> None:
        index = self._index_of(event_id)
        if index is None:
            return
        removed = self._events.pop(index)
        logger.debug("Deleted event %s (%s)", removed.id, removed.title)

    def reschedule(self, event_id: str, target_day: DateLike, target_slot: str) -> CalendarEvent:
        """Move an event to a week-view slot, keeping its duration."""

        event = self.get_by_id(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return self.update(event_id, reschedule_patch(event, target_day, target_slot))

    def replace_all(self, events: Iterable[CalendarEvent]) -> None:
        """Swap in a pre-validated list, for example one loaded from a fixture."""

        incoming = list(events)
        seen: set[str] = set()
        for event in incoming:
            if event.id in seen:
                raise EventValidationError({"id": "Duplicate event id"}, context=f"event {event.id}")
            seen.add(event.id)
            errors = validate_event(event)
            if errors:
                raise EventValidationError(errors, context=f"event {event.id}")
        self._events = incoming
        logger.info("Loaded %d events into the store", len(incoming))

    def to_records(self) -> List[Dict[str, Any]]:
        return [event.to_record() for event in self._events]


__all__ = ["EventStore"]
