from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, List

import orjson
from pydantic import ValidationError

from ..assets import asset_path
from ..core.events import validate_event
from ..domain import CalendarEvent, EventValidationError
from .records import EventRecord

logger = logging.getLogger(__name__)

SAMPLE_EVENTS_FILE = "sample_events.json"


def _records_from_payload(payload: Any) -> List[Any]:
    if isinstance(payload, dict):
        payload = payload.get("events", [])
    if not isinstance(payload, list):
        raise ValueError("Event fixtures must be a JSON list or an object with an 'events' list.")
    return payload


def parse_events(raw: bytes) -> List[CalendarEvent]:
    """Decode a JSON fixture into validated events.

    The whole fixture is rejected when any record is malformed; the error
    names the offending record's position.
    """

    if not raw.strip():
        return []
    events: List[CalendarEvent] = []
    for index, record in enumerate(_records_from_payload(orjson.loads(raw))):
        try:
            event = EventRecord.model_validate(record).to_domain()
        except ValidationError as exc:
            errors = {
                ".".join(str(part) for part in error["loc"]) or "record": error["msg"]
                for error in exc.errors()
            }
            raise EventValidationError(errors, context=f"record {index}") from exc
        errors = validate_event(event)
        if errors:
            raise EventValidationError(errors, context=f"record {index}")
        events.append(event)
    return events


def load_events(path: Path) -> List[CalendarEvent]:
    events = parse_events(Path(path).read_bytes())
    logger.info("Read %d events from %s", len(events), path)
    return events


def load_sample_events() -> List[CalendarEvent]:
    return load_events(Path(asset_path(SAMPLE_EVENTS_FILE)))


def dump_events(events: Iterable[CalendarEvent], path: Path) -> None:
    records = [EventRecord.from_domain(event).model_dump(mode="json", exclude_none=True) for event in events]
    payload = orjson.dumps(records, option=orjson.OPT_INDENT_2)
    Path(path).write_bytes(payload + b"\n")
    logger.info("Wrote %d events to %s", len(records), path)


__all__ = ["SAMPLE_EVENTS_FILE", "dump_events", "load_events", "load_sample_events", "parse_events"]
