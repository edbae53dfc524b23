"""Loading and dumping events in their external JSON shape."""

from __future__ import annotations

from .records import EventRecord
from .seed import SAMPLE_EVENTS_FILE, dump_events, load_events, load_sample_events, parse_events

__all__ = [
    "EventRecord",
    "SAMPLE_EVENTS_FILE",
    "dump_events",
    "load_events",
    "load_sample_events",
    "parse_events",
]
