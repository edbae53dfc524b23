from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, Mapping, Optional

# Older fixtures used ``startDate``/``endDate``; ``start``/``end`` is canonical.
_LEGACY_KEYS = {"startDate": "start", "endDate": "end"}


def to_local(value: datetime) -> datetime:
    """Return ``value`` as a naive timestamp in local machine time."""

    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return to_local(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        return to_local(datetime.fromisoformat(value.replace("Z", "+00:00")))
    raise ValueError(f"Unsupported datetime value: {value!r}")


def migrate_record(record: Mapping[str, Any]) -> Dict[str, Any]:
    migrated: Dict[str, Any] = {}
    for key, value in record.items():
        target = _LEGACY_KEYS.get(key, key)
        if target in migrated and key in _LEGACY_KEYS:
            continue
        migrated[target] = value
    return migrated


@dataclass(slots=True)
class EventDraft:
    """Editor form contents before the store assigns an id."""

    title: Optional[str] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    description: Optional[str] = None
    color: Optional[str] = None
    category: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EventDraft":
        known = {item.name for item in fields(cls)}
        payload = migrate_record(data)
        unknown = sorted(set(payload) - known - {"id"})
        if unknown:
            raise TypeError(f"Unknown event fields: {', '.join(unknown)}")
        return cls(**{key: value for key, value in payload.items() if key in known})

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class CalendarEvent:
    id: str
    title: str
    start: datetime
    end: datetime
    description: Optional[str] = None
    color: Optional[str] = None
    category: Optional[str] = None

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "CalendarEvent":
        data = migrate_record(record)
        return cls(
            id=str(data["id"]),
            title=str(data["title"]),
            start=parse_timestamp(data["start"]),
            end=parse_timestamp(data["end"]),
            description=data.get("description"),
            color=data.get("color"),
            category=data.get("category"),
        )

    def to_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
        }
        for key in ("description", "color", "category"):
            value = getattr(self, key)
            if value is not None:
                record[key] = value
        return record

    def as_draft(self) -> EventDraft:
        return EventDraft(
            title=self.title,
            start=self.start,
            end=self.end,
            description=self.description,
            color=self.color,
            category=self.category,
        )
