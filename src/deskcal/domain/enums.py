from __future__ import annotations

from enum import Enum


class CalendarView(str, Enum):
    MONTH = "month"
    WEEK = "week"
    LIST = "list"


class EventCategory(str, Enum):
    WORK = "work"
    MEETING = "meeting"
    PERSONAL = "personal"
    OTHER = "other"

    @property
    def label(self) -> str:
        return self.value.capitalize()
