from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from ..domain import CalendarEvent, to_local


class EventRecord(BaseModel):
    """External JSON shape of an event, as found in seed fixtures."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    title: str
    start: datetime = Field(validation_alias=AliasChoices("start", "startDate"))
    end: datetime = Field(validation_alias=AliasChoices("end", "endDate"))
    description: Optional[str] = Field(default=None)
    color: Optional[str] = Field(default=None)
    category: Optional[str] = Field(default=None)

    @classmethod
    def from_domain(cls, event: CalendarEvent) -> "EventRecord":
        return cls(
            id=event.id,
            title=event.title,
            start=event.start,
            end=event.end,
            description=event.description,
            color=event.color,
            category=event.category,
        )

    def to_domain(self) -> CalendarEvent:
        return CalendarEvent(
            id=self.id,
            title=self.title,
            start=to_local(self.start),
            end=to_local(self.end),
            description=self.description,
            color=self.color,
            category=self.category,
        )


__all__ = ["EventRecord"]
