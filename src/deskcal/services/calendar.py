from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, List, Mapping, Optional, Union

from ..core import (
    CalendarState,
    EventStats,
    EventStore,
    calendar_grid,
    events_for_date,
    events_for_slot,
    group_by_date,
    overlaps,
    relative_day_label,
    summarize,
    week_dates,
)
from ..core.dates import as_date
from ..domain import CalendarEvent, CalendarView
from .context import ServiceContext

logger = logging.getLogger(__name__)

MAX_EVENTS_PER_CELL = 3


@dataclass(frozen=True)
class MonthCell:
    day: date
    in_month: bool
    is_today: bool
    is_selected: bool
    events: List[CalendarEvent]

    @property
    def visible_events(self) -> List[CalendarEvent]:
        return self.events[:MAX_EVENTS_PER_CELL]

    @property
    def hidden_count(self) -> int:
        return max(len(self.events) - MAX_EVENTS_PER_CELL, 0)


@dataclass(frozen=True)
class DayGroup:
    day: date
    label: str
    events: List[CalendarEvent]


@dataclass(slots=True)
class CalendarService:
    """Composes navigation state and the event store for the renderers."""

    context: ServiceContext
    state: CalendarState = field(default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.state is None:
            self.state = CalendarState.initial(view=self.context.settings.calendar.default_view)

    @property
    def store(self) -> EventStore:
        return self.context.store

    @property
    def events(self) -> List[CalendarEvent]:
        return list(self.store)

    # ------------------------------------------------------------------ navigation

    def next_month(self) -> CalendarState:
        self.state = self.state.next_month()
        return self.state

    def previous_month(self) -> CalendarState:
        self.state = self.state.previous_month()
        return self.state

    def go_today(self, now: Optional[datetime] = None) -> CalendarState:
        self.state = self.state.today(now)
        return self.state

    def go_to_date(self, target: datetime) -> CalendarState:
        self.state = self.state.go_to_date(target)
        return self.state

    def set_view(self, view: Union[CalendarView, str]) -> CalendarState:
        self.state = self.state.set_view(view)
        return self.state

    def toggle_view(self) -> CalendarState:
        self.state = self.state.toggle_view()
        return self.state

    def select_date(self, selected: Optional[date]) -> CalendarState:
        self.state = self.state.select_date(selected)
        return self.state

    # ------------------------------------------------------------------ view models

    def month_cells(self, *, today: Optional[date] = None) -> List[MonthCell]:
        reference = today or date.today()
        anchor = as_date(self.state.current_date)
        selected = self.state.selected_date
        events = self.events
        return [
            MonthCell(
                day=day,
                in_month=day.month == anchor.month,
                is_today=day == reference,
                is_selected=selected is not None and day == as_date(selected),
                events=events_for_date(events, day),
            )
            for day in calendar_grid(anchor, fixed_weeks=True)
        ]

    def week_days(self) -> List[date]:
        return week_dates(self.state.current_date)

    def slot_events(self, day: date, slot: str) -> List[CalendarEvent]:
        return events_for_slot(self.events, day, slot)

    def day_groups(self, *, today: Optional[date] = None) -> List[DayGroup]:
        reference = today or date.today()
        grouped = group_by_date(self.events)
        return [
            DayGroup(day=day, label=relative_day_label(day, reference), events=grouped[day])
            for day in sorted(grouped)
        ]

    def stats(self, *, now: Optional[datetime] = None) -> EventStats:
        return summarize(self.events, self.state.current_date, now=now)

    def has_conflict(self, event: CalendarEvent) -> bool:
        return overlaps(event, self.events)

    # ------------------------------------------------------------------ mutations

    def save_event(self, event_id: Optional[str], values: Mapping[str, Any]) -> CalendarEvent:
        """Create a new event, or update ``event_id`` when the editor was opened on one."""

        if event_id:
            saved = self.store.update(event_id, values)
        else:
            saved = self.store.add(values)
        if self.has_conflict(saved):
            logger.info("Event %s overlaps another event on %s", saved.id, saved.start.date())
        return saved

    def delete_event(self, event_id: str) -> None:
        self.store.delete(event_id)

    def move_event(self, event_id: str, target_day: date, target_slot: str) -> CalendarEvent:
        return self.store.reschedule(event_id, target_day, target_slot)
