from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Optional, Union

from ..domain import CalendarView
from .dates import add_months

_VIEW_CYCLE = (CalendarView.MONTH, CalendarView.WEEK, CalendarView.LIST)


@dataclass(frozen=True)
class CalendarState:
    """Navigation state for the calendar views.

    Transitions never mutate; each returns a new state so renderers can
    compare old and new values and tests can drive them directly.
    """

    current_date: datetime = field(default_factory=datetime.now)
    view: CalendarView = CalendarView.MONTH
    selected_date: Optional[date] = None

    @classmethod
    def initial(
        cls,
        current_date: Optional[datetime] = None,
        view: Union[CalendarView, str] = CalendarView.MONTH,
    ) -> "CalendarState":
        return cls(current_date=current_date or datetime.now(), view=CalendarView(view))

    def next_month(self) -> "CalendarState":
        return replace(self, current_date=add_months(self.current_date, 1))

    def previous_month(self) -> "CalendarState":
        return replace(self, current_date=add_months(self.current_date, -1))

    def today(self, now: Optional[datetime] = None) -> "CalendarState":
        return replace(self, current_date=now or datetime.now())

    def go_to_date(self, target: datetime) -> "CalendarState":
        return replace(self, current_date=target)

    def set_view(self, view: Union[CalendarView, str]) -> "CalendarState":
        return replace(self, view=CalendarView(view))

    def toggle_view(self) -> "CalendarState":
        position = _VIEW_CYCLE.index(self.view)
        return replace(self, view=_VIEW_CYCLE[(position + 1) % len(_VIEW_CYCLE)])

    def select_date(self, selected: Optional[date]) -> "CalendarState":
        return replace(self, selected_date=selected)


__all__ = ["CalendarState"]
