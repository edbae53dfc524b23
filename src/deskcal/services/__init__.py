"""Application services composing calendar state and the event store for the views."""

from __future__ import annotations

from .calendar import CalendarService, DayGroup, MonthCell
from .context import ServiceContext

__all__ = ["CalendarService", "DayGroup", "MonthCell", "ServiceContext"]
