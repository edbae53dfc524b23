"""Date grid helpers shared by the month, week and list renderers.

Everything here is a pure function of its arguments. Weeks start on Sunday
and slot labels are 30 minutes wide.
"""

from __future__ import annotations

import re
from calendar import monthrange
from datetime import date, datetime, time, timedelta
from typing import List, TypeVar, Union

from ..domain.models import to_local

DateLike = Union[date, datetime]
_D = TypeVar("_D", date, datetime)

ONE_DAY = timedelta(days=1)
SLOT_MINUTES = 30
SLOTS_PER_DAY = 24 * 60 // SLOT_MINUTES
GRID_CELLS = 42

DEFAULT_DATE_FORMAT = "MMM dd, yyyy"

_WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
_WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
_SLOT_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")
_FORMAT_TOKENS = re.compile(r"'[^']*'|([A-Za-z])\1*")


def as_date(value: DateLike) -> date:
    """Calendar date of ``value`` in local time."""

    if isinstance(value, datetime):
        return to_local(value).date()
    return value


def days_between(start: DateLike, end: DateLike) -> int:
    """Whole days from ``start`` to ``end``, floored; negative when ``end`` is earlier."""

    if isinstance(start, datetime) or isinstance(end, datetime):
        start = _as_datetime(start)
        end = _as_datetime(end)
    return (end - start) // ONE_DAY


def is_same_day(first: DateLike, second: DateLike) -> bool:
    return as_date(first) == as_date(second)


def start_of_month(value: DateLike) -> date:
    return as_date(value).replace(day=1)


def end_of_month(value: DateLike) -> date:
    day = as_date(value)
    return day.replace(day=monthrange(day.year, day.month)[1])


def start_of_week(value: DateLike) -> date:
    day = as_date(value)
    # date.weekday() is Monday=0; shift so Sunday opens the week.
    return day - timedelta(days=(day.weekday() + 1) % 7)


def end_of_week(value: DateLike) -> date:
    return start_of_week(value) + timedelta(days=6)


def date_range(start: date, end: date) -> List[date]:
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


def days_in_month(value: DateLike) -> List[date]:
    return date_range(start_of_month(value), end_of_month(value))


def calendar_grid(value: DateLike, *, fixed_weeks: bool = False) -> List[date]:
    """Padded month grid from the Sunday before the 1st to the Saturday after the last day.

    The result is always a whole number of weeks. ``fixed_weeks`` keeps
    appending weeks until there are six rows so the month view does not
    change height between months.
    """

    grid = date_range(start_of_week(start_of_month(value)), end_of_week(end_of_month(value)))
    if fixed_weeks:
        while len(grid) < GRID_CELLS:
            grid.extend(date_range(grid[-1] + ONE_DAY, grid[-1] + timedelta(days=7)))
    return grid


def week_dates(value: DateLike) -> List[date]:
    first = start_of_week(value)
    return [first + timedelta(days=offset) for offset in range(7)]


def weekday_labels() -> List[str]:
    return list(_WEEKDAY_LABELS)


def time_slots() -> List[str]:
    return [
        f"{minutes // 60:02d}:{minutes % 60:02d}"
        for minutes in range(0, 24 * 60, SLOT_MINUTES)
    ]


def parse_slot(label: str) -> time:
    match = _SLOT_PATTERN.match(label.strip())
    if not match:
        raise ValueError(f"Time slot must be formatted HH:MM, got {label!r}")
    return time(int(match.group(1)), int(match.group(2)))


def slot_index(value: Union[datetime, time, str]) -> int:
    """Index into :func:`time_slots` of the slot containing ``value``."""

    if isinstance(value, str):
        value = parse_slot(value)
    elif isinstance(value, datetime):
        value = to_local(value).time()
    return value.hour * 2 + value.minute // SLOT_MINUTES


def add_months(value: _D, months: int) -> _D:
    """Shift ``value`` by whole months, clamping the day to the target month's length."""

    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(value.day, monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def format_date(value: DateLike, pattern: str = DEFAULT_DATE_FORMAT) -> str:
    """Render ``value`` using date-fns style tokens.

    Supported tokens: ``yyyy yy MMMM MMM MM M dd d EEEE EEE HH H hh h mm m ss s a``.
    Text wrapped in single quotes is copied through verbatim; any other
    unquoted letter raises ``ValueError``. Names are English regardless of
    the process locale.
    """

    moment = _as_datetime(value)

    def _render(match: re.Match) -> str:
        token = match.group(0)
        if token.startswith("'"):
            return token[1:-1]
        hour12 = moment.hour % 12 or 12
        rendered = {
            "yyyy": f"{moment.year:04d}",
            "yy": f"{moment.year % 100:02d}",
            "MMMM": _MONTH_NAMES[moment.month - 1],
            "MMM": _MONTH_NAMES[moment.month - 1][:3],
            "MM": f"{moment.month:02d}",
            "M": str(moment.month),
            "dd": f"{moment.day:02d}",
            "d": str(moment.day),
            "EEEE": _WEEKDAY_NAMES[moment.weekday()],
            "EEE": _WEEKDAY_NAMES[moment.weekday()][:3],
            "HH": f"{moment.hour:02d}",
            "H": str(moment.hour),
            "hh": f"{hour12:02d}",
            "h": str(hour12),
            "mm": f"{moment.minute:02d}",
            "m": str(moment.minute),
            "ss": f"{moment.second:02d}",
            "s": str(moment.second),
            "a": "AM" if moment.hour < 12 else "PM",
        }.get(token)
        if rendered is None:
            raise ValueError(f"Unknown token {token!r} in date pattern {pattern!r}; quote literal text")
        return rendered

    return _FORMAT_TOKENS.sub(_render, pattern)


def relative_day_label(value: DateLike, today: DateLike) -> str:
    offset = days_between(as_date(today), as_date(value))
    if offset == 0:
        return "Today"
    if offset == 1:
        return "Tomorrow"
    if offset == -1:
        return "Yesterday"
    return format_date(value, "EEEE, MMM d")


def _as_datetime(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return to_local(value)
    return datetime.combine(value, time.min)


__all__ = [
    "DEFAULT_DATE_FORMAT",
    "GRID_CELLS",
    "SLOTS_PER_DAY",
    "SLOT_MINUTES",
    "add_months",
    "as_date",
    "calendar_grid",
    "date_range",
    "days_between",
    "days_in_month",
    "end_of_month",
    "end_of_week",
    "format_date",
    "is_same_day",
    "parse_slot",
    "relative_day_label",
    "slot_index",
    "start_of_month",
    "start_of_week",
    "time_slots",
    "week_dates",
    "weekday_labels",
]
