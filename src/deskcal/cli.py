from __future__ import annotations

import argparse
import logging
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional

from .bootstrap import configure_logging
from .core import calendar_grid, format_date, time_slots, weekday_labels
from .data import load_events, load_sample_events
from .services import CalendarService, ServiceContext

logger = logging.getLogger(__name__)


def _parse_month(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m").date()
    except ValueError as exc:
        raise argparse.ArgumentTypeError("month must be formatted YYYY-MM") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Desktop calendar command line interface.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("gui", help="Launch the desktop calendar.")

    grid_parser = subparsers.add_parser("grid", help="Print the padded month grid.")
    grid_parser.add_argument("--month", type=_parse_month, default=None, help="Month as YYYY-MM.")

    agenda_parser = subparsers.add_parser("agenda", help="Print events grouped by day.")
    agenda_parser.add_argument("--file", type=Path, default=None, help="JSON fixture to read.")

    subparsers.add_parser("slots", help="Print the week view time slots.")
    return parser


def render_grid(month: date) -> List[str]:
    lines = [format_date(month, "MMMM yyyy"), " ".join(f"{label:>3}" for label in weekday_labels())]
    grid = calendar_grid(month)
    for row in range(0, len(grid), 7):
        lines.append(
            " ".join(
                f"{day.day:>3}" if day.month == month.month else f"{'.':>3}"
                for day in grid[row : row + 7]
            )
        )
    return lines


def render_agenda(service: CalendarService, *, today: Optional[date] = None) -> List[str]:
    lines: List[str] = []
    for group in service.day_groups(today=today):
        lines.append(f"{group.label} ({format_date(group.day, 'MMM d, yyyy')})")
        for event in group.events:
            lines.append(
                f"  {format_date(event.start, 'HH:mm')}-{format_date(event.end, 'HH:mm')}  {event.title}"
            )
    return lines or ["No events scheduled"]


def main(argv: Optional[List[str]] = None) -> None:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    logger.debug("CLI command: %s", args.command)

    if args.command == "gui":
        from .ui.app import run_gui

        run_gui()
    elif args.command == "grid":
        print("\n".join(render_grid(args.month or date.today())))
    elif args.command == "agenda":
        context = ServiceContext()
        context.store.replace_all(load_events(args.file) if args.file else load_sample_events())
        print("\n".join(render_agenda(CalendarService(context))))
    elif args.command == "slots":
        print("\n".join(time_slots()))
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
