from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QKeyEvent
from PyQt6.QtWidgets import QMainWindow, QMessageBox, QStackedWidget, QVBoxLayout, QWidget

from ..config.settings import AppSettings
from ..core import format_date
from ..core.dates import parse_slot
from ..domain import CalendarError, CalendarEvent, CalendarView
from ..services import CalendarService
from .components.event_dialog import EventDialog
from .components.header import CalendarHeader
from .components.list_view import ListView
from .components.month_view import MonthView
from .components.week_view import WeekView

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, *, service: CalendarService, settings: AppSettings) -> None:
        super().__init__()
        self.service = service
        self.settings = settings

        self.setWindowTitle(settings.ui.app_name)
        self.resize(1280, 860)

        self.header = CalendarHeader(title=settings.ui.app_name)
        self.month_view = MonthView()
        self.week_view = WeekView()
        self.list_view = ListView()

        self.stack = QStackedWidget()
        self._pages = {
            CalendarView.MONTH: self.stack.addWidget(self.month_view),
            CalendarView.WEEK: self.stack.addWidget(self.week_view),
            CalendarView.LIST: self.stack.addWidget(self.list_view),
        }

        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)
        layout.addWidget(self.header)
        layout.addWidget(self.stack, stretch=1)
        self.setCentralWidget(container)

        self.header.today_requested.connect(self.go_today)
        self.header.previous_requested.connect(self.previous_month)
        self.header.next_requested.connect(self.next_month)
        self.header.toggle_view_requested.connect(self.toggle_view)
        self.header.new_event_requested.connect(self.create_event)

        self.month_view.date_selected.connect(self.on_date_selected)
        self.month_view.event_selected.connect(self.edit_event)
        self.week_view.event_selected.connect(self.edit_event)
        self.week_view.slot_selected.connect(self.on_slot_selected)
        self.week_view.event_dropped.connect(self.on_event_dropped)
        self.list_view.event_selected.connect(self.edit_event)

        self.refresh()

    # ------------------------------------------------------------------ rendering

    def refresh(self) -> None:
        state = self.service.state
        self.header.set_view(state.view)
        self.header.set_period(format_date(state.current_date, "MMMM yyyy"))
        self.header.set_stats(self.service.stats())
        self.stack.setCurrentIndex(self._pages[state.view])
        if state.view is CalendarView.MONTH:
            self.month_view.populate(self.service.month_cells())
        elif state.view is CalendarView.WEEK:
            self.week_view.populate(self.service.week_days(), self.service.slot_events)
        else:
            self.list_view.populate(self.service.day_groups())

    # ------------------------------------------------------------------ navigation

    def go_today(self) -> None:
        self.service.go_today()
        self.refresh()

    def previous_month(self) -> None:
        self.service.previous_month()
        self.refresh()

    def next_month(self) -> None:
        self.service.next_month()
        self.refresh()

    def toggle_view(self) -> None:
        self.service.toggle_view()
        self.refresh()

    def keyPressEvent(self, event: QKeyEvent) -> None:  # noqa: N802
        key = event.key()
        if key == Qt.Key.Key_Left:
            self.previous_month()
        elif key == Qt.Key.Key_Right:
            self.next_month()
        elif key == Qt.Key.Key_T:
            self.go_today()
        elif key == Qt.Key.Key_V:
            self.toggle_view()
        else:
            super().keyPressEvent(event)
            return
        event.accept()

    # ------------------------------------------------------------------ actions

    def on_date_selected(self, day: date) -> None:
        self.service.select_date(day)
        self.create_event(start=datetime.combine(day, time(9, 0)))

    def on_slot_selected(self, day: date, slot: str) -> None:
        self.service.select_date(day)
        self.create_event(start=datetime.combine(day, parse_slot(slot)))

    def create_event(self, start: Optional[datetime] = None) -> None:
        if start is None:
            day = self.service.state.selected_date or date.today()
            start = datetime.combine(day, time(9, 0))
        end = start + self.settings.calendar.default_duration
        self._open_editor(None, default_start=start, default_end=end)

    def edit_event(self, event: CalendarEvent) -> None:
        self._open_editor(event, default_start=event.start, default_end=event.end)

    def _open_editor(
        self,
        event: Optional[CalendarEvent],
        *,
        default_start: datetime,
        default_end: datetime,
    ) -> None:
        dialog = EventDialog(event=event, default_start=default_start, default_end=default_end)
        result = dialog.exec()
        if result == EventDialog.DELETE_REQUESTED and event is not None:
            self.service.delete_event(event.id)
            self.statusBar().showMessage("Event deleted.", 3000)
        elif result == EventDialog.DialogCode.Accepted.value:
            try:
                self.service.save_event(event.id if event else None, dialog.values())
            except CalendarError as exc:
                self._handle_error(exc)
                return
            self.statusBar().showMessage("Event saved.", 3000)
        else:
            return
        self.refresh()

    def on_event_dropped(self, event_id: str, day: date, slot: str) -> None:
        try:
            moved = self.service.move_event(event_id, day, slot)
        except CalendarError as exc:
            self._handle_error(exc)
        else:
            self.statusBar().showMessage(f"Moved '{moved.title}' to {format_date(moved.start, 'EEE HH:mm')}.", 3000)
        self.refresh()

    # ------------------------------------------------------------------ misc

    def _handle_error(self, exc: Exception) -> None:
        logger.warning("Calendar mutation failed: %s", exc)
        self.statusBar().showMessage(f"Error: {exc}", 5000)
        QMessageBox.critical(self, "Error", str(exc))
