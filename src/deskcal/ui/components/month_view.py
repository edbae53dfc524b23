from __future__ import annotations

from typing import Iterable, List

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QMouseEvent
from PyQt6.QtWidgets import QFrame, QGridLayout, QLabel, QVBoxLayout, QWidget

from ...config import DEFAULT_EVENT_COLOR
from ...core import weekday_labels
from ...domain import CalendarEvent
from ...services import MonthCell


class _EventChip(QLabel):
    clicked = pyqtSignal(object)

    def __init__(self, event: CalendarEvent) -> None:
        super().__init__(event.title)
        self.calendar_event = event
        color = event.color or DEFAULT_EVENT_COLOR
        self.setStyleSheet(
            f"background-color: {color}33; border-left: 3px solid {color};"
            " padding: 2px 4px; border-radius: 4px;"
        )
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setToolTip(event.description or "")

    def mousePressEvent(self, ev: QMouseEvent) -> None:  # noqa: N802
        self.clicked.emit(self.calendar_event)
        ev.accept()


class _DayCell(QFrame):
    clicked = pyqtSignal(object)
    event_clicked = pyqtSignal(object)

    def __init__(self, cell: MonthCell) -> None:
        super().__init__()
        self.setObjectName("dayCell")
        self.day = cell.day
        self.setProperty("outside", not cell.in_month)
        self.setProperty("today", cell.is_today)
        self.setProperty("selected", cell.is_selected)
        self.setMinimumHeight(96)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(2)

        number = QLabel(str(cell.day.day))
        number.setObjectName("dayNumber")
        layout.addWidget(number)

        for event in cell.visible_events:
            chip = _EventChip(event)
            chip.clicked.connect(self.event_clicked)
            layout.addWidget(chip)
        if cell.hidden_count:
            more = QLabel(f"+{cell.hidden_count} more")
            more.setObjectName("moreLabel")
            layout.addWidget(more)
        layout.addStretch(1)

    def mousePressEvent(self, ev: QMouseEvent) -> None:  # noqa: N802
        self.clicked.emit(self.day)
        ev.accept()


class MonthView(QWidget):
    date_selected = pyqtSignal(object)
    event_selected = pyqtSignal(object)

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("monthView")
        self.grid = QGridLayout(self)
        self.grid.setContentsMargins(0, 0, 0, 0)
        self.grid.setSpacing(0)
        for column, label in enumerate(weekday_labels()):
            header = QLabel(label)
            header.setObjectName("weekdayLabel")
            header.setAlignment(Qt.AlignmentFlag.AlignCenter)
            self.grid.addWidget(header, 0, column)
        self._cells: List[_DayCell] = []

    def populate(self, cells: Iterable[MonthCell]) -> None:
        for widget in self._cells:
            self.grid.removeWidget(widget)
            widget.deleteLater()
        self._cells = []
        for index, cell in enumerate(cells):
            widget = _DayCell(cell)
            widget.clicked.connect(self.date_selected)
            widget.event_clicked.connect(self.event_selected)
            self.grid.addWidget(widget, 1 + index // 7, index % 7)
            self._cells.append(widget)
