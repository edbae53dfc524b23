from __future__ import annotations

import math
from datetime import date
from typing import Callable, List, Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor, QDropEvent
from PyQt6.QtWidgets import QAbstractItemView, QHeaderView, QTableWidget, QTableWidgetItem

from ...config import DEFAULT_EVENT_COLOR
from ...core import format_date, slot_span, time_slots, weekday_labels
from ...domain import CalendarEvent


class WeekView(QTableWidget):
    """48 half-hour rows by 7 day columns; events can be dragged between slots.

    Each block spans as many rows as its longest event lasts, stopping short
    of the next occupied slot. A drop emits ``event_dropped(event_id, day, slot)``
    once per event in the dragged block; the caller decides whether each move
    is committed and re-populates the table.
    """

    event_selected = pyqtSignal(object)
    slot_selected = pyqtSignal(object, str)
    event_dropped = pyqtSignal(str, object, str)

    def __init__(self) -> None:
        self._slots = time_slots()
        super().__init__(len(self._slots), 7)
        self.setObjectName("weekView")
        self._days: List[date] = []
        self.setVerticalHeaderLabels(self._slots)
        self.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        self.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.setDragEnabled(True)
        self.setAcceptDrops(True)
        self.setDragDropMode(QAbstractItemView.DragDropMode.DragDrop)
        self.setDefaultDropAction(Qt.DropAction.CopyAction)
        self.cellClicked.connect(self._on_cell_clicked)

    def populate(
        self,
        days: Sequence[date],
        events_for: Callable[[date, str], List[CalendarEvent]],
    ) -> None:
        self._days = list(days)
        self.clearSpans()
        self.clearContents()
        labels = weekday_labels()
        self.setHorizontalHeaderLabels(
            [f"{labels[index]}\n{format_date(day, 'MMM d')}" for index, day in enumerate(self._days)]
        )
        for column, day in enumerate(self._days):
            blocks = [(row, events_for(day, slot)) for row, slot in enumerate(self._slots)]
            blocks = [(row, events) for row, events in blocks if events]
            for position, (row, events) in enumerate(blocks):
                limit = blocks[position + 1][0] if position + 1 < len(blocks) else len(self._slots)
                span = min(math.ceil(max(slot_span(event) for event in events)), limit - row)
                self.setItem(row, column, self._item_for(events))
                if span > 1:
                    self.setSpan(row, column, span, 1)

    @staticmethod
    def _item_for(events: List[CalendarEvent]) -> QTableWidgetItem:
        item = QTableWidgetItem(" / ".join(event.title for event in events))
        item.setData(Qt.ItemDataRole.UserRole, events)
        color = QColor(events[0].color or DEFAULT_EVENT_COLOR)
        color.setAlpha(90)
        item.setBackground(color)
        item.setToolTip(
            "\n".join(
                f"{event.title} - {format_date(event.start, 'HH:mm')} to {format_date(event.end, 'HH:mm')}"
                f" ({slot_span(event):g} slots)"
                for event in events
            )
        )
        return item

    def _events_at(self, row: int, column: int) -> List[CalendarEvent]:
        item = self.item(row, column)
        if item is None:
            return []
        return list(item.data(Qt.ItemDataRole.UserRole) or [])

    def _on_cell_clicked(self, row: int, column: int) -> None:
        if column >= len(self._days):
            return
        events = self._events_at(row, column)
        if events:
            self.event_selected.emit(events[0])
        else:
            self.slot_selected.emit(self._days[column], self._slots[row])

    def dropEvent(self, event: QDropEvent) -> None:  # noqa: N802
        source = self.currentItem()
        target = self.indexAt(event.position().toPoint())
        if source is None or not target.isValid() or target.column() >= len(self._days):
            event.ignore()
            return
        if not self.move_block(source, target.row(), target.column()):
            event.ignore()
            return
        event.setDropAction(Qt.DropAction.CopyAction)
        event.accept()

    def move_block(self, source: QTableWidgetItem, row: int, column: int) -> bool:
        """Request a move of every event in ``source`` to the slot at ``row``/``column``."""

        dragged = source.data(Qt.ItemDataRole.UserRole) or []
        if not dragged or column >= len(self._days):
            return False
        for calendar_event in dragged:
            self.event_dropped.emit(calendar_event.id, self._days[column], self._slots[row])
        return True
