from __future__ import annotations

from typing import Iterable

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor, QFont
from PyQt6.QtWidgets import QLabel, QListWidget, QListWidgetItem, QVBoxLayout, QWidget

from ...config import DEFAULT_EVENT_COLOR
from ...core import format_date
from ...services import DayGroup


class ListView(QWidget):
    event_selected = pyqtSignal(object)

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("listView")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.empty_label = QLabel("No events scheduled\nYour upcoming events will appear here")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.empty_label)

        self.event_list = QListWidget()
        self.event_list.itemClicked.connect(self._on_item_clicked)
        layout.addWidget(self.event_list, stretch=1)

    def populate(self, groups: Iterable[DayGroup]) -> None:
        self.event_list.clear()
        count = 0
        for group in groups:
            header = QListWidgetItem(f"{group.label}    {format_date(group.day, 'MMM d, yyyy')}")
            font = QFont()
            font.setBold(True)
            header.setFont(font)
            header.setFlags(Qt.ItemFlag.NoItemFlags)
            self.event_list.addItem(header)
            for event in group.events:
                label = (
                    f"{format_date(event.start, 'h:mm a')} - {format_date(event.end, 'h:mm a')}"
                    f"  {event.title}"
                )
                item = QListWidgetItem(label)
                item.setForeground(QColor(event.color or DEFAULT_EVENT_COLOR))
                item.setData(Qt.ItemDataRole.UserRole, event)
                item.setToolTip(event.description or "")
                self.event_list.addItem(item)
                count += 1
        self.empty_label.setVisible(count == 0)
        self.event_list.setVisible(count > 0)

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        event = item.data(Qt.ItemDataRole.UserRole)
        if event is not None:
            self.event_selected.emit(event)
