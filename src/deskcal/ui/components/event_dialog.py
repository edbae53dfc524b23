from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from PyQt6.QtCore import QDateTime
from PyQt6.QtWidgets import (
    QComboBox,
    QDateTimeEdit,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
)

from ...config import DEFAULT_EVENT_COLOR, EVENT_COLORS
from ...core import validate_event
from ...domain import CalendarEvent, EventCategory


class EventDialog(QDialog):
    """Create/edit form. Errors are shown next to the field they belong to."""

    DELETE_REQUESTED = 2

    def __init__(
        self,
        *,
        event: Optional[CalendarEvent] = None,
        default_start: datetime,
        default_end: datetime,
    ) -> None:
        super().__init__()
        self.calendar_event = event
        self.setWindowTitle("Edit Event" if event else "Create Event")
        layout = QVBoxLayout(self)
        form = QFormLayout()
        self.error_labels: Dict[str, QLabel] = {}

        self.title_input = QLineEdit(event.title if event else "")
        self.title_input.setPlaceholderText("Event title")
        form.addRow("Title *", self.title_input)
        form.addRow("", self._error_label("title"))

        self.description_input = QTextEdit()
        self.description_input.setPlaceholderText("Event description")
        self.description_input.setPlainText((event.description if event else None) or "")
        form.addRow("Description", self.description_input)

        self.start_input = QDateTimeEdit()
        self.start_input.setCalendarPopup(True)
        self.start_input.setDateTime(QDateTime(event.start if event else default_start))
        form.addRow("Start *", self.start_input)
        form.addRow("", self._error_label("start"))

        self.end_input = QDateTimeEdit()
        self.end_input.setCalendarPopup(True)
        self.end_input.setDateTime(QDateTime(event.end if event else default_end))
        form.addRow("End *", self.end_input)
        form.addRow("", self._error_label("end"))

        self.color_box = QComboBox()
        for value, label in EVENT_COLORS:
            self.color_box.addItem(label, value)
        color = (event.color if event else None) or DEFAULT_EVENT_COLOR
        self.color_box.setCurrentIndex(max(self.color_box.findData(color), 0))
        form.addRow("Color", self.color_box)

        self.category_box = QComboBox()
        self.category_box.addItem("No category", None)
        for category in EventCategory:
            self.category_box.addItem(category.label, category.value)
        if event and event.category:
            self.category_box.setCurrentIndex(max(self.category_box.findData(event.category), 0))
        form.addRow("Category", self.category_box)

        layout.addLayout(form)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Save | QDialogButtonBox.StandardButton.Cancel)
        if event is not None:
            delete_button = QPushButton("Delete")
            delete_button.setObjectName("dangerButton")
            delete_button.clicked.connect(lambda: self.done(self.DELETE_REQUESTED))
            buttons.addButton(delete_button, QDialogButtonBox.ButtonRole.DestructiveRole)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def _error_label(self, field: str) -> QLabel:
        label = QLabel("")
        label.setObjectName("fieldError")
        label.setVisible(False)
        self.error_labels[field] = label
        return label

    def show_errors(self, errors: Dict[str, str]) -> None:
        for field, label in self.error_labels.items():
            message = errors.get(field, "")
            label.setText(message)
            label.setVisible(bool(message))

    def values(self) -> Dict[str, Any]:
        return {
            "title": self.title_input.text().strip(),
            "description": self.description_input.toPlainText().strip() or None,
            "start": self.start_input.dateTime().toPyDateTime(),
            "end": self.end_input.dateTime().toPyDateTime(),
            "color": self.color_box.currentData(),
            "category": self.category_box.currentData(),
        }

    def accept(self) -> None:
        errors = validate_event(self.values())
        self.show_errors(errors)
        if errors:
            return
        super().accept()
