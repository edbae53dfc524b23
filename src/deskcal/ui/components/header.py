from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout

from ...core import EventStats
from ...domain import CalendarView

_NEXT_VIEW_LABEL = {
    CalendarView.MONTH: "Week",
    CalendarView.WEEK: "List",
    CalendarView.LIST: "Month",
}


class CalendarHeader(QFrame):
    today_requested = pyqtSignal()
    previous_requested = pyqtSignal()
    next_requested = pyqtSignal()
    toggle_view_requested = pyqtSignal()
    new_event_requested = pyqtSignal()

    def __init__(self, *, title: str) -> None:
        super().__init__()
        self.setObjectName("header")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 16, 24, 16)
        layout.setSpacing(8)

        top_row = QHBoxLayout()
        title_label = QLabel(title)
        title_label.setObjectName("title")
        top_row.addWidget(title_label)
        top_row.addStretch(1)

        today_button = QPushButton("Today")
        today_button.setObjectName("secondaryButton")
        today_button.clicked.connect(self.today_requested)
        top_row.addWidget(today_button)

        previous_button = QPushButton("‹")
        previous_button.setObjectName("secondaryButton")
        previous_button.clicked.connect(self.previous_requested)
        top_row.addWidget(previous_button)

        next_button = QPushButton("›")
        next_button.setObjectName("secondaryButton")
        next_button.clicked.connect(self.next_requested)
        top_row.addWidget(next_button)

        self.view_button = QPushButton("")
        self.view_button.setObjectName("secondaryButton")
        self.view_button.clicked.connect(self.toggle_view_requested)
        top_row.addWidget(self.view_button)

        add_button = QPushButton("Add Event")
        add_button.clicked.connect(self.new_event_requested)
        top_row.addWidget(add_button)
        layout.addLayout(top_row)

        bottom_row = QHBoxLayout()
        self.period_label = QLabel("")
        self.period_label.setObjectName("periodLabel")
        bottom_row.addWidget(self.period_label)
        bottom_row.addStretch(1)
        self.stats_label = QLabel("")
        bottom_row.addWidget(self.stats_label)
        layout.addLayout(bottom_row)

    def set_period(self, text: str) -> None:
        self.period_label.setText(text)

    def set_view(self, view: CalendarView) -> None:
        self.view_button.setText(_NEXT_VIEW_LABEL[view])

    def set_stats(self, stats: EventStats) -> None:
        self.stats_label.setText(
            f"Total {stats.total}  ·  This month {stats.this_month}  ·  Upcoming {stats.upcoming}"
        )
