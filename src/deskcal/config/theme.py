from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

DEFAULT_EVENT_COLOR = "#3b82f6"

# (value, label) pairs offered by the event editor.
EVENT_COLORS: Tuple[Tuple[str, str], ...] = (
    ("#3b82f6", "Blue"),
    ("#10b981", "Green"),
    ("#f59e0b", "Yellow"),
    ("#ef4444", "Red"),
    ("#8b5cf6", "Purple"),
    ("#06b6d4", "Cyan"),
)


@dataclass(frozen=True)
class AppPalette:
    background_primary: str = "#f8fafc"
    background_secondary: str = "#ffffff"
    surface: str = "#f1f5f9"
    header: str = "#0f172a"
    accent_primary: str = "#3b82f6"
    accent_today: str = "#dbeafe"
    accent_selected: str = "#bfdbfe"
    accent_error: str = "#dc2626"
    text_primary: str = "#0f172a"
    text_secondary: str = "#64748b"
    text_muted: str = "#94a3b8"
    border_subtle: str = "#e2e8f0"
    border_strong: str = "#cbd5e1"

    def as_stylesheet(self) -> str:
        """Quick access to a global stylesheet for the PyQt app."""

        return f"""
        QWidget {{
            background-color: {self.background_primary};
            color: {self.text_primary};
            font-family: 'Helvetica Neue', 'Segoe UI', Arial, sans-serif;
            font-size: 13px;
        }}
        QFrame#header {{
            background-color: {self.header};
            border-radius: 12px;
        }}
        QFrame#header QLabel {{
            background-color: transparent;
            color: #ffffff;
        }}
        QLabel#title {{
            font-size: 22px;
            font-weight: 700;
        }}
        QLabel#periodLabel {{
            font-size: 18px;
            font-weight: 600;
        }}
        QPushButton {{
            background-color: {self.accent_primary};
            color: #ffffff;
            border: none;
            padding: 8px 14px;
            border-radius: 8px;
            font-weight: 600;
        }}
        QPushButton#secondaryButton {{
            background-color: rgba(255, 255, 255, 0.12);
            border: 1px solid rgba(255, 255, 255, 0.25);
        }}
        QPushButton#dangerButton {{
            background-color: transparent;
            color: {self.accent_error};
            border: 1px solid {self.accent_error};
        }}
        QLineEdit, QTextEdit, QComboBox, QDateTimeEdit {{
            background-color: {self.background_secondary};
            border: 1px solid {self.border_strong};
            border-radius: 6px;
            padding: 6px 8px;
        }}
        QLabel#fieldError {{
            color: {self.accent_error};
            font-size: 12px;
        }}
        QFrame#dayCell {{
            background-color: {self.background_secondary};
            border: 1px solid {self.border_subtle};
        }}
        QFrame#dayCell[outside="true"] {{
            background-color: {self.surface};
        }}
        QFrame#dayCell[outside="true"] QLabel#dayNumber {{
            color: {self.text_muted};
        }}
        QFrame#dayCell[today="true"] {{
            background-color: {self.accent_today};
        }}
        QFrame#dayCell[selected="true"] {{
            border: 2px solid {self.accent_primary};
            background-color: {self.accent_selected};
        }}
        QLabel#dayNumber {{
            font-size: 15px;
            font-weight: 600;
            background-color: transparent;
        }}
        QLabel#weekdayLabel {{
            color: {self.text_secondary};
            font-size: 11px;
            text-transform: uppercase;
        }}
        QLabel#moreLabel, QLabel#groupDate {{
            color: {self.text_secondary};
            font-size: 11px;
        }}
        QLabel#groupTitle {{
            font-size: 16px;
            font-weight: 700;
        }}
        QTableWidget {{
            background-color: {self.background_secondary};
            gridline-color: {self.border_subtle};
        }}
        QListWidget {{
            background-color: {self.background_secondary};
            border: 1px solid {self.border_subtle};
            border-radius: 8px;
        }}
        """
