"""Configuration models and helpers."""

from __future__ import annotations

from .settings import AppSettings, CalendarSettings, SeedSettings, UiSettings, get_settings
from .theme import DEFAULT_EVENT_COLOR, EVENT_COLORS, AppPalette

__all__ = [
    "AppPalette",
    "AppSettings",
    "CalendarSettings",
    "DEFAULT_EVENT_COLOR",
    "EVENT_COLORS",
    "SeedSettings",
    "UiSettings",
    "get_settings",
]
