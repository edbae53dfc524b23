from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from platformdirs import user_log_dir

from ..domain import CalendarView

load_dotenv()

APP_NAME = "Deskcal"
APP_AUTHOR = "Deskcal"


@dataclass(frozen=True)
class UiSettings:
    app_name: str
    organization: str
    base_path: str


@dataclass(frozen=True)
class CalendarSettings:
    default_view: CalendarView
    default_duration: timedelta


@dataclass(frozen=True)
class SeedSettings:
    seed_file: Optional[Path]
    load_samples: bool


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    log_dir: Path


@dataclass(frozen=True)
class AppSettings:
    ui: UiSettings
    calendar: CalendarSettings
    seed: SeedSettings
    logging: LoggingSettings


def _bool_from_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _minutes_from_env(name: str, default_minutes: int) -> timedelta:
    raw = os.getenv(name)
    if not raw:
        return timedelta(minutes=default_minutes)
    try:
        minutes = int(raw)
    except ValueError:
        return timedelta(minutes=default_minutes)
    if minutes <= 0:
        return timedelta(minutes=default_minutes)
    return timedelta(minutes=minutes)


def _view_from_env(name: str, default: CalendarView) -> CalendarView:
    raw = (os.getenv(name) or "").strip().lower()
    try:
        return CalendarView(raw) if raw else default
    except ValueError:
        return default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    ui = UiSettings(
        app_name=os.getenv("DESKCAL_APP_NAME", "Calendar"),
        organization=os.getenv("DESKCAL_APP_ORG", APP_AUTHOR),
        base_path=os.getenv("DESKCAL_BASE_PATH", "/"),
    )

    calendar = CalendarSettings(
        default_view=_view_from_env("DESKCAL_DEFAULT_VIEW", CalendarView.MONTH),
        default_duration=_minutes_from_env("DESKCAL_DEFAULT_DURATION_MINUTES", 60),
    )

    seed_file = os.getenv("DESKCAL_SEED_FILE")
    seed = SeedSettings(
        seed_file=Path(seed_file).expanduser() if seed_file else None,
        load_samples=_bool_from_env("DESKCAL_LOAD_SAMPLES", True),
    )

    logging = LoggingSettings(
        level=os.getenv("DESKCAL_LOG_LEVEL", "INFO").upper(),
        log_dir=Path(os.getenv("DESKCAL_LOG_DIR") or user_log_dir(APP_NAME, APP_AUTHOR)),
    )

    return AppSettings(ui=ui, calendar=calendar, seed=seed, logging=logging)
