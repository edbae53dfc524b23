from __future__ import annotations

import logging
import sys

from PyQt6.QtWidgets import QApplication

from ..bootstrap import configure_logging
from ..config import AppPalette, get_settings
from ..services import CalendarService, ServiceContext
from .main_window import MainWindow
from .styles.theme import apply_palette

logger = logging.getLogger(__name__)


def run_gui() -> None:
    configure_logging()
    app = QApplication.instance() or QApplication(sys.argv)
    settings = get_settings()
    app.setApplicationName(settings.ui.app_name)
    app.setOrganizationName(settings.ui.organization)
    apply_palette(app, AppPalette())

    context = ServiceContext(settings=settings)
    seeded = context.seed()
    logger.info("Starting calendar with %d events", seeded)

    window = MainWindow(service=CalendarService(context), settings=settings)
    window.show()
    sys.exit(app.exec())
