"""Application entry point and setup for the Sumgrid puzzle."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from sumgrid.core.levels import LevelRepository
from sumgrid.core.settings import GameSettings
from sumgrid.ui.main_window import MainWindow


def configure_logging(level: str = "INFO") -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load settings and levels, then show the main window."""
    settings = GameSettings.from_env()
    configure_logging(settings.log_level)
    app = QApplication(sys.argv)
    app.setApplicationName("Sumgrid")
    app.setApplicationDisplayName("Sumgrid")

    levels = LevelRepository(settings.levels_dir)
    logging.info("Starting on level %s", settings.start_level)

    window = MainWindow(levels=levels, settings=settings)
    window.resize(640, 760)
    window.show()

    sys.exit(app.exec())
