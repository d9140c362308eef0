"""Application entry point and setup for Skyhop."""

import logging
import random
import sys
from pathlib import Path

from PySide6.QtGui import QFont, QGuiApplication, QIcon
from PySide6.QtWidgets import QApplication

from skyhop.config import levels_path_from_env, log_level_from_env, seed_from_env
from skyhop.core.levels import LevelRepository
from skyhop.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=log_level_from_env(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def load_application_font(app: QApplication) -> None:
    """Prefer a color emoji font as fallback so the player marker renders."""
    app_font = QFont(app.font().family())
    app_font.setFamilies(
        [
            app.font().family(),
            "Noto Color Emoji",  # Linux (common)
            "Segoe UI Emoji",  # Windows
            "Apple Color Emoji",  # macOS
        ]
    )
    app_font.setPointSize(11)
    app.setFont(app_font)


def run() -> None:
    """Initialize the application, load the level table, and start the game window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Skyhop")
    app.setApplicationDisplayName("Skyhop")

    load_application_font(app)

    levels = LevelRepository(levels_path_from_env())
    seed = seed_from_env()
    if seed is not None:
        logging.info(f"Using fixed seed {seed}")
    rng = random.Random(seed)

    icon_path = Path(__file__).parent / "assets" / "logo.svg"
    if icon_path.exists():
        app.setWindowIcon(QIcon(str(icon_path)))
    else:
        logging.warning(f"Window icon not found: {icon_path}")

    window = MainWindow(levels=levels, rng=rng)
    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        geometry = screen.availableGeometry()
        window.resize(min(geometry.width(), 640), min(geometry.height(), 820))
    window.show()

    sys.exit(app.exec())
