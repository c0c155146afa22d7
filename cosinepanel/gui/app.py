"""
Application entry point and setup.
"""

import sys
from typing import Optional
from PyQt6.QtWidgets import QApplication
from PyQt6.QtCore import Qt

# Configure PyQtGraph before importing any plot modules
import pyqtgraph as pg
pg.setConfigOptions(
    useOpenGL=False,
    antialias=True,
)

from .main_window import MainWindow
from ..core.settings import get_int_setting, get_setting
from ..core.signal_model import CosineParameters
from .theme import DEFAULT_THEME_ID, THEMES
from .theme.theme_manager import ThemeManager

from cosinepanel.logging import get_logger
logger = get_logger(__name__)


def create_app(theme_id: Optional[str] = None) -> QApplication:
    """Create and configure the QApplication."""
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("cosinepanel")
    app.setOrganizationName("cosinepanel")

    manager = ThemeManager.instance(app)
    requested = theme_id or get_setting("theme", DEFAULT_THEME_ID)
    if requested not in THEMES:
        logger.warning(f"Unknown theme {requested!r}, using {DEFAULT_THEME_ID}")
        requested = DEFAULT_THEME_ID
    manager.set_theme(requested)

    return app


def run_app(params: Optional[CosineParameters] = None,
            theme_id: Optional[str] = None) -> int:
    """Run the cosinepanel application."""
    app = create_app(theme_id)

    samples_per_period = get_int_setting("samples_per_period", minimum=2)
    window = MainWindow(params=params, samples_per_period=samples_per_period)
    window.show()

    return app.exec()
