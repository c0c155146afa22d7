"""
Main application window hosting one SignalPanel.
"""

from typing import Optional
from PyQt6.QtWidgets import QMainWindow, QStatusBar
from PyQt6.QtCore import pyqtSlot
from PyQt6.QtGui import QAction, QActionGroup

from cosinepanel.logging import get_logger
logger = get_logger(__name__)

from .signal_panel import SignalPanel
from ..core.actions import Rescale
from ..core.signal_model import (
    DEFAULT_SAMPLES_PER_PERIOD, CosineParameters, format_formula,
)
from ..core.settings import set_setting
from .theme.theme_manager import ThemeManager


class MainWindow(QMainWindow):
    """
    Signal window.

    Layout:
    ┌────────────────────────────────────────────────────────┐
    │  View ▸ Theme | Rescale                                │
    ├──────────────────────────────┬─────────────────────────┤
    │   x(t) = cos(2πt)            │   Amplitude: [  1  ]    │
    │   ┌──────────────────────┐   │   Period:    [  1  ]    │
    │   │        plot          │   │   Phase:     [  0  ]    │
    │   └──────────────────────┘   │   Length:    [  1  ]    │
    │   Click inside plot area...  │   Delay:     [  0  ]    │
    ├──────────────────────────────┴─────────────────────────┤
    │  Status                                                │
    └────────────────────────────────────────────────────────┘
    """

    def __init__(
        self,
        params: Optional[CosineParameters] = None,
        samples_per_period: int = DEFAULT_SAMPLES_PER_PERIOD,
    ):
        super().__init__()
        params = params or CosineParameters()
        self.setWindowTitle(f"Signal: {params.name}")
        self.resize(760, 420)

        self._panel = SignalPanel(params, samples_per_period=samples_per_period)
        self.setCentralWidget(self._panel)
        self._panel.signal_changed.connect(self._on_signal_changed)
        self._panel.replot_failed.connect(self._on_replot_failed)

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        self._status_bar.showMessage(format_formula(params))

        self._setup_menus()

    @property
    def panel(self) -> SignalPanel:
        return self._panel

    def _setup_menus(self) -> None:
        view_menu = self.menuBar().addMenu("View")

        rescale_action = QAction("Rescale", self)
        rescale_action.setShortcut("Ctrl+R")
        rescale_action.triggered.connect(lambda: self._panel.dispatch(Rescale()))
        view_menu.addAction(rescale_action)

        theme_menu = view_menu.addMenu("Theme")
        self._theme_actions: dict[str, QAction] = {}
        self._theme_action_group = QActionGroup(self)
        self._theme_action_group.setExclusive(True)

        manager = ThemeManager.instance()
        current_theme_id = manager.current.id

        for theme in manager.available():
            action = QAction(theme.name, self)
            action.setCheckable(True)
            action.setChecked(theme.id == current_theme_id)
            action.triggered.connect(
                lambda checked, theme_id=theme.id: self._on_theme_selected(theme_id, checked)
            )
            self._theme_action_group.addAction(action)
            theme_menu.addAction(action)
            self._theme_actions[theme.id] = action

        manager.theme_changed.connect(self._on_theme_changed)

    def _on_theme_selected(self, theme_id: str, checked: bool) -> None:
        """Handle a user selecting a theme from the menu."""
        if not checked:
            return

        manager = ThemeManager.instance()
        try:
            manager.set_theme(theme_id)
        except ValueError:
            logger.warning(f"Unknown theme selected: {theme_id}")
            return

        set_setting("theme", theme_id)
        self._status_bar.showMessage(f"Theme: {manager.current.name}", 3000)

    @pyqtSlot(object)
    def _on_theme_changed(self, theme) -> None:
        """Sync checked theme action with current theme state."""
        for theme_id, action in self._theme_actions.items():
            action.setChecked(theme_id == theme.id)

    @pyqtSlot(object)
    def _on_signal_changed(self, params) -> None:
        self._status_bar.showMessage(format_formula(params))

    @pyqtSlot(str)
    def _on_replot_failed(self, message: str) -> None:
        self._status_bar.showMessage(f"Invalid parameters: {message}", 5000)
