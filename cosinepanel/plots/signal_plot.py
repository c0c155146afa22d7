"""Plot widget showing one DataSeries with explicit, caller-controlled view bounds."""
from typing import Optional, Tuple

import numpy as np
import pyqtgraph as pg
from PyQt6.QtWidgets import QWidget, QVBoxLayout
from PyQt6.QtCore import Qt, pyqtSignal

from ..core.signal_model import DataSeries
from ..core.view_range import ViewRange

from cosinepanel.logging import get_logger
logger = get_logger(__name__)

DEFAULT_PLOT_COLORS = {
    'background': 'w',
    'foreground': 'k',
    'curve': '#0000ff',
    'title': '#0000ff',
    'grid_alpha': 0.0,
}


class SignalPlot(QWidget):
    """Single-curve plot. Emits rescale_requested on a left click inside the plot area.

    pyqtgraph auto-ranging is disabled; the owner decides the view through
    apply_view_range().
    """

    rescale_requested = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._series: Optional[DataSeries] = None
        self._colors = dict(DEFAULT_PLOT_COLORS)
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._plot_widget = pg.PlotWidget()
        self._plot_widget.useOpenGL(False)
        self._plot_widget.setMenuEnabled(False)
        layout.addWidget(self._plot_widget)

        plot_item = self._plot_widget.getPlotItem()
        plot_item.showAxis('top')
        plot_item.showAxis('right')
        plot_item.getAxis('top').setStyle(showValues=False)
        plot_item.getAxis('right').setStyle(showValues=False)
        plot_item.disableAutoRange()
        plot_item.hideButtons()

        self._curve = self._plot_widget.plot(antialias=False)
        self._plot_widget.scene().sigMouseClicked.connect(self._on_mouse_clicked)
        self.apply_colors(self._colors)

    @property
    def plot_item(self) -> pg.PlotItem:
        return self._plot_widget.getPlotItem()

    @property
    def series(self) -> Optional[DataSeries]:
        return self._series

    def apply_colors(self, colors: dict) -> None:
        """Restyle from a theme's plot_colors mapping."""
        self._colors = {**DEFAULT_PLOT_COLORS, **colors}
        c = self._colors
        self._plot_widget.setBackground(c['background'])
        axis_pen = pg.mkPen(color=c['foreground'], width=1)
        for name in ('left', 'bottom', 'top', 'right'):
            axis = self.plot_item.getAxis(name)
            axis.setPen(axis_pen)
            axis.setTextPen(axis_pen)
        self._plot_widget.showGrid(x=c['grid_alpha'] > 0, y=c['grid_alpha'] > 0,
                                   alpha=max(c['grid_alpha'], 0.01))
        self._curve.setPen(pg.mkPen(color=c['curve'], width=1.5))
        title = self.plot_item.titleLabel.text
        if title:
            self.set_title(title)

    def set_series(self, series: DataSeries) -> None:
        """Replace the drawn curve. The view is left as is."""
        self._series = series
        self._curve.setData(series.x, series.y)
        logger.debug(f"SignalPlot drew {len(series)} samples")

    def data_extents(self) -> Tuple[np.ndarray, np.ndarray]:
        """x and y arrays of the curve as currently rendered (empty if none)."""
        x, y = self._curve.getData()
        if x is None or y is None:
            return np.array([]), np.array([])
        return np.asarray(x, dtype=float), np.asarray(y, dtype=float)

    def view_range(self) -> ViewRange:
        x_range, y_range = self.plot_item.getViewBox().viewRange()
        return ViewRange.from_pairs(x_range, y_range)

    def apply_view_range(self, view: ViewRange) -> None:
        self.plot_item.getViewBox().setRange(
            xRange=view.x_range, yRange=view.y_range, padding=0
        )

    def set_title(self, text: str) -> None:
        self.plot_item.setTitle(text, color=self._colors['title'])

    def title(self) -> str:
        return self.plot_item.titleLabel.text

    def set_x_label(self, text: str) -> None:
        self.plot_item.setLabel('bottom', f"<b>{text}</b>")

    def _on_mouse_clicked(self, ev) -> None:
        if ev.button() != Qt.MouseButton.LeftButton:
            return
        vb = self.plot_item.getViewBox()
        if not vb.sceneBoundingRect().contains(ev.scenePos()):
            return
        ev.accept()
        logger.debug("Click inside plot area, requesting rescale")
        self.rescale_requested.emit()
