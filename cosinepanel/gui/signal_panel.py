"""
Interactive control panel for a cosine signal: a plot plus one numeric entry
per parameter. Editing an entry rebuilds and redraws the signal; clicking
inside the plot refits the axes.

All state lives in a PanelContext owned by the panel. Every operation goes
through dispatch(), which accepts a typed action or one of the legacy mode
names ('Initialize', 'Rescale Plot', 'Replot').
"""

from dataclasses import dataclass, replace
from typing import Dict, Optional, Union

import numpy as np
from PyQt6.QtWidgets import QWidget, QLabel
from PyQt6.QtCore import Qt, pyqtSignal

from ..core.actions import (
    FULL_RECT, Initialize, InvalidOperation, PanelAction, PanelActionKind,
    Rect, Replot, Rescale, parse_action,
)
from ..core.signal_model import (
    DEFAULT_SAMPLES_PER_PERIOD, PARAMETER_FIELDS, CosineParameters, DataSeries,
    build_signal, format_formula, parameter_limits,
)
from ..core.view_range import ViewRange, rescale_view
from ..plots.signal_plot import SignalPlot
from . import layout
from .num_edit import NumericEdit

from cosinepanel.logging import get_logger
logger = get_logger(__name__)

RESCALE_HINT = 'Click inside plot area to rescale axis'

FIELD_LABELS = {
    'amplitude': 'Amplitude:',
    'period': 'Period:',
    'phase': 'Phase:',
    'length': 'Length:',
    'delay': 'Delay:',
}


@dataclass(frozen=True)
class PanelContext:
    """Everything the panel knows about the signal it is showing."""

    params: CosineParameters
    series: DataSeries
    view: Optional[ViewRange] = None


class SignalPanel(QWidget):
    """Plot and parameter entries bound to one cosine signal.

    Signals:
        signal_changed(CosineParameters): Emitted after every successful replot
        replot_failed(str): Emitted when field values could not build a signal
    """

    signal_changed = pyqtSignal(object)
    replot_failed = pyqtSignal(str)

    def __init__(self, params: Optional[CosineParameters] = None,
                 position: Rect = FULL_RECT,
                 samples_per_period: int = DEFAULT_SAMPLES_PER_PERIOD,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._position = position
        self._samples_per_period = samples_per_period
        self._context: Optional[PanelContext] = None
        self._plot: Optional[SignalPlot] = None
        self._hint: Optional[QLabel] = None
        self._labels: Dict[str, QLabel] = {}
        self._entries: Dict[str, NumericEdit] = {}

        from .theme.theme_manager import ThemeManager
        tm = ThemeManager.instance()
        tm.theme_changed.connect(self._apply_theme)

        if params is not None:
            self.dispatch(Initialize(params, position))

    # === Accessors ===

    @property
    def context(self) -> Optional[PanelContext]:
        return self._context

    @property
    def plot(self) -> Optional[SignalPlot]:
        return self._plot

    @property
    def hint_label(self) -> Optional[QLabel]:
        return self._hint

    def entry(self, field: str) -> NumericEdit:
        return self._entries[field]

    def field_label(self, field: str) -> QLabel:
        return self._labels[field]

    # === Dispatch ===

    def dispatch(self, action: Union[PanelAction, str, PanelActionKind]) -> PanelContext:
        """Run one panel operation and return the resulting context.

        Raises:
            InvalidOperation: Unknown mode name or action object
            RuntimeError: Rescale/Replot before the panel was initialized
        """
        if isinstance(action, (str, PanelActionKind)):
            action = self._action_for(parse_action(action))
        if not isinstance(action, (Initialize, Rescale, Replot)):
            raise InvalidOperation(action)

        logger.debug(f"SignalPanel dispatch {action.kind.name}")
        if action.kind is PanelActionKind.INITIALIZE:
            return self._initialize(action)
        if self._context is None:
            raise RuntimeError(f"{action.kind.name} requested before the panel was initialized")
        if action.kind is PanelActionKind.RESCALE:
            return self._rescale()
        return self._replot(action)

    def _action_for(self, kind: PanelActionKind) -> PanelAction:
        """Default payload for an action requested by name."""
        if kind is PanelActionKind.INITIALIZE:
            params = self._context.params if self._context else CosineParameters()
            return Initialize(params, self._position)
        if kind is PanelActionKind.RESCALE:
            return Rescale()
        return Replot()

    # === Operations ===

    def _initialize(self, action: Initialize) -> PanelContext:
        self._position = action.position
        if self._plot is None:
            self._create_widgets()

        for field, value in zip(PARAMETER_FIELDS, action.params.values()):
            self._entries[field].setValue(value)

        series = build_signal(action.params, self._samples_per_period)
        self._context = PanelContext(params=action.params, series=series)
        self._draw()
        self._apply_layout()
        return self._context

    def _replot(self, action: Replot) -> PanelContext:
        if action.values:
            values = tuple(action.values)
        else:
            values = tuple(self._entries[f].value() for f in PARAMETER_FIELDS)

        try:
            params = CosineParameters.from_values(self._context.params.name, values)
            for field, value in zip(PARAMETER_FIELDS, params.values()):
                if not self._entries[field].accepts(value):
                    raise ValueError(f"{field}={value} is outside {parameter_limits(field)}")
            series = build_signal(params, self._samples_per_period)
        except ValueError as exc:
            logger.warning(f"Replot rejected {values}: {exc}")
            self._show_params(self._context.params)
            self.replot_failed.emit(str(exc))
            return self._context

        self._show_params(params)
        self._context = PanelContext(params=params, series=series)
        self._draw()
        self.signal_changed.emit(params)
        return self._context

    def _rescale(self) -> PanelContext:
        x, y = self._plot.data_extents()
        if len(x) == 0:
            logger.debug("Rescale skipped: nothing drawn")
            return self._context
        view = rescale_view(x, y, self._plot.view_range())
        self._plot.apply_view_range(view)
        self._context = replace(self._context, view=view)
        logger.debug(f"Rescaled view to {view}")
        return self._context

    def _draw(self) -> None:
        """Redraw the current context, fit the data tightly, then pad it."""
        params = self._context.params
        series = self._context.series
        self._plot.set_series(series)
        self._plot.set_title(format_formula(params))
        self._plot.set_x_label(params.name)
        self._plot.apply_view_range(ViewRange(
            float(np.min(series.x)), float(np.max(series.x)),
            float(np.min(series.y)), float(np.max(series.y)),
        ))
        self._rescale()

    def _show_params(self, params: CosineParameters) -> None:
        for field, value in zip(PARAMETER_FIELDS, params.values()):
            entry = self._entries[field]
            if entry.value() != value:
                entry.setValue(value)

    # === Widgets ===

    def _create_widgets(self) -> None:
        self._plot = SignalPlot(self)
        self._plot.rescale_requested.connect(self._on_rescale_requested)

        self._hint = QLabel(RESCALE_HINT, self)
        self._hint.setObjectName('hintLabel')
        self._hint.setAlignment(Qt.AlignmentFlag.AlignCenter)

        for field in PARAMETER_FIELDS:
            label = QLabel(FIELD_LABELS[field], self)
            label.setObjectName('fieldLabel')
            label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
            minimum, maximum = parameter_limits(field)
            entry = NumericEdit(minimum=minimum, maximum=maximum,
                                integer=(field == 'length'), parent=self)
            entry.setObjectName(f'{field}Edit')
            entry.value_committed.connect(self._on_value_committed)
            self._labels[field] = label
            self._entries[field] = entry

        from .theme.theme_manager import ThemeManager
        self._apply_theme(ThemeManager.instance().current)

    def _apply_layout(self) -> None:
        if self._plot is None:
            return
        w, h = self.width(), self.height()
        self._plot.setGeometry(layout.to_qrect(layout.plot_rect(self._position), w, h))
        self._hint.setGeometry(layout.to_qrect(layout.hint_rect(self._position), w, h))
        placements = layout.field_placements(len(PARAMETER_FIELDS), self._position)
        for field, placement in zip(PARAMETER_FIELDS, placements):
            self._labels[field].setGeometry(layout.to_qrect(placement.label, w, h))
            self._entries[field].setGeometry(layout.to_qrect(placement.entry, w, h))

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._apply_layout()

    def _apply_theme(self, theme) -> None:
        if self._plot is not None:
            self._plot.apply_colors(theme.plot_colors)

    # === Callbacks ===

    def _on_value_committed(self, _value: float) -> None:
        self.dispatch(Replot())

    def _on_rescale_requested(self) -> None:
        self.dispatch(Rescale())
