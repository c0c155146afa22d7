"""Tests for SignalPanel: dispatch, replot from entries and rescale."""

import numpy as np
import pytest
from PyQt6.QtCore import Qt
from PyQt6.QtTest import QTest

from cosinepanel.core.actions import (
    Initialize, InvalidOperation, PanelActionKind, Replot, Rescale,
)
from cosinepanel.core.signal_model import PARAMETER_FIELDS, CosineParameters
from cosinepanel.core.view_range import ViewRange
from cosinepanel.gui.signal_panel import FIELD_LABELS, RESCALE_HINT, SignalPanel
from cosinepanel.gui.theme.theme_manager import ThemeManager


def assert_view(view, expected):
    assert view.x_range == pytest.approx(expected.x_range)
    assert view.y_range == pytest.approx(expected.y_range)


class TestInitialize:
    def test_entries_show_parameters(self, panel):
        texts = [panel.entry(f).text() for f in PARAMETER_FIELDS]
        assert texts == ["2", "4", "0", "2", "1"]

    def test_labels_and_hint(self, panel):
        for field in PARAMETER_FIELDS:
            assert panel.field_label(field).text() == FIELD_LABELS[field]
        assert panel.hint_label.text() == RESCALE_HINT

    def test_title_and_axis_label(self, panel):
        assert "2cos(2π(t - 1)/4)" in panel.plot.title()
        assert "x" in panel.plot.plot_item.getAxis('bottom').labelText

    def test_view_fits_data_with_padding(self, panel):
        # data x in [-1, 11], y in [-2, 2]; tight fit then one rescale
        assert_view(panel.context.view, ViewRange(-2.2, 12.2, -2.4, 2.4))
        assert_view(panel.plot.view_range(), ViewRange(-2.2, 12.2, -2.4, 2.4))

    def test_context_holds_series(self, panel):
        x, _ = panel.plot.data_extents()
        np.testing.assert_allclose(x, panel.context.series.x)

    def test_initialize_by_name_on_empty_panel(self, qtbot):
        p = SignalPanel()
        qtbot.addWidget(p)
        assert p.context is None
        ctx = p.dispatch("Initialize")
        assert ctx.params == CosineParameters()

    def test_reinitialize_replaces_signal(self, panel):
        new = CosineParameters(name='y', amplitude=-1.0)
        ctx = panel.dispatch(Initialize(new))
        assert ctx.params == new
        assert panel.entry('amplitude').text() == "-1"


class TestRescale:
    def test_rescale_by_name_pads_current_view(self, panel):
        ctx = panel.dispatch("Rescale Plot")
        # spans are now 14.4 and 4.8
        assert_view(ctx.view, ViewRange(-2.44, 12.44, -2.48, 2.48))

    def test_click_request_rescales(self, panel):
        panel.plot.apply_view_range(ViewRange(0, 1, 0, 1))
        panel.plot.rescale_requested.emit()
        assert_view(panel.context.view, ViewRange(-1.1, 11.1, -2.1, 2.1))

    def test_rescale_keeps_params(self, panel):
        before = panel.context.params
        panel.dispatch(Rescale())
        assert panel.context.params is before


class TestReplot:
    def test_entry_edit_replots(self, panel, qtbot):
        entry = panel.entry('amplitude')
        entry.setText("3")
        with qtbot.waitSignal(panel.signal_changed, timeout=1000) as blocker:
            QTest.keyClick(entry, Qt.Key.Key_Return)
        params = blocker.args[0]
        assert params.amplitude == 3.0
        assert panel.context.params == params
        assert "3cos" in panel.plot.title()
        _, y = panel.plot.data_extents()
        assert y.max() == pytest.approx(3.0)

    def test_replot_keeps_name(self, panel):
        panel.entry('period').setText("2")
        panel.entry('period').commit()
        assert panel.context.params.name == 'x'
        assert panel.context.params.period == 2.0

    def test_replot_with_values(self, panel):
        ctx = panel.dispatch(Replot((1, 1, 0, 1, 0)))
        assert ctx.params == CosineParameters()
        assert [panel.entry(f).text() for f in PARAMETER_FIELDS] == ["1", "1", "0", "1", "0"]

    def test_replot_by_kind(self, panel):
        panel.entry('delay').setValue(-3)
        ctx = panel.dispatch(PanelActionKind.REPLOT)
        assert ctx.params.delay == -3.0

    def test_invalid_values_keep_previous_signal(self, panel, qtbot):
        before = panel.context
        with qtbot.waitSignal(panel.replot_failed, timeout=1000):
            ctx = panel.dispatch(Replot((1, 1, 0, 0, 0)))
        assert ctx is before
        assert panel.entry('length').text() == "2"

    def test_out_of_range_entry_does_not_replot(self, panel):
        received = []
        panel.signal_changed.connect(received.append)
        panel.entry('period').setText("-1")
        panel.entry('period').commit()
        assert received == []
        assert panel.context.params.period == 4.0


class TestDispatchErrors:
    def test_unknown_mode(self, panel):
        with pytest.raises(InvalidOperation):
            panel.dispatch("Zoom In")

    def test_unknown_action_object(self, panel):
        with pytest.raises(InvalidOperation):
            panel.dispatch(object())

    def test_rescale_before_initialize(self, qtbot):
        p = SignalPanel()
        qtbot.addWidget(p)
        with pytest.raises(RuntimeError):
            p.dispatch(Rescale())


class TestLayoutAndTheme:
    def test_entries_stacked_in_controls_block(self, panel):
        ys = [panel.entry(f).geometry().y() for f in PARAMETER_FIELDS]
        assert ys == sorted(ys)
        assert panel.entry('amplitude').geometry().x() == 624

    def test_plot_left_of_controls(self, panel):
        assert panel.plot.geometry().right() < panel.field_label('amplitude').geometry().left()

    def test_theme_change_restyles_plot(self, panel):
        manager = ThemeManager.instance()
        try:
            manager.set_theme('cyberpunk')
            assert panel.plot._colors['curve'] == '#00ffff'
        finally:
            manager.set_theme('classic')
        assert panel.plot._colors['curve'] == '#0000ff'
