"""Unit tests for panel action parsing."""

import pytest

from cosinepanel.core.actions import (
    FULL_RECT, Initialize, InvalidOperation, PanelActionKind, Replot, Rescale,
    parse_action,
)
from cosinepanel.core.signal_model import CosineParameters


class TestParseAction:
    @pytest.mark.parametrize("mode, kind", [
        ("Initialize", PanelActionKind.INITIALIZE),
        ("Rescale Plot", PanelActionKind.RESCALE),
        ("rescale", PanelActionKind.RESCALE),
        ("Replot", PanelActionKind.REPLOT),
        ("  REPLOT ", PanelActionKind.REPLOT),
        ("rescale_plot", PanelActionKind.RESCALE),
    ])
    def test_known_modes(self, mode, kind):
        assert parse_action(mode) is kind

    def test_kind_passes_through(self):
        assert parse_action(PanelActionKind.REPLOT) is PanelActionKind.REPLOT

    @pytest.mark.parametrize("mode", ["Zoom", "", "Rescale Plots", "delete"])
    def test_unknown_mode_raises(self, mode):
        with pytest.raises(InvalidOperation) as excinfo:
            parse_action(mode)
        assert excinfo.value.mode == mode
        assert repr(mode) in str(excinfo.value)

    def test_non_string_raises(self):
        with pytest.raises(InvalidOperation):
            parse_action(42)

    def test_invalid_operation_is_value_error(self):
        assert issubclass(InvalidOperation, ValueError)


class TestPayloads:
    def test_initialize_defaults_to_full_rect(self):
        action = Initialize(CosineParameters())
        assert action.position == FULL_RECT
        assert action.kind is PanelActionKind.INITIALIZE

    def test_kinds(self):
        assert Rescale().kind is PanelActionKind.RESCALE
        assert Replot().kind is PanelActionKind.REPLOT

    def test_replot_values_default_empty(self):
        assert Replot().values == ()
