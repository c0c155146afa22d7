"""Shared test fixtures for the cosinepanel test suite.

Provides a session QApplication (offscreen), isolated settings storage and
factories for signal parameters and panels.
"""

import os
import sys

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from cosinepanel.core import settings
from cosinepanel.core.signal_model import CosineParameters


@pytest.fixture(scope="session")
def qapp():
    """Session-scoped QApplication shared by all tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.config/cosinepanel."""
    settings_dir = tmp_path / "config"
    monkeypatch.setattr(settings, "SETTINGS_DIR", settings_dir)
    monkeypatch.setattr(settings, "SETTINGS_PATH", settings_dir / "settings.json")
    return settings_dir


@pytest.fixture
def params_factory():
    """Factory fixture: CosineParameters with overridable fields."""
    def _make(**overrides):
        fields = dict(name="x", amplitude=2.0, period=4.0, phase=0.0, length=2, delay=1.0)
        fields.update(overrides)
        return CosineParameters(**fields)
    return _make


@pytest.fixture
def panel(qtbot, qapp, params_factory):
    """A shown SignalPanel bound to the default factory parameters."""
    from cosinepanel.gui.signal_panel import SignalPanel

    p = SignalPanel(params_factory())
    qtbot.addWidget(p)
    p.resize(800, 450)
    p.show()
    qapp.processEvents()
    yield p
    p.close()
