"""Two signal panels stacked in one window by a QVBoxLayout.

Run with:
    python examples/two_signal_panels.py
"""
import sys

from PyQt6.QtWidgets import QApplication, QWidget, QVBoxLayout

from cosinepanel.core.signal_model import CosineParameters
from cosinepanel.gui.signal_panel import SignalPanel
from cosinepanel.gui.theme.theme_manager import ThemeManager


def main():
    app = QApplication(sys.argv)
    ThemeManager.instance(app).set_theme('classic')

    window = QWidget()
    window.setWindowTitle("x(t) and h(t)")
    layout = QVBoxLayout(window)

    x = SignalPanel(CosineParameters(name='x', amplitude=2.0, period=4.0, length=2))
    h = SignalPanel(CosineParameters(name='h', period=1.0, length=3, delay=-1.0))
    x.signal_changed.connect(lambda p: print(f"x changed: {p}"))
    h.signal_changed.connect(lambda p: print(f"h changed: {p}"))
    layout.addWidget(x)
    layout.addWidget(h)

    window.resize(800, 700)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
