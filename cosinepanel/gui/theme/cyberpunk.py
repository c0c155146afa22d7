"""
Dark cyberpunk theme.
Neon accents on near-black backgrounds.
"""

from PyQt6.QtWidgets import QApplication
from PyQt6.QtGui import QPalette, QColor

from .base import Theme
from .stylesheet import build_stylesheet


COLORS = {
    'bg_window': '#0d0d0d',
    'bg_entry': '#1a1a1a',

    'border_default': '#333333',

    'text_primary': '#ffffff',
    'text_secondary': '#aaaaaa',
    'text_entry': '#00ffff',

    'accent_primary': '#00ffff',
    'hint': '#ff00ff',
    'error': '#ff0044',
}

PLOT_COLORS = {
    'background': '#0a0a0a',
    'foreground': '#aaaaaa',
    'curve': '#00ffff',
    'title': '#00ffff',
    'grid_alpha': 0.6,
}

CYBERPUNK_THEME = Theme(
    name='Cyberpunk',
    id='cyberpunk',
    colors=COLORS,
    stylesheet=build_stylesheet(COLORS),
    plot_colors=PLOT_COLORS,
)


def apply_palette(app: QApplication) -> None:
    """Dark palette so unstyled widgets match the stylesheet."""
    palette = QPalette()
    palette.setColor(QPalette.ColorRole.Window, QColor(COLORS['bg_window']))
    palette.setColor(QPalette.ColorRole.WindowText, QColor(COLORS['text_primary']))
    palette.setColor(QPalette.ColorRole.Base, QColor(COLORS['bg_entry']))
    palette.setColor(QPalette.ColorRole.Text, QColor(COLORS['text_entry']))
    palette.setColor(QPalette.ColorRole.Button, QColor(COLORS['bg_entry']))
    palette.setColor(QPalette.ColorRole.ButtonText, QColor(COLORS['text_primary']))
    palette.setColor(QPalette.ColorRole.Highlight, QColor(COLORS['accent_primary']))
    palette.setColor(QPalette.ColorRole.HighlightedText, QColor(COLORS['bg_window']))
    app.setPalette(palette)
