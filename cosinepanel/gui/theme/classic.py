"""
Light theme modelled on the look of classic engineering teaching tools:
grey window, white plot, blue title and curve, red hint text.
"""

from .base import Theme
from .stylesheet import build_stylesheet


COLORS = {
    'bg_window': '#c0c0c0',
    'bg_entry': '#ffffff',

    'border_default': '#808080',

    'text_primary': '#000000',
    'text_secondary': '#333333',
    'text_entry': '#000000',

    'accent_primary': '#0000ff',
    'hint': '#ff0000',
    'error': '#ff0000',
}

PLOT_COLORS = {
    'background': '#ffffff',
    'foreground': '#000000',
    'curve': '#0000ff',
    'title': '#0000ff',
    'grid_alpha': 0.0,
}

CLASSIC_THEME = Theme(
    name='Classic',
    id='classic',
    colors=COLORS,
    stylesheet=build_stylesheet(COLORS),
    plot_colors=PLOT_COLORS,
)
