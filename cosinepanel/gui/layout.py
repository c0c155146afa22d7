"""
Normalized placement of the panel's widgets.

Rectangles are (left, bottom, width, height) in units of the parent window,
origin bottom-left. All placements are relative to a position rectangle
``pos`` so the panel can occupy part of a larger window.
"""

from dataclasses import dataclass
from typing import List, Tuple

from PyQt6.QtCore import QRect

from ..core.actions import FULL_RECT, Rect

ENTRY_WIDTH = 0.1
ENTRY_HEIGHT = 0.05
ENTRY_RIGHT_GAP = 0.1
LABEL_WIDTH = 0.15
LABEL_OFFSET = 0.16
LABEL_DROP = 0.005


@dataclass(frozen=True)
class FieldPlacement:
    label: Rect
    entry: Rect


def plot_rect(pos: Rect = FULL_RECT) -> Rect:
    px, py, pw, ph = pos
    return (0.06 * pw + px, 0.2 * ph + py, 0.5 * pw, 0.65 * ph)


def hint_rect(pos: Rect = FULL_RECT) -> Rect:
    """Rectangle of the 'click to rescale' message under the plot."""
    px, py, pw, ph = pos
    return (0.06 * pw + px, 0.05 * ph + py, 0.5 * pw, 0.05 * ph)


def controls_rect(pos: Rect = FULL_RECT) -> Rect:
    px, py, pw, ph = pos
    return (0.6 * pw + px, 0.2 * ph + py, 0.38 * pw, 0.7 * ph)


def field_placements(n_fields: int, pos: Rect = FULL_RECT) -> List[FieldPlacement]:
    """Label and entry rectangles for each field, top to bottom.

    Entry and label sizes are absolute (not scaled by ``pos``); only the
    controls block they are stacked in follows ``pos``.
    """
    if n_fields < 1:
        raise ValueError(f"n_fields must be >= 1, got {n_fields}")
    cx, cy, cw, ch = controls_rect(pos)
    left = cx + cw - ENTRY_WIDTH - ENTRY_RIGHT_GAP
    placements = []
    for i in range(n_fields):
        bottom = cy + ch - ch / n_fields * i - ENTRY_HEIGHT
        entry = (left, bottom, ENTRY_WIDTH, ENTRY_HEIGHT)
        label = (left - LABEL_OFFSET, bottom - LABEL_DROP, LABEL_WIDTH, ENTRY_HEIGHT)
        placements.append(FieldPlacement(label=label, entry=entry))
    return placements


def to_pixels(rect: Rect, width: int, height: int) -> Tuple[int, int, int, int]:
    """Convert a normalized rect to Qt pixel geometry (x, y, w, h), origin top-left."""
    left, bottom, w, h = rect
    x = round(left * width)
    y = round((1.0 - bottom - h) * height)
    return (x, y, max(1, round(w * width)), max(1, round(h * height)))


def to_qrect(rect: Rect, width: int, height: int) -> QRect:
    return QRect(*to_pixels(rect, width, height))
