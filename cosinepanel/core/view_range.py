"""
View bounds for the signal plot and the rescale rule used after every replot
and on click-inside-plot.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np

ArrayLike = Union[Sequence[float], np.ndarray]

# Padding on each side is the current view span divided by this
PADDING_FRACTION = 10.0


@dataclass(frozen=True)
class ViewRange:
    """Visible window of a plot: (x_min, x_max) and (y_min, y_max)."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @classmethod
    def from_pairs(cls, x_range: Tuple[float, float], y_range: Tuple[float, float]) -> "ViewRange":
        """Build from two (min, max) pairs, as pyqtgraph's viewRange() returns them."""
        return cls(float(x_range[0]), float(x_range[1]), float(y_range[0]), float(y_range[1]))

    @property
    def x_range(self) -> Tuple[float, float]:
        return (self.x_min, self.x_max)

    @property
    def y_range(self) -> Tuple[float, float]:
        return (self.y_min, self.y_max)

    @property
    def x_span(self) -> float:
        return self.x_max - self.x_min

    @property
    def y_span(self) -> float:
        return self.y_max - self.y_min


def rescale_view(x_data: ArrayLike, y_data: ArrayLike, current: ViewRange) -> ViewRange:
    """Compute view bounds that frame the data with padding.

    Padding on each side is one tenth of the *current* view span for that
    axis. The y range is always widened to include zero so the baseline of a
    one-signed signal stays visible. Constant data (or a zero-width result)
    is framed as +/-1 around the single x value and as (0, 1) in y. Padded
    x bounds that meet for non-constant data (an inverted current view) are
    widened by 1 on each side.

    Empty input is not guarded; numpy raises ``ValueError`` for the empty
    reduction. NaN in either series propagates into that axis of the result.

    Args:
        x_data: Non-empty x samples
        y_data: Non-empty y samples
        current: The view currently shown; only its spans are used

    Returns:
        The new ViewRange for the caller to apply
    """
    x = np.asarray(x_data, dtype=float)
    y = np.asarray(y_data, dtype=float)

    x_lo, x_hi = float(np.min(x)), float(np.max(x))
    y_lo, y_hi = float(np.min(y)), float(np.max(y))

    x_pad = current.x_span / PADDING_FRACTION
    y_pad = current.y_span / PADDING_FRACTION

    x_min = x_lo - x_pad
    x_max = x_hi + x_pad
    # NaN in y must survive the zero clamp
    y_min = float(np.minimum(0.0, y_lo - y_pad))
    y_max = float(np.maximum(0.0, y_hi + y_pad))

    # Constant data gets a fixed frame whatever the current view is
    if x_lo == x_hi:
        x_min, x_max = x_lo - 1.0, x_hi + 1.0
    elif x_min == x_max:
        x_min, x_max = x_min - 1.0, x_max + 1.0
    if y_lo == y_hi or y_min == y_max:
        y_min, y_max = 0.0, 1.0

    return ViewRange(x_min, x_max, y_min, y_max)
