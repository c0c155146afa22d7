"""
Finite-duration continuous cosine signal model.

A signal is described by CosineParameters and evaluated into a DataSeries:

    x(t) = A cos(2*pi*(t - delay)/period + phase),  delay <= t <= delay + length*period

and zero elsewhere. The series carries a short zero lead-in and lead-out so
the pulse edges show on the plot.
"""

from dataclasses import dataclass, replace as dc_replace
from typing import Dict, Sequence, Tuple

import numpy as np

# Ordered as the panel shows them
PARAMETER_FIELDS: Tuple[str, ...] = ('amplitude', 'period', 'phase', 'length', 'delay')

EPS = float(np.finfo(float).eps)

PARAMETER_LIMITS: Dict[str, Tuple[float, float]] = {
    'amplitude': (-np.inf, np.inf),
    'period': (EPS, np.inf),
    'phase': (-np.inf, np.inf),
    'length': (1, np.inf),
    'delay': (-np.inf, np.inf),
}

DEFAULT_SAMPLES_PER_PERIOD = 64

# Zero padding on each side, as a fraction of the support width
EDGE_FRACTION = 0.25


def parameter_limits(field: str) -> Tuple[float, float]:
    """Return the (min, max) accepted for a parameter field."""
    try:
        return PARAMETER_LIMITS[field]
    except KeyError:
        raise ValueError(f"Unknown parameter field: {field}") from None


@dataclass(frozen=True)
class CosineParameters:
    """The five user-editable values of a cosine signal, plus its name."""

    name: str = 'x'
    amplitude: float = 1.0
    period: float = 1.0
    phase: float = 0.0
    length: int = 1
    delay: float = 0.0

    def __post_init__(self):
        for field in PARAMETER_FIELDS:
            if not np.isfinite(getattr(self, field)):
                raise ValueError(f"{field} must be finite, got {getattr(self, field)}")
        if not self.period > EPS:
            raise ValueError(f"period must be > {EPS}, got {self.period}")
        if int(self.length) != self.length or self.length < 1:
            raise ValueError(f"length must be an integer >= 1, got {self.length}")
        object.__setattr__(self, 'length', int(self.length))

    @classmethod
    def from_values(cls, name: str, values: Sequence[float]) -> "CosineParameters":
        """Build parameters from field values in PARAMETER_FIELDS order."""
        if len(values) != len(PARAMETER_FIELDS):
            raise ValueError(
                f"Expected {len(PARAMETER_FIELDS)} values, got {len(values)}"
            )
        amplitude, period, phase, length, delay = values
        if not np.isfinite(length):
            raise ValueError(f"length must be finite, got {length}")
        return cls(
            name=name,
            amplitude=float(amplitude),
            period=float(period),
            phase=float(phase),
            length=int(round(length)),
            delay=float(delay),
        )

    def values(self) -> Tuple[float, ...]:
        """Field values in PARAMETER_FIELDS order."""
        return tuple(getattr(self, f) for f in PARAMETER_FIELDS)

    def replace(self, **changes) -> "CosineParameters":
        return dc_replace(self, **changes)

    @property
    def duration(self) -> float:
        """Width of the non-zero support."""
        return self.length * self.period


@dataclass(frozen=True)
class DataSeries:
    """Ordered (x, y) samples of a rendered signal. Arrays are read-only."""

    x: np.ndarray
    y: np.ndarray

    def __post_init__(self):
        x = np.array(self.x, dtype=float)
        y = np.array(self.y, dtype=float)
        if x.ndim != 1 or y.ndim != 1:
            raise ValueError("DataSeries arrays must be one-dimensional")
        if len(x) != len(y):
            raise ValueError(f"x and y length mismatch: {len(x)} != {len(y)}")
        if len(x) == 0:
            raise ValueError("DataSeries must not be empty")
        x.setflags(write=False)
        y.setflags(write=False)
        object.__setattr__(self, 'x', x)
        object.__setattr__(self, 'y', y)

    def __len__(self) -> int:
        return len(self.x)


def build_signal(params: CosineParameters,
                 samples_per_period: int = DEFAULT_SAMPLES_PER_PERIOD) -> DataSeries:
    """Evaluate the cosine into a DataSeries, including zero edges."""
    if samples_per_period < 2:
        raise ValueError(f"samples_per_period must be >= 2, got {samples_per_period}")

    start = params.delay
    stop = params.delay + params.duration
    n_support = samples_per_period * params.length + 1
    t = np.linspace(start, stop, n_support)
    y = params.amplitude * np.cos(2 * np.pi * (t - params.delay) / params.period + params.phase)

    # Vertical edges: repeat the end points at zero, then extend flat
    edge = EDGE_FRACTION * params.duration
    x_all = np.concatenate(([start - edge, start], t, [stop, stop + edge]))
    y_all = np.concatenate(([0.0, 0.0], y, [0.0, 0.0]))
    return DataSeries(x_all, y_all)


def _fmt(value: float) -> str:
    return f"{value:g}"


def format_formula(params: CosineParameters) -> str:
    """Human-readable formula, e.g. ``x(t) = 2cos(2π(t - 1)/4 + 0.5)``."""
    if params.amplitude == 1:
        amp = ''
    elif params.amplitude == -1:
        amp = '-'
    else:
        amp = _fmt(params.amplitude)

    if params.delay == 0:
        arg = 't'
    elif params.delay > 0:
        arg = f"(t - {_fmt(params.delay)})"
    else:
        arg = f"(t + {_fmt(-params.delay)})"

    if params.period == 1:
        inner = f"2π{arg}"
    else:
        inner = f"2π{arg}/{_fmt(params.period)}"

    if params.phase > 0:
        inner += f" + {_fmt(params.phase)}"
    elif params.phase < 0:
        inner += f" - {_fmt(-params.phase)}"

    return f"{params.name}(t) = {amp}cos({inner})"
