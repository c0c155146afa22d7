"""
Closed set of operations the signal panel understands.

The panel used to be driven by mode strings ('Initialize', 'Rescale Plot',
'Replot'); those names are still accepted by parse_action() so scripts and
tests can drive the panel by name.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple, Union

from .signal_model import CosineParameters

Rect = Tuple[float, float, float, float]

FULL_RECT: Rect = (0.0, 0.0, 1.0, 1.0)


class InvalidOperation(ValueError):
    """Raised when the panel is asked to run a mode it does not know."""

    def __init__(self, mode):
        self.mode = mode
        super().__init__(f"Illegal action: unsupported panel mode {mode!r}")


class PanelActionKind(Enum):
    INITIALIZE = auto()
    RESCALE = auto()
    REPLOT = auto()


@dataclass(frozen=True)
class Initialize:
    """Create the panel widgets for ``params`` inside the normalized ``position``."""

    params: CosineParameters
    position: Rect = FULL_RECT
    kind = PanelActionKind.INITIALIZE


@dataclass(frozen=True)
class Rescale:
    """Refit the plot view to the rendered data."""

    kind = PanelActionKind.RESCALE


@dataclass(frozen=True)
class Replot:
    """Rebuild the signal from field values (PARAMETER_FIELDS order).

    An empty ``values`` tuple means "read the panel's entry fields".
    """

    values: Tuple[float, ...] = ()
    kind = PanelActionKind.REPLOT


PanelAction = Union[Initialize, Rescale, Replot]

_MODE_NAMES = {
    'initialize': PanelActionKind.INITIALIZE,
    'rescale plot': PanelActionKind.RESCALE,
    'rescale': PanelActionKind.RESCALE,
    'replot': PanelActionKind.REPLOT,
}


def parse_action(mode) -> PanelActionKind:
    """Map a mode name (or a PanelActionKind) to a PanelActionKind.

    Raises:
        InvalidOperation: If the mode is not one of the known operations
    """
    if isinstance(mode, PanelActionKind):
        return mode
    if not isinstance(mode, str):
        raise InvalidOperation(mode)
    key = mode.strip().lower().replace('_', ' ')
    try:
        return _MODE_NAMES[key]
    except KeyError:
        raise InvalidOperation(mode) from None
