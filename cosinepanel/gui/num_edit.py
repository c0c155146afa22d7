"""
Numeric entry field with range checking.
Commits on Enter or focus loss, reverts on Escape or invalid input.
"""

import math
from typing import Optional

from PyQt6.QtWidgets import QLineEdit, QWidget
from PyQt6.QtCore import pyqtSignal, Qt, QTimer

from cosinepanel.logging import get_logger
logger = get_logger(__name__)

# Styled by the theme stylesheet through the "invalid" dynamic property
INVALID_PROPERTY = "invalid"


def format_number(value: float) -> str:
    """Compact text for an entry field."""
    if isinstance(value, int) or float(value).is_integer():
        return str(int(value))
    return f"{value:.6g}"


class NumericEdit(QLineEdit):
    """Line edit holding a single number within [minimum, maximum].

    Signals:
        value_committed(float): A new, valid value was accepted
        value_rejected(str): Text that failed to parse or was out of range
    """

    value_committed = pyqtSignal(float)
    value_rejected = pyqtSignal(str)

    def __init__(self, value: float = 0.0, minimum: float = -math.inf,
                 maximum: float = math.inf, integer: bool = False,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        if minimum > maximum:
            raise ValueError(f"minimum {minimum} exceeds maximum {maximum}")
        self._minimum = float(minimum)
        self._maximum = float(maximum)
        self._integer = integer
        self._value = float(value)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setProperty(INVALID_PROPERTY, False)
        self.setText(format_number(self._value))

    @property
    def minimum(self) -> float:
        return self._minimum

    @property
    def maximum(self) -> float:
        return self._maximum

    def value(self) -> float:
        """Last accepted value (not the text currently being typed)."""
        return self._value

    def setValue(self, value: float) -> None:
        """Set the value without emitting value_committed."""
        if not self.accepts(value):
            raise ValueError(
                f"{value} outside [{self._minimum}, {self._maximum}]"
            )
        self._value = float(value)
        self.setText(format_number(self._value))

    def accepts(self, value: float) -> bool:
        if math.isnan(value):
            return False
        if self._integer and not float(value).is_integer():
            return False
        return self._minimum <= value <= self._maximum

    def keyPressEvent(self, event) -> None:
        if event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            self.commit()
        elif event.key() == Qt.Key.Key_Escape:
            self.revert()
        else:
            super().keyPressEvent(event)

    def focusOutEvent(self, event) -> None:
        super().focusOutEvent(event)
        self.commit()

    def commit(self) -> bool:
        """Accept the typed text if valid. Returns True if the value changed."""
        text = self.text().strip()
        try:
            value = float(text)
        except ValueError:
            value = math.nan

        if not self.accepts(value):
            logger.debug(f"NumericEdit rejected {text!r} (limits [{self._minimum}, {self._maximum}])")
            self._flash_error()
            self.revert()
            self.value_rejected.emit(text)
            return False

        self.setText(format_number(value))
        if value == self._value:
            return False
        self._value = value
        logger.debug(f"NumericEdit committed {value}")
        self.value_committed.emit(value)
        return True

    def revert(self) -> None:
        self.setText(format_number(self._value))

    def _flash_error(self) -> None:
        self._set_invalid(True)
        QTimer.singleShot(300, self._clear_error)

    def _clear_error(self) -> None:
        self._set_invalid(False)

    def _set_invalid(self, invalid: bool) -> None:
        self.setProperty(INVALID_PROPERTY, invalid)
        self.style().unpolish(self)
        self.style().polish(self)
