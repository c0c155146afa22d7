"""Theme and styling modules."""

from .base import Theme
from .classic import CLASSIC_THEME
from .cyberpunk import CYBERPUNK_THEME

THEMES: dict[str, Theme] = {
	CLASSIC_THEME.id: CLASSIC_THEME,
	CYBERPUNK_THEME.id: CYBERPUNK_THEME,
}

DEFAULT_THEME_ID = CLASSIC_THEME.id

__all__ = [
	"Theme",
	"THEMES",
	"DEFAULT_THEME_ID",
	"CLASSIC_THEME",
	"CYBERPUNK_THEME",
]
