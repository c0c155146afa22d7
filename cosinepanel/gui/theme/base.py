"""Base theme protocol types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Theme descriptor used by ThemeManager and the panel widgets."""

    name: str
    id: str
    colors: dict[str, str]
    stylesheet: str
    plot_colors: dict
