"""
Panel theme: background fill, major gridline style and axis text style.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import matplotlib.colors as mcolors

from ..config import Config
from ..constants import (
    PANEL_BACKGROUND,
    GRID_COLOR,
    GRID_LINEWIDTH,
    GRID_ALPHA,
    GRID_LINESTYLE,
    AXIS_LABEL_SIZE,
    AXIS_LABEL_COLOR,
)

logger = logging.getLogger("projplot.rendering.theme")


def _is_dark_color(color: Optional[str]) -> bool:
    """Return True when a Matplotlib color spec is visually dark."""

    if not color:
        return False
    try:
        r, g, b = mcolors.to_rgb(color)
    except ValueError:
        return False

    # Relative luminance (sRGB-ish). Good enough for theme heuristics.
    luminance = 0.2126 * r + 0.7152 * g + 0.0722 * b
    return luminance < 0.35


@dataclass
class Theme:
    """Styling consumed by coordinate systems when building panel decorations."""

    panel_background: str = PANEL_BACKGROUND
    grid_color: str = GRID_COLOR
    grid_linewidth: float = GRID_LINEWIDTH
    grid_alpha: float = GRID_ALPHA
    grid_linestyle: str = GRID_LINESTYLE
    axis_label_size: float = AXIS_LABEL_SIZE
    axis_label_color: str = AXIS_LABEL_COLOR

    @classmethod
    def from_config(cls, config: Config) -> "Theme":
        """Build a theme from configuration, adapting colours to dark panels."""
        use_dark_theme = _is_dark_color(config.panel_background)
        grid_color = config.grid_color
        if use_dark_theme and grid_color == GRID_COLOR:
            grid_color = "#7d8590"
        label_color = "#e6edf3" if _is_dark_color(config.background_color) else AXIS_LABEL_COLOR

        logger.debug(f"Theme from config: dark_panel={use_dark_theme}, grid_color={grid_color}")
        return cls(
            panel_background=config.panel_background,
            grid_color=grid_color,
            grid_linewidth=config.grid_linewidth,
            grid_alpha=config.grid_alpha,
            grid_linestyle=config.grid_linestyle,
            axis_label_size=config.axis_label_size,
            axis_label_color=label_color,
        )
