"""
Rendering primitives for projplot.

This module holds the pieces coordinate systems hand back to the plot
assembly: the panel theme, the background "grill" of gridlines and the
axis guides.

Main Classes:
    Theme: Panel background, gridline and axis text styling
    Grill: Panel background plus major gridline collections
    AxisGuide: Tick positions and labels for one panel side
"""

from .theme import Theme
from .guides import AxisGuide, Grill, element_background, element_line, split_polylines

__all__ = [
    "Theme",
    "AxisGuide",
    "Grill",
    "element_background",
    "element_line",
    "split_polylines",
]
