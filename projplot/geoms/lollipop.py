"""
Lollipop charts.

A lollipop is a thin segment from the baseline up to each value with a dot
on top; a lighter alternative to a bar chart.
"""

import logging
from typing import Any, Dict, Optional

import pandas as pd
import matplotlib.pyplot as plt

from .base import Geom, Layer
from .primitives import GeomPoint, GeomSegment
from ..constants import LOLLIPOP_POINT_SCALE

logger = logging.getLogger("projplot.geoms.lollipop")


class GeomLollipop(Geom):
    """
    Segment from (x, 0) to (x, y) topped with a point.

    Draw parameters:
        point_colour: Colour of every point (defaults to the row colour)
        point_size: Size of every point (defaults to 2.5 times the row size)
    """

    required_aes = ("x", "y")
    non_missing_aes = ("size", "shape", "point_colour", "point_size")
    default_aes: Dict[str, Any] = {
        "shape": 19, "colour": "black", "size": 0.5, "fill": None,
        "alpha": None, "stroke": 0.5,
    }

    def setup_data(self, data: pd.DataFrame, params: Dict[str, Any]) -> pd.DataFrame:
        return data.assign(xend=data["x"], yend=0.0)

    def draw_panel(
        self,
        ax: plt.Axes,
        data: pd.DataFrame,
        panel_params,
        coord,
        point_colour: Optional[str] = None,
        point_size: Optional[float] = None,
        **params
    ) -> list:
        points = data.copy()
        points["colour"] = point_colour if point_colour is not None else data["colour"]
        points["size"] = point_size if point_size is not None else data["size"] * LOLLIPOP_POINT_SCALE

        segment = GeomSegment().use_defaults(data)
        artists = GeomSegment().draw_panel(ax, segment, panel_params, coord)
        artists += GeomPoint().draw_panel(ax, points, panel_params, coord)
        return artists


def geom_lollipop(
    data: pd.DataFrame,
    mapping: Optional[Dict[str, str]] = None,
    point_colour: Optional[str] = None,
    point_size: Optional[float] = None,
    na_rm: bool = False,
) -> Layer:
    """
    Create a lollipop layer.

    Args:
        data: Data frame to draw
        mapping: Aesthetic -> column mapping; needs at least ``x`` and ``y``
        point_colour: Colour of the points (row colour when None)
        point_size: Size of the points (2.5 times the row size when None)
        na_rm: Drop rows with missing values silently instead of warning

    Example:
        >>> layer = geom_lollipop(df, {"x": "year", "y": "count"}, point_colour="steelblue")
    """
    return Layer(
        GeomLollipop(),
        data,
        mapping,
        na_rm=na_rm,
        point_colour=point_colour,
        point_size=point_size,
    )
