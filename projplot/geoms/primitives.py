"""
Drawing primitives: points, segments and paths.

Each geom transforms its positions with the plot's coordinate system and
draws in panel space on a matplotlib Axes whose data limits are the unit
square.
"""

import logging
from typing import Any, Dict

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection

from .base import Geom, colour_values, size_to_points
from ..rendering.guides import split_polylines

logger = logging.getLogger("projplot.geoms.primitives")

# ggplot-style numeric shapes mapped to matplotlib markers
SHAPE_MARKERS = {
    0: "s", 1: "o", 2: "^", 3: "+", 4: "x", 5: "D", 6: "v", 8: "*",
    15: "s", 16: "o", 17: "^", 18: "D", 19: "o", 20: "o", 21: "o",
    22: "s", 23: "D", 24: "^", 25: "v",
}


def shape_to_marker(shape) -> str:
    if isinstance(shape, str):
        return shape
    return SHAPE_MARKERS.get(int(shape), "o")


class GeomPoint(Geom):
    """Scatter points."""

    required_aes = ("x", "y")
    non_missing_aes = ("size", "shape", "colour")
    default_aes: Dict[str, Any] = {
        "shape": 19, "colour": "black", "size": 1.5, "fill": None,
        "alpha": None, "stroke": 0.5,
    }

    def draw_panel(self, ax: plt.Axes, data: pd.DataFrame, panel_params, coord, **params) -> list:
        if data.empty:
            return []
        coords = coord.transform(data, panel_params)
        # matplotlib sizes scatter markers by area in points^2
        sizes = (size_to_points(coords["size"]) + size_to_points(coords["stroke"]) / 2) ** 2
        colours = colour_values(coords)

        x = coords["x"].to_numpy(dtype=float)
        y = coords["y"].to_numpy(dtype=float)
        markers = [shape_to_marker(s) for s in coords["shape"]]

        artists = []
        for marker in dict.fromkeys(markers):
            keep = np.array([m == marker for m in markers])
            artists.append(ax.scatter(
                x[keep],
                y[keep],
                s=sizes[keep],
                c=[c for c, k in zip(colours, keep) if k],
                marker=marker,
                linewidths=0,
                zorder=4,
            ))
        return artists


class GeomSegment(Geom):
    """Straight segments from (x, y) to (xend, yend)."""

    required_aes = ("x", "y", "xend", "yend")
    non_missing_aes = ("linetype", "size")
    default_aes: Dict[str, Any] = {
        "colour": "black", "size": 0.5, "linetype": "solid", "alpha": None,
    }

    def draw_panel(self, ax: plt.Axes, data: pd.DataFrame, panel_params, coord, **params) -> list:
        if data.empty:
            return []
        starts = coord.transform(data, panel_params)
        ends = coord.transform(
            data.assign(x=data["xend"], y=data["yend"]),
            panel_params,
        )

        segments = np.stack([
            np.column_stack([starts["x"].to_numpy(dtype=float), starts["y"].to_numpy(dtype=float)]),
            np.column_stack([ends["x"].to_numpy(dtype=float), ends["y"].to_numpy(dtype=float)]),
        ], axis=1)

        lines = LineCollection(
            segments,
            colors=colour_values(data),
            linewidths=size_to_points(data["size"]),
            linestyles=list(data["linetype"]),
            zorder=3,
        )
        ax.add_collection(lines)
        return [lines]


class GeomPath(Geom):
    """Connected lines through the rows of each group, in data order."""

    required_aes = ("x", "y")
    non_missing_aes = ("size", "colour", "linetype")
    default_aes: Dict[str, Any] = {
        "colour": "black", "size": 0.5, "linetype": "solid", "alpha": None,
    }

    def draw_panel(self, ax: plt.Axes, data: pd.DataFrame, panel_params, coord, **params) -> list:
        if data.empty:
            return []
        coords = coord.transform(data, panel_params)

        segments = []
        colours = []
        widths = []
        for _, rows in coords.groupby("group", sort=False):
            pieces = split_polylines(rows["x"], rows["y"])
            first = rows.iloc[0]
            segments.extend(pieces)
            colours.extend(colour_values(rows.iloc[:1]) * len(pieces))
            widths.extend([float(size_to_points(first["size"]))] * len(pieces))

        if not segments:
            logger.debug("GeomPath: no drawable pieces after transform")
            return []

        lines = LineCollection(segments, colors=colours, linewidths=widths, zorder=3)
        ax.add_collection(lines)
        return [lines]
