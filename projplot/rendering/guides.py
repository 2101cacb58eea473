"""
Drawable panel decorations produced by coordinate systems.

``Grill`` bundles the panel background with the major gridlines, and
``AxisGuide`` carries tick positions (in panel space) and their labels for
one side of the panel. Both are built without an Axes and attached to one
when the plot is rendered.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.artist import Artist
from matplotlib.collections import LineCollection
from matplotlib.patches import Rectangle


def split_polylines(x, y, group=None) -> List[np.ndarray]:
    """
    Split coordinate sequences into drawable polylines.

    Lines break at non-finite points and, when ``group`` is given, wherever
    the group value changes. Pieces with fewer than two points are dropped.

    Returns:
        List of (n, 2) vertex arrays
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    ok = np.isfinite(x) & np.isfinite(y)

    breaks = ~ok
    if group is not None:
        group = np.asarray(group)
        changed = np.zeros(group.shape, dtype=bool)
        changed[1:] = group[1:] != group[:-1]
    else:
        changed = np.zeros(x.shape, dtype=bool)

    pieces = []
    current = []
    for i in range(x.size):
        if breaks[i] or changed[i]:
            if len(current) > 1:
                pieces.append(np.array(current))
            current = []
        if not breaks[i]:
            current.append((x[i], y[i]))
    if len(current) > 1:
        pieces.append(np.array(current))
    return pieces


def element_line(segments: Sequence[np.ndarray], theme, name: str) -> Optional[LineCollection]:
    """Gridline collection styled from ``theme``; None when nothing is drawable."""
    if len(segments) == 0:
        return None
    lines = LineCollection(
        segments,
        colors=theme.grid_color,
        linewidths=theme.grid_linewidth,
        linestyles=theme.grid_linestyle,
        alpha=theme.grid_alpha,
        zorder=1,
    )
    lines.set_label(name)
    return lines


def element_background(theme) -> Rectangle:
    """Panel background covering the unit square."""
    background = Rectangle(
        (0.0, 0.0), 1.0, 1.0,
        facecolor=theme.panel_background,
        edgecolor="none",
        zorder=0,
    )
    background.set_label("panel.background")
    return background


@dataclass
class Grill:
    """Panel background plus optional x and y major gridlines."""

    background: Rectangle
    xlines: Optional[LineCollection] = None
    ylines: Optional[LineCollection] = None

    def artists(self) -> List[Artist]:
        return [a for a in (self.background, self.xlines, self.ylines) if a is not None]

    def draw(self, ax: plt.Axes) -> None:
        ax.add_patch(self.background)
        for lines in (self.xlines, self.ylines):
            if lines is not None:
                ax.add_collection(lines)


@dataclass
class AxisGuide:
    """
    Tick positions and labels for one side of the panel.

    Attributes:
        positions: Tick positions in panel space along the axis
        labels: One label per position
        side: "bottom" or "left"
    """

    positions: np.ndarray
    labels: List[str] = field(default_factory=list)
    side: str = "bottom"

    def __post_init__(self):
        positions = np.asarray(self.positions, dtype=float)
        labels = list(self.labels)
        keep = np.isfinite(positions)
        self.positions = positions[keep]
        self.labels = [label for label, k in zip(labels, keep) if k]

    def __len__(self) -> int:
        return int(self.positions.size)

    def draw(self, ax: plt.Axes, theme) -> None:
        """Place ticks and labels on the matching side of ``ax``."""
        if self.side == "bottom":
            ax.set_xticks(self.positions)
            ax.set_xticklabels(self.labels, fontsize=theme.axis_label_size, color=theme.axis_label_color)
        else:
            ax.set_yticks(self.positions)
            ax.set_yticklabels(self.labels, fontsize=theme.axis_label_size, color=theme.axis_label_color)
