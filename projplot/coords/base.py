"""
Coordinate system interface.

A coordinate system turns trained scales into panel parameters, maps layer
data into panel space (the unit square the plot panel is drawn in), and
produces the panel background and axis guides.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
import matplotlib.ticker as mticker


@dataclass
class PanelParams:
    """
    Result of a training pass, consumed by transform and render calls.

    Attributes:
        x_range, y_range: Data-space ranges of the panel
        x_proj, y_proj: Ranges of the panel in the coordinate system's
            output space (projected units for map projections)
        x_major, y_major: Major break positions in data space
        x_minor, y_minor: Minor break positions in data space
        x_labels, y_labels: Labels for the major breaks
        orientation: (latitude, longitude, rotation) of the projection
            centre, used by projections that need one
    """

    x_range: Tuple[float, float]
    y_range: Tuple[float, float]
    x_proj: Tuple[float, float]
    y_proj: Tuple[float, float]
    x_major: np.ndarray = field(default_factory=lambda: np.array([], dtype=float))
    x_minor: np.ndarray = field(default_factory=lambda: np.array([], dtype=float))
    x_labels: List[str] = field(default_factory=list)
    y_major: np.ndarray = field(default_factory=lambda: np.array([], dtype=float))
    y_minor: np.ndarray = field(default_factory=lambda: np.array([], dtype=float))
    y_labels: List[str] = field(default_factory=list)
    orientation: Optional[Tuple[float, float, float]] = None


class Coord(ABC):
    """Base class for coordinate systems."""

    @abstractmethod
    def train(self, x_scale, y_scale) -> PanelParams:
        """Compute panel ranges and break metadata from trained scales."""

    @abstractmethod
    def transform(self, data: pd.DataFrame, panel_params: PanelParams) -> pd.DataFrame:
        """Map the position columns of ``data`` into panel space."""

    @abstractmethod
    def render_bg(self, panel_params: PanelParams, theme):
        """Build the panel background and major gridlines."""

    @abstractmethod
    def render_axis_h(self, panel_params: PanelParams, theme):
        """Build the horizontal (bottom) axis guide, or None."""

    @abstractmethod
    def render_axis_v(self, panel_params: PanelParams, theme):
        """Build the vertical (left) axis guide, or None."""

    def aspect(self, panel_params: PanelParams) -> Optional[float]:
        """Panel height/width ratio, or None when the panel may stretch."""
        return None

    def is_linear(self) -> bool:
        return True

    def label_formatter(self, aesthetic: str) -> Optional[mticker.Formatter]:
        """Formatter for default tick labels of ``aesthetic``; None for the scale default."""
        return None

    def distance(self, x: Sequence[float], y: Sequence[float], panel_params: PanelParams) -> np.ndarray:
        """Distances between successive points, relative to the panel diagonal."""
        max_dist = np.hypot(np.diff(panel_params.x_range), np.diff(panel_params.y_range))[0]
        return np.hypot(np.diff(np.asarray(x, dtype=float)), np.diff(np.asarray(y, dtype=float))) / max_dist

