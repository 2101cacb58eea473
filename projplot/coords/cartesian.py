"""
Cartesian coordinate system: linear rescaling of data ranges to the panel.
"""

import logging
from typing import Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .base import Coord, PanelParams
from ..rendering.guides import AxisGuide, Grill, element_background, element_line
from ..scales import X_AESTHETICS, Y_AESTHETICS, expand_default
from ..utils import rescale, validate_limits

logger = logging.getLogger("projplot.coords.cartesian")


class CoordCartesian(Coord):
    """
    Default coordinate system for non-map plots.

    Attributes:
        xlim, ylim: Optional explicit limits overriding the data ranges
        expand: Widen data-derived ranges by the scale's default expansion
    """

    def __init__(
        self,
        xlim: Optional[Sequence[float]] = None,
        ylim: Optional[Sequence[float]] = None,
        expand: bool = True,
    ):
        self.limits = {
            "x": validate_limits("xlim", xlim),
            "y": validate_limits("ylim", ylim),
        }
        self.expand = expand

    def _axis_range(self, name: str, scale) -> Tuple[float, float]:
        limits = self.limits[name]
        if limits is not None:
            values = scale.transform(limits)
            return (float(np.min(values)), float(np.max(values)))
        if self.expand:
            return scale.dimension(expand_default(scale))
        return scale.dimension((0.0, 0.0))

    def train(self, x_scale, y_scale) -> PanelParams:
        x_info = x_scale.break_info(self._axis_range("x", x_scale))
        y_info = y_scale.break_info(self._axis_range("y", y_scale))

        logger.debug(f"Trained CoordCartesian: x_range={x_info.range}, y_range={y_info.range}")

        return PanelParams(
            x_range=x_info.range,
            y_range=y_info.range,
            x_proj=x_info.range,
            y_proj=y_info.range,
            x_major=x_info.major_source,
            x_minor=x_info.minor_source,
            x_labels=x_info.labels,
            y_major=y_info.major_source,
            y_minor=y_info.minor_source,
            y_labels=y_info.labels,
        )

    def transform(self, data: pd.DataFrame, panel_params: PanelParams) -> pd.DataFrame:
        out = data.copy()
        for aes in X_AESTHETICS:
            if aes in out.columns:
                out[aes] = rescale(out[aes].to_numpy(dtype=float), (0.0, 1.0), panel_params.x_range)
        for aes in Y_AESTHETICS:
            if aes in out.columns:
                out[aes] = rescale(out[aes].to_numpy(dtype=float), (0.0, 1.0), panel_params.y_range)
        return out

    def render_bg(self, panel_params: PanelParams, theme) -> Grill:
        xpos = rescale(panel_params.x_major, (0.0, 1.0), panel_params.x_range)
        ypos = rescale(panel_params.y_major, (0.0, 1.0), panel_params.y_range)

        xlines = [np.array([[x, 0.0], [x, 1.0]]) for x in xpos if np.isfinite(x)]
        ylines = [np.array([[0.0, y], [1.0, y]]) for y in ypos if np.isfinite(y)]

        return Grill(
            background=element_background(theme),
            xlines=element_line(xlines, theme, "panel.grid.major.x"),
            ylines=element_line(ylines, theme, "panel.grid.major.y"),
        )

    def render_axis_h(self, panel_params: PanelParams, theme) -> Optional[AxisGuide]:
        if len(panel_params.x_major) == 0:
            return None
        pos = rescale(panel_params.x_major, (0.0, 1.0), panel_params.x_range)
        return AxisGuide(pos, panel_params.x_labels, side="bottom")

    def render_axis_v(self, panel_params: PanelParams, theme) -> Optional[AxisGuide]:
        if len(panel_params.y_major) == 0:
            return None
        pos = rescale(panel_params.y_major, (0.0, 1.0), panel_params.y_range)
        return AxisGuide(pos, panel_params.y_labels, side="left")


def coord_cartesian(xlim=None, ylim=None, expand: bool = True) -> CoordCartesian:
    """Create a cartesian coordinate system with optional limits."""
    return CoordCartesian(xlim=xlim, ylim=ylim, expand=expand)
