"""
Layers and the geom interface.

A ``Layer`` pairs a data frame with an aesthetic mapping and a ``Geom``.
Geoms prepare the mapped data (``setup_data``), fill in default aesthetics
and draw onto a matplotlib Axes in panel space, routing every position
through the plot's coordinate system.
"""

import logging
from typing import Any, Dict, Optional, Tuple

import numpy as np
import pandas as pd
import matplotlib.colors as mcolors
import matplotlib.pyplot as plt

from ..constants import POINTS_PER_MM
from ..exceptions import DataError

logger = logging.getLogger("projplot.geoms")


def size_to_points(size) -> np.ndarray:
    """Convert sizes in millimetres to points."""
    return np.asarray(size, dtype=float) * POINTS_PER_MM


def colour_values(data: pd.DataFrame, column: str = "colour", alpha: str = "alpha") -> list:
    """Row colours with alpha applied where given."""
    colours = []
    alphas = data[alpha] if alpha in data.columns else [None] * len(data)
    for colour, a in zip(data[column], alphas):
        if a is None or (isinstance(a, float) and np.isnan(a)):
            colours.append(mcolors.to_rgba(colour))
        else:
            colours.append(mcolors.to_rgba(colour, float(a)))
    return colours


class Geom:
    """
    Base class for geoms.

    Attributes:
        required_aes: Aesthetics that must be mapped
        non_missing_aes: Aesthetics whose missing values also drop a row
        default_aes: Values for aesthetics that are not mapped
    """

    required_aes: Tuple[str, ...] = ()
    non_missing_aes: Tuple[str, ...] = ()
    default_aes: Dict[str, Any] = {}

    @property
    def name(self) -> str:
        return type(self).__name__

    def setup_data(self, data: pd.DataFrame, params: Dict[str, Any]) -> pd.DataFrame:
        return data

    def use_defaults(self, data: pd.DataFrame) -> pd.DataFrame:
        """Add columns for unmapped aesthetics from ``default_aes``."""
        data = data.copy()
        for aes, value in self.default_aes.items():
            if aes not in data.columns:
                data[aes] = [value] * len(data)
        return data

    def handle_na(self, data: pd.DataFrame, na_rm: bool = False) -> pd.DataFrame:
        """Drop rows missing required (or non-missing) aesthetics."""
        columns = [c for c in self.required_aes + self.non_missing_aes if c in data.columns]
        if not columns:
            return data
        complete = data[columns].notna().all(axis=1)
        dropped = int((~complete).sum())
        if dropped and not na_rm:
            logger.warning(f"Removed {dropped} rows containing missing values ({self.name})")
        return data[complete]

    def draw_panel(self, ax: plt.Axes, data: pd.DataFrame, panel_params, coord, **params) -> list:
        """Draw ``data`` onto ``ax`` and return the created artists."""
        raise NotImplementedError


class Layer:
    """
    One geom drawn from one data frame.

    Attributes:
        geom: Geom instance
        data: Source data frame
        mapping: Aesthetic name -> column name
        params: Extra parameters passed to the geom
    """

    def __init__(
        self,
        geom: Geom,
        data: pd.DataFrame,
        mapping: Optional[Dict[str, str]] = None,
        **params
    ):
        self.geom = geom
        self.data = data
        self.mapping = dict(mapping or {})
        self.params = params

    def compute_aesthetics(self) -> pd.DataFrame:
        """
        Build the layer data frame with aesthetic names as columns.

        Raises:
            DataError: If a mapped column is missing or a required aesthetic
                is not mapped
        """
        missing_columns = [col for col in self.mapping.values() if col not in self.data.columns]
        if missing_columns:
            raise DataError(
                f"{self.geom.name}: columns not found in data: {missing_columns}. "
                f"Available columns: {list(self.data.columns)}"
            )

        out = pd.DataFrame(
            {aes: self.data[col].to_numpy() for aes, col in self.mapping.items()},
            index=self.data.index,
        )

        missing_aes = [aes for aes in self.geom.required_aes if aes not in out.columns]
        if missing_aes:
            raise DataError(f"{self.geom.name} requires the following missing aesthetics: {missing_aes}")

        if "group" not in out.columns:
            out["group"] = 0

        out = self.geom.setup_data(out, self.params)
        return out.reset_index(drop=True)

    def draw(self, ax: plt.Axes, data: pd.DataFrame, panel_params, coord) -> list:
        data = self.geom.handle_na(data, na_rm=self.params.get("na_rm", False))
        data = self.geom.use_defaults(data)
        params = {k: v for k, v in self.params.items() if k != "na_rm"}
        return self.geom.draw_panel(ax, data, panel_params, coord, **params)
