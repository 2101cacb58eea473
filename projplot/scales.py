"""
Continuous position scales.

Scales collect the data range for one position aesthetic and compute the
break positions and labels that coordinate systems turn into gridlines and
axis guides. Break placement uses matplotlib's ``MaxNLocator``; labels use
a matplotlib ``Formatter`` (coordinate systems can supply their own, e.g.
cartopy's degree formatters for map axes).
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np
import matplotlib.ticker as mticker

from .constants import DEFAULT_EXPANSION, DEFAULT_N_BREAKS
from .utils import expand_range, finite_range

logger = logging.getLogger("projplot.scales")

X_AESTHETICS = ("x", "xend", "xmin", "xmax")
Y_AESTHETICS = ("y", "yend", "ymin", "ymax")

# Relative slack when clipping breaks to the scale range
_BREAK_TOLERANCE = 1e-10


@dataclass
class BreakInfo:
    """Breaks and labels for one axis over a given range."""

    range: Tuple[float, float]
    major_source: np.ndarray = field(default_factory=lambda: np.array([], dtype=float))
    minor_source: np.ndarray = field(default_factory=lambda: np.array([], dtype=float))
    labels: List[str] = field(default_factory=list)


def expand_default(scale: "ContinuousScale") -> Tuple[float, float]:
    """Default (mult, add) expansion for a continuous position scale."""
    return scale.expand if scale.expand is not None else DEFAULT_EXPANSION


class ContinuousScale:
    """
    Continuous position scale for the ``x`` or ``y`` aesthetic.

    Attributes:
        aesthetic: "x" or "y"
        breaks: Explicit major breaks, or None to compute them
        formatter: Matplotlib formatter for tick labels
        n_breaks: Target number of major breaks
        expand: Optional (mult, add) expansion overriding the default

    Example:
        >>> scale = ContinuousScale("x")
        >>> scale.train([0, 10])
        >>> scale.break_info((0, 10)).major_source
        array([ 0.,  2.,  4.,  6.,  8., 10.])
    """

    def __init__(
        self,
        aesthetic: str,
        breaks: Optional[Sequence[float]] = None,
        formatter: Optional[mticker.Formatter] = None,
        n_breaks: int = DEFAULT_N_BREAKS,
        expand: Optional[Tuple[float, float]] = None,
    ):
        self.aesthetic = aesthetic
        self.breaks = None if breaks is None else np.asarray(breaks, dtype=float)
        self.formatter = formatter if formatter is not None else mticker.StrMethodFormatter("{x:g}")
        self.n_breaks = n_breaks
        self.expand = expand
        self._range: Optional[Tuple[float, float]] = None

    @property
    def aesthetics(self) -> Tuple[str, ...]:
        return X_AESTHETICS if self.aesthetic == "x" else Y_AESTHETICS

    @property
    def range(self) -> Optional[Tuple[float, float]]:
        return self._range

    def train(self, values) -> None:
        """Extend the scale range to cover the finite entries of ``values``."""
        lo, hi = finite_range(values)
        if np.isnan(lo):
            return
        if self._range is None:
            self._range = (lo, hi)
        else:
            self._range = (min(self._range[0], lo), max(self._range[1], hi))

    def train_df(self, data) -> None:
        """Train on every column of ``data`` that belongs to this scale."""
        for aes in self.aesthetics:
            if aes in data.columns:
                self.train(data[aes].to_numpy(dtype=float))

    def dimension(self, expand: Optional[Tuple[float, float]] = None) -> Tuple[float, float]:
        """Trained range widened by ``expand`` (defaults to the scale default)."""
        if self._range is None:
            return (np.nan, np.nan)
        mult, add = expand if expand is not None else expand_default(self)
        return expand_range(self._range, mul=mult, add=add)

    def transform(self, values) -> np.ndarray:
        """Identity transformation; continuous position scales are linear."""
        return np.asarray(values, dtype=float)

    def get_breaks(self, rng: Sequence[float]) -> np.ndarray:
        lo, hi = float(min(rng)), float(max(rng))
        if not (np.isfinite(lo) and np.isfinite(hi)):
            return np.array([], dtype=float)

        if self.breaks is not None:
            breaks = self.breaks
        elif lo == hi:
            breaks = np.array([lo])
        else:
            locator = mticker.MaxNLocator(nbins=self.n_breaks, steps=[1, 2, 2.5, 5, 10])
            breaks = np.asarray(locator.tick_values(lo, hi), dtype=float)

        slack = (hi - lo) * _BREAK_TOLERANCE
        return breaks[(breaks >= lo - slack) & (breaks <= hi + slack)]

    def get_labels(self, breaks: Sequence[float]) -> List[str]:
        return [self.formatter(float(b)) for b in breaks]

    def break_info(self, rng: Sequence[float]) -> BreakInfo:
        """
        Major/minor breaks and labels inside ``rng``.

        Minor breaks sit halfway between successive major breaks.
        """
        rng = (float(rng[0]), float(rng[1]))
        major = self.get_breaks(rng)
        minor = (major[:-1] + major[1:]) / 2 if major.size > 1 else np.array([], dtype=float)
        labels = self.get_labels(major)
        logger.debug(f"Scale {self.aesthetic}: range={rng}, {major.size} major breaks")
        return BreakInfo(range=rng, major_source=major, minor_source=minor, labels=labels)
