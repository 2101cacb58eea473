"""
Map projection coordinate system backed by PROJ (through pyproj).

``CoordProj`` projects longitude/latitude data with an arbitrary PROJ
definition, estimates the projected extent of the panel from a dense
sampling grid, and draws graticule-style gridlines and axis guides whose
ticks stay at round geographic values.

Coordinate flow:
    data (lon/lat) -> clamp_lonlat (forward only) -> pyproj.Proj
    -> rescale against the trained projected range -> panel space [0, 1]

Example:
    >>> from projplot.coords import coord_proj
    >>> coord = coord_proj("+proj=wintri")
    >>> result = coord.project([0.0, 30.0], [0.0, 45.0])
    >>> xmin, xmax, ymin, ymax = result.range
"""

import logging
import re
import warnings
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np
import pandas as pd
import pyproj
from cartopy.mpl.ticker import LatitudeFormatter, LongitudeFormatter

from .base import Coord, PanelParams
from ..constants import (
    DEFAULT_PROJECTION,
    PROJECTIONS,
    DEFAULT_ELLIPSOID,
    LONGITUDE_LIMIT,
    LATITUDE_LIMIT,
    LONGITUDE_INSET,
    LATITUDE_INSET,
    TRAINING_GRID_SIZE,
    GRIDLINE_SAMPLES,
    GRID_EXPANSION,
)
from ..exceptions import InvalidParameterError
from ..rendering.guides import AxisGuide, Grill, element_background, element_line, split_polylines
from ..scales import expand_default
from ..utils import dist_central_angle, expand_range, finite_range, rescale, validate_limits

logger = logging.getLogger("projplot.coords.proj")

_DATUM_PATTERN = re.compile(r"\+(ellps|datum)=")


def resolve_projection(proj: Optional[str]) -> str:
    """
    Turn a preset name or PROJ definition into a PROJ definition.

    ``None`` selects the Robinson default; names from ``PROJECTIONS`` map to
    their preset strings; anything else is returned unchanged.
    """
    if proj is None:
        return DEFAULT_PROJECTION
    if proj in PROJECTIONS:
        return PROJECTIONS[proj]["proj"]
    return proj


@dataclass(frozen=True)
class ProjectionSpec:
    """
    Projection definition and limits for one ``CoordProj``.

    Attributes:
        proj: PROJ definition string or preset name (None = Robinson)
        inverse: Project from cartographic coordinates back to lon/lat
        degrees: Lon/lat values are in degrees (otherwise radians)
        ellps_default: Ellipsoid appended when ``proj`` names neither an
            ellipsoid nor a datum; None to append nothing
        xlim: Explicit longitude limits overriding the data range
        ylim: Explicit latitude limits overriding the data range
    """

    proj: Optional[str] = None
    inverse: bool = False
    degrees: bool = True
    ellps_default: Optional[str] = DEFAULT_ELLIPSOID
    xlim: Optional[Tuple[float, float]] = None
    ylim: Optional[Tuple[float, float]] = None

    def __post_init__(self):
        proj = resolve_projection(self.proj)
        if not isinstance(proj, str) or not proj.strip():
            raise InvalidParameterError("Projection definition must be a non-empty string")
        object.__setattr__(self, "proj", proj.strip())
        object.__setattr__(self, "xlim", validate_limits("xlim", self.xlim))
        object.__setattr__(self, "ylim", validate_limits("ylim", self.ylim))

    @property
    def definition(self) -> str:
        """PROJ definition handed to pyproj, including the default ellipsoid."""
        if self.ellps_default is None or _DATUM_PATTERN.search(self.proj):
            return self.proj
        return f"{self.proj} +ellps={self.ellps_default}"


@dataclass
class ProjectedRange:
    """Projected coordinates and the bounding range of their finite values."""

    x: np.ndarray
    y: np.ndarray
    range: Tuple[float, float, float, float]


def clamp_lonlat(x, y) -> Tuple[np.ndarray, np.ndarray]:
    """
    Pull longitudes/latitudes at or beyond the poles and antimeridian inside.

    Anything <= -180 or >= 180 longitude (and <= -90 or >= 90 latitude)
    becomes the boundary inset by 1e-11 degrees. NaN passes through.
    """
    x = np.array(x, dtype=float)
    y = np.array(y, dtype=float)
    x[x <= -LONGITUDE_LIMIT] = -LONGITUDE_INSET
    x[x >= LONGITUDE_LIMIT] = LONGITUDE_INSET
    y[y <= -LATITUDE_LIMIT] = -LATITUDE_INSET
    y[y >= LATITUDE_LIMIT] = LATITUDE_INSET
    return x, y


def project_points(spec: ProjectionSpec, x, y, projector: Optional[pyproj.Proj] = None) -> ProjectedRange:
    """
    Project parallel x/y sequences with ``spec``.

    Points PROJ cannot project come back as NaN. Clamping is applied only
    for forward projections.

    Args:
        spec: Projection definition and direction
        x, y: Input coordinates
        projector: Pre-built ``pyproj.Proj`` for ``spec`` (built when None)

    Returns:
        ProjectedRange with the projected arrays and (xmin, xmax, ymin, ymax)
    """
    x = np.asarray(x, dtype=float).ravel()
    y = np.asarray(y, dtype=float).ravel()

    if x.size == 0:
        return ProjectedRange(x=x.copy(), y=y.copy(), range=(np.nan,) * 4)

    if not spec.inverse:
        x, y = clamp_lonlat(x, y)

    if projector is None:
        projector = pyproj.Proj(spec.definition)

    with warnings.catch_warnings(), np.errstate(all="ignore"):
        warnings.simplefilter("ignore")
        px, py = projector(x, y, inverse=spec.inverse, radians=not spec.degrees, errcheck=False)

    px = np.asarray(px, dtype=float)
    py = np.asarray(py, dtype=float)
    px[~np.isfinite(px)] = np.nan
    py[~np.isfinite(py)] = np.nan

    return ProjectedRange(x=px, y=py, range=finite_range(px) + finite_range(py))


def limit_grid_range(rng: Sequence[float], half_span: float) -> Tuple[float, float]:
    """Clip a range so neither end lies more than ``half_span`` from its midpoint."""
    lo, hi = float(rng[0]), float(rng[1])
    mid = (lo + hi) / 2
    return (max(lo, mid - half_span), min(hi, mid + half_span))


class CoordProj(Coord):
    """
    Coordinate system using a PROJ map projection.

    Attributes:
        spec: ProjectionSpec with the projection definition and limits
        orientation: Optional (latitude, longitude, rotation) of the
            projection centre; defaults to the north pole over the middle
            of the longitude range
        grid_resolution: Points per axis in the extent-estimation grid
        gridline_samples: Points along each background gridline
        grid_expansion: Fractional margin added to gridline ranges

    Example:
        >>> coord = CoordProj(ProjectionSpec("+proj=wintri"))
        >>> params = coord.train(x_scale, y_scale)
        >>> panel = coord.transform(df, params)
    """

    def __init__(
        self,
        spec: Optional[ProjectionSpec] = None,
        orientation: Optional[Tuple[float, float, float]] = None,
        grid_resolution: int = TRAINING_GRID_SIZE,
        gridline_samples: int = GRIDLINE_SAMPLES,
        grid_expansion: float = GRID_EXPANSION,
    ):
        self.spec = spec if spec is not None else ProjectionSpec()
        self.orientation = orientation
        self.grid_resolution = grid_resolution
        self.gridline_samples = gridline_samples
        self.grid_expansion = grid_expansion

        # Raises pyproj.exceptions.CRSError for malformed definitions
        self._projector = pyproj.Proj(self.spec.definition)

        logger.debug(
            f"Initialized CoordProj: proj='{self.spec.definition}', "
            f"inverse={self.spec.inverse}, degrees={self.spec.degrees}"
        )

    @property
    def limits(self):
        return {"x": self.spec.xlim, "y": self.spec.ylim}

    def project(self, x, y) -> ProjectedRange:
        """Project raw coordinates without rescaling to panel space."""
        return project_points(self.spec, x, y, projector=self._projector)

    def is_linear(self) -> bool:
        return False

    def label_formatter(self, aesthetic: str):
        if aesthetic == "x":
            return LongitudeFormatter()
        return LatitudeFormatter()

    def transform(self, data: pd.DataFrame, panel_params: PanelParams) -> pd.DataFrame:
        """
        Project the ``x``/``y`` columns of ``data`` into panel space.

        All other columns, the index and the row order are kept. Output is
        rescaled from the trained projected range to [0, 1] without clamping.
        """
        trans = self.project(data["x"].to_numpy(dtype=float), data["y"].to_numpy(dtype=float))

        out = data.copy()
        out["x"] = rescale(trans.x, (0.0, 1.0), panel_params.x_proj)
        out["y"] = rescale(trans.y, (0.0, 1.0), panel_params.y_proj)
        return out

    def _axis_range(self, name: str, scale) -> Tuple[float, float]:
        limits = self.limits[name]
        if limits is None:
            return scale.dimension(expand_default(scale))
        values = scale.transform(limits)
        return (float(np.min(values)), float(np.max(values)))

    def train(self, x_scale, y_scale) -> PanelParams:
        """
        Compute projected panel extent and geographic breaks.

        The projected extent is the bounding box of a dense lon/lat grid
        over the panel ranges, since curved boundaries rarely peak at the
        corners. Breaks are computed on the unprojected ranges.
        """
        ranges = {
            "x": self._axis_range("x", x_scale),
            "y": self._axis_range("y", y_scale),
        }

        orientation = self.orientation
        if orientation is None:
            orientation = (90.0, 0.0, float(np.mean(ranges["x"])))

        gx, gy = np.meshgrid(
            np.linspace(ranges["x"][0], ranges["x"][1], self.grid_resolution),
            np.linspace(ranges["y"][0], ranges["y"][1], self.grid_resolution),
        )
        proj_range = self.project(gx.ravel(), gy.ravel()).range

        x_info = x_scale.break_info(ranges["x"])
        y_info = y_scale.break_info(ranges["y"])

        logger.debug(
            f"Trained CoordProj: x_range={x_info.range}, y_range={y_info.range}, "
            f"x_proj={proj_range[0:2]}, y_proj={proj_range[2:4]}"
        )

        return PanelParams(
            x_range=x_info.range,
            y_range=y_info.range,
            x_proj=tuple(proj_range[0:2]),
            y_proj=tuple(proj_range[2:4]),
            x_major=x_info.major_source,
            x_minor=x_info.minor_source,
            x_labels=x_info.labels,
            y_major=y_info.major_source,
            y_minor=y_info.minor_source,
            y_labels=y_info.labels,
            orientation=orientation,
        )

    def gridline_ranges(self, panel_params: PanelParams) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        """Expanded x/y ranges for gridlines, kept within half a globe of their centres."""
        xrange = expand_range(panel_params.x_range, mul=self.grid_expansion)
        yrange = expand_range(panel_params.y_range, mul=self.grid_expansion)
        return (
            limit_grid_range(xrange, LONGITUDE_LIMIT),
            limit_grid_range(yrange, LATITUDE_LIMIT),
        )

    def _gridlines(self, majors, span, along: str, panel_params: PanelParams):
        """Transform one family of gridlines and split it into polylines."""
        majors = np.asarray(majors, dtype=float)
        if majors.size == 0:
            return []

        # One NaN row after each line keeps successive lines apart
        samples = np.append(np.linspace(span[0], span[1], self.gridline_samples), np.nan)
        fixed = np.repeat(majors, samples.size)
        varying = np.tile(samples, majors.size)
        group = np.repeat(np.arange(majors.size), samples.size)

        if along == "y":
            grid = pd.DataFrame({"x": fixed, "y": varying, "group": group})
        else:
            grid = pd.DataFrame({"x": varying, "y": fixed, "group": group})

        lines = self.transform(grid, panel_params)
        return split_polylines(lines["x"], lines["y"], lines["group"])

    def render_bg(self, panel_params: PanelParams, theme) -> Grill:
        """Panel background with projected longitude and latitude gridlines."""
        xrange, yrange = self.gridline_ranges(panel_params)

        xlines = self._gridlines(panel_params.x_major, yrange, "y", panel_params)
        ylines = self._gridlines(panel_params.y_major, xrange, "x", panel_params)

        logger.debug(f"Rendered background: {len(xlines)} x gridlines, {len(ylines)} y gridlines")

        return Grill(
            background=element_background(theme),
            xlines=element_line(xlines, theme, "panel.grid.major.x"),
            ylines=element_line(ylines, theme, "panel.grid.major.y"),
        )

    def render_axis_h(self, panel_params: PanelParams, theme) -> Optional[AxisGuide]:
        """Bottom axis: longitude ticks projected along the lower latitude limit."""
        if panel_params.x_major is None or len(panel_params.x_major) == 0:
            return None

        x_intercept = pd.DataFrame({
            "x": np.asarray(panel_params.x_major, dtype=float),
            "y": panel_params.y_range[0],
        })
        pos = self.transform(x_intercept, panel_params)
        return AxisGuide(pos["x"].to_numpy(), panel_params.x_labels, side="bottom")

    def render_axis_v(self, panel_params: PanelParams, theme) -> Optional[AxisGuide]:
        """Left axis: latitude ticks projected along the western longitude limit."""
        if panel_params.y_major is None or len(panel_params.y_major) == 0:
            return None

        y_intercept = pd.DataFrame({
            "x": panel_params.x_range[0],
            "y": np.asarray(panel_params.y_major, dtype=float),
        })
        pos = self.transform(y_intercept, panel_params)
        return AxisGuide(pos["y"].to_numpy(), panel_params.y_labels, side="left")

    def aspect(self, panel_params: PanelParams) -> Optional[float]:
        width = np.diff(panel_params.x_proj)[0]
        height = np.diff(panel_params.y_proj)[0]
        if not (np.isfinite(width) and np.isfinite(height)) or width == 0:
            return None
        return float(height / width)

    def distance(self, x, y, panel_params: PanelParams) -> np.ndarray:
        """Great-circle distances between successive points relative to the panel span."""
        max_dist = dist_central_angle(panel_params.x_range, panel_params.y_range)[0]
        return dist_central_angle(x, y) / max_dist


def coord_proj(
    proj: Optional[str] = None,
    inverse: bool = False,
    degrees: bool = True,
    ellps_default: Optional[str] = DEFAULT_ELLIPSOID,
    xlim: Optional[Sequence[float]] = None,
    ylim: Optional[Sequence[float]] = None,
) -> CoordProj:
    """
    Create a projected coordinate system.

    Args:
        proj: PROJ definition or preset name; None for Robinson
        inverse: Project from a cartographic projection into lon/lat
        degrees: Lon/lat values are in degrees rather than radians
        ellps_default: Ellipsoid added when ``proj`` has no datum or
            ellipsoid; None to add nothing
        xlim: Longitude limits in degrees
        ylim: Latitude limits in degrees

    Note:
        Forward projections assume longitudes within -180:180 and latitudes
        within -90:90; values at or beyond those bounds are pulled inside.

    Example:
        >>> usa = coord_proj("usa_albers", xlim=(-125, -66), ylim=(24, 50))
    """
    spec = ProjectionSpec(
        proj=proj,
        inverse=inverse,
        degrees=degrees,
        ellps_default=ellps_default,
        xlim=None if xlim is None else tuple(xlim),
        ylim=None if ylim is None else tuple(ylim),
    )
    return CoordProj(spec)
