"""
Main API module for projplot package.

This module provides simplified user-facing functions that wrap the Plot
assembly for the common cases: drawing lon/lat data on a map projection,
drawing lollipop charts, and projecting the coordinates of a data frame.

Example:
    >>> import pandas as pd
    >>> from projplot import plot_map
    >>>
    >>> world = pd.read_csv("world.csv")
    >>> plot_map(world, x="long", y="lat", group="group",
    ...          coord=coord_proj("+proj=wintri"), output_path="world.png")
"""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from .config import Config
from .coords import Coord, CoordProj, ProjectionSpec
from .exceptions import DataError, InvalidParameterError, RenderError
from .geoms import GEOMS, Layer, geom_lollipop
from .plot import Plot

logger = logging.getLogger(__name__)


def coord_from_config(config: Config, **projection) -> CoordProj:
    """
    Build a projected coordinate system using the sampling settings of ``config``.

    Args:
        config: Config providing grid_resolution, gridline_samples and grid_expansion
        **projection: ProjectionSpec fields (proj, inverse, degrees, ellps_default, xlim, ylim)

    Example:
        >>> coord = coord_from_config(Config(grid_resolution=100), proj="wintri")
    """
    return CoordProj(
        ProjectionSpec(**projection),
        grid_resolution=config.grid_resolution,
        gridline_samples=config.gridline_samples,
        grid_expansion=config.grid_expansion,
    )


def _finish(plot: Plot, output_path: Optional[Union[str, Path]]) -> Union[str, Tuple[plt.Figure, plt.Axes]]:
    """Render ``plot`` and either save it or hand back the figure."""
    try:
        fig, ax = plot.render()
    except (DataError, InvalidParameterError):
        plot.close()
        raise
    except Exception as e:
        # A failed render may leave a half-drawn figure open
        plot.close()
        raise RenderError(f"Failed to render plot: {e}") from e

    if output_path is None:
        logger.info("Returning figure and axes for interactive use")
        return fig, ax

    output_path = Path(output_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        saved_path = plot.save(str(output_path))
    except Exception as e:
        raise RenderError(f"Failed to save plot to {output_path}: {e}") from e
    finally:
        # Batch callers render many plots; don't let figures pile up
        plot.close()

    logger.info(f"Plot saved successfully to {saved_path}")
    return saved_path


def plot_map(
    data: pd.DataFrame,
    x: str = "long",
    y: str = "lat",
    group: Optional[str] = None,
    geom: str = "path",
    coord: Optional[Coord] = None,
    output_path: Optional[Union[str, Path]] = None,
    config: Optional[Config] = None
) -> Union[str, Tuple[plt.Figure, plt.Axes]]:
    """
    Draw longitude/latitude data on a map projection.

    Args:
        data: Data frame with longitude and latitude columns
        x: Longitude column name
        y: Latitude column name
        group: Optional column separating paths (e.g. polygon ids)
        geom: "path" or "point"
        coord: Coordinate system (Robinson projection when None)
        output_path: Output file path; if None, returns (fig, ax)
        config: Optional Config object

    Returns:
        If output_path provided: path to saved file
        If output_path is None: tuple of (figure, axes)

    Raises:
        InvalidParameterError: If geom is unknown
        DataError: If a column is missing
        RenderError: If rendering or saving fails
    """
    if geom not in ("path", "point"):
        raise InvalidParameterError(f"Unknown map geom '{geom}'. Use 'path' or 'point'")

    if config is None:
        config = Config()

    # pyproj errors for malformed definitions propagate from here unchanged
    if coord is None:
        coord = coord_from_config(config)

    mapping = {"x": x, "y": y}
    if group is not None:
        mapping["group"] = group

    logger.info(f"Creating map: {len(data)} rows, geom={geom}, coord={type(coord).__name__}")

    plot = Plot(coord=coord, config=config)
    plot.add_layer(Layer(GEOMS[geom](), data, mapping))
    return _finish(plot, output_path)


def plot_lollipop(
    data: pd.DataFrame,
    x: str,
    y: str,
    point_colour: Optional[str] = None,
    point_size: Optional[float] = None,
    coord: Optional[Coord] = None,
    output_path: Optional[Union[str, Path]] = None,
    config: Optional[Config] = None
) -> Union[str, Tuple[plt.Figure, plt.Axes]]:
    """
    Draw a lollipop chart.

    Args:
        data: Data frame to draw
        x: Column for the lollipop positions
        y: Column for the lollipop heights
        point_colour: Colour of the points (row colour when None)
        point_size: Size of the points (2.5 times the segment size when None)
        coord: Coordinate system (cartesian when None)
        output_path: Output file path; if None, returns (fig, ax)
        config: Optional Config object

    Returns:
        If output_path provided: path to saved file
        If output_path is None: tuple of (figure, axes)
    """
    logger.info(f"Creating lollipop chart: {len(data)} rows")

    plot = Plot(coord=coord, config=config)
    plot.add_layer(geom_lollipop(
        data,
        {"x": x, "y": y},
        point_colour=point_colour,
        point_size=point_size,
    ))
    return _finish(plot, output_path)


def project_frame(
    data: pd.DataFrame,
    x: str = "long",
    y: str = "lat",
    coord: Optional[CoordProj] = None
) -> pd.DataFrame:
    """
    Project two columns of a data frame without rescaling to a panel.

    Every other column, the index and the row order are preserved; points
    PROJ cannot project become NaN.

    Args:
        data: Source data frame
        x: Longitude (or projected x when inverse) column
        y: Latitude (or projected y when inverse) column
        coord: Projected coordinate system (Robinson when None)

    Returns:
        Copy of ``data`` with ``x`` and ``y`` replaced

    Raises:
        DataError: If a column is missing
    """
    missing = [col for col in (x, y) if col not in data.columns]
    if missing:
        raise DataError(f"Columns not found in data: {missing}. Available columns: {list(data.columns)}")

    if coord is None:
        coord = CoordProj()

    xs = data[x].to_numpy(dtype=float)
    ys = data[y].to_numpy(dtype=float)
    result = coord.project(xs, ys)
    out = data.copy()
    out[x] = result.x
    out[y] = result.y

    # Rows missing a coordinate on input are not projection failures
    finite_input = np.isfinite(xs) & np.isfinite(ys)
    failed = finite_input & ~(np.isfinite(result.x) & np.isfinite(result.y))
    unprojected = int(failed.sum())
    if unprojected:
        logger.warning(
            f"{unprojected} of {int(finite_input.sum())} points with coordinates could not be projected"
        )
    return out
