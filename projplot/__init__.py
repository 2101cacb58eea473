"""
projplot - Map projections and extra geoms for grammar-of-graphics plots on matplotlib.

This package provides a PROJ-backed coordinate system that draws
longitude/latitude data in any map projection PROJ supports, with
graticule gridlines and degree-labelled axes, plus a lollipop geom for
segment-and-dot charts.

Quick Start:
    >>> import pandas as pd
    >>> from projplot import plot_map, coord_proj
    >>>
    >>> world = pd.read_csv("world.csv")
    >>> plot_map(world, group="group", coord=coord_proj("+proj=wintri"),
    ...          output_path="world_wintri.png")

    >>> from projplot import plot_lollipop
    >>> plot_lollipop(counts, x="year", y="n", point_colour="steelblue",
    ...               output_path="counts.png")

Advanced Usage:
    >>> from projplot import Plot, Config, PROJECTIONS
    >>> from projplot.geoms import GeomPath, GeomPoint
    >>>
    >>> config = Config(figure_width=12, panel_background="#1f2328")
    >>> plot = Plot(coord=coord_proj("usa_albers"), config=config)
    >>> plot.add_layer(GeomPath(), states, {"x": "long", "y": "lat", "group": "group"})
    >>> plot.add_layer(GeomPoint(), cities, {"x": "lon", "y": "lat"})
    >>> fig, ax = plot.render()
"""

__version__ = "0.1.0"

# Initialize logging with default settings
from .logging_config import setup_logging
setup_logging()

# Core constants and configuration
from .constants import PROJECTIONS, DEFAULT_PROJECTION
from .config import Config

# Coordinate systems
from .coords import (
    Coord,
    CoordCartesian,
    CoordProj,
    PanelParams,
    ProjectionSpec,
    coord_cartesian,
    coord_proj,
)

# Geoms
from .geoms import GeomLollipop, GeomPath, GeomPoint, GeomSegment, Layer, geom_lollipop

# Plot assembly
from .plot import Plot

# User-facing API
from .api import coord_from_config, plot_lollipop, plot_map, project_frame

# Exceptions
from .exceptions import (
    ProjplotError,
    InvalidParameterError,
    DataError,
    RenderError,
)

__all__ = [
    # Version info
    "__version__",

    # Constants and config
    "PROJECTIONS",
    "DEFAULT_PROJECTION",
    "Config",

    # Coordinate systems
    "Coord",
    "CoordCartesian",
    "CoordProj",
    "PanelParams",
    "ProjectionSpec",
    "coord_cartesian",
    "coord_proj",

    # Geoms
    "GeomLollipop",
    "GeomPath",
    "GeomPoint",
    "GeomSegment",
    "Layer",
    "geom_lollipop",

    # Plot and API
    "Plot",
    "coord_from_config",
    "plot_lollipop",
    "plot_map",
    "project_frame",

    # Exceptions
    "ProjplotError",
    "InvalidParameterError",
    "DataError",
    "RenderError",
]
