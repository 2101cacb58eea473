"""
Coordinate systems for projplot.

Main Classes:
    Coord: Interface every coordinate system implements (train, transform,
        render_bg, render_axis_h, render_axis_v)
    CoordProj: PROJ-backed map projection coordinate system
    CoordCartesian: Linear coordinate system for non-map plots

Example:
    >>> from projplot.coords import coord_proj
    >>> coord = coord_proj("+proj=wintri")
"""

from .base import Coord, PanelParams
from .proj import (
    CoordProj,
    ProjectionSpec,
    ProjectedRange,
    clamp_lonlat,
    coord_proj,
    limit_grid_range,
    project_points,
    resolve_projection,
)
from .cartesian import CoordCartesian, coord_cartesian

__all__ = [
    "Coord",
    "PanelParams",
    "CoordProj",
    "ProjectionSpec",
    "ProjectedRange",
    "clamp_lonlat",
    "coord_proj",
    "limit_grid_range",
    "project_points",
    "resolve_projection",
    "CoordCartesian",
    "coord_cartesian",
]
