"""
Geoms and layers for projplot.

Main Classes:
    Layer: Data frame + aesthetic mapping + geom
    GeomPoint, GeomSegment, GeomPath: Drawing primitives
    GeomLollipop: Segment-and-point lollipop charts
"""

from .base import Geom, Layer
from .primitives import GeomPath, GeomPoint, GeomSegment
from .lollipop import GeomLollipop, geom_lollipop

GEOMS = {
    "point": GeomPoint,
    "path": GeomPath,
    "segment": GeomSegment,
    "lollipop": GeomLollipop,
}

__all__ = [
    "Geom",
    "Layer",
    "GeomPath",
    "GeomPoint",
    "GeomSegment",
    "GeomLollipop",
    "geom_lollipop",
    "GEOMS",
]
