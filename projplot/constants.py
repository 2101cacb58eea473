"""
Constants and fixed parameters for projplot package.

This module defines projection presets, the numeric constants used by the
projected coordinate system, and default styling values.
"""

# ============================================================================
# Projection Definitions
# ============================================================================

DEFAULT_PROJECTION = (
    "+proj=robin +lon_0=0 +x_0=0 +y_0=0 "
    "+ellps=WGS84 +datum=WGS84 +units=m +no_defs"
)

PROJECTIONS = {
    "robinson": {
        "name": "Robinson (world)",
        "proj": DEFAULT_PROJECTION,
    },
    "wintri": {
        "name": "Winkel Tripel (world)",
        "proj": "+proj=wintri",
    },
    "usa_albers": {
        "name": "Albers Equal Area (contiguous USA)",
        "proj": (
            "+proj=aea +lat_1=29.5 +lat_2=45.5 +lat_0=37.5 +lon_0=-96 "
            "+x_0=0 +y_0=0 +ellps=GRS80 +datum=NAD83 +units=m +no_defs"
        ),
    },
    "greenland": {
        "name": "Polar Stereographic (Greenland)",
        "proj": (
            "+proj=stere +lat_0=90 +lat_ts=70 +lon_0=-45 +k=1 +x_0=0 "
            "+y_0=0 +ellps=WGS84 +datum=WGS84 +units=m +no_defs"
        ),
    },
}

DEFAULT_ELLIPSOID = "sphere"

# ============================================================================
# Projection Boundaries
# ============================================================================

# PROJ treats exact +/-180 and +/-90 as degenerate; inputs are pulled inside.
LONGITUDE_LIMIT = 180.0
LATITUDE_LIMIT = 90.0
LONGITUDE_INSET = 179.99999999999
LATITUDE_INSET = 89.99999999999

# ============================================================================
# Training / Gridline Sampling
# ============================================================================

TRAINING_GRID_SIZE = 50  # points per axis in the range-estimation grid
GRIDLINE_SAMPLES = 50  # points along each background gridline
GRID_EXPANSION = 0.2  # fractional margin added to gridline ranges
DEFAULT_EXPANSION = (0.05, 0.0)  # (mult, add) for continuous scales
DEFAULT_N_BREAKS = 5

# ============================================================================
# Styling Constants
# ============================================================================

PANEL_BACKGROUND = "#EBEBEB"
GRID_COLOR = "#FFFFFF"
GRID_LINEWIDTH = 0.5
GRID_ALPHA = 1.0
GRID_LINESTYLE = "-"
AXIS_LABEL_SIZE = 9
AXIS_LABEL_COLOR = "#4D4D4D"

# ggplot-style sizes are millimetres; matplotlib works in points
POINTS_PER_MM = 72.27 / 25.4

# Lollipop defaults
LOLLIPOP_POINT_SCALE = 2.5
