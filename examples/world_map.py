"""
World Map Projection Example

This example draws a coarse world graticule outline and a handful of cities
in several map projections. It shows how to pick a projection by preset name
or PROJ string, how to restrict the map to a region with xlim/ylim, and how to
combine path and point layers on one Plot.

Output: PNG files for Robinson, Winkel Tripel and a USA Albers close-up.
"""

import logging
from pathlib import Path

import numpy as np
import pandas as pd

from projplot import Config, Plot, RenderError, coord_proj, plot_map
from projplot.geoms import GeomPath, GeomPoint


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# ============================================================================
# Build Sample Data
# ============================================================================

# Outline of the globe: one closed ring traced along the map edges
edge = np.linspace(-180, 180, 91)
globe = pd.DataFrame({
    "long": np.concatenate([edge, np.full(46, 180.0), edge[::-1], np.full(46, -180.0)]),
    "lat": np.concatenate([np.full(91, -90.0), np.linspace(-90, 90, 46),
                           np.full(91, 90.0), np.linspace(90, -90, 46)]),
    "group": 1,
})

cities = pd.DataFrame({
    "name": ["New York", "Denver", "Los Angeles", "London", "Tokyo", "Sydney"],
    "lon": [-74.0, -104.99, -118.24, -0.13, 139.69, 151.21],
    "lat": [40.71, 39.74, 34.05, 51.51, 35.68, -33.87],
})

Path("output").mkdir(parents=True, exist_ok=True)

# ============================================================================
# Whole-World Maps
# ============================================================================

print("Drawing world maps")
print("=" * 60)

for name in ("robinson", "wintri"):
    try:
        output = plot_map(
            globe,
            group="group",
            coord=coord_proj(name),
            output_path=f"output/world_{name}.png",
        )
        print(f"  Success: {output}")
    except RenderError as e:
        print(f"  Error: {e}")

# ============================================================================
# Regional Close-up With Layers
# ============================================================================

print()
print("Drawing USA close-up (Albers equal area)")
print("-" * 60)

config = Config(figure_width=8, figure_height=5, panel_background="#1f2328")
plot = Plot(coord=coord_proj("usa_albers", xlim=(-125, -66), ylim=(24, 50)), config=config)
plot.add_layer(GeomPath(), globe, {"x": "long", "y": "lat", "group": "group"})
plot.add_layer(GeomPoint(), cities, {"x": "lon", "y": "lat"})

plot.render()
output = plot.save("output/usa_albers.png")
plot.close()
print(f"  Success: {output}")

print()
print("=" * 60)
print("World map examples complete!")
