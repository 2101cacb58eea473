"""
Lollipop Chart Example

This example draws a lollipop chart (a thin segment from zero up to each
value, topped with a dot) from a small table of counts, first with the
convenience function and then as a layer on a Plot with custom styling.

Output: Two PNG files in ./output.
"""

import logging
from pathlib import Path

import pandas as pd

from projplot import Config, Plot, geom_lollipop, plot_lollipop


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

counts = pd.DataFrame({
    "year": list(range(2010, 2022)),
    "releases": [3, 5, 4, 8, 12, 9, 14, 11, 7, 13, 16, 10],
})

Path("output").mkdir(parents=True, exist_ok=True)

# ============================================================================
# Convenience Function
# ============================================================================

output = plot_lollipop(
    counts,
    x="year",
    y="releases",
    point_colour="steelblue",
    output_path="output/lollipop_basic.png",
)
print(f"Success: {output}")

# ============================================================================
# Layer on a Plot
# ============================================================================

config = Config(figure_width=8, figure_height=4, grid_color="#d0d0d0", panel_background="white")
plot = Plot(config=config)
plot.add_layer(geom_lollipop(counts, {"x": "year", "y": "releases"}, point_colour="firebrick", point_size=3))
plot.render()
output = plot.save("output/lollipop_styled.png")
plot.close()
print(f"Success: {output}")
