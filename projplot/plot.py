"""
Orchestration module for complete plot creation.

This module provides the Plot class that coordinates layer data
preparation, scale training, coordinate-system training and rendering. The
panel is a matplotlib Axes spanning the unit square; coordinate systems map
data into it and supply the background gridlines and axis guides.
"""

import logging
import os
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from .config import Config
from .coords import Coord, CoordCartesian, PanelParams
from .geoms import Geom, Layer
from .rendering import Theme
from .scales import ContinuousScale

logger = logging.getLogger("projplot.plot")


class Plot:
    """
    Assemble layers, scales and a coordinate system into a figure.

    The rendering workflow:
    1. Map aesthetics and prepare each layer's data
    2. Train the x and y scales on all layers
    3. Train the coordinate system (panel ranges, breaks, labels)
    4. Draw the panel background and gridlines (zorder 0-1)
    5. Draw layers in the order they were added (zorder 3-4)
    6. Place axis guides and apply the coordinate system's aspect ratio

    Attributes:
        coord: Coordinate system (CoordCartesian when not given)
        config: Configuration object with display settings
        theme: Panel styling derived from config
        layers: Layers in drawing order
        fig: Matplotlib Figure (None until render called)
        ax: Matplotlib Axes (None until render called)

    Example:
        >>> from projplot import Plot, coord_proj
        >>> from projplot.geoms import Layer, GeomPath
        >>>
        >>> plot = Plot(coord=coord_proj("+proj=wintri"))
        >>> plot.add_layer(GeomPath(), world, {"x": "long", "y": "lat", "group": "group"})
        >>> fig, ax = plot.render()
        >>> plot.save("world.png")
    """

    def __init__(self, coord: Optional[Coord] = None, config: Optional[Config] = None):
        self.coord = coord if coord is not None else CoordCartesian()
        self.config = config if config is not None else Config()
        self.theme = Theme.from_config(self.config)
        self.layers: List[Layer] = []

        self.fig = None
        self.ax = None
        self.panel_params: Optional[PanelParams] = None

        logger.debug(f"Initialized Plot with {type(self.coord).__name__}")

    def add_layer(
        self,
        geom,
        data: Optional[pd.DataFrame] = None,
        mapping: Optional[Dict[str, str]] = None,
        **params
    ) -> "Plot":
        """
        Add a layer; accepts a ready ``Layer`` or a geom plus data and mapping.

        Returns:
            Self for method chaining
        """
        if isinstance(geom, Layer):
            layer = geom
        elif isinstance(geom, Geom):
            layer = Layer(geom, data, mapping, **params)
        else:
            raise TypeError(f"Expected a Layer or Geom, got {type(geom).__name__}")
        self.layers.append(layer)
        return self

    def _make_scales(self) -> Tuple[ContinuousScale, ContinuousScale]:
        return (
            ContinuousScale("x", formatter=self.coord.label_formatter("x")),
            ContinuousScale("y", formatter=self.coord.label_formatter("y")),
        )

    def build(self) -> Tuple[PanelParams, List[pd.DataFrame]]:
        """
        Prepare layer data and train scales and the coordinate system.

        Returns:
            Tuple of (panel parameters, per-layer data frames)
        """
        layer_data = [layer.compute_aesthetics() for layer in self.layers]

        x_scale, y_scale = self._make_scales()
        for data in layer_data:
            x_scale.train_df(data)
            y_scale.train_df(data)

        self.panel_params = self.coord.train(x_scale, y_scale)
        logger.debug(
            f"Built plot: {len(self.layers)} layers, "
            f"x_range={self.panel_params.x_range}, y_range={self.panel_params.y_range}"
        )
        return self.panel_params, layer_data

    def create_figure(self) -> Tuple[plt.Figure, plt.Axes]:
        """Create the figure and a panel Axes spanning the unit square."""
        fig = plt.figure(
            figsize=(self.config.figure_width, self.config.figure_height),
            dpi=self.config.default_dpi
        )
        fig.patch.set_facecolor(self.config.background_color)

        ax = fig.add_subplot(1, 1, 1)
        ax.set_xlim(0.0, 1.0)
        ax.set_ylim(0.0, 1.0)
        ax.set_facecolor("none")
        ax.set_xmargin(0)
        ax.set_ymargin(0)
        ax.autoscale(False)
        for spine in ax.spines.values():
            spine.set_visible(False)
        ax.tick_params(length=0, colors=self.theme.axis_label_color)
        return fig, ax

    def render(self) -> Tuple[plt.Figure, plt.Axes]:
        """
        Render the plot.

        Returns:
            Tuple of (figure, axes)
        """
        logger.info(f"Rendering plot with {len(self.layers)} layers")

        panel_params, layer_data = self.build()
        self.fig, self.ax = self.create_figure()

        grill = self.coord.render_bg(panel_params, self.theme)
        grill.draw(self.ax)

        for layer, data in zip(self.layers, layer_data):
            artists = layer.draw(self.ax, data, panel_params, self.coord)
            logger.debug(f"Drew {layer.geom.name}: {len(data)} rows, {len(artists)} artists")

        axis_h = self.coord.render_axis_h(panel_params, self.theme)
        axis_v = self.coord.render_axis_v(panel_params, self.theme)
        if axis_h is not None:
            axis_h.draw(self.ax, self.theme)
        else:
            self.ax.set_xticks([])
        if axis_v is not None:
            axis_v.draw(self.ax, self.theme)
        else:
            self.ax.set_yticks([])

        aspect = self.coord.aspect(panel_params)
        if aspect is not None and np.isfinite(aspect) and aspect > 0:
            self.ax.set_box_aspect(aspect)

        logger.info("Plot rendering complete")
        return self.fig, self.ax

    def save(
        self,
        output_path: str,
        dpi: Optional[int] = None,
        bbox_inches: str = 'tight',
        pad_inches: float = 0.05
    ) -> str:
        """
        Save the rendered plot to file.

        Args:
            output_path: Path or string for output file
            dpi: Optional DPI override (uses config.default_dpi if None)
            bbox_inches: Bbox setting for savefig (default: 'tight')
            pad_inches: Padding (inches) around tight bbox

        Returns:
            Path to saved file

        Raises:
            ValueError: If the plot has not been rendered yet
        """
        if self.fig is None:
            raise ValueError("Plot has not been rendered yet. Call render() first.")

        if dpi is None:
            dpi = self.config.default_dpi

        logger.info(f"Saving plot to {output_path} (dpi={dpi})")
        self.fig.savefig(
            output_path,
            dpi=dpi,
            bbox_inches=bbox_inches,
            pad_inches=pad_inches,
            facecolor=self.fig.get_facecolor(),
        )

        file_size = os.path.getsize(output_path) / 1024
        logger.info(f"Plot saved: {output_path} ({file_size:.1f} KB)")

        return str(output_path)

    def close(self) -> None:
        """Close the figure and release matplotlib state."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
