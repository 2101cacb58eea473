"""
Configuration management for projplot package.

This module provides configuration options for plot generation including
figure sizing, DPI, panel styling, and the sampling
resolution used by the projected coordinate system.
"""

import json
import yaml
from dataclasses import dataclass, asdict
from pathlib import Path

from .constants import (
    PANEL_BACKGROUND,
    GRID_COLOR,
    GRID_LINEWIDTH,
    GRID_ALPHA,
    GRID_LINESTYLE,
    AXIS_LABEL_SIZE,
    TRAINING_GRID_SIZE,
    GRIDLINE_SAMPLES,
    GRID_EXPANSION,
)


@dataclass
class Config:
    """Configuration for plot generation.

    Attributes:
        default_dpi: Resolution for output images (dots per inch).
        figure_width: Width of generated figures in inches.
        figure_height: Height of generated figures in inches.
        background_color: Figure background color (any Matplotlib color spec).
        panel_background: Fill color of the plot panel.
        grid_color: Color of major gridlines. Lightened automatically on
            dark panel backgrounds when left at the default.
        grid_linewidth: Width of major gridlines in points.
        grid_alpha: Opacity of major gridlines.
        grid_linestyle: Matplotlib linestyle for major gridlines.
        axis_label_size: Font size of axis tick labels.
        grid_resolution: Points per axis in the grid used to estimate the
            projected extent of the panel.
        gridline_samples: Points sampled along each projected gridline.
        grid_expansion: Fractional margin added to the gridline ranges.
    """

    default_dpi: int = 150
    figure_width: float = 10.0
    figure_height: float = 6.0
    background_color: str = "white"
    panel_background: str = PANEL_BACKGROUND
    grid_color: str = GRID_COLOR
    grid_linewidth: float = GRID_LINEWIDTH
    grid_alpha: float = GRID_ALPHA
    grid_linestyle: str = GRID_LINESTYLE
    axis_label_size: float = AXIS_LABEL_SIZE
    grid_resolution: int = TRAINING_GRID_SIZE
    gridline_samples: int = GRIDLINE_SAMPLES
    grid_expansion: float = GRID_EXPANSION

    @classmethod
    def load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a YAML or JSON file.

        Args:
            path: Path to configuration file (.yaml, .yml, or .json).

        Returns:
            Config instance with loaded settings.

        Raises:
            ValueError: If file format is not supported.
            FileNotFoundError: If file does not exist.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, 'r') as f:
            if path.suffix in ['.yaml', '.yml']:
                data = yaml.safe_load(f) or {}
            elif path.suffix == '.json':
                data = json.load(f)
            else:
                raise ValueError(f"Unsupported file format: {path.suffix}. Use .yaml, .yml, or .json")

        return cls(**data)

    def save_to_file(self, path: Path) -> None:
        """Save configuration to a YAML or JSON file.

        Args:
            path: Path where configuration should be saved.

        Raises:
            ValueError: If file format is not supported.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = asdict(self)

        with open(path, 'w') as f:
            if path.suffix in ['.yaml', '.yml']:
                yaml.dump(data, f, default_flow_style=False, sort_keys=False)
            elif path.suffix == '.json':
                json.dump(data, f, indent=2)
            else:
                raise ValueError(f"Unsupported file format: {path.suffix}. Use .yaml, .yml, or .json")

    def validate(self) -> bool:
        """Validate configuration parameters.

        Returns:
            True if configuration is valid.

        Raises:
            ValueError: If any configuration parameter is invalid.
        """
        if self.default_dpi <= 0:
            raise ValueError("default_dpi must be positive")

        if self.figure_width <= 0 or self.figure_height <= 0:
            raise ValueError("Figure dimensions must be positive")

        if not isinstance(self.background_color, str) or not self.background_color:
            raise ValueError("background_color must be a non-empty string")

        if not isinstance(self.panel_background, str) or not self.panel_background:
            raise ValueError("panel_background must be a non-empty string")

        if self.grid_linewidth < 0:
            raise ValueError("grid_linewidth must be non-negative")

        if not (0.0 <= float(self.grid_alpha) <= 1.0):
            raise ValueError("grid_alpha must be in the range [0.0, 1.0]")

        if self.axis_label_size <= 0:
            raise ValueError("axis_label_size must be positive")

        if not isinstance(self.grid_resolution, int) or self.grid_resolution < 2:
            raise ValueError("grid_resolution must be an integer >= 2")

        if not isinstance(self.gridline_samples, int) or self.gridline_samples < 2:
            raise ValueError("gridline_samples must be an integer >= 2")

        if self.grid_expansion < 0:
            raise ValueError("grid_expansion must be non-negative")

        return True


def get_default_config() -> Config:
    """
    Get a Config instance with default settings.

    Returns:
        Config instance initialized with default values.
    """
    return Config()
