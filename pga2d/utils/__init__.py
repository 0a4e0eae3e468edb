"""
Utility functions for PGA2D.

Includes configuration management and matplotlib visualization helpers.
"""

from .config import Config, load_config, save_config
from .visualization import (
    PlotStyle,
    line_segment_in_box,
    plot_points,
    plot_direction,
    plot_line,
    plot_polygon,
    plot_scene,
)

__all__ = [
    # Configuration
    "Config",
    "load_config",
    "save_config",
    # Visualization
    "PlotStyle",
    "line_segment_in_box",
    "plot_points",
    "plot_direction",
    "plot_line",
    "plot_polygon",
    "plot_scene",
]
