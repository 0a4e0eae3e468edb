"""
Visualization utilities for PGA2D.

Provides plotting helpers for:
- Points and directions
- Infinite lines, clipped to a view box
- Polygons and triangles
- Whole scenes combining all of the above
"""

import numpy as np
from typing import Optional, Tuple, Sequence, Any
from dataclasses import dataclass

from ..pga.primitives import Point2D, Dir2D, Line2D, points_to_array
from ..core.exceptions import DegenerateInputError


# =============================================================================
# Configuration and Style
# =============================================================================

@dataclass
class PlotStyle:
    """Plotting style configuration."""
    figsize: Tuple[int, int] = (6, 6)
    dpi: int = 100
    point_color: str = '#FF6B6B'
    line_color: str = '#4ECDC4'
    polygon_color: str = '#1a1a2e'
    polygon_alpha: float = 0.2
    marker_size: float = 30.0
    grid_alpha: float = 0.3


DEFAULT_STYLE = PlotStyle()


def _ensure_matplotlib():
    """Ensure matplotlib is available."""
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError:
        raise ImportError(
            "matplotlib is required for visualization. "
            "Install with: pip install matplotlib"
        )


def _get_ax(ax: Any, style: PlotStyle):
    if ax is not None:
        return ax
    plt = _ensure_matplotlib()
    _, ax = plt.subplots(figsize=style.figsize, dpi=style.dpi)
    return ax


def line_segment_in_box(
    line: Line2D,
    bounds: Tuple[float, float, float, float]
) -> np.ndarray:
    """
    Two points of an infinite line spanning the view box.

    Args:
        line: Line to clip
        bounds: (xmin, xmax, ymin, ymax)

    Returns:
        Array of shape (2, 2) with the endpoints

    Raises:
        DegenerateInputError: For the line at infinity
    """
    if line.is_ideal():
        raise DegenerateInputError("The line at infinity cannot be drawn")
    xmin, xmax, ymin, ymax = bounds
    a, b, c = line.a, line.b, line.c
    if abs(b) >= abs(a):
        xs = np.array([xmin, xmax])
        ys = -(a * xs + c) / b
    else:
        ys = np.array([ymin, ymax])
        xs = -(b * ys + c) / a
    return np.stack([xs, ys], axis=-1)


# =============================================================================
# Primitive Plots
# =============================================================================

def plot_points(
    points: Sequence[Point2D],
    ax: Any = None,
    labels: Optional[Sequence[str]] = None,
    style: PlotStyle = None,
):
    """
    Scatter-plot finite points.

    Args:
        points: Points to draw (ideal points are rejected)
        ax: Existing matplotlib axes (created if None)
        labels: Optional annotation per point
        style: Plot style

    Returns:
        The matplotlib axes
    """
    style = style or DEFAULT_STYLE
    ax = _get_ax(ax, style)
    coords = points_to_array(points)
    ax.scatter(coords[:, 0], coords[:, 1], s=style.marker_size, c=style.point_color, zorder=3)
    if labels is not None:
        for (x, y), label in zip(coords, labels):
            ax.annotate(label, (x, y), textcoords="offset points", xytext=(4, 4))
    return ax


def plot_direction(
    d: Dir2D,
    start: Point2D,
    ax: Any = None,
    style: PlotStyle = None,
):
    """Draw a direction as an arrow starting at a finite point."""
    style = style or DEFAULT_STYLE
    ax = _get_ax(ax, style)
    x, y = start.cartesian()
    ax.annotate(
        "", xy=(x + d.x, y + d.y), xytext=(x, y),
        arrowprops=dict(arrowstyle="->", color=style.point_color),
    )
    return ax


def plot_line(
    line: Line2D,
    ax: Any = None,
    bounds: Tuple[float, float, float, float] = (-5.0, 5.0, -5.0, 5.0),
    style: PlotStyle = None,
):
    """Draw an infinite line clipped to bounds (xmin, xmax, ymin, ymax)."""
    style = style or DEFAULT_STYLE
    ax = _get_ax(ax, style)
    segment = line_segment_in_box(line, bounds)
    ax.plot(segment[:, 0], segment[:, 1], color=style.line_color)
    ax.set_xlim(bounds[0], bounds[1])
    ax.set_ylim(bounds[2], bounds[3])
    return ax


def plot_polygon(
    poly: Sequence[Point2D],
    ax: Any = None,
    fill: bool = True,
    style: PlotStyle = None,
):
    """Draw a closed polygon outline, optionally filled."""
    style = style or DEFAULT_STYLE
    ax = _get_ax(ax, style)
    coords = points_to_array(poly)
    closed = np.vstack([coords, coords[:1]])
    ax.plot(closed[:, 0], closed[:, 1], color=style.polygon_color)
    if fill:
        ax.fill(coords[:, 0], coords[:, 1], color=style.polygon_color, alpha=style.polygon_alpha)
    return ax


def plot_scene(
    points: Sequence[Point2D] = (),
    lines: Sequence[Line2D] = (),
    polygons: Sequence[Sequence[Point2D]] = (),
    bounds: Tuple[float, float, float, float] = (-5.0, 5.0, -5.0, 5.0),
    ax: Any = None,
    title: str = None,
    style: PlotStyle = None,
):
    """
    Plot points, lines and polygons on one set of axes.

    Returns:
        The matplotlib axes
    """
    style = style or DEFAULT_STYLE
    ax = _get_ax(ax, style)

    for poly in polygons:
        plot_polygon(poly, ax=ax, style=style)
    for line in lines:
        plot_line(line, ax=ax, bounds=bounds, style=style)
    if points:
        plot_points(points, ax=ax, style=style)

    ax.set_xlim(bounds[0], bounds[1])
    ax.set_ylim(bounds[2], bounds[3])
    ax.set_aspect('equal')
    ax.grid(True, alpha=style.grid_alpha)
    if title:
        ax.set_title(title)
    return ax
