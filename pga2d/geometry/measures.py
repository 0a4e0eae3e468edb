"""
Metric queries: distances, angles and areas.

Distances are not separate formulas: the distance between two
normalized points is the magnitude of the line joining them, and the
signed distance from a normalized point to a normalized line is their
regressive product.
"""

from __future__ import annotations
from typing import Union
import logging

from ..pga.primitives import Point2D, Line2D
from ..pga.operators import vee, dot, join
from ..core.constants import DEFAULT_EPS
from ..core.exceptions import DegenerateInputError
from .constructions import move, displacement

logger = logging.getLogger(__name__)


def distance_point_point(p1: Point2D, p2: Point2D) -> float:
    """
    Euclidean distance between two points.

    Args:
        p1, p2: Finite points (any homogeneous scale)

    Returns:
        |vee(p1, p2)| on normalized points, always >= 0
    """
    return vee(p1.normalized(), p2.normalized()).magnitude()


def distance_point_line(p: Point2D, l: Line2D) -> float:
    """
    Perpendicular distance from a point to a line.

    Returns:
        |vee(p, l)| on normalized operands
    """
    return abs(vee(p.normalized(), l.normalized()))


def distance(
    a: Union[Point2D, Line2D],
    b: Union[Point2D, Line2D]
) -> float:
    """
    Distance between a point and a point or line, in either order.
    """
    if isinstance(a, Point2D) and isinstance(b, Point2D):
        return distance_point_point(a, b)
    if isinstance(a, Point2D) and isinstance(b, Line2D):
        return distance_point_line(a, b)
    if isinstance(a, Line2D) and isinstance(b, Point2D):
        return distance_point_line(b, a)
    raise TypeError(
        f"distance expects points and lines with at least one point, "
        f"got ({type(a).__name__}, {type(b).__name__})"
    )


def area_triangle(t1: Point2D, t2: Point2D, t3: Point2D) -> float:
    """
    Signed area of the triangle t1, t2, t3.

    Half of vee(vee(t1, t2), t3) on points rescaled to w = 1.
    Positive for counter-clockwise winding, negative for clockwise.
    """
    t1, t2, t3 = t1.dehomogenized(), t2.dehomogenized(), t3.dehomogenized()
    return vee(vee(t1, t2), t3) / 2


def point_segment_distance(
    p: Point2D,
    a: Point2D,
    b: Point2D,
    eps: float = DEFAULT_EPS
) -> float:
    """
    Distance from p to the segment a-b.

    Projects p onto the line through a and b, clamps the projection
    parameter to [0, |b - a|] and measures the distance to the clamped
    point. The plain line distance would undercount whenever p projects
    outside the segment.

    Raises:
        DegenerateInputError: If the segment has zero length.
    """
    p, a, b = p.dehomogenized(), a.dehomogenized(), b.dehomogenized()
    segment = join(a, b)
    length = segment.magnitude()
    if length <= eps:
        logger.debug(f"Rejecting zero-length segment at {a!r}")
        raise DegenerateInputError(f"Segment {a!r} -> {b!r} has zero length")

    # dot of the two joins through a is (p - a) . (b - a)
    t = dot(join(a, p), segment) / length
    t = min(max(t, 0.0), length)

    closest = move(a, displacement(a, b).unit() * t)
    return distance_point_point(closest, p)
