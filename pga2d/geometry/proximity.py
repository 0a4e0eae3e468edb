"""
Point-to-shape distances for triangles and polygons.

Edge distances take the minimum point-segment distance over the edges;
corner distances take the minimum point-point distance over the vertices.
"""

from __future__ import annotations
from typing import Iterable

from ..pga.primitives import Point2D
from ..pga.operators import join
from ..core.types import Polygon, validate_polygon
from .measures import distance_point_point, distance_point_line, point_segment_distance
from .predicates import point_in_triangle, triangle_orientation


def _min_corner_distance(p: Point2D, corners: Iterable[Point2D]) -> float:
    return min(distance_point_point(p, corner) for corner in corners)


def point_polygon_edge_distance(p: Point2D, poly: Polygon) -> float:
    """
    Distance from p to the closest edge of a closed polygon.

    Raises:
        DegenerateInputError: If the polygon has fewer than 3 vertices
            or a zero-length edge.
    """
    validate_polygon(poly)
    n = len(poly)
    return min(
        point_segment_distance(p, poly[i], poly[(i + 1) % n])
        for i in range(n)
    )


def point_triangle_edge_distance(
    p: Point2D,
    t1: Point2D,
    t2: Point2D,
    t3: Point2D
) -> float:
    """
    Distance from p to the closest edge of the triangle t1, t2, t3.

    Inside the triangle the foot of the perpendicular on each edge line
    lies within the edge, so the line distances suffice. Outside, the
    closest point can be a corner and segment distances are needed. A
    triangle with collinear corners has no inside and always takes the
    segment distances.
    """
    if triangle_orientation(t1, t2, t3) != 0 and point_in_triangle(p, t1, t2, t3):
        return min(
            distance_point_line(p, join(t1, t2)),
            distance_point_line(p, join(t2, t3)),
            distance_point_line(p, join(t3, t1)),
        )
    return min(
        point_segment_distance(p, t1, t2),
        point_segment_distance(p, t2, t3),
        point_segment_distance(p, t3, t1),
    )


def point_polygon_corner_distance(p: Point2D, poly: Polygon) -> float:
    """
    Distance from p to the closest vertex of a polygon.

    Raises:
        DegenerateInputError: If the polygon has fewer than 3 vertices.
    """
    validate_polygon(poly)
    return _min_corner_distance(p, poly)


def point_triangle_corner_distance(
    p: Point2D,
    t1: Point2D,
    t2: Point2D,
    t3: Point2D
) -> float:
    """Distance from p to the closest of the three triangle corners."""
    return _min_corner_distance(p, (t1, t2, t3))
