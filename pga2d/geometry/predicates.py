"""
Boolean geometric predicates.

All predicates reduce to the sign of vee(point, line): positive on the
side the line normal points to, negative on the other, zero on the line.
Inputs are rescaled to w = 1 first so that the sign is not flipped by a
negative homogeneous weight.

Tolerances are relative. A side test compares vee(p, join(a, b)) against
eps * |join(a, b)|, i.e. the distance of p from the line against eps
times |ab|, and corner tests compare twice the corner area against eps
times the product of the two edge lengths. Scaling every input by the
same factor never changes a predicate.

Boundary conventions:
- point_in_triangle / point_in_polygon: points on an edge count as inside.
- segment_segment_intersect: segments that only touch (an endpoint on the
  other segment, or collinear overlap) do not intersect.
- is_convex_quad: quads with three collinear consecutive corners are not
  convex.
"""

from __future__ import annotations
from typing import List

from ..pga.primitives import Point2D, Line2D
from ..pga.operators import vee, join
from ..core.constants import DEFAULT_EPS
from ..core.exceptions import DegenerateInputError
from ..core.types import Polygon, validate_polygon
from .measures import area_triangle, distance_point_point


def _sign(value: float, eps: float) -> int:
    if value > eps:
        return 1
    if value < -eps:
        return -1
    return 0


def _side(p: Point2D, line: Line2D, eps: float) -> int:
    """Side of a dehomogenized p relative to line, tolerance scaled by |line|."""
    return _sign(vee(p, line), eps * line.magnitude())


def _corner_sign(a: Point2D, b: Point2D, c: Point2D, eps: float) -> int:
    """Turn direction at b along a -> b -> c, tolerance scaled by |ab| |bc|."""
    scale = distance_point_point(a, b) * distance_point_point(b, c)
    return _sign(2.0 * area_triangle(a, b, c), eps * scale)


def _edge_signs(p: Point2D, vertices: List[Point2D], eps: float) -> List[int]:
    """Side of p relative to each directed edge v[i] -> v[i+1] of a closed loop."""
    n = len(vertices)
    return [
        _side(p, join(vertices[i], vertices[(i + 1) % n]), eps)
        for i in range(n)
    ]


def _check_polygon(poly: Polygon) -> List[Point2D]:
    validate_polygon(poly)
    return [v.dehomogenized() for v in poly]


def segment_segment_intersect(
    p1: Point2D,
    p2: Point2D,
    a: Point2D,
    b: Point2D,
    eps: float = DEFAULT_EPS
) -> bool:
    """
    Whether segment p1-p2 crosses segment a-b.

    The segments cross iff the endpoints of each lie strictly on opposite
    sides of the other's supporting line.

    Args:
        p1, p2: Endpoints of the first segment
        a, b: Endpoints of the second segment
        eps: Relative tolerance; an endpoint closer to the other line
            than eps times that segment's length counts as touching
    """
    p1, p2, a, b = (q.dehomogenized() for q in (p1, p2, a, b))

    l1 = join(a, b)
    s1 = _side(p1, l1, eps)
    s2 = _side(p2, l1, eps)

    l2 = join(p1, p2)
    s3 = _side(a, l2, eps)
    s4 = _side(b, l2, eps)

    return s1 * s2 < 0 and s3 * s4 < 0


def triangle_orientation(
    t1: Point2D,
    t2: Point2D,
    t3: Point2D,
    eps: float = DEFAULT_EPS
) -> int:
    """
    Winding of the triangle t1, t2, t3.

    Returns:
        1 for counter-clockwise, -1 for clockwise, 0 when the corners
        are collinear within the relative tolerance eps
    """
    return _corner_sign(t1, t2, t3, eps)


def point_in_triangle(
    p: Point2D,
    t1: Point2D,
    t2: Point2D,
    t3: Point2D,
    eps: float = DEFAULT_EPS
) -> bool:
    """
    Whether p lies inside the triangle t1, t2, t3 (either winding).

    p is inside iff its signed distances to the three edges never take
    both signs. Points on the boundary are inside.

    Raises:
        DegenerateInputError: If the corners are collinear; a triangle
            without area has no inside.
    """
    if triangle_orientation(t1, t2, t3, eps) == 0:
        raise DegenerateInputError("Triangle corners are collinear")
    return point_in_polygon(p, [t1, t2, t3], eps=eps)


def point_in_polygon(p: Point2D, poly: Polygon, eps: float = DEFAULT_EPS) -> bool:
    """
    Whether p lies inside a convex polygon (either winding).

    Generalizes the triangle test: every edge must agree in sign with
    the others. Points on the boundary are inside.

    Raises:
        DegenerateInputError: If the polygon has fewer than 3 vertices.
    """
    vertices = _check_polygon(poly)
    signs = _edge_signs(p.dehomogenized(), vertices, eps)
    return not (1 in signs and -1 in signs)


def is_convex_quad(
    p1: Point2D,
    p2: Point2D,
    p3: Point2D,
    p4: Point2D,
    eps: float = DEFAULT_EPS
) -> bool:
    """
    Whether the quad p1, p2, p3, p4 is convex (either winding).

    Convex iff the turns at the four corners all share the same strict
    sign.
    """
    signs = {
        _corner_sign(p1, p2, p3, eps),
        _corner_sign(p2, p3, p4, eps),
        _corner_sign(p3, p4, p1, eps),
        _corner_sign(p4, p1, p2, eps),
    }
    return signs == {1} or signs == {-1}
