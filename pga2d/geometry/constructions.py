"""
Geometric constructions: new points and lines built from old ones.

Every function is a composition of the PGA operators:
- move / displacement: affine arithmetic on points and directions
- join / intersect: regressive and outer products
- project: inner product, then re-composition with the outer product
- reflect: projection (points) or the sandwich product (lines)
"""

from __future__ import annotations
from typing import Union
import logging
import math

from ..pga.primitives import Point2D, Dir2D, Line2D
from ..pga.operators import dot, wedge, join, meet
from ..core.constants import DEFAULT_EPS
from ..core.exceptions import DegenerateInputError

logger = logging.getLogger(__name__)


def move(p: Point2D, d: Dir2D) -> Point2D:
    """Displace the point p along the direction d."""
    return p + d


def displacement(p1: Point2D, p2: Point2D) -> Dir2D:
    """Direction from p1 to p2; the zero direction iff p1 == p2."""
    return p2 - p1


def intersect(l1: Line2D, l2: Line2D, eps: float = DEFAULT_EPS) -> Point2D:
    """
    Intersection point of two lines, dehomogenized to w = 1.

    Args:
        l1, l2: Lines to intersect
        eps: Relative tolerance on the meet's weight. The weight equals
             |n1| |n2| sin(angle), so this bounds the sine of the angle.

    Raises:
        DegenerateInputError: If the lines are parallel or coincident.
    """
    hp = meet(l1, l2)
    scale = math.hypot(l1.a, l1.b) * math.hypot(l2.a, l2.b)
    if abs(hp.w) <= eps * scale:
        logger.debug(f"Rejecting intersection of parallel lines {l1!r} and {l2!r}")
        raise DegenerateInputError(f"Lines {l1!r} and {l2!r} are parallel")
    return hp.scale(1.0 / hp.w)


def project_point_line(p: Point2D, l: Line2D) -> Point2D:
    """
    Project a point onto a line.

    dot(l, p) is the perpendicular to l through p; wedging it back with l
    gives the foot of the perpendicular. (The scalar part dot(d, l) of
    the full product d * l vanishes since d is perpendicular to l.)

    Returns:
        Closest point to p on l, with w = 1

    Raises:
        DegenerateInputError: If p is ideal or l is the line at infinity.
    """
    perpendicular = dot(l, p)
    foot = wedge(perpendicular, l)
    if foot.is_ideal():
        raise DegenerateInputError(f"Cannot project {p!r} onto {l!r}")
    return foot.dehomogenized()


def project_line_point(l: Line2D, p: Point2D) -> Line2D:
    """
    Project a line onto a point.

    Returns:
        The line through p parallel to l, with l's orientation

    Raises:
        DegenerateInputError: If p is ideal or l is the line at infinity.
    """
    perpendicular = dot(l, p)
    # dot(perpendicular, p) carries a factor -w², flip it back
    parallel = -dot(perpendicular, p)
    if parallel.is_ideal():
        raise DegenerateInputError(f"Cannot project {l!r} onto {p!r}")
    return parallel


def project(
    a: Union[Point2D, Line2D],
    b: Union[Point2D, Line2D]
) -> Union[Point2D, Line2D]:
    """
    Project a onto b.

    point onto line -> foot of the perpendicular (Point2D)
    line onto point -> parallel line through the point (Line2D)
    """
    if isinstance(a, Point2D) and isinstance(b, Line2D):
        return project_point_line(a, b)
    if isinstance(a, Line2D) and isinstance(b, Point2D):
        return project_line_point(a, b)
    raise TypeError(
        f"project expects (Point2D, Line2D) or (Line2D, Point2D), "
        f"got ({type(a).__name__}, {type(b).__name__})"
    )


def reflect_point_line(p: Point2D, l: Line2D) -> Point2D:
    """
    Reflect a point across a line.

    Splits p into its projection on l plus a perpendicular remainder and
    flips the remainder: p' = para - (p - para) = 2 * project(p, l) - p.

    Returns:
        Mirrored point, with w = 1
    """
    p = p.dehomogenized()
    para = project_point_line(p, l).as_multivector()
    perp = p.as_multivector() - para
    return Point2D.from_multivector(para - perp).dehomogenized()


def reflect_line_line(l: Line2D, mirror: Line2D) -> Line2D:
    """
    Reflect a line across a mirror line.

    Uses the sandwich -m * l * ~m with m the normalized mirror. The
    leading sign makes the line's orientation reflect along with its
    position, so points on the positive side of l map to the positive
    side of the result.

    Raises:
        DegenerateInputError: If the mirror is the line at infinity.
    """
    m = mirror.normalized()
    reflected = -(m * l * m.reverse())
    return Line2D.from_multivector(reflected)


def reflect(
    a: Union[Point2D, Line2D],
    mirror: Line2D
) -> Union[Point2D, Line2D]:
    """Reflect a point or a line across the mirror line."""
    if not isinstance(mirror, Line2D):
        raise TypeError(f"mirror must be a Line2D, got {type(mirror).__name__}")
    if isinstance(a, Point2D):
        return reflect_point_line(a, mirror)
    if isinstance(a, Line2D):
        return reflect_line_line(a, mirror)
    raise TypeError(f"reflect expects a Point2D or Line2D, got {type(a).__name__}")
