"""
Typed PGA operators.

The products in algebra.py work on raw multivectors. The functions here
accept primitives (or raw multivectors), apply the same products, and
wrap the result by its grade:

    grade 0 -> float          (e.g. vee(point, line), dot(line, line))
    grade 1 -> Line2D         (e.g. vee(point, point), dot(line, point))
    grade 2 -> Point2D        (e.g. wedge(line, line))
    grade 3 -> float          (pseudoscalar weight, e.g. wedge(line, point))

Raw multivector operands give raw multivector results.
"""

from __future__ import annotations
from typing import Optional, Union
import logging
import math

from .algebra import (
    Multivector,
    geometric_product as _geometric_product,
    outer_product,
    inner_product,
    regressive_product,
)
from .primitives import Point2D, Dir2D, Line2D
from ..core.constants import DEFAULT_EPS_NORM
from ..core.exceptions import NumericDomainError

logger = logging.getLogger(__name__)

Element = Union[Multivector, Point2D, Dir2D, Line2D]
Result = Union[float, Multivector]


def _grade_of(element: Multivector) -> Optional[int]:
    """Grade carried by a primitive type, None for raw multivectors."""
    if isinstance(element, Point2D):
        return 2
    if isinstance(element, Line2D):
        return 1
    return None


def _typed(result: Multivector, grade: Optional[int]) -> Result:
    """Wrap a product result according to its known grade."""
    if grade == 0:
        return result.scalar()
    if grade == 1:
        return Line2D.from_multivector(result)
    if grade == 2:
        return Point2D.from_multivector(result)
    if grade == 3:
        return result.pseudoscalar()
    return result


def wedge(a: Element, b: Element) -> Result:
    """
    Outer product a ∧ b; raises grade.

    wedge(Line2D, Line2D) is their meet: the homogeneous point where the
    lines cross (an ideal point if they are parallel).
    """
    ga, gb = _grade_of(a), _grade_of(b)
    grade = ga + gb if ga is not None and gb is not None else None
    return _typed(outer_product(a, b), grade)


def vee(a: Element, b: Element) -> Result:
    """
    Regressive product a ∨ b; lowers grade.

    vee(Point2D, Point2D) is the line through both points; for
    normalized points its magnitude is their Euclidean distance.
    vee(Point2D, Line2D) is a*x + b*y + c*w: the signed distance when
    both are normalized, positive on the side the line normal points to.
    """
    ga, gb = _grade_of(a), _grade_of(b)
    grade = ga + gb - 3 if ga is not None and gb is not None else None
    return _typed(regressive_product(a, b), grade)


def dot(a: Element, b: Element) -> Result:
    """
    Symmetric inner product a · b.

    dot(Line2D, Line2D) is a1*a2 + b1*b2, the cosine of the angle for
    normalized lines. dot(Line2D, Point2D) is the line through the point
    perpendicular to the given line.
    """
    ga, gb = _grade_of(a), _grade_of(b)
    grade = abs(ga - gb) if ga is not None and gb is not None else None
    return _typed(inner_product(a, b), grade)


def geometric_product(a: Element, b: Element) -> Multivector:
    """Full geometric product; the result is generally of mixed grade."""
    return _geometric_product(a, b)


def reverse(a: Element) -> Element:
    """Reversion ~a, preserving the primitive type."""
    return a.reverse()


def normalize(a: Element, eps: float = DEFAULT_EPS_NORM) -> Element:
    """Metric normalization, preserving the primitive type."""
    return a.normalized(eps=eps)


def magnitude(a: Element) -> float:
    """Metric magnitude √|⟨a ~a⟩₀|."""
    return a.magnitude()


def join(p1: Point2D, p2: Point2D) -> Line2D:
    """Line through two points (p1 ∨ p2), oriented from p1 to p2."""
    return vee(p1, p2)


def meet(l1: Line2D, l2: Line2D) -> Point2D:
    """Homogeneous intersection point of two lines (l1 ∧ l2)."""
    return wedge(l1, l2)


def angle(l1: Line2D, l2: Line2D) -> float:
    """
    Angle between two lines in radians, in [0, π].

    Computed as acos(dot(l1, l2)) on normalized lines. Round-off can push
    the cosine slightly outside [-1, 1]; it is clamped before acos.

    Raises:
        DegenerateInputError: If either line is the line at infinity.
        NumericDomainError: If the cosine is not finite.
    """
    cosine = dot(l1.normalized(), l2.normalized())
    if not math.isfinite(cosine):
        raise NumericDomainError(f"Non-finite cosine {cosine} between {l1!r} and {l2!r}")
    if abs(cosine) > 1.0:
        logger.debug(f"Clamping cosine {cosine!r} into [-1, 1]")
        cosine = max(-1.0, min(1.0, cosine))
    return math.acos(cosine)
