"""
Rigid motions in 2D PGA.

A motor is an even multivector (scalar + bivector) applied with the
sandwich product X' = M * X * ~M. The same motor moves points, lines
and directions consistently:

- Translator: T = 1 + (dy/2)*e20 - (dx/2)*e01
- Rotor (counter-clockwise by θ about the origin): R = cos(θ/2) - sin(θ/2)*e12
- Rotation about a center c: T_c * R * ~T_c

Directions (ideal points) are invariant under translation and rotate
under rotors, as displacements should.
"""

from __future__ import annotations
from typing import Optional, Union
import math
import torch

from .algebra import Multivector, sandwich, IDX_S, IDX_E01, IDX_E20, IDX_E12
from .primitives import Point2D, Dir2D, Line2D
from ..core.constants import DEFAULT_DTYPE, NUM_COMPONENTS
from ..core.types import Coords2D

Displacement = Union[Dir2D, Coords2D]


def _as_xy(d: Displacement) -> Coords2D:
    if isinstance(d, Point2D):
        return d.x, d.y
    dx, dy = d
    return float(dx), float(dy)


def translator(d: Displacement) -> Multivector:
    """
    Motor translating by d.

    Args:
        d: Direction or (dx, dy) pair

    Returns:
        Translator multivector
    """
    dx, dy = _as_xy(d)
    mv = torch.zeros(NUM_COMPONENTS, dtype=DEFAULT_DTYPE)
    mv[IDX_S] = 1.0
    mv[IDX_E20] = 0.5 * dy
    mv[IDX_E01] = -0.5 * dx
    return Multivector(mv)


def rotor(angle: float, center: Optional[Point2D] = None) -> Multivector:
    """
    Motor rotating counter-clockwise by angle (radians).

    Args:
        angle: Rotation angle in radians
        center: Center of rotation (defaults to origin)

    Returns:
        Rotor, or motor T * R * ~T when a center is given
    """
    mv = torch.zeros(NUM_COMPONENTS, dtype=DEFAULT_DTYPE)
    mv[IDX_S] = math.cos(0.5 * angle)
    mv[IDX_E12] = -math.sin(0.5 * angle)
    r = Multivector(mv)

    if center is None:
        return r

    # Translate to origin, rotate, translate back
    t = translator(center.cartesian())
    return t * r * t.reverse()


def transform_point(p: Point2D, motor: Multivector) -> Point2D:
    """
    Apply a motor to a point.

    Finite points come back dehomogenized (w = 1); directions stay ideal.
    """
    moved = sandwich(motor, p)
    if isinstance(p, Dir2D):
        return Dir2D.from_multivector(moved)
    result = Point2D.from_multivector(moved)
    if result.is_ideal():
        return result
    return result.dehomogenized()


def transform_line(line: Line2D, motor: Multivector) -> Line2D:
    """Apply a motor to a line; unit motors preserve the line's scale."""
    return Line2D.from_multivector(sandwich(motor, line))


def translate(element: Union[Point2D, Line2D], d: Displacement) -> Union[Point2D, Line2D]:
    """Translate a point or line by d."""
    t = translator(d)
    if isinstance(element, Line2D):
        return transform_line(element, t)
    return transform_point(element, t)


def rotate(
    element: Union[Point2D, Line2D],
    angle: float,
    center: Optional[Point2D] = None
) -> Union[Point2D, Line2D]:
    """Rotate a point or line counter-clockwise by angle about center (default origin)."""
    r = rotor(angle, center)
    if isinstance(element, Line2D):
        return transform_line(element, r)
    return transform_point(element, r)
