"""
Geometric primitives in 2D Projective Geometric Algebra (PGA).

PGA2D represents geometric objects as follows:
- Lines: Grade-1 vectors (a*e1 + b*e2 + c*e0 for a*x + b*y + c = 0)
- Points: Grade-2 bivectors (x*e20 + y*e01 + w*e12)
- Directions: Ideal points, i.e. bivectors with no e12 weight

The primitive classes are views over a Multivector that name the blade
slots of their grade. Construction from raw coefficients never validates
semantics: a Point2D with w = 0 is accepted, and it is up to the caller
to know whether point or direction semantics apply.

Key operations (see operators.py):
- Join (∨): point ∨ point → line
- Meet (∧): line ∧ line → point
"""

from __future__ import annotations
from typing import List, Sequence, Union
import numpy as np
import torch

from .algebra import (
    Multivector,
    IDX_E0, IDX_E1, IDX_E2,
    IDX_E01, IDX_E20, IDX_E12,
)
from ..core.constants import DEFAULT_DTYPE, DEFAULT_EPS_NORM, NUM_COMPONENTS
from ..core.exceptions import DegenerateInputError
from ..core.types import Coords2D, Scalar


def _zeros() -> torch.Tensor:
    return torch.zeros(NUM_COMPONENTS, dtype=DEFAULT_DTYPE)


class Point2D(Multivector):
    """
    A homogeneous 2D point x*e20 + y*e01 + w*e12.

    w != 0 is the Euclidean point (x/w, y/w); w == 0 is a point at
    infinity, i.e. a pure direction (see Dir2D).

    Arithmetic follows affine rules on the dehomogenized coordinates:
        Point2D + Dir2D -> Point2D
        Point2D - Point2D -> Dir2D
        Point2D - Dir2D -> Point2D
    """

    def __init__(self, x: Scalar, y: Scalar, w: Scalar = 1.0):
        mv = _zeros()
        mv[IDX_E20] = x
        mv[IDX_E01] = y
        mv[IDX_E12] = w
        super().__init__(mv)

    @classmethod
    def from_multivector(cls, mv: Multivector) -> 'Point2D':
        """View the grade-2 part of a multivector as a point."""
        return cls._from_components(mv.grade(2).mv)

    @property
    def x(self) -> float:
        return float(self.mv[IDX_E20])

    @property
    def y(self) -> float:
        return float(self.mv[IDX_E01])

    @property
    def w(self) -> float:
        return float(self.mv[IDX_E12])

    def is_ideal(self, eps: float = DEFAULT_EPS_NORM) -> bool:
        """True for points at infinity (|w| <= eps)."""
        return abs(self.w) <= eps

    def cartesian(self, eps: float = DEFAULT_EPS_NORM) -> Coords2D:
        """
        Euclidean coordinates (x/w, y/w).

        Raises:
            DegenerateInputError: For ideal points, which have no location.
        """
        w = self.w
        if abs(w) <= eps:
            raise DegenerateInputError(f"Ideal point {self!r} has no Cartesian coordinates")
        return self.x / w, self.y / w

    def dehomogenized(self, eps: float = DEFAULT_EPS_NORM) -> 'Point2D':
        """The same point rescaled to w = 1."""
        x, y = self.cartesian(eps)
        return Point2D(x, y)

    def scale(self, s: Scalar) -> 'Point2D':
        """Multiply all three coordinates by s."""
        return self._like(self.mv * s)

    def to_numpy(self) -> np.ndarray:
        """Cartesian coordinates as a numpy array of shape (2,)."""
        return np.array(self.cartesian(), dtype=np.float64)

    def __add__(self, other):
        if isinstance(other, Dir2D):
            x, y = self.cartesian()
            return Point2D(x + other.x, y + other.y)
        return super().__add__(other)

    def __sub__(self, other):
        if isinstance(other, Dir2D):
            x, y = self.cartesian()
            return Point2D(x - other.x, y - other.y)
        if isinstance(other, Point2D):
            x1, y1 = self.cartesian()
            x2, y2 = other.cartesian()
            return Dir2D(x1 - x2, y1 - y2)
        return super().__sub__(other)


class Dir2D(Point2D):
    """
    A direction: the ideal point x*e20 + y*e01 (w = 0 by construction).

    Directions are displacements, never locations. They have zero metric
    magnitude, so length() and unit() use the ideal norm instead of
    normalized(), which raises like it does for any null element.
    """

    def __init__(self, x: Scalar, y: Scalar):
        super().__init__(x, y, 0.0)

    @classmethod
    def from_multivector(cls, mv: Multivector) -> 'Dir2D':
        """View the ideal part (e20, e01) of a multivector as a direction."""
        components = mv.grade(2).mv
        components[IDX_E12] = 0.0
        return cls._from_components(components)

    def length(self) -> float:
        """Euclidean length sqrt(x² + y²)."""
        return self.ideal_norm()

    def unit(self, eps: float = DEFAULT_EPS_NORM) -> 'Dir2D':
        """
        Unit-length direction.

        Raises:
            DegenerateInputError: For the zero direction.
        """
        n = self.length()
        if n < eps:
            raise DegenerateInputError("Zero direction has no unit vector")
        return self._like(self.mv / n)

    def __add__(self, other):
        if isinstance(other, Dir2D):
            return Dir2D(self.x + other.x, self.y + other.y)
        if isinstance(other, Point2D):
            return other + self
        return Multivector.__add__(self, other)

    def __sub__(self, other):
        if isinstance(other, Dir2D):
            return Dir2D(self.x - other.x, self.y - other.y)
        return Multivector.__sub__(self, other)


class Line2D(Multivector):
    """
    A homogeneous 2D line a*e1 + b*e2 + c*e0, i.e. a*x + b*y + c = 0.

    The normal (a, b) points to the side where signed distances are
    positive. Normalize before using a line in distance or angle
    formulas so that (a, b) has unit length.
    """

    def __init__(self, a: Scalar, b: Scalar, c: Scalar):
        mv = _zeros()
        mv[IDX_E1] = a
        mv[IDX_E2] = b
        mv[IDX_E0] = c
        super().__init__(mv)

    @classmethod
    def from_multivector(cls, mv: Multivector) -> 'Line2D':
        """View the grade-1 part of a multivector as a line."""
        return cls._from_components(mv.grade(1).mv)

    @property
    def a(self) -> float:
        return float(self.mv[IDX_E1])

    @property
    def b(self) -> float:
        return float(self.mv[IDX_E2])

    @property
    def c(self) -> float:
        return float(self.mv[IDX_E0])

    def normal(self) -> Dir2D:
        """Normal direction (a, b)."""
        return Dir2D(self.a, self.b)

    def direction(self) -> Dir2D:
        """Direction along the line, (b, -a)."""
        return Dir2D(self.b, -self.a)

    def is_ideal(self, eps: float = DEFAULT_EPS_NORM) -> bool:
        """True for the line at infinity (a = b = 0)."""
        return abs(self.a) <= eps and abs(self.b) <= eps

    def scale(self, s: Scalar) -> 'Line2D':
        """Multiply all three coefficients by s."""
        return self._like(self.mv * s)


def origin() -> Point2D:
    """Create the origin point (0, 0)."""
    return Point2D(0.0, 0.0)


def x_axis() -> Line2D:
    """Create the X axis (y = 0)."""
    return Line2D(0.0, 1.0, 0.0)


def y_axis() -> Line2D:
    """Create the Y axis (x = 0)."""
    return Line2D(1.0, 0.0, 0.0)


def point_from_tensor(coords: torch.Tensor) -> Point2D:
    """
    Create a point from a tensor of Cartesian coordinates.

    Args:
        coords: Tensor of shape (2,) containing [x, y]

    Returns:
        Point with w = 1
    """
    x, y = coords.unbind(dim=-1)
    return Point2D(x, y)


def points_from_array(coords: Union[np.ndarray, Sequence[Sequence[float]]]) -> List[Point2D]:
    """
    Create points from an array-like of (x, y) pairs.

    Args:
        coords: Array-like of shape (N, 2)

    Returns:
        List of N points, each with w = 1
    """
    arr = np.asarray(coords, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected an array of shape (N, 2), got {arr.shape}")
    return [Point2D(float(x), float(y)) for x, y in arr]


def points_to_array(points: Sequence[Point2D]) -> np.ndarray:
    """Cartesian coordinates of finite points as an (N, 2) numpy array."""
    return np.array([p.cartesian() for p in points], dtype=np.float64).reshape(-1, 2)
