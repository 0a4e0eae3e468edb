"""
Tests for PGA2D geometric primitives: points, directions and lines.

These tests pin down how primitives are represented:

1. Point representation as grade-2 bivectors (x*e20 + y*e01 + w*e12)
2. Direction representation as ideal points (w = 0)
3. Line representation as grade-1 vectors (a*e1 + b*e2 + c*e0)
4. Affine arithmetic between points and directions
"""

import pytest
import numpy as np
import torch
import math

from pga2d.pga.algebra import (
    Multivector, e1, e12,
    IDX_E0, IDX_E1, IDX_E2, IDX_E01, IDX_E20, IDX_E12,
)
from pga2d.pga.primitives import (
    Point2D,
    Dir2D,
    Line2D,
    origin,
    x_axis,
    y_axis,
    point_from_tensor,
    points_from_array,
    points_to_array,
)
from pga2d.pga.operators import vee
from pga2d.core.exceptions import DegenerateInputError


# =============================================================================
# Points
# =============================================================================

class TestPoint2D:
    """Tests for homogeneous points."""

    def test_point_layout(self):
        """A point stores x on e20, y on e01 and w on e12."""
        p = Point2D(3.0, -2.0)
        assert p.mv[IDX_E20] == 3.0
        assert p.mv[IDX_E01] == -2.0
        assert p.mv[IDX_E12] == 1.0
        assert p.grades() == (2,)

    def test_accessors(self):
        p = Point2D(2.0, 4.0, 2.0)
        assert (p.x, p.y, p.w) == (2.0, 4.0, 2.0)

    def test_cartesian_divides_by_weight(self):
        assert Point2D(2.0, 4.0, 2.0).cartesian() == pytest.approx((1.0, 2.0))

    def test_cartesian_is_plain_float_pair(self):
        x, y = coords = Point2D(torch.tensor(3.0), 6.0, 3.0).cartesian()
        assert isinstance(coords, tuple)
        assert isinstance(x, float) and isinstance(y, float)
        assert (x, y) == pytest.approx((1.0, 2.0))

    def test_dehomogenized(self):
        p = Point2D(2.0, 4.0, 2.0).dehomogenized()
        assert p.w == 1.0
        assert p.cartesian() == pytest.approx((1.0, 2.0))

    def test_zero_weight_is_accepted(self):
        """Construction never validates semantics: w = 0 is an ideal point."""
        p = Point2D(1.0, 2.0, 0.0)
        assert p.is_ideal()

    def test_cartesian_of_ideal_point_raises(self):
        with pytest.raises(DegenerateInputError):
            Point2D(1.0, 2.0, 0.0).cartesian()

    def test_ideal_tolerance_is_configurable(self):
        p = Point2D(1.0, 2.0, 1e-8)
        assert p.cartesian() == pytest.approx((1e8, 2e8))
        assert not p.is_ideal()
        assert p.is_ideal(eps=1e-6)
        with pytest.raises(DegenerateInputError):
            p.cartesian(eps=1e-6)
        with pytest.raises(DegenerateInputError):
            p.dehomogenized(eps=1e-6)

    def test_normalized_divides_by_abs_weight(self):
        p = Point2D(2.0, 4.0, -2.0).normalized()
        assert isinstance(p, Point2D)
        assert p.w == pytest.approx(-1.0)
        assert p.cartesian() == pytest.approx((-1.0, -2.0))

    def test_normalized_is_idempotent(self, random_coords):
        for x, y in random_coords:
            p = Point2D(float(x), float(y), 3.0)
            once = p.normalized()
            assert once.normalized().allclose(once)

    def test_scale_keeps_location(self):
        p = Point2D(1.0, 2.0).scale(3.0)
        assert isinstance(p, Point2D)
        assert (p.x, p.y, p.w) == (3.0, 6.0, 3.0)
        assert p.cartesian() == pytest.approx((1.0, 2.0))

    def test_from_multivector_takes_grade_2(self):
        p = Point2D.from_multivector(e12() + e1())
        assert isinstance(p, Point2D)
        assert p.w == 1.0
        assert p.mv[IDX_E1] == 0.0

    def test_to_numpy(self):
        arr = Point2D(2.0, 4.0, 2.0).to_numpy()
        assert isinstance(arr, np.ndarray)
        np.testing.assert_allclose(arr, [1.0, 2.0])

    def test_repr_names_type(self):
        assert repr(Point2D(1.0, 0.0)) == "Point2D(1*e20 + 1*e12)"


# =============================================================================
# Directions
# =============================================================================

class TestDir2D:
    """Tests for directions (ideal points)."""

    def test_direction_has_zero_weight(self):
        d = Dir2D(1.0, 2.0)
        assert d.w == 0.0
        assert d.is_ideal()
        assert isinstance(d, Point2D)

    def test_length(self):
        assert Dir2D(3.0, 4.0).length() == pytest.approx(5.0)

    def test_unit(self):
        u = Dir2D(3.0, 4.0).unit()
        assert isinstance(u, Dir2D)
        assert (u.x, u.y) == pytest.approx((0.6, 0.8))

    def test_unit_of_zero_direction_raises(self):
        with pytest.raises(DegenerateInputError):
            Dir2D(0.0, 0.0).unit()

    def test_unit_tolerance_is_configurable(self):
        short = Dir2D(1e-8, 0.0)
        assert (short.unit().x, short.unit().y) == pytest.approx((1.0, 0.0))
        with pytest.raises(DegenerateInputError):
            short.unit(eps=1e-6)

    def test_normalized_raises_for_direction(self):
        """Directions are null elements: metric normalization fails."""
        with pytest.raises(DegenerateInputError):
            Dir2D(1.0, 0.0).normalized()

    def test_from_multivector_drops_weight(self):
        d = Dir2D.from_multivector(Point2D(1.0, 2.0, 5.0))
        assert isinstance(d, Dir2D)
        assert (d.x, d.y, d.w) == (1.0, 2.0, 0.0)


# =============================================================================
# Affine Arithmetic
# =============================================================================

class TestAffineArithmetic:
    """Tests for point/direction arithmetic."""

    def test_point_plus_direction(self):
        p = Point2D(1.0, 2.0) + Dir2D(3.0, 4.0)
        assert type(p) is Point2D
        assert p.cartesian() == pytest.approx((4.0, 6.0))

    def test_point_plus_direction_ignores_weight(self):
        p = Point2D(2.0, 4.0, 2.0) + Dir2D(1.0, 1.0)
        assert p.cartesian() == pytest.approx((2.0, 3.0))

    def test_direction_plus_point(self):
        p = Dir2D(3.0, 4.0) + Point2D(1.0, 2.0)
        assert type(p) is Point2D
        assert p.cartesian() == pytest.approx((4.0, 6.0))

    def test_point_minus_point(self):
        d = Point2D(4.0, 6.0) - Point2D(1.0, 2.0)
        assert type(d) is Dir2D
        assert (d.x, d.y) == pytest.approx((3.0, 4.0))

    def test_point_minus_direction(self):
        p = Point2D(4.0, 6.0) - Dir2D(3.0, 4.0)
        assert type(p) is Point2D
        assert p.cartesian() == pytest.approx((1.0, 2.0))

    def test_direction_arithmetic(self):
        d = Dir2D(1.0, 2.0) + Dir2D(3.0, 4.0)
        assert type(d) is Dir2D
        assert (d.x, d.y) == (4.0, 6.0)
        d = Dir2D(1.0, 2.0) - Dir2D(3.0, 4.0)
        assert (d.x, d.y) == (-2.0, -2.0)

    def test_direction_scaling_and_negation(self):
        d = Dir2D(1.0, -2.0) * 2.0
        assert type(d) is Dir2D
        assert (d.x, d.y) == (2.0, -4.0)
        n = -Dir2D(1.0, -2.0)
        assert type(n) is Dir2D
        assert (n.x, n.y) == (-1.0, 2.0)

    def test_values_do_not_alias(self):
        p = Point2D(1.0, 2.0)
        q = p.clone()
        q.mv[IDX_E20] = 9.0
        assert p.x == 1.0


# =============================================================================
# Lines
# =============================================================================

class TestLine2D:
    """Tests for lines a*x + b*y + c = 0."""

    def test_line_layout(self):
        l = Line2D(1.0, 2.0, 3.0)
        assert l.mv[IDX_E1] == 1.0
        assert l.mv[IDX_E2] == 2.0
        assert l.mv[IDX_E0] == 3.0
        assert l.grades() == (1,)
        assert (l.a, l.b, l.c) == (1.0, 2.0, 3.0)

    def test_normalized_line(self):
        l = Line2D(3.0, 4.0, 5.0).normalized()
        assert isinstance(l, Line2D)
        assert (l.a, l.b, l.c) == pytest.approx((0.6, 0.8, 1.0))
        assert l.normalized().allclose(l)

    def test_line_at_infinity(self):
        l = Line2D(0.0, 0.0, 1.0)
        assert l.is_ideal()
        with pytest.raises(DegenerateInputError):
            l.normalized()

    def test_normal_and_direction(self):
        l = Line2D(0.0, 1.0, 0.0)
        n, d = l.normal(), l.direction()
        assert (n.x, n.y) == (0.0, 1.0)
        assert (d.x, d.y) == (1.0, 0.0)

    def test_scale(self):
        l = Line2D(1.0, 2.0, 3.0).scale(-2.0)
        assert isinstance(l, Line2D)
        assert (l.a, l.b, l.c) == (-2.0, -4.0, -6.0)

    def test_from_multivector_takes_grade_1(self):
        l = Line2D.from_multivector(e1() + e12())
        assert (l.a, l.b, l.c) == (1.0, 0.0, 0.0)
        assert l.grades() == (1,)


# =============================================================================
# Constructors and Conversion
# =============================================================================

class TestConstructors:

    def test_origin_lies_on_both_axes(self):
        assert origin().cartesian() == (0.0, 0.0)
        assert vee(origin(), x_axis()) == pytest.approx(0.0)
        assert vee(origin(), y_axis()) == pytest.approx(0.0)

    def test_axes(self):
        assert vee(Point2D(5.0, 0.0), x_axis()) == pytest.approx(0.0)
        assert vee(Point2D(0.0, 5.0), y_axis()) == pytest.approx(0.0)

    def test_point_from_tensor(self):
        p = point_from_tensor(torch.tensor([1.0, 2.0]))
        assert p.cartesian() == pytest.approx((1.0, 2.0))

    def test_points_from_array(self):
        points = points_from_array(np.array([[0.0, 0.0], [1.0, 2.0]]))
        assert len(points) == 2
        assert all(isinstance(p, Point2D) for p in points)
        assert points[1].cartesian() == (1.0, 2.0)

    def test_points_from_array_rejects_bad_shape(self):
        with pytest.raises(ValueError, match="shape"):
            points_from_array(np.zeros((3, 3)))

    def test_points_to_array(self):
        arr = points_to_array([Point2D(1.0, 2.0), Point2D(6.0, 8.0, 2.0)])
        assert arr.shape == (2, 2)
        np.testing.assert_allclose(arr, [[1.0, 2.0], [3.0, 4.0]])

    def test_points_to_array_empty(self):
        assert points_to_array([]).shape == (0, 2)

    def test_points_to_array_rejects_directions(self):
        with pytest.raises(DegenerateInputError):
            points_to_array([Dir2D(1.0, 0.0)])
