"""
Tests for geometric constructions: move, displacement, intersect,
project and reflect.
"""

import pytest

from pga2d.pga.primitives import Point2D, Dir2D, Line2D, x_axis, y_axis
from pga2d.pga.operators import vee, join
from pga2d.geometry.constructions import (
    move,
    displacement,
    intersect,
    project_point_line,
    project_line_point,
    project,
    reflect_point_line,
    reflect_line_line,
    reflect,
)
from pga2d.core.exceptions import DegenerateInputError


# =============================================================================
# Move and Displacement
# =============================================================================

class TestMove:

    def test_move(self):
        p = move(Point2D(1.0, 1.0), Dir2D(2.0, -1.0))
        assert type(p) is Point2D
        assert p.cartesian() == pytest.approx((3.0, 0.0))

    def test_displacement(self):
        d = displacement(Point2D(1.0, 1.0), Point2D(4.0, 5.0))
        assert type(d) is Dir2D
        assert (d.x, d.y) == pytest.approx((3.0, 4.0))
        assert d.length() == pytest.approx(5.0)

    def test_displacement_to_self_is_zero(self):
        d = displacement(Point2D(2.0, 3.0), Point2D(2.0, 3.0))
        assert d.length() == 0.0

    def test_move_by_displacement_round_trips(self):
        p1, p2 = Point2D(-1.0, 2.5), Point2D(3.0, -4.0)
        assert move(p1, displacement(p1, p2)).cartesian() == pytest.approx(p2.cartesian())


# =============================================================================
# Intersect
# =============================================================================

class TestIntersect:
    """Tests for line-line intersection."""

    def test_diagonals_cross_at_center(self):
        l1 = join(Point2D(0.0, 0.0), Point2D(2.0, 2.0))
        l2 = join(Point2D(0.0, 2.0), Point2D(2.0, 0.0))
        p = intersect(l1, l2)
        assert p.w == pytest.approx(1.0)
        assert p.cartesian() == pytest.approx((1.0, 1.0))

    def test_result_lies_on_both_lines(self):
        l1, l2 = Line2D(1.0, 2.0, -3.0), Line2D(-4.0, 1.0, 5.0)
        p = intersect(l1, l2)
        assert vee(p, l1) == pytest.approx(0.0, abs=1e-12)
        assert vee(p, l2) == pytest.approx(0.0, abs=1e-12)

    def test_parallel_lines_raise(self):
        with pytest.raises(DegenerateInputError, match="parallel"):
            intersect(Line2D(0.0, 1.0, 0.0), Line2D(0.0, 2.0, -1.0))

    def test_coincident_lines_raise(self):
        with pytest.raises(DegenerateInputError):
            intersect(x_axis(), x_axis().scale(3.0))

    def test_tolerance_is_relative(self):
        """Scaling both lines does not change the parallel test."""
        l1, l2 = Line2D(1e-6, 1e-6, 0.0), Line2D(-1e-6, 1e-6, 1e-6)
        p = intersect(l1, l2)
        assert p.cartesian() == pytest.approx((0.5, -0.5))


# =============================================================================
# Project
# =============================================================================

class TestProject:
    """Tests for projections between points and lines."""

    def test_project_point_onto_x_axis(self):
        p = project_point_line(Point2D(2.0, 3.0), x_axis())
        assert type(p) is Point2D
        assert p.w == pytest.approx(1.0)
        assert p.cartesian() == pytest.approx((2.0, 0.0))

    def test_project_point_onto_diagonal(self):
        p = project(Point2D(2.0, 0.0), Line2D(1.0, -1.0, 0.0))
        assert p.cartesian() == pytest.approx((1.0, 1.0))

    def test_projected_point_lies_on_line(self, random_coords):
        l = Line2D(0.3, -1.7, 2.0)
        for x, y in random_coords.tolist():
            foot = project(Point2D(x, y), l)
            assert vee(foot, l) == pytest.approx(0.0, abs=1e-9)

    def test_project_point_on_line_is_itself(self):
        p = project(Point2D(5.0, 0.0), x_axis())
        assert p.cartesian() == pytest.approx((5.0, 0.0))

    def test_project_line_onto_point(self):
        l = project_line_point(x_axis(), Point2D(3.0, 5.0))
        assert isinstance(l, Line2D)
        assert (l.a, l.b, l.c) == pytest.approx((0.0, 1.0, -5.0))

    def test_project_line_keeps_orientation(self):
        l = Line2D(1.0, -1.0, 4.0)
        parallel = project(l, Point2D(2.0, 7.0))
        assert vee(Point2D(2.0, 7.0), parallel) == pytest.approx(0.0)
        assert (parallel.a, parallel.b) == pytest.approx((1.0, -1.0))

    def test_project_onto_line_at_infinity_raises(self):
        with pytest.raises(DegenerateInputError):
            project(Point2D(1.0, 1.0), Line2D(0.0, 0.0, 1.0))

    def test_project_unsupported_pair_raises(self):
        with pytest.raises(TypeError):
            project(Point2D(1.0, 1.0), Point2D(2.0, 2.0))


# =============================================================================
# Reflect
# =============================================================================

class TestReflect:
    """Tests for reflections of points and lines."""

    def test_reflect_point_across_y_axis(self):
        p = reflect_point_line(Point2D(1.0, 0.0), y_axis())
        assert p.cartesian() == pytest.approx((-1.0, 0.0))

    def test_reflect_point_across_diagonal(self):
        p = reflect(Point2D(2.0, 0.0), Line2D(1.0, -1.0, 0.0))
        assert type(p) is Point2D
        assert p.cartesian() == pytest.approx((0.0, 2.0))

    def test_reflect_point_on_mirror_is_fixed(self):
        p = reflect(Point2D(0.0, 3.0), y_axis())
        assert p.cartesian() == pytest.approx((0.0, 3.0))

    def test_reflect_homogeneous_point(self):
        p = reflect(Point2D(2.0, 4.0, 2.0), y_axis())
        assert p.cartesian() == pytest.approx((-1.0, 2.0))

    def test_point_reflection_is_involution(self, random_coords):
        mirror = Line2D(0.6, 0.8, -1.5)
        for x, y in random_coords.tolist():
            p = Point2D(x, y)
            twice = reflect(reflect(p, mirror), mirror)
            assert twice.cartesian() == pytest.approx((x, y), abs=1e-9)

    def test_reflect_line_across_y_axis(self):
        l = reflect_line_line(Line2D(1.0, 1.0, 0.0), y_axis())
        assert isinstance(l, Line2D)
        assert (l.a, l.b, l.c) == pytest.approx((-1.0, 1.0, 0.0))

    def test_reflect_offset_line(self):
        """x = -2 mirrors to x = 2."""
        l = reflect(Line2D(1.0, 0.0, 2.0), y_axis())
        assert vee(Point2D(2.0, 0.0), l) == pytest.approx(0.0)

    def test_reflect_line_with_unnormalized_mirror(self):
        l = reflect(Line2D(1.0, 1.0, 0.0), Line2D(2.0, 0.0, 0.0))
        assert (l.a, l.b, l.c) == pytest.approx((-1.0, 1.0, 0.0))

    def test_reflected_line_keeps_sides(self):
        """A point on the positive side maps to the positive side."""
        l, mirror = Line2D(1.0, 1.0, 0.0), y_axis()
        p = Point2D(1.0, 0.0)
        assert vee(p, l) > 0
        assert vee(reflect(p, mirror), reflect(l, mirror)) > 0

    def test_line_reflection_is_involution(self):
        mirror = Line2D(1.0, 2.0, -3.0)
        l = Line2D(-0.5, 1.5, 4.0)
        assert reflect(reflect(l, mirror), mirror).allclose(l, atol=1e-12)

    def test_reflect_requires_line_mirror(self):
        with pytest.raises(TypeError):
            reflect(Point2D(1.0, 1.0), Point2D(0.0, 0.0))

    def test_reflect_unsupported_element(self):
        with pytest.raises(TypeError):
            reflect(3.0, y_axis())

    def test_reflect_across_line_at_infinity_raises(self):
        with pytest.raises(DegenerateInputError):
            reflect(Line2D(1.0, 0.0, 0.0), Line2D(0.0, 0.0, 1.0))
