"""
PGA2D: 2D computational geometry on Projective Geometric Algebra

A small PyTorch-backed library where points, directions and lines are
elements of one algebra, G(2,0,1), and every geometric query is a
composition of three products: wedge (meet), vee (join) and dot.

Key Features:
- Full PGA2D algebra (8-component multivectors, Cayley-table products)
- Typed primitives: Point2D, Dir2D, Line2D
- Distances, intersections, projections and reflections by composition
- Containment, segment crossing and convexity predicates
- Rigid motions (translators, rotors) via the sandwich product

API Design:
- All elements are immutable values; every operation returns a new one
- Scalar results are plain Python floats
- Degenerate input raises DegenerateInputError instead of returning NaN

Example:
    >>> import pga2d
    >>> from pga2d import Point2D, join, intersect
    >>> l1 = join(Point2D(0, 0), Point2D(2, 2))
    >>> l2 = join(Point2D(0, 2), Point2D(2, 0))
    >>> intersect(l1, l2).cartesian()
    (1.0, 1.0)
"""

__version__ = "0.1.0"
__author__ = "PGA2D Contributors"

from . import core
from . import pga
from . import geometry
from . import utils

from .core import GeometryError, DegenerateInputError, NumericDomainError
from .pga import (
    Multivector,
    Point2D,
    Dir2D,
    Line2D,
    wedge,
    vee,
    dot,
    join,
    meet,
    angle,
    translate,
    rotate,
)
from .geometry import (
    move,
    displacement,
    intersect,
    project,
    reflect,
    distance,
    distance_point_point,
    distance_point_line,
    area_triangle,
    point_segment_distance,
    segment_segment_intersect,
    triangle_orientation,
    point_in_triangle,
    point_in_polygon,
    is_convex_quad,
    point_polygon_edge_distance,
    point_triangle_edge_distance,
    point_polygon_corner_distance,
    point_triangle_corner_distance,
)

__all__ = [
    "core",
    "pga",
    "geometry",
    "utils",
    # Errors
    "GeometryError",
    "DegenerateInputError",
    "NumericDomainError",
    # Elements
    "Multivector",
    "Point2D",
    "Dir2D",
    "Line2D",
    # Operators
    "wedge",
    "vee",
    "dot",
    "join",
    "meet",
    "angle",
    "translate",
    "rotate",
    # Geometry
    "move",
    "displacement",
    "intersect",
    "project",
    "reflect",
    "distance",
    "distance_point_point",
    "distance_point_line",
    "area_triangle",
    "point_segment_distance",
    "segment_segment_intersect",
    "triangle_orientation",
    "point_in_triangle",
    "point_in_polygon",
    "is_convex_quad",
    "point_polygon_edge_distance",
    "point_triangle_edge_distance",
    "point_polygon_corner_distance",
    "point_triangle_corner_distance",
]
