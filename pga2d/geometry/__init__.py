"""
Geometry library built on the PGA operators.

Includes constructions (move, join, intersect, project, reflect),
measures (distances, angle, area), predicates (containment, segment
crossing, convexity) and point-to-shape proximity queries.
"""

from ..pga.operators import join, angle

from .constructions import (
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
from .measures import (
    distance_point_point,
    distance_point_line,
    distance,
    area_triangle,
    point_segment_distance,
)
from .predicates import (
    segment_segment_intersect,
    triangle_orientation,
    point_in_triangle,
    point_in_polygon,
    is_convex_quad,
)
from .proximity import (
    point_polygon_edge_distance,
    point_triangle_edge_distance,
    point_polygon_corner_distance,
    point_triangle_corner_distance,
)

__all__ = [
    # Constructions
    "move",
    "displacement",
    "join",
    "intersect",
    "project_point_line",
    "project_line_point",
    "project",
    "reflect_point_line",
    "reflect_line_line",
    "reflect",
    # Measures
    "distance_point_point",
    "distance_point_line",
    "distance",
    "angle",
    "area_triangle",
    "point_segment_distance",
    # Predicates
    "segment_segment_intersect",
    "triangle_orientation",
    "point_in_triangle",
    "point_in_polygon",
    "is_convex_quad",
    # Proximity
    "point_polygon_edge_distance",
    "point_triangle_edge_distance",
    "point_polygon_corner_distance",
    "point_triangle_corner_distance",
]
