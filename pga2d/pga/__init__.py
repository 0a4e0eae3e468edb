"""
PGA (Projective Geometric Algebra) module.

Implements the full algebra of G(2,0,1) with 8-component multivectors,
geometric products, typed operators on points and lines, and rigid body
transformations (motors).
"""

from .algebra import (
    Multivector,
    geometric_product,
    outer_product,
    inner_product,
    regressive_product,
    sandwich,
    scalar,
    e0, e1, e2,
    e01, e20, e12,
    e012,
)

from .primitives import (
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

from .operators import (
    wedge,
    vee,
    dot,
    reverse,
    normalize,
    magnitude,
    join,
    meet,
    angle,
)

from .transforms import (
    translator,
    rotor,
    transform_point,
    transform_line,
    translate,
    rotate,
)

__all__ = [
    # Algebra
    "Multivector",
    "geometric_product",
    "outer_product",
    "inner_product",
    "regressive_product",
    "sandwich",
    "scalar",
    # Basis elements
    "e0", "e1", "e2",
    "e01", "e20", "e12",
    "e012",
    # Primitives
    "Point2D",
    "Dir2D",
    "Line2D",
    "origin",
    "x_axis",
    "y_axis",
    "point_from_tensor",
    "points_from_array",
    "points_to_array",
    # Operators
    "wedge",
    "vee",
    "dot",
    "reverse",
    "normalize",
    "magnitude",
    "join",
    "meet",
    "angle",
    # Transforms
    "translator",
    "rotor",
    "transform_point",
    "transform_line",
    "translate",
    "rotate",
]
