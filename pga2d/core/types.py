"""
Type aliases for PGA2D.

Geometry queries accept plain Python floats or zero-dimensional tensors
for scalars, and any sequence of points for polygons.
"""

from typing import Sequence, Tuple, Union, TYPE_CHECKING

import torch

from .constants import MIN_POLYGON_VERTICES
from .exceptions import DegenerateInputError

if TYPE_CHECKING:
    from ..pga.primitives import Point2D


# =============================================================================
# Basic Type Aliases
# =============================================================================

# Scalar coefficient accepted by constructors
Scalar = Union[float, int, torch.Tensor]

# Euclidean coordinate pair
Coords2D = Tuple[float, float]

# Polygon as an ordered vertex sequence (either winding)
Polygon = Sequence["Point2D"]


def validate_polygon(poly: Polygon, name: str = "polygon") -> None:
    """
    Validate that a vertex sequence describes a polygon.

    Args:
        poly: Ordered vertices
        name: Name for error messages

    Raises:
        DegenerateInputError: If there are fewer than 3 vertices
    """
    if len(poly) < MIN_POLYGON_VERTICES:
        raise DegenerateInputError(
            f"{name} needs at least {MIN_POLYGON_VERTICES} vertices, got {len(poly)}"
        )
