"""
Core module for PGA2D.

Contains:
- Constants: Centralized tolerances and algebra layout
- Types: Type aliases for scalars, coordinates and polygons
- Exceptions: The error taxonomy shared by all modules
"""

from .constants import (
    DEFAULT_EPS,
    DEFAULT_EPS_NORM,
    DEFAULT_DTYPE,
    NUM_COMPONENTS,
    BASIS_NAMES,
    MIN_POLYGON_VERTICES,
)

from .types import (
    Scalar,
    Coords2D,
    Polygon,
    validate_polygon,
)

from .exceptions import (
    GeometryError,
    DegenerateInputError,
    NumericDomainError,
)

__all__ = [
    # Constants
    "DEFAULT_EPS",
    "DEFAULT_EPS_NORM",
    "DEFAULT_DTYPE",
    "NUM_COMPONENTS",
    "BASIS_NAMES",
    "MIN_POLYGON_VERTICES",
    # Types
    "Scalar",
    "Coords2D",
    "Polygon",
    "validate_polygon",
    # Exceptions
    "GeometryError",
    "DegenerateInputError",
    "NumericDomainError",
]
