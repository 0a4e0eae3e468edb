"""
Exception taxonomy for PGA2D.

All errors raised on purpose by the library derive from GeometryError,
which itself is a ValueError so callers that already guard numeric input
with ``except ValueError`` keep working.
"""


class GeometryError(ValueError):
    """Base class for geometry kernel errors."""


class DegenerateInputError(GeometryError):
    """
    Input violates a geometric precondition.

    Raised for parallel lines passed to intersect, zero-length segments,
    polygons with fewer than three vertices, and null elements that
    cannot be normalized.
    """


class NumericDomainError(GeometryError):
    """A value fell outside the domain of a math function and could not be clamped."""
