"""
Centralized constants for PGA2D.

This module defines the default tolerances and numeric settings used
throughout the library. Using these constants keeps comparisons against
zero consistent between the algebra kernel and the geometry queries.

Usage:
    from pga2d.core.constants import DEFAULT_EPS

    def my_query(p, l, eps: float = DEFAULT_EPS):
        ...
"""

import torch

# =============================================================================
# Numeric Constants
# =============================================================================

# Tolerance for geometric comparisons (parallel lines, zero-length segments)
DEFAULT_EPS: float = 1e-9

# Magnitudes below this are treated as null elements during normalization
DEFAULT_EPS_NORM: float = 1e-12

# Storage dtype for multivector coefficients
DEFAULT_DTYPE: torch.dtype = torch.float64


# =============================================================================
# Algebra Layout
# =============================================================================

# Number of basis blades in G(2,0,1)
NUM_COMPONENTS: int = 8

# Human-readable blade names in storage order
BASIS_NAMES = ("1", "e0", "e1", "e2", "e01", "e20", "e12", "e012")

# Minimum vertex count for polygon queries
MIN_POLYGON_VERTICES: int = 3
