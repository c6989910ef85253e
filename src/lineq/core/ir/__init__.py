"""
LINEQ Intermediate Representation (IR) types.

All IR types are re-exported from this package.
"""

from .affine import (
    EPSILON,
    AffineForm,
    Equation,
    is_real_zero,
)

__all__ = [
    "EPSILON",
    "AffineForm",
    "Equation",
    "is_real_zero",
]
