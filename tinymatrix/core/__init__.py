"""
Core infrastructure for TinyMatrix.

Key components:
    exceptions: Exception hierarchy
    validation: Fail-fast shape and index validators
    precision: Storage dtype, display precision and tolerances
"""

from tinymatrix.core.exceptions import (
    TinyMatrixError,
    ValidationError,
    DimensionError,
    IndexOutOfBoundsError,
)

__all__ = [
    "TinyMatrixError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfBoundsError",
]
