"""
TinyMatrix: a small dense-matrix value type.

Matrices are stored as flat float64 buffers in row-major order and support
element access, shape predicates, arithmetic operators, diagonal analysis,
transpose and row/column joins.

Submodules:
    matrix: The Matrix value type
    core: Exceptions, validators and precision constants
    demo: Sample program printing example matrices
"""

__version__ = "0.1.0"

from tinymatrix.matrix import Matrix, DiagonalPartition
from tinymatrix.core.exceptions import (
    TinyMatrixError,
    ValidationError,
    DimensionError,
    IndexOutOfBoundsError,
)

__all__ = [
    "__version__",
    "Matrix",
    "DiagonalPartition",
    "TinyMatrixError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfBoundsError",
]
