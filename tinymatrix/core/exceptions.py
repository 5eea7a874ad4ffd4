"""
Errors raised by TinyMatrix.

Every failure is a contract violation by the caller: a flat sequence that
does not fill the declared shape, a non-square matrix where a square one is
required, operands whose shapes do not line up, or an element index outside
the matrix. Each is raised at the point of detection with the offending
shape or index attached; nothing is clamped, reshaped or retried.
"""


class TinyMatrixError(Exception):
    """Base exception for all TinyMatrix errors."""
    pass


class ValidationError(TinyMatrixError):
    """
    Input validation failed.

    Raised when constructor arguments or operands fail validation checks
    (negative dimensions, non-numeric values).
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix shapes are incorrect or inconsistent.

    Raised when a flat value sequence does not fill the declared shape, when
    a square matrix is required, or when two operands have incompatible
    shapes.

    Attributes:
        operation: Name of the operation that rejected the shapes
        expected: Expected shape or length, if meaningful
        actual: Observed shape or length
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.expected = expected
        self.actual = actual


class IndexOutOfBoundsError(TinyMatrixError, IndexError):
    """
    Element access outside the matrix.

    Subclasses IndexError so that code written against plain sequences
    keeps working.

    Attributes:
        row: Requested row index
        col: Requested column index
        shape: Shape of the matrix that was indexed
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        col: int | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.col = col
        self.shape = shape
