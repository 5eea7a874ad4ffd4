"""
Input validation utilities for TinyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than clamping indices,
reshaping data or otherwise guessing at caller intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Operation or parameter names included in all error messages
"""

import numbers
from collections.abc import Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from tinymatrix.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    ValidationError,
)
from tinymatrix.core.precision import DTYPE


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a row or column count.

    Args:
        value: Proposed count
        name: Parameter name for error messages

    Returns:
        The count as a plain int

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_values(values: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate and copy a flat value sequence into owned float64 storage.

    Args:
        values: Flat sequence of numbers
        name: Parameter name for error messages

    Returns:
        A fresh 1-D float64 array (never a view of the input)

    Raises:
        ValidationError: If input is not numeric
        DimensionError: If input is not one-dimensional
    """
    if isinstance(values, Iterator):
        # Generators would otherwise become a 0-d object array.
        values = list(values)

    try:
        result = np.array(values)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.size and np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, imaginary parts cannot be stored"
        )

    is_real = (
        np.issubdtype(result.dtype, np.integer)
        or np.issubdtype(result.dtype, np.floating)
    )
    if result.size and not is_real:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if result.ndim != 1:
        raise DimensionError(
            f"{name}: expected a flat 1D sequence, got {result.ndim}D with shape {result.shape}",
            expected=1,
            actual=result.ndim,
        )

    return result.astype(DTYPE, copy=False)


def check_length(values: NDArray[np.floating[Any]], rows: int, cols: int) -> None:
    """
    Verify a flat buffer exactly fills a rows x cols matrix.

    Raises:
        DimensionError: If len(values) != rows * cols
    """
    if len(values) != rows * cols:
        raise DimensionError(
            f"values: length {len(values)} does not match {rows}x{cols} "
            f"(expected {rows * cols} elements)",
            operation="from_values",
            expected=rows * cols,
            actual=len(values),
        )


def check_index(row: Any, col: Any, shape: tuple[int, int]) -> None:
    """
    Verify (row, col) addresses an existing element.

    Negative indices are out of bounds; there is no wrap-around.

    Raises:
        IndexOutOfBoundsError: If either index is outside the matrix
        TypeError: If either index is not an integer
    """
    for name, idx in (("row", row), ("col", col)):
        if isinstance(idx, bool) or not isinstance(idx, numbers.Integral):
            raise TypeError(
                f"{name} index must be an integer, got {type(idx).__name__}"
            )
    rows, cols = shape
    if not (0 <= row < rows and 0 <= col < cols):
        raise IndexOutOfBoundsError(
            f"index ({row}, {col}) out of bounds for {rows}x{cols} matrix",
            row=int(row),
            col=int(col),
            shape=shape,
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        DimensionError: If rows != cols
    """
    rows, cols = shape
    if rows != cols:
        raise DimensionError(
            f"{operation}: requires a square matrix, got {rows}x{cols}",
            operation=operation,
            actual=shape,
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes (element-wise operations).

    Raises:
        DimensionError: If shapes differ
    """
    if left != right:
        raise DimensionError(
            f"{operation}: shapes must match, got {left[0]}x{left[1]} "
            f"and {right[0]}x{right[1]}",
            operation=operation,
            expected=left,
            actual=right,
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, int],
) -> None:
    """
    Verify left.cols == right.rows for matrix multiplication.

    Raises:
        DimensionError: If the inner dimensions differ
    """
    if left[1] != right[0]:
        raise DimensionError(
            f"multiply: left operand has {left[1]} columns but right operand "
            f"has {right[0]} rows",
            operation="multiply",
            expected=left[1],
            actual=right[0],
        )


def check_matching_axis(
    left: tuple[int, int],
    right: tuple[int, int],
    axis: int,
    operation: str,
) -> None:
    """
    Verify two operands agree along one axis (0 = rows, 1 = columns).

    Raises:
        DimensionError: If the counts along axis differ
    """
    if left[axis] != right[axis]:
        label = "rows" if axis == 0 else "columns"
        raise DimensionError(
            f"{operation}: both matrices need the same number of {label}, "
            f"got {left[axis]} and {right[axis]}",
            operation=operation,
            expected=left[axis],
            actual=right[axis],
        )
