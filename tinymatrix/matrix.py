"""
Matrix: a small dense matrix value type.

Elements are stored as a flat float64 buffer in row-major order, so element
(row, col) lives at offset ``row * cols + col``. Every operation validates
operand shapes before touching data and returns a freshly allocated matrix;
only ``set``, item assignment, ``*=`` and ``/=`` mutate an existing one.
"""

from __future__ import annotations

import numbers
import sys
import warnings
from dataclasses import dataclass
from typing import Any, Iterator, TextIO

import numpy as np
from numpy.typing import ArrayLike, NDArray

from tinymatrix.core.exceptions import DimensionError
from tinymatrix.core.precision import (
    DEFAULT_ATOL,
    DEFAULT_RTOL,
    DISPLAY_DECIMALS,
    DTYPE,
    is_close,
    scale,
)
from tinymatrix.core.validation import (
    check_dimension,
    check_index,
    check_inner_dimensions,
    check_length,
    check_matching_axis,
    check_same_shape,
    check_square,
    check_values,
)


@dataclass(frozen=True)
class DiagonalPartition:
    """
    Split of a square matrix's cells around its main diagonal.

    Attributes:
        diagonal: Entries with row == col, in row order (length n)
        above: Entries with row < col, row-major order (length n(n-1)/2)
        below: Entries with row > col, row-major order (length n(n-1)/2)

    Unpacks like a tuple: ``diag, above, below = m.main_diagonal()``.
    """
    diagonal: NDArray[np.floating[Any]]
    above: NDArray[np.floating[Any]]
    below: NDArray[np.floating[Any]]

    def __iter__(self) -> Iterator[NDArray[np.floating[Any]]]:
        return iter((self.diagonal, self.above, self.below))


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class Matrix:
    """
    Dense rows x cols matrix of float64 values.

    Construction:
        Matrix.new(rows, cols)                 - all zeros
        Matrix.from_values(rows, cols, values) - flat row-major sequence
        Matrix.from_array(array)               - 2D array-like
        Matrix.eye(n)                          - n x n identity

    Operators:
        a + b, a - b     element-wise, shapes must match
        a * b, a @ b     matrix product, a.cols must equal b.rows
        a * s, s * a     scale by a real scalar
        a / s            divide by a real scalar (IEEE semantics for s == 0)
        a *= s, a /= s   scale in place
    """

    __slots__ = ("_rows", "_cols", "_data")

    # Make numpy scalars defer to __rmul__ instead of broadcasting.
    __array_ufunc__ = None

    def __init__(self, rows: int, cols: int, values: ArrayLike):
        """
        Validated construction from a flat row-major sequence.

        Same contract as ``Matrix.from_values``: the values are copied and
        must number exactly rows * cols.
        """
        rows = check_dimension(rows, "rows")
        cols = check_dimension(cols, "cols")
        data = check_values(values, "values")
        check_length(data, rows, cols)
        self._rows = rows
        self._cols = cols
        self._data = data

    @classmethod
    def _wrap(cls, rows: int, cols: int, data: NDArray[np.floating[Any]]) -> Matrix:
        """Internal builder around an owned float64 buffer of the right length."""
        obj = cls.__new__(cls)
        obj._rows = rows
        obj._cols = cols
        obj._data = data
        return obj

    # --- Construction ---

    @classmethod
    def new(cls, rows: int, cols: int) -> Matrix:
        """Zero-filled rows x cols matrix. Zero dimensions are allowed."""
        rows = check_dimension(rows, "rows")
        cols = check_dimension(cols, "cols")
        return cls._wrap(rows, cols, np.zeros(rows * cols, dtype=DTYPE))

    @classmethod
    def from_values(cls, rows: int, cols: int, values: ArrayLike) -> Matrix:
        """
        Build a matrix from a flat row-major sequence.

        Parameters
        ----------
        rows, cols : int
            Declared shape.
        values : array-like
            Flat sequence of exactly rows * cols numbers. The values are
            copied, so later changes to ``values`` do not reach the matrix.

        Raises
        ------
        DimensionError
            If ``len(values) != rows * cols``.
        """
        return cls(rows, cols, values)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build a matrix from a 2D array-like (nested lists, numpy array).

        Raises
        ------
        DimensionError
            If the input is not two-dimensional.
        """
        grid = np.asarray(array)
        if grid.ndim != 2:
            raise DimensionError(
                f"array: expected 2D array, got {grid.ndim}D with shape {grid.shape}",
                operation="from_array",
                expected=2,
                actual=grid.ndim,
            )
        rows, cols = grid.shape
        return cls.from_values(rows, cols, grid.ravel())

    @classmethod
    def eye(cls, n: int) -> Matrix:
        """Square n x n identity matrix."""
        n = check_dimension(n, "n")
        return cls._wrap(n, n, np.eye(n, dtype=DTYPE).ravel())

    def copy(self) -> Matrix:
        return Matrix._wrap(self._rows, self._cols, self._data.copy())

    # --- Shape and access ---

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._rows, self._cols)

    @property
    def size(self) -> int:
        """Total number of elements, rows * cols."""
        return self._rows * self._cols

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Read-only view of the flat row-major buffer."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def get(self, row: int, col: int) -> float:
        """
        Element at (row, col).

        Raises IndexOutOfBoundsError outside 0 <= row < rows,
        0 <= col < cols.
        """
        check_index(row, col, self.shape)
        return float(self._data[row * self._cols + col])

    def set(self, row: int, col: int, value: float) -> None:
        """Overwrite the element at (row, col) in place."""
        check_index(row, col, self.shape)
        if not _is_scalar(value):
            raise TypeError(f"value must be a real number, got {type(value).__name__}")
        self._data[row * self._cols + col] = value

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = self._unpack_key(key)
        return self.get(row, col)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = self._unpack_key(key)
        self.set(row, col, value)

    @staticmethod
    def _unpack_key(key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(f"matrix indices must be a (row, col) pair, got {key!r}")
        return key

    def is_square(self) -> bool:
        return self._rows == self._cols

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Fresh 2D (rows, cols) copy of the data."""
        return self._data.reshape(self._rows, self._cols).copy()

    def tolist(self) -> list[list[float]]:
        return self._data.reshape(self._rows, self._cols).tolist()

    # --- Diagonal and triangularity ---

    def main_diagonal(self) -> DiagonalPartition:
        """
        Partition every cell by its position relative to the main diagonal.

        Cells are visited in row-major order, so ``above`` and ``below``
        are ordered row-then-column.

        Raises
        ------
        DimensionError
            If the matrix is not square.
        """
        check_square(self.shape, "main_diagonal")
        n = self._rows
        grid = self._data.reshape(n, n)
        i, j = np.indices((n, n))
        return DiagonalPartition(
            diagonal=grid[i == j],
            above=grid[i < j],
            below=grid[i > j],
        )

    def is_upper_triangular(self) -> bool:
        """
        True if square and every entry strictly below the diagonal is
        exactly 0.0. No tolerance is applied.
        """
        if not self.is_square():
            return False
        return bool(np.all(self.main_diagonal().below == 0.0))

    def is_lower_triangular(self) -> bool:
        """
        True if square and every entry strictly above the diagonal is
        exactly 0.0. No tolerance is applied.
        """
        if not self.is_square():
            return False
        return bool(np.all(self.main_diagonal().above == 0.0))

    # --- Arithmetic ---

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, "add")
        return Matrix._wrap(self._rows, self._cols, self._data + other._data)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, "subtract")
        return Matrix._wrap(self._rows, self._cols, self._data - other._data)

    def matmul(self, other: Matrix) -> Matrix:
        """
        Matrix product self x other.

        Each result cell is a running sum over k in increasing order,
        starting from 0.0, so results are reproducible bit for bit.

        Raises
        ------
        DimensionError
            If ``self.cols != other.rows``.
        """
        _require_matrix(other, "matmul")
        check_inner_dimensions(self.shape, other.shape)
        left = self._data.reshape(self._rows, self._cols)
        right = other._data.reshape(other._rows, other._cols)
        acc = np.zeros((self._rows, other._cols), dtype=DTYPE)
        for k in range(self._cols):
            acc += np.outer(left[:, k], right[k, :])
        return Matrix._wrap(self._rows, other._cols, acc.ravel())

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matmul(other)

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.matmul(other)
        if _is_scalar(other):
            return Matrix._wrap(self._rows, self._cols, scale(self._data.copy(), other))
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return Matrix._wrap(self._rows, self._cols, scale(self._data.copy(), other))
        return NotImplemented

    def __truediv__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return Matrix._wrap(
                self._rows, self._cols, scale(self._data.copy(), other, divide=True)
            )
        return NotImplemented

    def __imul__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            scale(self._data, other)
            return self
        return NotImplemented

    def __itruediv__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            scale(self._data, other, divide=True)
            return self
        return NotImplemented

    def identity(self) -> Matrix:
        """
        Identity-pattern matrix of the same declared shape.

        Places 1.0 at flat offsets ``i * (rows + 1)`` for each row i. This is
        the identity only for square matrices; for other shapes the placement
        is kept as-is, offsets past the end of the buffer are skipped, and a
        RuntimeWarning is issued. Use ``Matrix.eye(n)`` for a true identity.
        """
        if not self.is_square():
            warnings.warn(
                f"identity() on a non-square {self._rows}x{self._cols} matrix "
                f"is not a mathematical identity",
                RuntimeWarning,
                stacklevel=2,
            )
        result = Matrix.new(self._rows, self._cols)
        for i in range(self._rows):
            offset = i * (self._rows + 1)
            if offset < result.size:
                result._data[offset] = 1.0
        return result

    def determinant(self) -> float:
        raise NotImplementedError("determinant is not supported")

    def lu_decomposition(self) -> tuple[Matrix, Matrix]:
        raise NotImplementedError("LU decomposition is not supported")

    # --- Structural transforms ---

    def transpose(self) -> Matrix:
        """New (cols, rows) matrix with result[j, i] == self[i, j]."""
        grid = self._data.reshape(self._rows, self._cols)
        return Matrix._wrap(self._cols, self._rows, grid.T.flatten())

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def concat_cols(self, other: Matrix) -> Matrix:
        """
        Join columns side by side: row i is self's row i followed by
        other's row i.

        Raises
        ------
        DimensionError
            If the row counts differ.
        """
        _require_matrix(other, "concat_cols")
        check_matching_axis(self.shape, other.shape, 0, "concat_cols")
        left = self._data.reshape(self._rows, self._cols)
        right = other._data.reshape(other._rows, other._cols)
        joined = np.hstack([left, right])
        return Matrix._wrap(self._rows, self._cols + other._cols, joined.ravel())

    def concat_rows(self, other: Matrix) -> Matrix:
        """
        Stack rows: all of self's rows followed by all of other's rows.

        Raises
        ------
        DimensionError
            If the column counts differ.
        """
        _require_matrix(other, "concat_rows")
        check_matching_axis(self.shape, other.shape, 1, "concat_rows")
        # Row-major stacking is plain buffer concatenation.
        joined = np.concatenate([self._data, other._data])
        return Matrix._wrap(self._rows + other._rows, self._cols, joined)

    # --- Comparison ---

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def allclose(
        self,
        other: Matrix,
        rtol: float = DEFAULT_RTOL,
        atol: float = DEFAULT_ATOL,
    ) -> bool:
        """Element-wise comparison within tolerance. Shapes must match."""
        _require_matrix(other, "allclose")
        check_same_shape(self.shape, other.shape, "allclose")
        return bool(np.all(is_close(self._data, other._data, rtol=rtol, atol=atol)))

    # --- Display ---

    def render(self, decimals: int = DISPLAY_DECIMALS) -> str:
        """
        Debug rendering: one line per row, each value fixed to ``decimals``
        places and followed by a space, then a trailing blank line.
        """
        grid = self._data.reshape(self._rows, self._cols)
        lines = ["".join(f"{value:.{decimals}f} " for value in row) for row in grid]
        return "".join(line + "\n" for line in lines) + "\n"

    def print_matrix(self, file: TextIO | None = None) -> None:
        if file is None:
            file = sys.stdout
        file.write(self.render())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Matrix.from_values({self._rows}, {self._cols}, "
            f"{self._data.tolist()})"
        )


def _require_matrix(other: Any, operation: str) -> None:
    if not isinstance(other, Matrix):
        raise TypeError(
            f"{operation}: expected a Matrix operand, got {type(other).__name__}"
        )
