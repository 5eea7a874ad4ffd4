"""
Numerical precision constants and utilities.

Provides the storage dtype, display precision and tolerance defaults shared
by every matrix operation.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


# Storage dtype for every matrix buffer
DTYPE = np.float64

# Decimal places used by Matrix.render()
DISPLAY_DECIMALS: int = 2

# Machine epsilon for float64
EPSILON_64: float = np.finfo(np.float64).eps  # ~2.22e-16

# Default tolerance for numerical comparisons (relative)
DEFAULT_RTOL: float = 1e-12

# Default tolerance for considering values as zero (absolute)
DEFAULT_ATOL: float = 1e-14


def is_close(
    a: float | NDArray[np.floating[Any]],
    b: float | NDArray[np.floating[Any]],
    rtol: float = DEFAULT_RTOL,
    atol: float = DEFAULT_ATOL
) -> bool | NDArray[np.bool_]:
    """
    Tolerance-aware comparison backing Matrix.allclose().

    A value a matches reference b when |a - b| <= atol + rtol * |b|, so the
    test is asymmetric in its arguments. Triangularity checks never use it;
    they compare against 0.0 exactly.
    """
    return np.abs(a - b) <= atol + rtol * np.abs(b)


def scale(
    values: NDArray[np.floating[Any]],
    factor: float,
    divide: bool = False,
) -> NDArray[np.floating[Any]]:
    """
    Multiply (or divide) an array by a scalar in place.

    Division by zero yields IEEE-754 inf/nan without numpy warnings.

    Returns:
        The same array, scaled
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        if divide:
            values /= factor
        else:
            values *= factor
    return values
