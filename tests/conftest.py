"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from tinymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_2x2():
    """[[1, 2], [3, 4]]"""
    return Matrix.from_values(2, 2, [1.0, 2.0, 3.0, 4.0])


@pytest.fixture
def square_3x3():
    """The 3x3 sample matrix used by the demo program."""
    return Matrix.from_values(3, 3, [
        1.0, 2.0, 3.0,
        -2.0, -1.0, 10.0,
        5.0, 6.0, -1.5,
    ])


@pytest.fixture
def random_matrix(rng):
    """Factory for random matrices with integer-valued entries (exact arithmetic)."""
    def make(rows, cols):
        values = rng.integers(-9, 10, size=rows * cols).astype(np.float64)
        return Matrix.from_values(rows, cols, values)
    return make
