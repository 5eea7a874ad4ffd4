"""
Tests for TinyMatrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via TinyMatrixError)
    - IndexOutOfBoundsError is also an IndexError
    - Diagnostic attributes on DimensionError and IndexOutOfBoundsError
    - Default attribute values (None for optional attributes)
"""

import pytest

from tinymatrix.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    TinyMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via TinyMatrixError."""

    def test_validation_error_is_tinymatrix_error(self):
        with pytest.raises(TinyMatrixError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_index_error_is_tinymatrix_error(self):
        with pytest.raises(TinyMatrixError):
            raise IndexOutOfBoundsError("out of range")

    def test_index_error_is_builtin_index_error(self):
        with pytest.raises(IndexError):
            raise IndexOutOfBoundsError("out of range")

    def test_index_error_is_not_validation_error(self):
        err = IndexOutOfBoundsError("out of range")
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# DimensionError
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionError:
    """DimensionError carries shape diagnostics."""

    def test_all_attributes(self):
        err = DimensionError(
            "add: shapes must match",
            operation="add",
            expected=(2, 2),
            actual=(3, 2),
        )
        assert str(err) == "add: shapes must match"
        assert err.operation == "add"
        assert err.expected == (2, 2)
        assert err.actual == (3, 2)

    def test_defaults_are_none(self):
        err = DimensionError("wrong shape")
        assert err.operation is None
        assert err.expected is None
        assert err.actual is None


# ═══════════════════════════════════════════════════════════════════════
# IndexOutOfBoundsError
# ═══════════════════════════════════════════════════════════════════════


class TestIndexOutOfBoundsError:

    def test_all_attributes(self):
        err = IndexOutOfBoundsError("index (2, 0) out of bounds", row=2, col=0, shape=(2, 2))
        assert err.row == 2
        assert err.col == 0
        assert err.shape == (2, 2)

    def test_defaults_are_none(self):
        err = IndexOutOfBoundsError("out of range")
        assert err.row is None
        assert err.col is None
        assert err.shape is None
