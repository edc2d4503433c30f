"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - as_index / check_non_negative: integer coercion
    - check_index / check_range: bounds, no negative wrapping
    - check_same_length / rows / columns: mismatch errors
    - check_segment_extent: strict and inclusive edge rules
    - check_ndim: array dimensionality
"""

import numpy as np
import pytest

from pymatrix.core.exceptions import (
    ColumnMismatchError,
    DimensionError,
    IndexOutOfBoundsError,
    LengthMismatchError,
    RowMismatchError,
    ValidationError,
)
from pymatrix.core.validation import (
    as_index,
    check_index,
    check_ndim,
    check_non_negative,
    check_range,
    check_same_columns,
    check_same_length,
    check_same_rows,
    check_segment_extent,
)


# ═══════════════════════════════════════════════════════════════════════
# as_index / check_non_negative
# ═══════════════════════════════════════════════════════════════════════


class TestAsIndex:
    """as_index accepts integer-likes only."""

    def test_int_passthrough(self):
        assert as_index(3, "i") == 3

    def test_numpy_integer(self):
        result = as_index(np.int64(7), "i")
        assert result == 7
        assert type(result) is int

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="expected an integer"):
            as_index(1.0, "i")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="bool"):
            as_index(True, "i")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_index"):
            as_index("0", "my_index")


class TestCheckNonNegative:

    def test_zero_passes(self):
        assert check_non_negative(0, "n") == 0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="n: must be non-negative, got -1"):
            check_non_negative(-1, "n")


# ═══════════════════════════════════════════════════════════════════════
# check_index / check_range
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:
    """check_index rejects anything outside 0..bound."""

    def test_in_range(self):
        assert check_index(2, 3, "i") == 2

    def test_at_bound_rejected(self):
        with pytest.raises(IndexOutOfBoundsError):
            check_index(3, 3, "i")

    def test_negative_not_wrapped(self):
        with pytest.raises(IndexOutOfBoundsError):
            check_index(-1, 3, "i")

    def test_attributes(self):
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            check_index(100, 1, "i")
        assert exc_info.value.index == 100
        assert exc_info.value.bound == 1


class TestCheckRange:

    def test_full_range(self):
        assert check_range(0, 4, 4, "r") == (0, 4)

    def test_empty_range_at_end(self):
        assert check_range(4, 4, 4, "r") == (4, 4)

    def test_reversed_rejected(self):
        with pytest.raises(IndexOutOfBoundsError):
            check_range(3, 1, 4, "r")

    def test_past_end_rejected(self):
        with pytest.raises(IndexOutOfBoundsError):
            check_range(2, 5, 4, "r")


# ═══════════════════════════════════════════════════════════════════════
# Dimension matching
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionMatching:

    def test_same_length_passes(self):
        check_same_length(3, 3)  # no exception

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError, match="left=1, right=2") as exc_info:
            check_same_length(1, 2)
        assert exc_info.value.expected == 1
        assert exc_info.value.actual == 2

    def test_length_mismatch_custom_names(self):
        with pytest.raises(LengthMismatchError, match="vector=2"):
            check_same_length(2, 3, names=("vector", "matrix rows"))

    def test_row_mismatch(self):
        with pytest.raises(RowMismatchError):
            check_same_rows(2, 3)

    def test_column_mismatch(self):
        with pytest.raises(ColumnMismatchError):
            check_same_columns(2, 3)


# ═══════════════════════════════════════════════════════════════════════
# check_segment_extent
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSegmentExtent:
    """Strict mode rejects segments ending exactly at the edge."""

    def test_inside_passes(self):
        check_segment_extent(3, 3, 10, "rows")

    def test_edge_rejected_when_strict(self):
        with pytest.raises(IndexOutOfBoundsError, match="too many rows"):
            check_segment_extent(7, 3, 10, "rows")

    def test_edge_accepted_when_not_strict(self):
        check_segment_extent(7, 3, 10, "rows", strict=False)

    def test_past_edge_rejected_when_not_strict(self):
        with pytest.raises(IndexOutOfBoundsError, match="too many cols"):
            check_segment_extent(8, 3, 10, "cols", strict=False)


# ═══════════════════════════════════════════════════════════════════════
# check_ndim
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNdim:

    def test_correct_ndim(self):
        check_ndim(np.zeros((2, 2)), 2, "X")

    def test_wrong_ndim(self):
        with pytest.raises(DimensionError, match="expected 1D array, got 2D"):
            check_ndim(np.zeros((2, 2)), 1, "X")
