"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently truncating,
padding or wrapping negative indices.

Design principles:
    - No silent coercion (except operator.index on integer-likes)
    - Every check runs before the caller mutates anything
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import operator
from typing import Any

from pymatrix.core.exceptions import (
    ColumnMismatchError,
    DimensionError,
    IndexOutOfBoundsError,
    LengthMismatchError,
    RowMismatchError,
    ValidationError,
)


def as_index(value: Any, name: str) -> int:
    """
    Convert an integer-like value to a plain int.

    Accepts int and numpy integer scalars. Rejects bool, float and
    anything else without an ``__index__``.

    Args:
        value: Candidate index or size
        name: Parameter name for error messages

    Returns:
        The value as a Python int

    Raises:
        ValidationError: If value is not integer-like
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name}: expected an integer, got bool {value!r}")
    try:
        return operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        ) from e


def check_non_negative(value: Any, name: str) -> int:
    """
    Verify a size argument is a non-negative integer.

    Args:
        value: Size to check
        name: Parameter name for error messages

    Returns:
        The size as a Python int

    Raises:
        ValidationError: If value is negative or not integer-like
    """
    size = as_index(value, name)
    if size < 0:
        raise ValidationError(f"{name}: must be non-negative, got {size}")
    return size


def check_index(index: Any, bound: int, name: str) -> int:
    """
    Verify an index lies in ``0..bound``.

    Negative indices are rejected, not wrapped.

    Args:
        index: Index to check
        bound: Exclusive upper bound
        name: Parameter name for error messages

    Returns:
        The index as a Python int

    Raises:
        ValidationError: If index is not integer-like
        IndexOutOfBoundsError: If index < 0 or index >= bound
    """
    i = as_index(index, name)
    if i < 0 or i >= bound:
        raise IndexOutOfBoundsError(
            f"{name}: index {i} out of bounds for length {bound}",
            index=i,
            bound=bound,
        )
    return i


def check_range(start: Any, stop: Any, bound: int, name: str) -> tuple[int, int]:
    """
    Verify ``start..stop`` is a forward range inside ``0..bound``.

    An empty range (start == stop) is valid anywhere up to bound.

    Args:
        start: Inclusive start
        stop: Exclusive stop
        bound: Length of the indexed sequence
        name: Parameter name for error messages

    Returns:
        (start, stop) as Python ints

    Raises:
        ValidationError: If either end is not integer-like
        IndexOutOfBoundsError: If the range is reversed or exceeds bound
    """
    lo = as_index(start, f"{name}.start")
    hi = as_index(stop, f"{name}.stop")
    if lo < 0 or hi < lo or hi > bound:
        raise IndexOutOfBoundsError(
            f"{name}: range {lo}..{hi} out of bounds for length {bound}",
            index=hi,
            bound=bound,
        )
    return lo, hi


def check_same_length(
    left: int,
    right: int,
    names: tuple[str, str] = ('left', 'right'),
) -> None:
    """
    Verify two vector lengths are equal.

    Args:
        left: Length of the left operand
        right: Length of the right operand
        names: Operand names for error messages

    Raises:
        LengthMismatchError: If the lengths differ
    """
    if left != right:
        raise LengthMismatchError(
            f"Vectors should be of equal length: "
            f"{names[0]}={left}, {names[1]}={right}",
            expected=left,
            actual=right,
        )


def check_same_rows(left: int, right: int) -> None:
    """
    Verify two matrices have the same number of rows.

    Raises:
        RowMismatchError: If the row counts differ
    """
    if left != right:
        raise RowMismatchError(
            f"Row counts differ: left has {left} rows, right has {right}",
            expected=left,
            actual=right,
        )


def check_same_columns(left: int, right: int) -> None:
    """
    Verify two matrices have the same number of columns.

    Raises:
        ColumnMismatchError: If the column counts differ
    """
    if left != right:
        raise ColumnMismatchError(
            f"Column counts differ: left has {left} columns, right has {right}",
            expected=left,
            actual=right,
        )


def check_segment_extent(
    start: int,
    extent: int,
    bound: int,
    axis: str,
    strict: bool = True,
) -> None:
    """
    Verify a segment starting at ``start`` with ``extent`` entries fits.

    With strict=True the end (start + extent) must be strictly less than
    bound, so a segment touching the last row or column is rejected. This
    matches the reference behaviour of the segment operators. strict=False
    allows the end to equal bound.

    Args:
        start: First row or column of the segment
        extent: Number of rows or columns
        bound: Row or column count of the matrix
        axis: 'rows' or 'cols', for error messages
        strict: Use the strict end < bound comparison

    Raises:
        IndexOutOfBoundsError: If the segment does not fit
    """
    end = start + extent
    fits = end < bound if strict else end <= bound
    if not fits:
        relation = '<' if strict else '<='
        raise IndexOutOfBoundsError(
            f"Index out of bounds: too many {axis} "
            f"(need {start} + {extent} {relation} {bound})",
            index=end,
            bound=bound,
        )


def check_ndim(array: Any, ndim: int, name: str) -> None:
    """
    Verify a numpy array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )
