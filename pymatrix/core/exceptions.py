"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Dimension problems share the DimensionError
base so callers can treat every shape mismatch uniformly.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class ContractViolationError(ValidationError):
    """
    A constructor was called with arguments its contract forbids.

    Example: the two-argument identity constructor with rows != cols.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand dimensions are incorrect or inconsistent.

    Base class for every mismatch between vector lengths, row counts
    and column counts.
    """
    pass


class LengthMismatchError(DimensionError):
    """
    Two vectors combined elementwise have different lengths.

    Attributes:
        expected: Length of the left operand
        actual: Length of the right operand
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class RowMismatchError(DimensionError):
    """
    Matrices combined side by side have different row counts.

    Attributes:
        expected: Row count of the receiver
        actual: Row count of the other operand
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ColumnMismatchError(DimensionError):
    """
    Matrices combined column by column have different column counts.

    Attributes:
        expected: Column count of the receiver
        actual: Column count of the other operand
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class UnequalColumnLengthError(DimensionError):
    """
    Columns handed to a matrix constructor are not all the same length.

    Attributes:
        column: Index of the first offending column
        expected: Length of column 0
        actual: Length of the offending column
    """

    def __init__(
        self,
        message: str,
        column: int | None = None,
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.column = column
        self.expected = expected
        self.actual = actual


class IndexOutOfBoundsError(PyMatrixError, IndexError):
    """
    An index or index range exceeds the bounds of a store, vector or matrix.

    Subclasses IndexError so plain Python iteration protocols and
    ``except IndexError`` handlers keep working.

    Attributes:
        index: The offending index (or range end)
        bound: The exclusive upper bound that was exceeded
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
