"""
Core infrastructure for pymatrix.

This module provides shared abstractions and utilities used by the
element store, vector and matrix layers.

Key components:
    protocols: Ring, Sampler capability protocols
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Default rtol/atol for allclose()
"""

from pymatrix.core.protocols import Ring, Sampler
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    ContractViolationError,
    DimensionError,
    LengthMismatchError,
    RowMismatchError,
    ColumnMismatchError,
    UnequalColumnLengthError,
    IndexOutOfBoundsError,
)

__all__ = [
    # Protocols
    "Ring",
    "Sampler",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "ContractViolationError",
    "DimensionError",
    "LengthMismatchError",
    "RowMismatchError",
    "ColumnMismatchError",
    "UnequalColumnLengthError",
    "IndexOutOfBoundsError",
]
