"""
pymatrix: generic vectors and matrices over copy-on-write storage.

Vectors and matrices work over any element type supporting ``+``, ``-``
and ``*``. Derived values (repeats, slices, segments, transposes) share
storage cells with their source and copy a cell only when it is written.

Submodules:
    core: protocols, exceptions, validation
    fields: Bit, built-in rings, samplers
    store: copy-on-write element store
    vector: Vector
    matrix: Matrix
"""

__version__ = "0.1.0"

from pymatrix.core import (
    ColumnMismatchError,
    ContractViolationError,
    DimensionError,
    IndexOutOfBoundsError,
    LengthMismatchError,
    PyMatrixError,
    Ring,
    RowMismatchError,
    Sampler,
    UnequalColumnLengthError,
    ValidationError,
)
from pymatrix.fields import (
    BITS,
    BOOLEANS,
    COMPLEX,
    FLOATS,
    INTEGERS,
    Bit,
    BitSampler,
    NumpyRing,
    UniformFloatSampler,
    UniformIntegerSampler,
    ring_for,
)
from pymatrix.store import ElementStore, StoreView
from pymatrix.vector import Vector
from pymatrix.matrix import Matrix

__all__ = [
    "__version__",
    # Values
    "ElementStore",
    "StoreView",
    "Vector",
    "Matrix",
    # Fields
    "Bit",
    "BITS",
    "BOOLEANS",
    "COMPLEX",
    "FLOATS",
    "INTEGERS",
    "NumpyRing",
    "ring_for",
    "BitSampler",
    "UniformFloatSampler",
    "UniformIntegerSampler",
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
