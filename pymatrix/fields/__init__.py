"""
Element types and capabilities shipped with pymatrix.

Public API:
    Bit                    - GF(2) element, XOR addition
    INTEGERS, FLOATS, ...  - Ring instances for builtin scalar types
    NumpyRing(dtype)       - Ring over a numpy scalar dtype
    ring_for(type)         - Ring lookup by element type
    UniformFloatSampler, UniformIntegerSampler, BitSampler
"""

from pymatrix.fields.bit import Bit
from pymatrix.fields.rings import (
    BITS,
    BOOLEANS,
    COMPLEX,
    FLOATS,
    INTEGERS,
    NumpyRing,
    ScalarRing,
    ring_for,
)
from pymatrix.fields.sampling import (
    BitSampler,
    UniformFloatSampler,
    UniformIntegerSampler,
)

__all__ = [
    "Bit",
    "BITS",
    "BOOLEANS",
    "COMPLEX",
    "FLOATS",
    "INTEGERS",
    "NumpyRing",
    "ScalarRing",
    "ring_for",
    "BitSampler",
    "UniformFloatSampler",
    "UniformIntegerSampler",
]
