"""
Built-in Ring implementations.

A ring here only answers "what is zero" and "what is one" for an element
type; the arithmetic itself comes from the element's own operators.

Usage:
    from pymatrix.fields.rings import FLOATS, ring_for

    Matrix.zero(3, 3, ring=FLOATS)
    Matrix.identity(4, ring=ring_for(np.float32))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from pymatrix.core.exceptions import ValidationError
from pymatrix.fields.bit import Bit


@dataclass(frozen=True)
class ScalarRing:
    """Ring backed by two fixed identity values."""
    name: str
    zero: Any
    one: Any

    def identity_additive(self) -> Any:
        return self.zero

    def identity_multiplicative(self) -> Any:
        return self.one


@dataclass(frozen=True)
class NumpyRing:
    """
    Ring over a numpy scalar dtype.

    Identities are numpy scalars of that dtype, so arithmetic on the
    resulting vectors keeps numpy's overflow and rounding rules.
    """
    dtype: np.dtype

    def __post_init__(self):
        object.__setattr__(self, 'dtype', np.dtype(self.dtype))
        if not (np.issubdtype(self.dtype, np.number) or self.dtype == np.bool_):
            raise ValidationError(
                f"dtype: non-numeric dtype {self.dtype}, expected numeric or bool"
            )

    @property
    def name(self) -> str:
        return str(self.dtype)

    def identity_additive(self) -> Any:
        return self.dtype.type(0)

    def identity_multiplicative(self) -> Any:
        return self.dtype.type(1)


INTEGERS = ScalarRing('integers', 0, 1)
FLOATS = ScalarRing('floats', 0.0, 1.0)
COMPLEX = ScalarRing('complex', 0j, 1 + 0j)
BOOLEANS = ScalarRing('booleans', False, True)
BITS = ScalarRing('bits', Bit(False), Bit(True))

_BUILTIN_RINGS: dict[type, ScalarRing] = {
    int: INTEGERS,
    float: FLOATS,
    complex: COMPLEX,
    bool: BOOLEANS,
    Bit: BITS,
}


def ring_for(element_type: Any) -> ScalarRing | NumpyRing:
    """
    Look up the ring for a Python or numpy element type.

    Args:
        element_type: int, float, complex, bool, Bit, a numpy scalar type
            or anything np.dtype() accepts

    Returns:
        The matching ring

    Raises:
        ValidationError: If no ring is known for the type
    """
    if element_type in _BUILTIN_RINGS:
        return _BUILTIN_RINGS[element_type]
    try:
        dtype = np.dtype(element_type)
    except TypeError as e:
        raise ValidationError(
            f"element_type: no ring known for {element_type!r}"
        ) from e
    return NumpyRing(dtype)
