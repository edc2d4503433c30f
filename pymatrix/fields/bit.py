"""
Bit: the two-element field with XOR as addition.

Bit wraps any value supporting ``^`` and ``&`` (bool, int, numpy integer
scalars). Addition and subtraction are both XOR, multiplication is AND,
so vectors and matrices of Bits do GF(2) arithmetic with the ordinary
Vector and Matrix operators.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pymatrix.core.protocols import Ring


@dataclass(frozen=True)
class Bit:
    """
    One element of GF(2).

    Immutable; ``a += b`` rebinds ``a`` to ``a ^ b``.

    Examples:
        >>> Bit.one() + Bit.one() == Bit.zero()
        True
        >>> Bit.from_value(1) * Bit.from_value(0)
        Bit(value=0)
    """
    value: Any = False

    @classmethod
    def zero(cls, ring: Ring | None = None) -> Bit:
        """Bit holding the ring's zero (False by default)."""
        return cls(ring.identity_additive() if ring is not None else False)

    @classmethod
    def one(cls, ring: Ring | None = None) -> Bit:
        """Bit holding the ring's one (True by default)."""
        return cls(ring.identity_multiplicative() if ring is not None else True)

    @classmethod
    def from_value(cls, value: Any) -> Bit:
        return cls(value)

    def __xor__(self, other: Bit) -> Bit:
        if not isinstance(other, Bit):
            return NotImplemented
        return Bit(self.value ^ other.value)

    # In GF(2) addition and subtraction are both XOR
    __add__ = __xor__
    __sub__ = __xor__

    def __mul__(self, other: Bit) -> Bit:
        if not isinstance(other, Bit):
            return NotImplemented
        return Bit(self.value & other.value)

    def __neg__(self) -> Bit:
        return self

    def __bool__(self) -> bool:
        return bool(self.value)

    def __int__(self) -> int:
        return int(self.value)
