"""
Capability protocols for pymatrix.

Element types are not required to subclass anything. Constructors that need
a zero, a one or a random value take an explicit capability object instead
of relying on global lookup. We use Protocol (structural typing) rather
than ABC (nominal typing) so any object with the right methods qualifies.

Design Principles:
    - Minimal contracts: prescribe only what constructors actually call
    - Explicit: capabilities are passed in, never discovered implicitly
    - Type-safe: generic over the element type T
"""

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar('T')  # Element type
T_co = TypeVar('T_co', covariant=True)


@runtime_checkable
class Ring(Protocol[T_co]):
    """
    Supplies the additive and multiplicative identities of an element type.

    Used by Matrix.zero, Matrix.identity and Vector.zero. The element type
    itself must support ``+``, ``-`` and ``*`` for the arithmetic operators;
    the ring only answers "what is zero" and "what is one".
    """

    def identity_additive(self) -> T_co:
        """Return the zero element, i.e. ``zero + a == a``."""
        ...

    def identity_multiplicative(self) -> T_co:
        """Return the one element, i.e. ``one * a == a``."""
        ...


@runtime_checkable
class Sampler(Protocol[T_co]):
    """
    Produces independent random values of an element type.

    The distribution is the sampler's own concern; Matrix.random only
    calls sample() once per entry, column by column.
    """

    def sample(self) -> T_co:
        """Draw one value."""
        ...
