"""
Vector: a fixed-length vector over an arbitrary element type.

Every binary operation comes in two forms that produce equal values:

    borrowing   a + b, a.add(b)         new vector, operands untouched
    consuming   a += b, a.add_into(b)   result written into a's storage

The consuming form reuses the receiver's store. Its writes go through the
store's copy-on-write path, so other vectors sharing cells with the
receiver never observe them.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.protocols import Ring
from pymatrix.core.tolerances import DEFAULT_ATOL, DEFAULT_RTOL
from pymatrix.core.validation import check_ndim, check_same_length
from pymatrix.fields.rings import INTEGERS
from pymatrix.store import ElementStore, StoreView

if TYPE_CHECKING:
    from pymatrix.matrix.matrix import Matrix


def fold_sum(values: Iterable[Any], ring: Ring | None = None) -> Any:
    """
    Sum values left to right in iteration order.

    The first value seeds the accumulator, so no zero is needed for
    non-empty input. An empty input gives ``ring.identity_additive()``,
    or ``0`` when no ring is supplied.
    """
    it = iter(values)
    try:
        acc = next(it)
    except StopIteration:
        return ring.identity_additive() if ring is not None else 0
    for value in it:
        acc = acc + value
    return acc


def _require_vector(other: Any, name: str) -> Vector:
    if not isinstance(other, Vector):
        raise ValidationError(
            f"{name}: expected Vector, got {type(other).__name__}"
        )
    return other


class Vector:
    """
    Fixed-length vector backed by a copy-on-write ElementStore.

    Construction:
        Vector([1, 2, 3])
        Vector.repeat(3, 0)
        Vector.zero(3, ring=FLOATS)
        Vector.from_store(store.slice(1, 3))

    Examples:
        >>> Vector([1, 3, -5]) @ Vector([4, -2, -1])
        3
        >>> Vector([0, 1, 2]) + Vector([0, 1, 2])
        Vector([0, 2, 4])
    """

    def __init__(self, values: Iterable[Any] = ()):
        self._store = ElementStore(values)

    @classmethod
    def from_store(cls, store: ElementStore | StoreView) -> Vector:
        """
        Wrap a store without copying values.

        The vector gets its own store sharing the given store's (or
        view's) cells, so writes through either side stay private.
        """
        if isinstance(store, StoreView):
            return cls._adopt(store.to_store())
        return cls._adopt(store.clone())

    @classmethod
    def _adopt(cls, store: ElementStore) -> Vector:
        # Store must be freshly built and referenced by nothing else
        obj = cls.__new__(cls)
        obj._store = store
        return obj

    @classmethod
    def repeat(cls, n: int, value: Any) -> Vector:
        """``n`` copies of ``value`` sharing one cell."""
        return cls._adopt(ElementStore.repeat(n, value))

    @classmethod
    def zero(cls, n: int, ring: Ring = INTEGERS) -> Vector:
        return cls.repeat(n, ring.identity_additive())

    @classmethod
    def from_numpy(cls, array: ArrayLike) -> Vector:
        """
        Build from a 1D array-like. Elements become Python scalars.

        Raises:
            DimensionError: If the array is not 1D
        """
        arr = np.asarray(array)
        check_ndim(arr, 1, 'array')
        return cls(arr.tolist())

    @property
    def store(self) -> ElementStore:
        """The backing store (for aliasing introspection)."""
        return self._store

    # --- Sequence protocol ---

    def __len__(self) -> int:
        return len(self._store)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._store)

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            if index.step not in (None, 1):
                raise ValidationError(f"slice step must be 1, got {index.step}")
            start = 0 if index.start is None else index.start
            stop = len(self) if index.stop is None else index.stop
            return self.slice(start, stop)
        return self._store.get(index)

    def __setitem__(self, index: int, value: Any) -> None:
        self._store.set(index, value)

    def get_mut(self, index: int) -> Any:
        """Value at ``index``, detached from other owners for in-place mutation."""
        return self._store.get_mut(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._store == other._store

    __hash__ = None

    def __repr__(self) -> str:
        return f"Vector({self.to_list()!r})"

    # --- Derived vectors (share cells) ---

    def copy(self) -> Vector:
        """Vector sharing every cell of this one until written."""
        return Vector._adopt(self._store.clone())

    def slice(self, start: int, stop: int) -> Vector:
        """Sub-vector ``start..stop`` sharing this vector's cells."""
        return Vector._adopt(self._store.slice(start, stop).to_store())

    def concat(self, other: Vector) -> Vector:
        other = _require_vector(other, 'other')
        return Vector._adopt(self._store.concat(other._store))

    # --- Elementwise arithmetic ---

    def add(self, other: Vector) -> Vector:
        """
        Borrowing elementwise sum.

        Raises:
            LengthMismatchError: If lengths differ
        """
        other = _require_vector(other, 'other')
        check_same_length(len(self), len(other))
        return Vector(a + b for a, b in zip(self, other))

    def add_into(self, other: Vector) -> Vector:
        """
        Consuming elementwise sum: writes into this vector and returns it.

        Raises:
            LengthMismatchError: If lengths differ (self is left untouched)
        """
        other = _require_vector(other, 'other')
        check_same_length(len(self), len(other))
        for i, b in enumerate(other.to_list()):
            self._store.set(i, self._store.get(i) + b)
        return self

    def sub(self, other: Vector) -> Vector:
        """
        Borrowing elementwise difference.

        Raises:
            LengthMismatchError: If lengths differ
        """
        other = _require_vector(other, 'other')
        check_same_length(len(self), len(other))
        return Vector(a - b for a, b in zip(self, other))

    def sub_into(self, other: Vector) -> Vector:
        """Consuming elementwise difference; see add_into."""
        other = _require_vector(other, 'other')
        check_same_length(len(self), len(other))
        for i, b in enumerate(other.to_list()):
            self._store.set(i, self._store.get(i) - b)
        return self

    def dot(self, other: Vector, *, ring: Ring | None = None) -> Any:
        """
        Borrowing dot product, folded in ascending index order.

        Args:
            other: Vector of the same length
            ring: Supplies the result for empty vectors (default 0)

        Raises:
            LengthMismatchError: If lengths differ
        """
        other = _require_vector(other, 'other')
        check_same_length(len(self), len(other))
        return fold_sum((a * b for a, b in zip(self, other)), ring)

    def dot_into(self, other: Vector, *, ring: Ring | None = None) -> Any:
        """
        Consuming dot product.

        The elementwise products are written into this vector's storage
        and then folded in ascending index order, so afterwards this
        vector holds ``self[i] * other[i]``.
        """
        other = _require_vector(other, 'other')
        check_same_length(len(self), len(other))
        for i, b in enumerate(other.to_list()):
            self._store.set(i, self._store.get(i) * b)
        return fold_sum(self, ring)

    def scale(self, factor: Any) -> Vector:
        """Borrowing scalar multiple ``self[i] * factor``."""
        return Vector(a * factor for a in self)

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __iadd__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add_into(other)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sub(other)

    def __isub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sub_into(other)

    def __matmul__(self, other: Vector) -> Any:
        # vector @ matrix is handled by Matrix.__rmatmul__
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)

    def __imatmul__(self, other: Matrix) -> Vector:
        from pymatrix.matrix.matrix import Matrix

        if not isinstance(other, Matrix):
            return NotImplemented
        return other.vecmat_into(self)

    # --- Conversion ---

    def to_list(self) -> list[Any]:
        return self._store.to_list()

    def to_numpy(self, dtype: Any = None) -> NDArray[Any]:
        return np.asarray(self.to_list(), dtype=dtype)

    def allclose(
        self,
        other: Vector,
        rtol: float = DEFAULT_RTOL,
        atol: float = DEFAULT_ATOL,
    ) -> bool:
        """
        Approximate equality for numeric vectors.

        Raises:
            LengthMismatchError: If lengths differ
        """
        other = _require_vector(other, 'other')
        check_same_length(len(self), len(other))
        return bool(np.allclose(self.to_numpy(), other.to_numpy(), rtol=rtol, atol=atol))

    def _replace_store(self, store: ElementStore) -> None:
        self._store = store
