"""
Copy-on-write element store.

An ElementStore is a fixed-length sequence of cells. A cell holds one value
and an explicit owner count: the number of live store or view slots that
reference it. Several slots (of one store, or of different stores) may
reference the same cell, which is what makes ``repeat``, ``clone``,
``slice`` and matrix transposition cheap.

Mutation always goes through ``_detach``: a slot whose cell has more than
one owner first gets a private cell, and only that private cell is
written. A write through one alias is therefore never visible through
another.

Ownership is released by a weakref finalizer when a store or view is
garbage collected, so owner counts never undercount live references.
They may overcount briefly (until the collector runs), which only costs
an extra copy on the next write.
"""

from __future__ import annotations

import copy
import weakref
from typing import Any, Iterable, Iterator, Sequence

from pymatrix.core.validation import check_index, check_non_negative, check_range


class Cell:
    """One shareable storage slot."""

    __slots__ = ('value', 'owners')

    def __init__(self, value: Any, owners: int = 1):
        self.value = value
        self.owners = owners

    def __repr__(self) -> str:
        return f"Cell({self.value!r}, owners={self.owners})"


def _release(cells: list[Cell]) -> None:
    for cell in cells:
        cell.owners -= 1


class _CellSequence:
    """Shared read API of ElementStore and StoreView."""

    __slots__ = ('_cells', '_finalizer', '__weakref__')

    def _attach(self, cells: list[Cell]) -> None:
        # Ownership of every cell in ``cells`` must already be counted
        self._cells = cells
        self._finalizer = weakref.finalize(self, _release, cells)
        self._finalizer.atexit = False

    @classmethod
    def _from_shared_cells(cls, cells: Iterable[Cell]):
        shared = list(cells)
        for cell in shared:
            cell.owners += 1
        obj = cls.__new__(cls)
        obj._attach(shared)
        return obj

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Any]:
        return (cell.value for cell in self._cells)

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _CellSequence):
            return NotImplemented
        return len(self) == len(other) and all(
            a == b for a, b in zip(self, other)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"

    def get(self, index: int) -> Any:
        """
        Read the value at ``index``.

        Raises:
            IndexOutOfBoundsError: If index is outside 0..len
        """
        i = check_index(index, len(self._cells), 'index')
        return self._cells[i].value

    def to_list(self) -> list[Any]:
        return [cell.value for cell in self._cells]

    def owners(self, index: int) -> int:
        """Number of live slots sharing the cell at ``index``."""
        i = check_index(index, len(self._cells), 'index')
        return self._cells[i].owners

    def shares_cell(
        self,
        index: int,
        other_index: int,
        other: _CellSequence | None = None,
    ) -> bool:
        """
        True if slot ``index`` and slot ``other_index`` of ``other``
        (default: this store) reference the same cell.
        """
        target = self if other is None else other
        i = check_index(index, len(self._cells), 'index')
        j = check_index(other_index, len(target._cells), 'other_index')
        return self._cells[i] is target._cells[j]


class StoreView(_CellSequence):
    """
    Read-only window over a contiguous run of another store's cells.

    The view shares cells, never values: creating one copies only cell
    references. Writes to the parent store after the view was taken detach
    the parent's slot and are not seen through the view.
    """

    __slots__ = ()

    def to_store(self) -> ElementStore:
        """Promote to a mutable store sharing the same cells."""
        return ElementStore._from_shared_cells(self._cells)


class ElementStore(_CellSequence):
    """
    Fixed-length sequence of copy-on-write cells.

    Construction:
        ElementStore([1, 2, 3])          # one private cell per value
        ElementStore.repeat(3, 0)        # three slots, one shared cell

    Examples:
        >>> s = ElementStore.repeat(3, 0)
        >>> s.set(1, 4)
        >>> s.to_list()
        [0, 4, 0]
        >>> s.shares_cell(0, 2)
        True
    """

    __slots__ = ()

    def __init__(self, values: Iterable[Any] = ()):
        self._attach([Cell(value) for value in values])

    @classmethod
    def build(cls, values: Iterable[Any]) -> ElementStore:
        """Wrap each value as an exclusively owned cell."""
        return cls(values)

    @classmethod
    def repeat(cls, n: int, value: Any) -> ElementStore:
        """
        ``n`` slots that all reference one shared cell holding ``value``.

        Raises:
            ValidationError: If n is negative or not an integer
        """
        n = check_non_negative(n, 'n')
        cell = Cell(value, owners=n)
        obj = cls.__new__(cls)
        obj._attach([cell] * n)
        return obj

    @classmethod
    def gather(cls, sources: Sequence[_CellSequence], index: int) -> ElementStore:
        """
        Store whose k-th slot shares cell ``index`` of ``sources[k]``.

        Used to read a matrix row across its column stores without
        copying values.

        Raises:
            IndexOutOfBoundsError: If index is out of range for any source
        """
        for source in sources:
            check_index(index, len(source._cells), 'index')
        return cls._from_shared_cells(source._cells[index] for source in sources)

    def __setitem__(self, index: int, value: Any) -> None:
        self.set(index, value)

    def _detach(self, i: int, copy_value: bool) -> Cell:
        cell = self._cells[i]
        if cell.owners > 1:
            value = copy.deepcopy(cell.value) if copy_value else cell.value
            cell.owners -= 1
            cell = Cell(value)
            self._cells[i] = cell
        return cell

    def set(self, index: int, value: Any) -> None:
        """
        Store ``value`` at ``index``.

        If the slot's cell is shared, the slot is first given a private
        cell; other owners keep the old value.

        Raises:
            IndexOutOfBoundsError: If index is outside 0..len
        """
        i = check_index(index, len(self._cells), 'index')
        self._detach(i, copy_value=False).value = value

    def get_mut(self, index: int) -> Any:
        """
        Return the value at ``index`` for in-place mutation.

        If the slot's cell is shared, its value is deep-copied into a
        private cell first, so mutating the returned object (e.g. a list
        or numpy array element) never affects other owners.

        Raises:
            IndexOutOfBoundsError: If index is outside 0..len
        """
        i = check_index(index, len(self._cells), 'index')
        return self._detach(i, copy_value=True).value

    def slice(self, start: int, stop: int) -> StoreView:
        """
        Zero-copy read-only view of ``start..stop``.

        Raises:
            IndexOutOfBoundsError: If the range is reversed or out of bounds
        """
        lo, hi = check_range(start, stop, len(self._cells), 'slice')
        return StoreView._from_shared_cells(self._cells[lo:hi])

    def clone(self) -> ElementStore:
        """New store sharing every cell of this one."""
        return ElementStore._from_shared_cells(self._cells)

    def concat(self, other: _CellSequence) -> ElementStore:
        """New store sharing this store's cells followed by ``other``'s."""
        return ElementStore._from_shared_cells(self._cells + other._cells)
