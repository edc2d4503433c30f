"""
Matrix: an ordered list of equal-length column vectors.

Storage is column-major: ``m.get(row, col)`` reads ``columns[col][row]``.
A matrix with no columns has zero rows.

Aliasing rules:
    - segment(), transpose(), row(), column(), augment() and stack()
      return matrices or vectors sharing cells with the source; the
      first write to a shared cell detaches it (copy-on-write)
    - set_segment() copies values element by element and never aliases

Operators follow Vector's two calling conventions:

    borrowing   m + n, m - n, m @ n     new matrix
    consuming   m += n, m -= n, m @= n  result stored in m
"""

from __future__ import annotations

import copy
import warnings
from typing import Any, Callable, Iterable, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    ContractViolationError,
    UnequalColumnLengthError,
    ValidationError,
)
from pymatrix.core.protocols import Ring, Sampler
from pymatrix.core.tolerances import DEFAULT_ATOL, DEFAULT_RTOL
from pymatrix.core.validation import (
    check_index,
    check_ndim,
    check_non_negative,
    check_same_columns,
    check_same_length,
    check_same_rows,
    check_segment_extent,
)
from pymatrix.fields.rings import INTEGERS
from pymatrix.fields.sampling import UniformFloatSampler
from pymatrix.matrix._products import dots_against, product_columns
from pymatrix.store import ElementStore
from pymatrix.vector import Vector


def _as_column(column: Vector | Iterable[Any]) -> Vector:
    # Vectors are shared, not copied; the matrix's writes detach
    if isinstance(column, Vector):
        return column.copy()
    return Vector(column)


def _split_key(key: Any) -> tuple[Any, Any]:
    if not isinstance(key, tuple) or len(key) != 2:
        raise ValidationError(f"key: expected (row, col), got {key!r}")
    return key


def _require_matrix(other: Any, name: str) -> Matrix:
    if not isinstance(other, Matrix):
        raise ValidationError(
            f"{name}: expected Matrix, got {type(other).__name__}"
        )
    return other


class Matrix:
    """
    Dense matrix over an arbitrary element type.

    Construction:
        Matrix.zero(rows, cols, ring=FLOATS)
        Matrix.identity(size)
        Matrix.random(rows, cols, sampler=UniformIntegerSampler(seed=0))
        Matrix.from_columns([[1, 2], [3, 4]])
        Matrix.from_rows([[1, 3], [2, 4]])
        Matrix.from_function(rows, cols, lambda r, c: r * c)
        Matrix.from_numpy(array)

    Examples:
        >>> m = Matrix.from_rows([[1, 2], [3, 4]])
        >>> m.get(0, 1)
        2
        >>> m @ Matrix.identity(2) == m
        True
    """

    def __init__(self, columns: Iterable[Vector | Iterable[Any]] = ()):
        cols = [_as_column(c) for c in columns]
        if cols:
            expected = len(cols[0])
            for j, col in enumerate(cols):
                if len(col) != expected:
                    raise UnequalColumnLengthError(
                        f"All columns must be the same length: column 0 has "
                        f"{expected} entries, column {j} has {len(col)}",
                        column=j,
                        expected=expected,
                        actual=len(col),
                    )
        self._columns: list[Vector] = cols

    @classmethod
    def _from_trusted(cls, columns: list[Vector]) -> Matrix:
        # Caller guarantees equal lengths and exclusive ownership of the list
        obj = cls.__new__(cls)
        obj._columns = columns
        return obj

    # --- Constructors ---

    @classmethod
    def from_columns(cls, columns: Iterable[Vector | Iterable[Any]]) -> Matrix:
        """
        Build from column vectors or sequences.

        Raises:
            UnequalColumnLengthError: Unless every column matches column 0
        """
        return cls(columns)

    @classmethod
    def from_rows(cls, rows: Iterable[Vector | Iterable[Any]]) -> Matrix:
        """
        Build from row vectors or sequences.

        Raises:
            UnequalColumnLengthError: If rows differ in length (reported
                against the transposed layout)
        """
        return cls.from_columns(rows).transpose()

    @classmethod
    def zero(cls, rows: int, cols: int, ring: Ring = INTEGERS) -> Matrix:
        rows = check_non_negative(rows, 'rows')
        cols = check_non_negative(cols, 'cols')
        return cls._from_trusted([Vector.zero(rows, ring) for _ in range(cols)])

    @classmethod
    def identity(
        cls,
        size: int,
        cols: int | None = None,
        *,
        ring: Ring = INTEGERS,
    ) -> Matrix:
        """
        Square identity matrix.

        Args:
            size: Number of rows and columns
            cols: Legacy second dimension; must equal size
            ring: Supplies zero and one

        Raises:
            ContractViolationError: If cols is given and differs from size
        """
        size = check_non_negative(size, 'size')
        if cols is not None:
            cols = check_non_negative(cols, 'cols')
            if cols != size:
                raise ContractViolationError(
                    f"Rows needs to equal columns for identity matrices, "
                    f"got rows={size}, cols={cols}"
                )
            warnings.warn(
                "identity(rows, cols) is deprecated, pass a single size",
                DeprecationWarning,
                stacklevel=2,
            )
        one = ring.identity_multiplicative()
        columns = []
        for j in range(size):
            column = Vector.zero(size, ring)
            column[j] = one
            columns.append(column)
        return cls._from_trusted(columns)

    @classmethod
    def random(
        cls,
        rows: int,
        cols: int,
        sampler: Sampler | None = None,
        *,
        seed: int | None = None,
    ) -> Matrix:
        """
        Matrix of independent samples, drawn column by column.

        Args:
            rows, cols: Shape
            sampler: Value source (default: uniform floats on [0, 1))
            seed: Seed for the default sampler

        Raises:
            ValidationError: If both sampler and seed are given
        """
        if sampler is None:
            sampler = UniformFloatSampler(seed=seed)
        elif seed is not None:
            raise ValidationError("seed only applies to the default sampler")
        return cls.from_function(rows, cols, lambda _row, _col: sampler.sample())

    @classmethod
    def from_function(
        cls,
        rows: int,
        cols: int,
        function: Callable[[int, int], Any],
    ) -> Matrix:
        """Entry (row, col) is ``function(row, col)``."""
        rows = check_non_negative(rows, 'rows')
        cols = check_non_negative(cols, 'cols')
        return cls._from_trusted([
            Vector(function(i, j) for i in range(rows))
            for j in range(cols)
        ])

    @classmethod
    def from_numpy(cls, array: ArrayLike) -> Matrix:
        """
        Build from a 2D array-like. Elements become Python scalars.

        Raises:
            DimensionError: If the array is not 2D
        """
        arr = np.asarray(array)
        check_ndim(arr, 2, 'array')
        return cls._from_trusted([Vector(col) for col in arr.T.tolist()])

    # --- Shape and access ---

    @property
    def ncols(self) -> int:
        return len(self._columns)

    @property
    def nrows(self) -> int:
        if not self._columns:
            return 0
        return len(self._columns[0])

    @property
    def shape(self) -> tuple[int, int]:
        return self.nrows, self.ncols

    def get(self, row: int, col: int) -> Any:
        """
        Entry at (row, col).

        Raises:
            IndexOutOfBoundsError: If either index is out of range
        """
        j = check_index(col, self.ncols, 'col')
        i = check_index(row, self.nrows, 'row')
        return self._columns[j][i]

    def set(self, row: int, col: int, value: Any) -> None:
        """
        Store value at (row, col), detaching a shared cell first.

        Raises:
            IndexOutOfBoundsError: If either index is out of range
        """
        j = check_index(col, self.ncols, 'col')
        i = check_index(row, self.nrows, 'row')
        self._columns[j][i] = value

    def __getitem__(self, key: tuple[int, int]) -> Any:
        row, col = _split_key(key)
        return self.get(row, col)

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        row, col = _split_key(key)
        self.set(row, col, value)

    def column(self, col: int) -> Vector:
        """Column ``col`` as a vector sharing this matrix's cells."""
        j = check_index(col, self.ncols, 'col')
        return self._columns[j].copy()

    def row(self, row: int) -> Vector:
        """Row ``row`` as a vector sharing this matrix's cells."""
        i = check_index(row, self.nrows, 'row')
        return Vector._adopt(
            ElementStore.gather([c.store for c in self._columns], i)
        )

    def __iter__(self) -> Iterator[Vector]:
        """Iterate over columns (each sharing this matrix's cells)."""
        return (c.copy() for c in self._columns)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and all(
            a == b for a, b in zip(self._columns, other._columns)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self.to_rows()!r})"

    def copy(self) -> Matrix:
        return Matrix._from_trusted([c.copy() for c in self._columns])

    # --- Structural operators ---

    def segment(
        self,
        row: int,
        col: int,
        nrows: int,
        ncols: int,
        *,
        strict: bool = True,
    ) -> Matrix:
        """
        Sub-rectangle of ``nrows`` x ``ncols`` starting at (row, col).

        The result's columns are views sharing this matrix's cells.

        With strict=True, ``row + nrows`` must be < self.nrows and
        ``col + ncols`` must be < self.ncols, so a segment that ends on the
        last row or column is rejected. Pass strict=False to allow it.

        Raises:
            IndexOutOfBoundsError: If the segment does not fit
        """
        row = check_non_negative(row, 'row')
        col = check_non_negative(col, 'col')
        nrows = check_non_negative(nrows, 'nrows')
        ncols = check_non_negative(ncols, 'ncols')
        check_segment_extent(row, nrows, self.nrows, 'rows', strict)
        check_segment_extent(col, ncols, self.ncols, 'cols', strict)
        return Matrix._from_trusted([
            self._columns[j].slice(row, row + nrows)
            for j in range(col, col + ncols)
        ])

    def set_segment(
        self,
        row: int,
        col: int,
        src: Matrix,
        *,
        strict: bool = True,
    ) -> None:
        """
        Copy every entry of ``src`` into this matrix at offset (row, col).

        Bounds follow segment(). Nothing is written unless the whole of
        ``src`` fits.

        Raises:
            IndexOutOfBoundsError: If src does not fit at the offset
        """
        src = _require_matrix(src, 'src')
        row = check_non_negative(row, 'row')
        col = check_non_negative(col, 'col')
        check_segment_extent(row, src.nrows, self.nrows, 'rows', strict)
        check_segment_extent(col, src.ncols, self.ncols, 'cols', strict)
        # Snapshot first: src may share cells with self
        values = [copy.deepcopy(c.to_list()) for c in src._columns]
        for j, column_values in enumerate(values):
            target = self._columns[col + j]
            for i, value in enumerate(column_values):
                target[row + i] = value

    def transpose(self) -> Matrix:
        """
        Matrix with rows and columns swapped.

        Result column i shares the cells of this matrix's row i.
        """
        return Matrix._from_trusted([self.row(i) for i in range(self.nrows)])

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def augment(self, other: Matrix) -> Matrix:
        """
        ``other``'s columns placed after this matrix's.

        A matrix with no columns acts as the identity element.

        Raises:
            RowMismatchError: If row counts differ
        """
        other = _require_matrix(other, 'other')
        if self.ncols and other.ncols:
            check_same_rows(self.nrows, other.nrows)
        return Matrix._from_trusted(
            [c.copy() for c in self._columns] + [c.copy() for c in other._columns]
        )

    def stack(self, other: Matrix) -> Matrix:
        """
        ``other``'s rows placed below this matrix's.

        Raises:
            ColumnMismatchError: If column counts differ
        """
        other = _require_matrix(other, 'other')
        check_same_columns(self.ncols, other.ncols)
        return Matrix._from_trusted([
            a.concat(b) for a, b in zip(self._columns, other._columns)
        ])

    # --- Elementwise arithmetic ---

    def add(self, other: Matrix) -> Matrix:
        """
        Borrowing elementwise sum.

        Raises:
            ColumnMismatchError: If column counts differ
            LengthMismatchError: If row counts differ
        """
        other = _require_matrix(other, 'other')
        check_same_columns(self.ncols, other.ncols)
        return Matrix._from_trusted([
            a.add(b) for a, b in zip(self._columns, other._columns)
        ])

    def add_into(self, other: Matrix) -> Matrix:
        """Consuming elementwise sum: writes into this matrix and returns it."""
        other = _require_matrix(other, 'other')
        self._check_pairable(other)
        for a, b in zip(self._columns, other._columns):
            a.add_into(b)
        return self

    def sub(self, other: Matrix) -> Matrix:
        """
        Borrowing elementwise difference.

        Raises:
            ColumnMismatchError: If column counts differ
            LengthMismatchError: If row counts differ
        """
        other = _require_matrix(other, 'other')
        check_same_columns(self.ncols, other.ncols)
        return Matrix._from_trusted([
            a.sub(b) for a, b in zip(self._columns, other._columns)
        ])

    def sub_into(self, other: Matrix) -> Matrix:
        """Consuming elementwise difference; see add_into."""
        other = _require_matrix(other, 'other')
        self._check_pairable(other)
        for a, b in zip(self._columns, other._columns):
            a.sub_into(b)
        return self

    def _check_pairable(self, other: Matrix) -> None:
        # Consuming forms validate every column pair before the first write
        check_same_columns(self.ncols, other.ncols)
        for a, b in zip(self._columns, other._columns):
            check_same_length(len(a), len(b))

    def scale(self, factor: Any) -> Matrix:
        """Borrowing scalar multiple."""
        return Matrix._from_trusted([c.scale(factor) for c in self._columns])

    # --- Multiplication ---

    def vecmat(self, vector: Vector) -> Vector:
        """
        Borrowing ``vector @ self``: entry j is ``vector . column j``.

        Raises:
            LengthMismatchError: If len(vector) != self.nrows
        """
        if not isinstance(vector, Vector):
            raise ValidationError(
                f"vector: expected Vector, got {type(vector).__name__}"
            )
        check_same_length(len(vector), self.nrows, names=('vector', 'matrix rows'))
        return Vector(dots_against(self._columns, vector))

    def vecmat_into(self, vector: Vector) -> Vector:
        """
        Consuming ``vector @ self``: the result is stored in ``vector``.

        The vector's store is reused when the result has the same length
        (square matrices), and replaced otherwise.
        """
        if not isinstance(vector, Vector):
            raise ValidationError(
                f"vector: expected Vector, got {type(vector).__name__}"
            )
        check_same_length(len(vector), self.nrows, names=('vector', 'matrix rows'))
        values = dots_against(self._columns, vector)
        if len(values) == len(vector):
            for j, value in enumerate(values):
                vector[j] = value
        else:
            vector._replace_store(ElementStore(values))
        return vector

    def matvec(self, vector: Vector) -> Vector:
        """
        Borrowing ``self @ vector``: entry i is ``row i . vector``.

        Raises:
            LengthMismatchError: If len(vector) != self.ncols
        """
        if not isinstance(vector, Vector):
            raise ValidationError(
                f"vector: expected Vector, got {type(vector).__name__}"
            )
        check_same_length(self.ncols, len(vector), names=('matrix columns', 'vector'))
        return Vector(dots_against(self._rows(), vector))

    def _rows(self) -> list[Vector]:
        return [self.row(i) for i in range(self.nrows)]

    def matmul(self, other: Matrix) -> Matrix:
        """
        Borrowing matrix product ``self @ other``.

        Raises:
            LengthMismatchError: If self.ncols != other.nrows
        """
        other = _require_matrix(other, 'other')
        check_same_length(self.ncols, other.nrows, names=('lhs columns', 'rhs rows'))
        return Matrix._from_trusted(product_columns(self._rows(), other._columns))

    def matmul_into(self, other: Matrix) -> Matrix:
        """
        Consuming matrix product: this matrix becomes ``self @ other``.

        The column list is reused; its contents are replaced by the
        product's columns.
        """
        other = _require_matrix(other, 'other')
        check_same_length(self.ncols, other.nrows, names=('lhs columns', 'rhs rows'))
        self._columns[:] = product_columns(self._rows(), other._columns)
        return self

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __iadd__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add_into(other)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __isub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub_into(other)

    def __matmul__(self, other: Matrix | Vector) -> Matrix | Vector:
        if isinstance(other, Matrix):
            return self.matmul(other)
        if isinstance(other, Vector):
            return self.matvec(other)
        return NotImplemented

    def __rmatmul__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.vecmat(other)

    def __imatmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matmul_into(other)

    # --- Conversion ---

    def to_rows(self) -> list[list[Any]]:
        return [self.row(i).to_list() for i in range(self.nrows)]

    def to_numpy(self, dtype: Any = None) -> NDArray[Any]:
        flat = [value for column in self._columns for value in column]
        return np.asarray(flat, dtype=dtype).reshape(self.ncols, self.nrows).T

    def allclose(
        self,
        other: Matrix,
        rtol: float = DEFAULT_RTOL,
        atol: float = DEFAULT_ATOL,
    ) -> bool:
        """
        Approximate equality for numeric matrices.

        Raises:
            ColumnMismatchError: If column counts differ
            RowMismatchError: If row counts differ
        """
        other = _require_matrix(other, 'other')
        check_same_columns(self.ncols, other.ncols)
        check_same_rows(self.nrows, other.nrows)
        return bool(np.allclose(self.to_numpy(), other.to_numpy(), rtol=rtol, atol=atol))
