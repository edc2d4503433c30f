"""
Tests for Matrix constructors and element access.

Validates:
    - zero / identity / random / from_columns / from_rows / from_function
    - identity contract for the legacy two-argument form
    - column-major get / set and bounds
    - nrows / ncols conventions for empty matrices
    - numpy interop
"""

import warnings

import numpy as np
import pytest

from pymatrix import (
    FLOATS,
    Bit,
    BitSampler,
    Matrix,
    NumpyRing,
    UniformIntegerSampler,
    Vector,
)
from pymatrix.core.exceptions import (
    ContractViolationError,
    DimensionError,
    IndexOutOfBoundsError,
    UnequalColumnLengthError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Shape
# ═══════════════════════════════════════════════════════════════════════


class TestShape:

    def test_ncols_and_rows(self):
        m = Matrix.from_columns([
            Vector([1, 2, 3]),
            Vector([1, 2, 3]),
            Vector([1, 2, 3]),
            Vector([1, 2, 3]),
        ])
        assert m.ncols == 4
        assert m.nrows == 3
        assert m.shape == (3, 4)

    def test_from_single_column(self):
        m = Matrix.from_columns([Vector([1])])
        assert m.nrows == 1
        assert m.ncols == 1

    def test_no_columns_has_no_rows(self):
        m = Matrix.from_columns([])
        assert m.ncols == 0
        assert m.nrows == 0

    def test_from_unequal_length(self):
        with pytest.raises(UnequalColumnLengthError) as exc_info:
            Matrix.from_columns([Vector([1]), Vector([1, 2])])
        assert exc_info.value.column == 1
        assert exc_info.value.expected == 1
        assert exc_info.value.actual == 2

    def test_from_plain_sequences(self):
        m = Matrix.from_columns([[1, 2], (3, 4)])
        assert m.get(1, 1) == 4


# ═══════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════


class TestZeroAndIdentity:

    def test_zero(self):
        m = Matrix.zero(10, 10)
        assert m.shape == (10, 10)
        assert sum(m.get(i, j) for i in range(10) for j in range(10)) == 0

    def test_zero_rectangular_float(self):
        m = Matrix.zero(2, 3, ring=FLOATS)
        assert m.shape == (2, 3)
        assert m.get(1, 2) == 0.0

    def test_identity(self):
        m = Matrix.identity(10)
        assert m.shape == (10, 10)
        assert sum(m.get(i, i) for i in range(10)) == 10
        assert sum(m.get(i, j) for i in range(10) for j in range(10)) == 10

    def test_identity_numpy_ring(self):
        m = Matrix.identity(2, ring=NumpyRing(np.float32))
        assert m.get(0, 0) == np.float32(1)
        assert isinstance(m.get(0, 1), np.float32)

    def test_identity_legacy_square_warns(self):
        with pytest.warns(DeprecationWarning):
            m = Matrix.identity(3, 3)
        assert m == Matrix.identity(3)

    def test_identity_legacy_non_square_fails(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            with pytest.raises(ContractViolationError, match="rows=2, cols=3"):
                Matrix.identity(2, 3)

    def test_negative_size_rejected(self):
        with pytest.raises(ValidationError):
            Matrix.zero(-1, 2)

    def test_identity_columns_are_independent(self):
        m = Matrix.identity(3)
        m.set(0, 1, 5)
        assert m.get(0, 2) == 0
        assert m.get(0, 0) == 1


class TestRandom:

    def test_random_shape(self):
        m = Matrix.random(9, 10)
        assert m.nrows == 9
        assert m.ncols == 10

    def test_default_sampler_range(self):
        m = Matrix.random(4, 4, seed=0)
        values = m.to_numpy()
        assert np.all((values >= 0.0) & (values < 1.0))

    def test_seed_reproducible(self):
        assert Matrix.random(3, 3, seed=7) == Matrix.random(3, 3, seed=7)

    def test_integer_sampler(self, rng):
        m = Matrix.random(5, 5, UniformIntegerSampler(-3, 3, rng=rng))
        assert all(-3 <= m.get(i, j) < 3 for i in range(5) for j in range(5))
        assert all(isinstance(v, int) for v in m.to_numpy().ravel().tolist())

    def test_bit_sampler(self):
        m = Matrix.random(3, 2, BitSampler(seed=1))
        assert all(isinstance(m.get(i, j), Bit) for i in range(3) for j in range(2))

    def test_sampler_and_seed_rejected(self):
        with pytest.raises(ValidationError):
            Matrix.random(2, 2, UniformIntegerSampler(seed=1), seed=2)


class TestFromFunction:

    def test_row_col_arguments(self):
        m = Matrix.from_function(2, 3, lambda row, col: 10 * row + col)
        assert m.get(0, 2) == 2
        assert m.get(1, 0) == 10
        assert m.shape == (2, 3)

    def test_from_rows(self):
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        assert m.shape == (2, 3)
        assert m.get(1, 0) == 4
        assert m.column(2) == Vector([3, 6])
        assert m.row(0) == Vector([1, 2, 3])


# ═══════════════════════════════════════════════════════════════════════
# Access
# ═══════════════════════════════════════════════════════════════════════


class TestAccess:

    def test_column_major_get(self):
        m = Matrix.from_columns([[1, 2], [3, 4]])
        assert m.get(0, 1) == 3
        assert m[1, 0] == 2

    def test_set(self, square_matrix):
        square_matrix.set(2, 0, -1)
        assert square_matrix.get(2, 0) == -1
        square_matrix[0, 2] = 42
        assert square_matrix.get(0, 2) == 42

    def test_non_tuple_key_rejected(self, square_matrix):
        with pytest.raises(ValidationError, match="key"):
            square_matrix[0]
        with pytest.raises(ValidationError, match="key"):
            square_matrix[0] = 1
        with pytest.raises(ValidationError, match="key"):
            square_matrix[0, 1, 2]

    @pytest.mark.parametrize("row, col", [(3, 0), (0, 3), (-1, 0), (0, -1)])
    def test_out_of_range(self, square_matrix, row, col):
        with pytest.raises(IndexOutOfBoundsError):
            square_matrix.get(row, col)
        with pytest.raises(IndexOutOfBoundsError):
            square_matrix.set(row, col, 0)

    def test_column_is_alias_not_handle(self, square_matrix):
        col = square_matrix.column(0)
        col[0] = 100
        assert square_matrix.get(0, 0) == 1

    def test_matrix_isolated_from_source_vector(self):
        v = Vector([1, 2])
        m = Matrix.from_columns([v])
        v[0] = 9
        assert m.get(0, 0) == 1

    def test_iteration_over_columns(self):
        m = Matrix.from_columns([[1, 2], [3, 4]])
        assert [c.to_list() for c in m] == [[1, 2], [3, 4]]


class TestNumpy:

    def test_from_numpy(self):
        arr = np.array([[1, 2, 3], [4, 5, 6]])
        m = Matrix.from_numpy(arr)
        assert m.shape == (2, 3)
        assert m.get(1, 2) == 6
        np.testing.assert_array_equal(m.to_numpy(), arr)

    def test_from_numpy_rejects_1d(self):
        with pytest.raises(DimensionError):
            Matrix.from_numpy(np.zeros(3))

    def test_empty_to_numpy(self):
        assert Matrix.zero(0, 0).to_numpy().shape == (0, 0)

    def test_allclose(self):
        a = Matrix.from_rows([[0.1 + 0.2]])
        b = Matrix.from_rows([[0.3]])
        assert a != b
        assert a.allclose(b)

    def test_repr(self):
        assert repr(Matrix.identity(2)) == "Matrix.from_rows([[1, 0], [0, 1]])"
