"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_matrix():
    """3x3 integer matrix with distinct entries."""
    return Matrix.from_rows([
        [1, 2, 3],
        [4, 5, 6],
        [7, 8, 10],
    ])


@pytest.fixture
def rect_matrix():
    """2x3 integer matrix."""
    return Matrix.from_rows([
        [1, -2, 0],
        [3, 4, -1],
    ])


@pytest.fixture
def int_vectors(rng):
    """Pairs of equal-length random integer vectors."""
    return [
        (
            Vector(rng.integers(-50, 50, size=n).tolist()),
            Vector(rng.integers(-50, 50, size=n).tolist()),
        )
        for n in (0, 1, 3, 8)
    ]
