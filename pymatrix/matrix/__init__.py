"""
Matrix module.

Public API:
    Matrix - column-major matrix of copy-on-write vectors
"""

from pymatrix.matrix.matrix import Matrix

__all__ = [
    "Matrix",
]
