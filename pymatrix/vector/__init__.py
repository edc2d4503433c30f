"""
Vector module.

Public API:
    Vector     - copy-on-write vector with borrowing and consuming operators
    fold_sum   - left-to-right reduction used by dot products
"""

from pymatrix.vector.vector import Vector, fold_sum

__all__ = [
    "Vector",
    "fold_sum",
]
