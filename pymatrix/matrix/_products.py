"""
Product kernels shared by the matrix multiplication operators.

Both kernels take row vectors of the left operand and column vectors of
the right one and reduce every pair with Vector.dot, so accumulation order
is always ascending index order.
"""

from __future__ import annotations

from typing import Any, Sequence

from pymatrix.vector import Vector


def dots_against(vectors: Sequence[Vector], other: Vector) -> list[Any]:
    """``[v.dot(other) for v in vectors]``, in order."""
    return [v.dot(other) for v in vectors]


def product_columns(rows: Sequence[Vector], columns: Sequence[Vector]) -> list[Vector]:
    """
    Columns of the product whose left operand has ``rows`` and whose
    right operand has ``columns``.

    Result column j holds ``rows[i] . columns[j]`` at position i.
    """
    return [Vector(dots_against(rows, column)) for column in columns]
