"""
Random samplers for Matrix.random.

Every sampler draws from its own numpy Generator. Pass ``seed`` for
reproducible matrices, or share one ``rng`` between samplers to keep a
single stream.
"""

from __future__ import annotations

import numpy as np

from pymatrix.core.exceptions import ValidationError
from pymatrix.fields.bit import Bit

# Default integer range: the 32-bit signed range
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31


def _make_rng(seed: int | None, rng: np.random.Generator | None) -> np.random.Generator:
    if rng is not None and seed is not None:
        raise ValidationError("pass either seed or rng, not both")
    if rng is not None:
        return rng
    return np.random.default_rng(seed)


class UniformFloatSampler:
    """Floats drawn uniformly from ``[low, high)``."""

    def __init__(
        self,
        low: float = 0.0,
        high: float = 1.0,
        *,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ):
        if not low < high:
            raise ValidationError(f"low must be < high, got low={low}, high={high}")
        self.low = low
        self.high = high
        self._rng = _make_rng(seed, rng)

    def sample(self) -> float:
        return float(self._rng.uniform(self.low, self.high))


class UniformIntegerSampler:
    """
    Integers drawn uniformly from ``[low, high)``.

    Defaults to the full 32-bit signed range.
    """

    def __init__(
        self,
        low: int = INT32_MIN,
        high: int = INT32_MAX,
        *,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ):
        if not low < high:
            raise ValidationError(f"low must be < high, got low={low}, high={high}")
        self.low = low
        self.high = high
        self._rng = _make_rng(seed, rng)

    def sample(self) -> int:
        return int(self._rng.integers(self.low, self.high))


class BitSampler:
    """Fair coin flips as Bits."""

    def __init__(
        self,
        *,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ):
        self._rng = _make_rng(seed, rng)

    def sample(self) -> Bit:
        return Bit(bool(self._rng.integers(0, 2)))
