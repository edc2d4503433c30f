"""
Default tolerances for approximate comparison of float vectors and matrices.

Exact equality (``==``) is the contract for every operator in pymatrix.
allclose() exists for callers comparing float results produced along
different evaluation orders.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision: results of the same ops in a different order
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='double precision, reordered accumulation',
)

# Single precision inputs (numpy float32 rings)
FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='single precision',
)

DEFAULT_RTOL: float = FP64.rtol
DEFAULT_ATOL: float = FP64.atol
