"""
Tolerance tiers for numerical comparison.

Defines precision expectations for each floating precision:
- FP64: close to machine precision for double
- FP32: relaxed for single-precision arithmetic

Used as the default ``eps`` of ``BaseVector.approximate_eq`` and by the
test suite when comparing results across precisions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pycora.core.numbers import Real


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str

    def is_close(self, a: float, b: float) -> bool:
        """|a - b| <= atol + rtol * |b|."""
        return abs(a - b) <= self.atol + self.rtol * abs(b)


# Double precision
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='double precision',
)

# Single precision, eps ~1.19e-7
FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='single precision',
)


def select_tolerance(real: Real) -> ToleranceTier:
    """Select the tolerance tier for a precision adapter."""
    if real.name == 'float32':
        return FP32
    return FP64
