"""
Real number contract and its two precisions.

Every algorithm in PyCora is written once against the Real contract and
runs in either single or double precision. Python cannot attach methods
to ``float``, so the contract is a type-class: one adapter object per
precision (F32, F64) that exposes the operation set and keeps all
arithmetic in numpy scalars of that precision.

    >>> from pycora.core.numbers import F64
    >>> F64.sigmoid(0.0)
    np.float64(0.5)

Swapping F32 for F64 changes precision and speed, never the algorithm.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

import numpy as np

from pycora.core.exceptions import ValidationError
from pycora.core.tolerances import ToleranceTier, FP32, FP64


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Machine epsilon for float32
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7

# ln(1 + e^x) == x to machine precision above this
SOFTPLUS_THRESHOLD = 15.0

# sigmoid saturates to exactly 0 / 1 outside [-SIGMOID_CUTOFF, SIGMOID_CUTOFF]
SIGMOID_CUTOFF = 40.0

T = TypeVar('T', np.float32, np.float64)

# Process-wide generator for rand(); numpy Generators are not thread-safe
_RNG = np.random.default_rng()
_RNG_LOCK = threading.Lock()


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


class Real(ABC, Generic[T]):
    """
    Real number contract.

    Concrete subclasses fix ``dtype`` and implement ``to_f32_bits``; every
    other operation is shared so both precisions follow the same policy.

    Attributes:
        name: 'float32' or 'float64'
        dtype: numpy scalar type values are kept in
        tolerance: default comparison tolerance for this precision
    """

    name: str
    dtype: type[T]
    tolerance: ToleranceTier

    # === Conversion ===

    def cast(self, x: Any) -> T:
        """Convert ``x`` to this precision."""
        return self.dtype(x)

    def from_usize(self, n: int) -> T:
        """
        Convert an unsigned element count.

        Raises:
            ValidationError: If n is negative
        """
        if n < 0:
            raise ValidationError(f"n: expected a non-negative count, got {n}")
        return self.dtype(n)

    # === Constants ===

    def zero(self) -> T:
        return self.dtype(0.0)

    def one(self) -> T:
        return self.dtype(1.0)

    def two(self) -> T:
        """Exactly 2."""
        return self.dtype(2.0)

    def half(self) -> T:
        """Exactly 0.5."""
        return self.dtype(0.5)

    def epsilon(self) -> T:
        return self.dtype(np.finfo(self.dtype).eps)

    def infinity(self) -> T:
        return self.dtype(np.inf)

    # === Extended operations ===

    def copysign(self, x: Any, sign: Any) -> T:
        """Magnitude of ``x`` with the sign bit of ``sign`` (IEEE copysign)."""
        return self.dtype(np.copysign(self.cast(x), self.cast(sign)))

    def ln_1pe(self, x: Any) -> T:
        """
        Softplus, ln(1 + e^x), without overflow.

        Above SOFTPLUS_THRESHOLD the result equals ``x`` to machine
        precision, so ``x`` is returned unchanged and e^x is never formed.
        """
        x = self.cast(x)
        if x > SOFTPLUS_THRESHOLD:
            return x
        with np.errstate(all='ignore'):
            return self.dtype(np.log1p(np.exp(x)))

    def sigmoid(self, x: Any) -> T:
        """
        Logistic function 1 / (1 + e^-x).

        Returns exactly 0 below -SIGMOID_CUTOFF and exactly 1 above
        SIGMOID_CUTOFF, where the true value rounds to 0 / 1 anyway.
        """
        x = self.cast(x)
        if x < -SIGMOID_CUTOFF:
            return self.zero()
        if x > SIGMOID_CUTOFF:
            return self.one()
        one = self.one()
        with np.errstate(all='ignore'):
            return self.dtype(one / (one + np.exp(-x)))

    def square(self, x: Any) -> T:
        """x * x (no pow)."""
        x = self.cast(x)
        return x * x

    def rand(self) -> T:
        """
        Pseudorandom value uniform in [0, 1).

        Drawn from a single process-wide generator. Safe to call from
        several threads; not reproducible.
        """
        with _RNG_LOCK:
            value = _RNG.random(dtype=self.dtype)
        return self.dtype(value)

    @abstractmethod
    def to_f32_bits(self, x: Any) -> int:
        """
        Raw bit pattern truncated to 32 bits.

        For hashing and bucketing; not reversible for float64.
        """
        ...

    # === Elementary functions ===

    def sqrt(self, x: Any) -> T:
        with np.errstate(all='ignore'):
            return self.dtype(np.sqrt(self.cast(x)))

    def abs(self, x: Any) -> T:
        return self.dtype(np.abs(self.cast(x)))

    def powf(self, x: Any, p: Any) -> T:
        with np.errstate(all='ignore'):
            return self.dtype(np.power(self.cast(x), self.cast(p)))

    def is_infinite(self, x: Any) -> bool:
        return bool(np.isinf(self.cast(x)))

    def is_nan(self, x: Any) -> bool:
        return bool(np.isnan(self.cast(x)))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class Float64(Real[np.float64]):
    """Double precision."""

    name = 'float64'
    dtype = np.float64
    tolerance = FP64

    def to_f32_bits(self, x: Any) -> int:
        # low 32 bits of the 64-bit pattern
        bits = np.array(self.cast(x), dtype=np.float64).view(np.uint64)
        return int(bits) & 0xFFFFFFFF


class Float32(Real[np.float32]):
    """Single precision."""

    name = 'float32'
    dtype = np.float32
    tolerance = FP32

    def to_f32_bits(self, x: Any) -> int:
        bits = np.array(self.cast(x), dtype=np.float32).view(np.uint32)
        return int(bits)


F64 = Float64()
F32 = Float32()

_BY_NAME: dict[str, Real] = {
    'float64': F64,
    'float32': F32,
}


def real_for(dtype: Any) -> Real:
    """
    Resolve a dtype, scalar type, dtype name or adapter to its Real adapter.

    Args:
        dtype: e.g. np.float32, np.dtype('float64'), 'float32', F64

    Returns:
        F32 or F64

    Raises:
        ValidationError: If the dtype is not float32 or float64
    """
    if isinstance(dtype, Real):
        return dtype
    try:
        name = np.dtype(dtype).name
    except TypeError as e:
        raise ValidationError(f"dtype: cannot interpret {dtype!r}: {e}") from e
    try:
        return _BY_NAME[name]
    except KeyError as e:
        raise ValidationError(
            f"dtype: unsupported precision {name}, expected float32 or float64"
        ) from e
