"""
Vector contract.

BaseVector is the only data structure higher algorithms manipulate
directly. A concrete container supplies a small set of primitives
(element access, length, in-place elementwise ops, sum, dot); the rest of
the algebra is derived here once, so every backing produces the same
numbers bit for bit.

Contract violations (index outside [0, len), operands of different length
or precision) raise immediately. They are bugs, not Failures.
"""

from __future__ import annotations

import warnings
from abc import ABC, abstractmethod
from typing import Any, Iterator, TypeVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycora.core.numbers import Real, F64, real_for
from pycora.core.validation import (
    check_1d,
    check_array,
    check_same_length,
    check_same_precision,
)

V = TypeVar('V', bound='BaseVector')


class BaseVector(ABC):
    """
    Ordered, fixed-length, mutable sequence of real numbers.

    Indexed from 0. The length is fixed at construction; elements are
    mutated in place by ``set`` and the ``*_mut`` operations. ``copy()``
    gives an independent vector.

    Subclasses implement:
        real, get, set, len, to_vec, fill, copy,
        add_mut, sub_mut, mul_mut, div_mut, sum, dot
    """

    # === Primitives ===

    @property
    @abstractmethod
    def real(self) -> Real:
        """Precision adapter of the elements."""
        ...

    @abstractmethod
    def get(self, i: int) -> Any:
        """Element at ``i``. Raises IndexOutOfRangeError outside [0, len)."""
        ...

    @abstractmethod
    def set(self, i: int, x: Any) -> None:
        """Overwrite element ``i`` with ``x``."""
        ...

    @abstractmethod
    def len(self) -> int:
        """Number of elements."""
        ...

    @abstractmethod
    def to_vec(self) -> list[Any]:
        """Elements as a list of scalars, in order."""
        ...

    @classmethod
    @abstractmethod
    def fill(cls: type[V], length: int, value: Any, real: Real = F64) -> V:
        """New vector of ``length`` elements, each set to ``value``."""
        ...

    @abstractmethod
    def copy(self: V) -> V:
        """Independent copy."""
        ...

    @abstractmethod
    def add_mut(self: V, other: BaseVector) -> V:
        """Elementwise ``self += other``; returns self."""
        ...

    @abstractmethod
    def sub_mut(self: V, other: BaseVector) -> V:
        """Elementwise ``self -= other``; returns self."""
        ...

    @abstractmethod
    def mul_mut(self: V, other: BaseVector) -> V:
        """Elementwise ``self *= other``; returns self."""
        ...

    @abstractmethod
    def div_mut(self: V, other: BaseVector) -> V:
        """Elementwise ``self /= other``; returns self."""
        ...

    @abstractmethod
    def sum(self) -> Any:
        """Sum of all elements, accumulated left to right."""
        ...

    @abstractmethod
    def dot(self, other: BaseVector) -> Any:
        """Inner product, accumulated left to right."""
        ...

    # === Construction ===

    @classmethod
    def zeros(cls: type[V], length: int, real: Real = F64) -> V:
        """New vector of ``length`` zeros."""
        return cls.fill(length, real.zero(), real)

    @classmethod
    def ones(cls: type[V], length: int, real: Real = F64) -> V:
        """New vector of ``length`` ones."""
        return cls.fill(length, real.one(), real)

    @classmethod
    def from_array(cls: type[V], values: ArrayLike, real: Real | None = None) -> V:
        """
        New vector holding ``values`` in order.

        Args:
            values: 1-D array-like of real numbers
            real: Target precision. If None, float32/float64 input keeps its
                precision and anything else becomes float64.

        Raises:
            ValidationError: If values are not numeric
            DimensionError: If values are not 1-D
        """
        arr = _as_1d(values)
        real = _resolve_real(arr, real)
        v = cls.zeros(arr.shape[0], real)
        for i, x in enumerate(arr):
            v.set(i, x)
        return v

    # === Shape ===

    def is_empty(self) -> bool:
        return self.len() == 0

    def _check_compatible(self, other: BaseVector, op: str) -> None:
        check_same_precision(self.real, other.real, op)
        check_same_length(self.len(), other.len(), op)

    # === Elementwise, pure ===

    def add(self: V, other: BaseVector) -> V:
        """Elementwise sum as a new vector."""
        r = self.copy()
        r.add_mut(other)
        return r

    def sub(self: V, other: BaseVector) -> V:
        """Elementwise difference as a new vector."""
        r = self.copy()
        r.sub_mut(other)
        return r

    def mul(self: V, other: BaseVector) -> V:
        """Elementwise product as a new vector."""
        r = self.copy()
        r.mul_mut(other)
        return r

    def div(self: V, other: BaseVector) -> V:
        """Elementwise quotient as a new vector."""
        r = self.copy()
        r.div_mut(other)
        return r

    # === Single element ===

    def add_element_mut(self, pos: int, x: Any) -> None:
        """``self[pos] += x``."""
        with np.errstate(all='ignore'):
            self.set(pos, self.get(pos) + self.real.cast(x))

    def sub_element_mut(self, pos: int, x: Any) -> None:
        """``self[pos] -= x``."""
        with np.errstate(all='ignore'):
            self.set(pos, self.get(pos) - self.real.cast(x))

    def mul_element_mut(self, pos: int, x: Any) -> None:
        """``self[pos] *= x``."""
        with np.errstate(all='ignore'):
            self.set(pos, self.get(pos) * self.real.cast(x))

    def div_element_mut(self, pos: int, x: Any) -> None:
        """``self[pos] /= x``."""
        with np.errstate(all='ignore'):
            self.set(pos, self.get(pos) / self.real.cast(x))

    # === Statistics ===

    def mean(self) -> Any:
        """Arithmetic mean, ``sum() / len``. NaN for an empty vector."""
        n = self.len()
        if n == 0:
            warnings.warn("Mean of empty vector", RuntimeWarning, stacklevel=2)
            return self.real.cast(np.nan)
        return self.sum() / self.real.from_usize(n)

    def var(self) -> Any:
        """
        Population variance, ``mean(x²) − mean(x)²``.

        Σx and Σx² are accumulated together in one left-to-right pass. The
        result is not clamped: for nearly constant data round-off can make
        it slightly negative.
        """
        real = self.real
        n = self.len()
        if n == 0:
            warnings.warn("Variance of empty vector", RuntimeWarning, stacklevel=2)
            return real.cast(np.nan)
        mu = real.zero()
        sum_sq = real.zero()
        div = real.from_usize(n)
        with np.errstate(all='ignore'):
            for xi in self:
                mu += xi
                sum_sq += xi * xi
            mu /= div
            return real.cast(sum_sq / div - mu * mu)

    def std(self) -> Any:
        """Population standard deviation, ``sqrt(var())``."""
        return self.real.sqrt(self.var())

    # === Norms ===

    def norm2(self) -> Any:
        """Euclidean norm."""
        return self.real.sqrt(self.dot(self))

    def norm(self, p: Any) -> Any:
        """
        Vector norm of order ``p``.

        ``p = inf`` gives max |x|, ``p = -inf`` gives min |x|; any other
        ``p`` (non-integer included) gives (Σ|x|^p)^(1/p).
        """
        real = self.real
        p = real.cast(p)
        if real.is_infinite(p):
            if p > 0:
                acc, pick = -real.infinity(), np.fmax
            else:
                acc, pick = real.infinity(), np.fmin
            for xi in self:
                acc = real.cast(pick(acc, real.abs(xi)))
            return acc

        acc = real.zero()
        with np.errstate(all='ignore'):
            for xi in self:
                acc += real.powf(real.abs(xi), p)
            return real.powf(acc, real.one() / p)

    # === Misc ===

    def unique(self) -> list[Any]:
        """Distinct values. Callers must not rely on their order."""
        return list(np.unique(self.to_numpy()))

    def approximate_eq(self, other: BaseVector, eps: Any = None) -> bool:
        """
        True if both vectors have the same length and every pair of
        elements differs by at most ``eps``.

        Args:
            other: Vector to compare with
            eps: Absolute tolerance. Defaults to the precision's
                tolerance tier (``real.tolerance.atol``).
        """
        if self.len() != other.len():
            return False
        real = self.real
        eps = real.cast(real.tolerance.atol if eps is None else eps)
        with np.errstate(all='ignore'):
            for a, b in zip(self, other):
                if real.abs(a - b) > eps:
                    return False
        return True

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Elements as a new 1-D numpy array of the vector's dtype."""
        return np.array(self.to_vec(), dtype=self.real.dtype)

    # === Python protocols ===

    def __len__(self) -> int:
        return self.len()

    def __iter__(self) -> Iterator[Any]:
        for i in range(self.len()):
            yield self.get(i)

    def __getitem__(self, i: int) -> Any:
        return self.get(i)

    def __setitem__(self, i: int, x: Any) -> None:
        self.set(i, x)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseVector):
            return NotImplemented
        if self.real.name != other.real.name or self.len() != other.len():
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None  # mutable

    def __add__(self: V, other: BaseVector) -> V:
        return self.add(other)

    def __sub__(self: V, other: BaseVector) -> V:
        return self.sub(other)

    def __mul__(self: V, other: BaseVector) -> V:
        return self.mul(other)

    def __truediv__(self: V, other: BaseVector) -> V:
        return self.div(other)

    def __iadd__(self: V, other: BaseVector) -> V:
        return self.add_mut(other)

    def __isub__(self: V, other: BaseVector) -> V:
        return self.sub_mut(other)

    def __imul__(self: V, other: BaseVector) -> V:
        return self.mul_mut(other)

    def __itruediv__(self: V, other: BaseVector) -> V:
        return self.div_mut(other)

    def __repr__(self) -> str:
        values = ", ".join(repr(float(x)) for x in self.to_vec())
        return f"{self.__class__.__name__}([{values}], dtype={self.real.name})"


def _as_1d(values: ArrayLike) -> NDArray[np.floating[Any]]:
    """Validate ``values`` as a 1-D numeric array."""
    arr = check_array(values, 'values')
    check_1d(arr, 'values')
    return arr


def _resolve_real(arr: NDArray[np.floating[Any]], real: Real | None) -> Real:
    """Precision for ``from_array``: explicit, else the array's, else float64."""
    if real is not None:
        return real_for(real)
    if arr.dtype.name in ('float32', 'float64'):
        return real_for(arr.dtype)
    return F64
