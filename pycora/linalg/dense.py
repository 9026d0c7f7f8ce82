"""
Dense vector backed by a 1-D numpy array.

Elementwise operations are vectorized. Reductions (sum, dot) use
``numpy.cumsum`` rather than ``numpy.sum`` or BLAS: cumsum adds strictly
left to right, so results match ListVector bit for bit.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycora.core.numbers import Real, F64
from pycora.core.validation import check_index, check_length
from pycora.linalg.base import BaseVector, _as_1d, _resolve_real


class DenseVector(BaseVector):
    """
    Vector stored as a contiguous numpy array of the precision's dtype.

    Construct via ``zeros``, ``ones``, ``fill`` or ``from_array``.

    Examples:
        >>> v = DenseVector.from_array([1.0, 2.0, 3.0])
        >>> float(v.mean())
        2.0
    """

    def __init__(self, data: NDArray[np.floating[Any]], real: Real):
        self._data = data
        self._real = real

    @property
    def real(self) -> Real:
        return self._real

    @classmethod
    def fill(cls, length: int, value: Any, real: Real = F64) -> DenseVector:
        check_length(length)
        return cls(np.full(length, real.cast(value), dtype=real.dtype), real)

    @classmethod
    def from_array(cls, values: ArrayLike, real: Real | None = None) -> DenseVector:
        arr = _as_1d(values)
        real = _resolve_real(arr, real)
        return cls(np.array(arr, dtype=real.dtype, copy=True), real)

    def get(self, i: int) -> Any:
        check_index(i, self._data.shape[0])
        return self._data[i]

    def set(self, i: int, x: Any) -> None:
        check_index(i, self._data.shape[0])
        self._data[i] = self._real.cast(x)

    def len(self) -> int:
        return self._data.shape[0]

    def to_vec(self) -> list[Any]:
        return list(self._data)

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        return self._data.copy()

    def copy(self) -> DenseVector:
        return DenseVector(self._data.copy(), self._real)

    def _operand(self, other: BaseVector, op: str) -> NDArray[np.floating[Any]]:
        self._check_compatible(other, op)
        if isinstance(other, DenseVector):
            return other._data
        return other.to_numpy()

    def add_mut(self, other: BaseVector) -> DenseVector:
        rhs = self._operand(other, 'add')
        with np.errstate(all='ignore'):
            np.add(self._data, rhs, out=self._data)
        return self

    def sub_mut(self, other: BaseVector) -> DenseVector:
        rhs = self._operand(other, 'sub')
        with np.errstate(all='ignore'):
            np.subtract(self._data, rhs, out=self._data)
        return self

    def mul_mut(self, other: BaseVector) -> DenseVector:
        rhs = self._operand(other, 'mul')
        with np.errstate(all='ignore'):
            np.multiply(self._data, rhs, out=self._data)
        return self

    def div_mut(self, other: BaseVector) -> DenseVector:
        rhs = self._operand(other, 'div')
        with np.errstate(all='ignore'):
            np.divide(self._data, rhs, out=self._data)
        return self

    def sum(self) -> Any:
        if self._data.shape[0] == 0:
            return self._real.zero()
        with np.errstate(all='ignore'):
            return np.cumsum(self._data, dtype=self._real.dtype)[-1]

    def dot(self, other: BaseVector) -> Any:
        rhs = self._operand(other, 'dot')
        if self._data.shape[0] == 0:
            return self._real.zero()
        with np.errstate(all='ignore'):
            return np.cumsum(self._data * rhs, dtype=self._real.dtype)[-1]

    def unique(self) -> list[Any]:
        return list(np.unique(self._data))
