"""
Vector backed by a plain python list of numpy scalars.

No vectorization: every operation is an explicit left-to-right loop. This
is the reference backing that DenseVector must agree with bit for bit.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from pycora.core.numbers import Real, F64
from pycora.core.validation import check_index, check_length
from pycora.linalg.base import BaseVector


class ListVector(BaseVector):
    """Vector stored as a python list of scalars of the precision's dtype."""

    def __init__(self, values: list[Any], real: Real):
        self._values = values
        self._real = real

    @property
    def real(self) -> Real:
        return self._real

    @classmethod
    def fill(cls, length: int, value: Any, real: Real = F64) -> ListVector:
        check_length(length)
        return cls([real.cast(value)] * length, real)

    def get(self, i: int) -> Any:
        check_index(i, len(self._values))
        return self._values[i]

    def set(self, i: int, x: Any) -> None:
        check_index(i, len(self._values))
        self._values[i] = self._real.cast(x)

    def len(self) -> int:
        return len(self._values)

    def to_vec(self) -> list[Any]:
        return list(self._values)

    def copy(self) -> ListVector:
        return ListVector(list(self._values), self._real)

    def add_mut(self, other: BaseVector) -> ListVector:
        self._check_compatible(other, 'add')
        with np.errstate(all='ignore'):
            for i, b in enumerate(other):
                self._values[i] = self._values[i] + b
        return self

    def sub_mut(self, other: BaseVector) -> ListVector:
        self._check_compatible(other, 'sub')
        with np.errstate(all='ignore'):
            for i, b in enumerate(other):
                self._values[i] = self._values[i] - b
        return self

    def mul_mut(self, other: BaseVector) -> ListVector:
        self._check_compatible(other, 'mul')
        with np.errstate(all='ignore'):
            for i, b in enumerate(other):
                self._values[i] = self._values[i] * b
        return self

    def div_mut(self, other: BaseVector) -> ListVector:
        self._check_compatible(other, 'div')
        with np.errstate(all='ignore'):
            for i, b in enumerate(other):
                self._values[i] = self._values[i] / b
        return self

    def sum(self) -> Any:
        acc = self._real.zero()
        with np.errstate(all='ignore'):
            for x in self._values:
                acc += x
        return acc

    def dot(self, other: BaseVector) -> Any:
        self._check_compatible(other, 'dot')
        acc = self._real.zero()
        with np.errstate(all='ignore'):
            for a, b in zip(self._values, other):
                acc += a * b
        return acc
