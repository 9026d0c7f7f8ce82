"""
Vector algebra.

Public API:
    BaseVector: the vector contract every container implements
    DenseVector: numpy-backed vector
    ListVector: list-backed reference vector

Example:
    >>> from pycora.linalg import DenseVector
    >>> from pycora.core.numbers import F32
    >>> v = DenseVector.from_array([1.0, 2.0, 3.0], real=F32)
    >>> v.norm2()
"""

from pycora.linalg.base import BaseVector
from pycora.linalg.dense import DenseVector
from pycora.linalg.naive import ListVector

__all__ = [
    "BaseVector",
    "DenseVector",
    "ListVector",
]
