"""
Input validation utilities for PyCora.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

A failed check here is a contract violation (a bug in the caller), not a
recoverable Failure.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycora.core.exceptions import (
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
    PrecisionMismatchError,
)

if TYPE_CHECKING:
    from pycora.core.numbers import Real


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype (integers promoted to float64)

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Empty input has no dtype worth checking
    if result.size == 0:
        return result.astype(np.float64)

    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_length(length: int, name: str = 'length') -> None:
    """
    Verify a requested vector length is a non-negative integer.

    Raises:
        ValidationError: If length is negative or not an integer
    """
    if isinstance(length, bool) or not isinstance(length, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected an integer, got {type(length).__name__}"
        )
    if length < 0:
        raise ValidationError(f"{name}: expected a non-negative length, got {length}")


def check_index(index: int, length: int, name: str = 'index') -> None:
    """
    Verify ``0 <= index < length``.

    Negative indices are rejected: vectors do not wrap around.

    Raises:
        IndexOutOfRangeError: If index is outside [0, length)
    """
    if not 0 <= index < length:
        raise IndexOutOfRangeError(
            f"{name}: {index} out of range for vector of length {length}",
            index=index,
            length=length,
        )


def check_same_length(left: int, right: int, op: str) -> None:
    """
    Verify two operands have the same length.

    Args:
        left: Length of the receiver
        right: Length of the other operand
        op: Operation name for error messages

    Raises:
        DimensionError: If lengths differ
    """
    if left != right:
        raise DimensionError(
            f"{op}: length mismatch, expected {left}, got {right}",
            expected=left,
            actual=right,
        )


def check_same_precision(left: Real, right: Real, op: str) -> None:
    """
    Verify two operands use the same floating precision.

    Raises:
        PrecisionMismatchError: If precisions differ
    """
    if left.name != right.name:
        raise PrecisionMismatchError(
            f"{op}: precision mismatch, expected {left.name}, got {right.name}",
            expected=left.name,
            actual=right.name,
        )
