"""
Exception hierarchy for PyCora.

All exceptions inherit from PyCoraError to allow catching any
library-specific error.

Two error regimes exist in PyCora:
    - Recoverable domain failures (bad data, non-convergence, singular
      matrix) are *returned* as Failure values inside a Result. They are
      never raised as control flow.
    - Contract violations (mismatched vector lengths, out-of-range indices,
      mixed precisions) are bugs in the caller. They are raised from the
      classes below and should crash loudly.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pycora.core.failure import Failure


class PyCoraError(Exception):
    """Base exception for all PyCora errors."""
    pass


class ValidationError(PyCoraError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Vector lengths or array dimensions are incorrect or inconsistent.

    Raised when a binary vector operation receives operands of different
    length, or when an array has the wrong number of dimensions.

    Attributes:
        expected: Expected length, if known
        actual: Actual length, if known
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class PrecisionMismatchError(ValidationError):
    """
    Operands of a binary operation use different floating precisions.

    Attributes:
        expected: Name of the receiver's precision (e.g. 'float64')
        actual: Name of the other operand's precision
    """

    def __init__(
        self,
        message: str,
        expected: str | None = None,
        actual: str | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Element index outside ``[0, len)``.

    Negative indices are rejected too; vectors do not wrap around.

    Attributes:
        index: The offending index
        length: Length of the vector that was accessed
    """

    def __init__(self, message: str, index: int, length: int):
        super().__init__(message)
        self.index = index
        self.length = length


class FailedComputationError(PyCoraError):
    """
    A failed Result was unwrapped at a caller-facing boundary.

    Raised only by ``Result.unwrap()``. The message is the failure's
    display string, for a Failure the kind-prefixed form
    ``"Fit failed: singular matrix"``.

    Attributes:
        failure: The Failure (or other error value) that was unwrapped
    """

    def __init__(self, failure: Failure | object):
        super().__init__(str(failure))
        self.failure = failure
