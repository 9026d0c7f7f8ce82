"""
Core infrastructure for PyCora.

This module provides the numeric contracts and shared abstractions every
algorithm in PyCora is written against.

Key components:
    numbers: Real number contract (F32, F64)
    failure: Failure / FailedError taxonomy for recoverable errors
    result: Generic Result[P, E] envelope
    protocols: BaseEstimator, Classifier, Regressor contracts
    exceptions: Exception hierarchy for contract violations
    validation: Input validators
    tolerances: Per-precision tolerance tiers
"""

from pycora.core.numbers import Real, Float32, Float64, F32, F64, real_for
from pycora.core.failure import Failure, FailedError
from pycora.core.result import Result
from pycora.core.protocols import BaseEstimator, Classifier, Regressor
from pycora.core.exceptions import (
    PyCoraError,
    ValidationError,
    DimensionError,
    PrecisionMismatchError,
    IndexOutOfRangeError,
    FailedComputationError,
)

__all__ = [
    # Numbers
    "Real",
    "Float32",
    "Float64",
    "F32",
    "F64",
    "real_for",
    # Failures
    "Failure",
    "FailedError",
    # Result
    "Result",
    # Protocols
    "BaseEstimator",
    "Classifier",
    "Regressor",
    # Exceptions
    "PyCoraError",
    "ValidationError",
    "DimensionError",
    "PrecisionMismatchError",
    "IndexOutOfRangeError",
    "FailedComputationError",
]
