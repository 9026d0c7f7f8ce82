"""
PyCora: numeric foundation for machine-learning estimators.

Estimators are written once, generically, over any conforming floating
precision and any conforming vector container.

Submodules:
    core: Real number contract, Failure taxonomy, Result, estimator protocols
    linalg: Vector contract and its dense / list-backed containers
"""

__version__ = "0.1.0"

from pycora import core
from pycora import linalg
from pycora.core import (
    F32,
    F64,
    Failure,
    FailedError,
    Result,
    BaseEstimator,
    Classifier,
    Regressor,
)
from pycora.linalg import BaseVector, DenseVector, ListVector

__all__ = [
    "__version__",
    "core",
    "linalg",
    "F32",
    "F64",
    "Failure",
    "FailedError",
    "Result",
    "BaseEstimator",
    "Classifier",
    "Regressor",
    "BaseVector",
    "DenseVector",
    "ListVector",
]
