"""
Estimator contracts for PyCora.

These define structural interfaces that concrete models must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing):
models share a method shape, never state, so there is no Estimator base
class to inherit from. A model opts in simply by having the method.

Design Principles:
    - Minimal contracts: fit and predict, nothing else
    - Capability-driven: a classifier and a regressor differ only in which
      protocol they satisfy and the shapes they document
    - Type-safe: generic over matrix type M, fit-parameter type P and
      error type E
    - Failures are returned inside a Result, never raised
"""

from typing import Protocol, TypeVar, runtime_checkable

from pycora.core.result import Result

M = TypeVar('M')  # Matrix type
P = TypeVar('P')  # Fit-parameter type
E = TypeVar('E')  # Error type, conventionally Failure


@runtime_checkable
class BaseEstimator(Protocol[M, P, E]):
    """
    Anything that can be trained.

    Type Parameters:
        M: Matrix type of features and targets
        P: Algorithm-specific hyperparameters
        E: Error type, conventionally Failure
    """

    def fit(self, x: M, y: M, params: P) -> 'Result[BaseEstimator[M, P, E], E]':
        """
        Train on features ``x`` and targets ``y``.

        Args:
            x: Training features
            y: Training targets
            params: Algorithm-specific hyperparameters

        Returns:
            Result holding a new, fitted instance of the same type, or a
            failure (conventionally kind FIT_FAILED). Whether the fitted
            model keeps a reference to the training data is up to the
            implementation.
        """
        ...


@runtime_checkable
class Classifier(Protocol[M, E]):
    """
    A fitted model that assigns class labels.

    Type Parameters:
        M: Matrix type of features and predictions
        E: Error type, conventionally Failure
    """

    def predict(self, x: M) -> Result[M, E]:
        """
        Predict a label for every row of ``x``.

        Returns:
            Result holding predicted labels, or a failure (conventionally
            kind PREDICT_FAILED)
        """
        ...


@runtime_checkable
class Regressor(Protocol[M, E]):
    """
    A fitted model that predicts continuous targets.

    Type Parameters:
        M: Matrix type of features and predictions
        E: Error type, conventionally Failure
    """

    def predict(self, x: M) -> Result[M, E]:
        """
        Predict a target value for every row of ``x``.

        Returns:
            Result holding predictions, or a failure (conventionally kind
            PREDICT_FAILED)
        """
        ...
