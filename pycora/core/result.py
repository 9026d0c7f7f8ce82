"""
Generic result container for PyCora computations.

Every operation that can fail for a recoverable reason (fit, predict,
transform, decomposition, search) returns a Result instead of raising.
A Result holds exactly one of:
    - params: the successful payload (a fitted model, predictions, ...)
    - failure: the error value, conventionally a Failure

Design decisions:
    - Generic over payload P and error E for type safety
    - info dict for flexible metadata (converged, iterations, diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a failure is never altered on its way up
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

from pycora.core.exceptions import FailedComputationError, ValidationError

P = TypeVar('P')  # Payload type
E = TypeVar('E')  # Error type
Q = TypeVar('Q')


@dataclass(frozen=True)
class Result(Generic[P, E]):
    """
    Immutable success-or-failure envelope.

    Type Parameters:
        P: The payload type on success
        E: The error type on failure (conventionally Failure)

    Attributes:
        params: Payload, or None on failure
        failure: Error value, or None on success
        info: Structured metadata (method, convergence, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of whatever produced this result
        warnings: Non-fatal issues encountered during computation

    Construct via ``Result.ok`` / ``Result.fail`` rather than directly.

    Examples:
        >>> Result.ok(model, info={'iterations': 12}, backend_name='cpu')
        >>> Result.fail(Failure.fit("matrix is singular"))
    """
    params: P | None = None
    failure: E | None = None
    info: dict[str, Any] = field(default_factory=dict)
    timing: dict[str, float] | None = None
    backend_name: str = ''
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if (self.params is None) == (self.failure is None):
            raise ValidationError(
                "Result: exactly one of params or failure must be set"
            )

    @classmethod
    def ok(
        cls,
        params: P,
        *,
        info: dict[str, Any] | None = None,
        timing: dict[str, float] | None = None,
        backend_name: str = '',
        warnings: tuple[str, ...] = (),
    ) -> Result[P, E]:
        """Successful result carrying ``params``."""
        return cls(
            params=params,
            info=dict(info) if info else {},
            timing=timing,
            backend_name=backend_name,
            warnings=tuple(warnings),
        )

    @classmethod
    def fail(
        cls,
        failure: E,
        *,
        info: dict[str, Any] | None = None,
        backend_name: str = '',
        warnings: tuple[str, ...] = (),
    ) -> Result[P, E]:
        """Failed result carrying ``failure``."""
        return cls(
            failure=failure,
            info=dict(info) if info else {},
            backend_name=backend_name,
            warnings=tuple(warnings),
        )

    @property
    def is_ok(self) -> bool:
        return self.failure is None

    @property
    def is_failure(self) -> bool:
        return self.failure is not None

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)

    def unwrap(self) -> P:
        """
        Return the payload, raising if this is a failure.

        Meant for caller-facing boundaries (scripts, tools) that have no way
        to react to a failure except reporting it.

        Raises:
            FailedComputationError: If this Result holds a failure. An error
                value that is itself an exception is raised as-is.
        """
        if self.failure is None:
            return self.params
        if isinstance(self.failure, BaseException):
            raise self.failure
        raise FailedComputationError(self.failure)

    def unwrap_or(self, default: P) -> P:
        """Return the payload, or ``default`` on failure."""
        if self.failure is None:
            return self.params
        return default

    def map(self, fn: Callable[[P], Q]) -> Result[Q, E]:
        """
        Apply ``fn`` to the payload; failures pass through unchanged.

        Metadata (info, timing, backend_name, warnings) is carried over.
        """
        if self.failure is not None:
            return Result(
                failure=self.failure,
                info=self.info,
                timing=self.timing,
                backend_name=self.backend_name,
                warnings=self.warnings,
            )
        return Result(
            params=fn(self.params),
            info=self.info,
            timing=self.timing,
            backend_name=self.backend_name,
            warnings=self.warnings,
        )
