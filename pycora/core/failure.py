"""
Failure taxonomy for recoverable domain errors.

Every higher-level operation (fit, predict, transform, decomposition,
search) reports a failure it cannot recover from as a Failure value
returned inside a Result. The set of kinds is closed: add a member to
FailedError, never subclass Failure.

Serialized shape:
    {'kind': <ordinal 1..6>, 'message': <str>}

Ordinals are stable and form part of the external interface.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from pycora.core.exceptions import ValidationError


class FailedError(IntEnum):
    """Closed set of failure kinds."""

    FIT_FAILED = 1
    PREDICT_FAILED = 2
    TRANSFORM_FAILED = 3
    FIND_FAILED = 4
    DECOMPOSITION_FAILED = 5
    SOLUTION_FAILED = 6

    @property
    def description(self) -> str:
        """Fixed human-readable text for this kind."""
        return _DESCRIPTIONS[self]

    def __str__(self) -> str:
        return self.description


_DESCRIPTIONS: dict[FailedError, str] = {
    FailedError.FIT_FAILED: "Fit failed",
    FailedError.PREDICT_FAILED: "Predict failed",
    FailedError.TRANSFORM_FAILED: "Transform failed",
    FailedError.FIND_FAILED: "Find failed",
    FailedError.DECOMPOSITION_FAILED: "Decomposition failed",
    FailedError.SOLUTION_FAILED: "Can not find solution",
}


@dataclass(frozen=True)
class Failure:
    """
    Immutable description of why an operation could not complete.

    Attributes:
        kind: One of the FailedError members
        message: Free-text explanation

    Equality and hashing are structural: two Failures are equal iff both
    kind and message match.

    Examples:
        >>> Failure.fit("design matrix is singular")
        Failure(kind=<FailedError.FIT_FAILED: 1>, message='design matrix is singular')
        >>> str(Failure.predict("model not fitted"))
        'Predict failed: model not fitted'
    """
    kind: FailedError
    message: str

    def __post_init__(self) -> None:
        if not isinstance(self.kind, FailedError):
            raise ValidationError(
                f"kind: expected FailedError, got {type(self.kind).__name__}"
            )
        if not isinstance(self.message, str):
            raise ValidationError(
                f"message: expected str, got {type(self.message).__name__}"
            )

    # === Construction helpers ===

    @classmethod
    def fit(cls, msg: str) -> Failure:
        """New FIT_FAILED failure."""
        return cls(FailedError.FIT_FAILED, msg)

    @classmethod
    def predict(cls, msg: str) -> Failure:
        """New PREDICT_FAILED failure."""
        return cls(FailedError.PREDICT_FAILED, msg)

    @classmethod
    def transform(cls, msg: str) -> Failure:
        """New TRANSFORM_FAILED failure."""
        return cls(FailedError.TRANSFORM_FAILED, msg)

    @classmethod
    def because(cls, kind: FailedError, msg: str) -> Failure:
        """New failure of an arbitrary kind."""
        return cls(kind, msg)

    @classmethod
    def caused_by(cls, kind: FailedError, context: str, cause: Failure) -> Failure:
        """
        Wrap ``cause`` as the reason for a more specific failure.

        The original failure's display string is kept in the new message,
        so nothing is lost when a DECOMPOSITION_FAILED becomes the cause of
        a SOLUTION_FAILED.

        Args:
            kind: Kind of the new failure
            context: What the caller was doing
            cause: The failure being wrapped

        Returns:
            Failure with message ``"<context>: <cause>"``
        """
        return cls(kind, f"{context}: {cause!s}")

    def error(self) -> FailedError:
        """Kind of this failure."""
        return self.kind

    # === Serialization ===

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'kind': int(self.kind),
            'message': self.message,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Failure:
        """
        Rebuild a Failure from ``to_dict()`` output.

        ``kind`` may be the ordinal (1..6) or the member name
        (e.g. ``'FIT_FAILED'``).

        Raises:
            ValidationError: If a field is missing or the kind is unknown
        """
        try:
            raw_kind = data['kind']
            message = data['message']
        except KeyError as e:
            raise ValidationError(f"failure record: missing field {e.args[0]!r}") from e

        return cls(_parse_kind(raw_kind), message)

    def to_json(self) -> str:
        """Serialize to a JSON string."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> Failure:
        """Deserialize from a JSON string produced by ``to_json()``."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValidationError(f"failure record: invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ValidationError(
                f"failure record: expected JSON object, got {type(data).__name__}"
            )
        return cls.from_dict(data)

    def __str__(self) -> str:
        return f"{self.kind.description}: {self.message}"


def _parse_kind(raw: Any) -> FailedError:
    """Resolve an ordinal or member name to a FailedError."""
    if isinstance(raw, FailedError):
        return raw
    if isinstance(raw, bool):
        raise ValidationError(f"failure record: unknown kind {raw!r}")
    if isinstance(raw, int):
        try:
            return FailedError(raw)
        except ValueError as e:
            raise ValidationError(
                f"failure record: unknown kind {raw!r}, expected 1..{len(FailedError)}"
            ) from e
    if isinstance(raw, str):
        try:
            return FailedError[raw]
        except KeyError as e:
            raise ValidationError(f"failure record: unknown kind {raw!r}") from e
    raise ValidationError(
        f"failure record: kind must be int or str, got {type(raw).__name__}"
    )
