"""Outcome and ErrorKind — the universal service contract.

INVARIANT: Every fallible service operation returns an Outcome.
An Outcome is exactly one of ``Ok(value)`` or ``Err(kind)``; never both.

The set of error kinds is closed from the responder's point of view:

- ``ValidationFailed`` — input-shape violation, correctable by the caller.
- ``NotFound`` — the requested identifier has no record.
- ``PersistenceFailed`` — the store reported a fault it recognises.
- ``Unexpected`` — anything else; a defect, not user-correctable.

Faults are classified and wrapped exactly once, at the service seam.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Field name -> ordered violation messages. Non-empty iff validation failed.
type FieldErrors = dict[str, list[str]]


@dataclass(frozen=True)
class ValidationFailed:
    """Raw input violated one or more field rules."""

    errors: FieldErrors


@dataclass(frozen=True)
class NotFound:
    """No record exists for *identifier*."""

    identifier: Any = None


@dataclass(frozen=True)
class PersistenceFailed:
    """The store raised a fault it recognises (constraint, connectivity, ...)."""

    cause: BaseException | None = None


@dataclass(frozen=True)
class Unexpected:
    """A fault no other kind accounts for."""

    cause: BaseException | None = None


type ErrorKind = ValidationFailed | NotFound | PersistenceFailed | Unexpected


@dataclass(frozen=True)
class Ok[T]:
    """Success track: carries the operation's result value."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failure track: carries exactly one error kind."""

    kind: ErrorKind


type Outcome[T] = Ok[T] | Err


def is_ok(outcome: object) -> bool:
    """True when *outcome* is on the success track."""
    return isinstance(outcome, Ok)


def is_err(outcome: object) -> bool:
    """True when *outcome* is on the failure track."""
    return isinstance(outcome, Err)
