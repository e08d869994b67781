"""Responder — deterministic Outcome → (status, body) mapping.

Guards are evaluated in order; the first match wins:

1. ``Ok(value)``                   → 200, serialized value
2. ``Err(NotFound)``               → 404, ``{"message": "Not found"}``
3. ``Err(PersistenceFailed)``      → 500, code ``002``
4. ``Err(ValidationFailed)``       → 422, ``{"message": ..., "errors": fields}``
5. ``Err(<any other kind>)``       → 500, code ``001``
6. anything that is not an Outcome → 500, code ``003``

The order encodes precedence: missing beats store fault beats bad input
beats unknown fault beats impossible state. ``respond`` never raises.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

import structlog
from pydantic import BaseModel

from postrail.services.result import Err, NotFound, Ok, PersistenceFailed, ValidationFailed

logger = structlog.get_logger(__name__)

CODE_UNEXPECTED = "001"
CODE_PERSISTENCE = "002"
CODE_UNKNOWN_STATE = "003"


class Response(BaseModel):
    """External response: HTTP-style status plus a JSON-ready body."""

    model_config = {"frozen": True}

    status: int
    body: Any = None

    @property
    def ok(self) -> bool:
        return self.status == 200

    def to_json(self, *, indent: int | None = None) -> str:
        return json.dumps(self.body, indent=indent)


def serialize(value: Any) -> Any:
    """Convert a success value into JSON-ready data."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return [serialize(item) for item in value]
    return value


def not_found() -> Response:
    return Response(status=404, body={"message": "Not found"})


def internal_server_error(code: str) -> Response:
    return Response(status=500, body={"message": "Internal server error", "code": code})


def unprocessable_entity(errors: dict[str, list[str]]) -> Response:
    return Response(
        status=422,
        body={"message": "Unprocessable entity", "errors": {k: list(v) for k, v in errors.items()}},
    )


def respond(outcome: object) -> Response:
    """Map *outcome* to a Response using the ordered guard chain."""
    if isinstance(outcome, Ok):
        try:
            return Response(status=200, body=serialize(outcome.value))
        except Exception as exc:
            logger.error("respond.serialize_failed", error=type(exc).__name__, exc_info=exc)
            return internal_server_error(CODE_UNEXPECTED)

    if not isinstance(outcome, Err):
        logger.error("respond.unknown_state", received=type(outcome).__name__)
        return internal_server_error(CODE_UNKNOWN_STATE)

    kind = outcome.kind
    if isinstance(kind, NotFound):
        logger.info("respond.not_found", id=kind.identifier)
        return not_found()
    if isinstance(kind, PersistenceFailed):
        logger.error("respond.persistence_failed", cause=repr(kind.cause))
        return internal_server_error(CODE_PERSISTENCE)
    if isinstance(kind, ValidationFailed):
        logger.info("respond.unprocessable", fields=list(kind.errors))
        return unprocessable_entity(kind.errors)

    cause = getattr(kind, "cause", kind)
    logger.error("respond.unexpected", kind=type(kind).__name__, cause=repr(cause))
    return internal_server_error(CODE_UNEXPECTED)
