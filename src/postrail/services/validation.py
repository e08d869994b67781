"""Post contract — declarative field rules for raw post input.

Every rule is checked; violations for all fields are collected into one
FieldErrors mapping before returning. Validation never touches the store.

A filled string has at least one non-whitespace character and encodes
as UTF-8. Whitespace-only values and strings carrying lone surrogates are
reported as "must be a string", the same as a wrong type. The value
itself is kept exactly as given.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from postrail.domain.post import PostDraft
from postrail.services.result import Err, FieldErrors, Ok, Outcome, ValidationFailed

MISSING = "is missing"
NOT_A_STRING = "must be a string"

# Required, filled string fields, in reporting order.
REQUIRED_STRING_FIELDS: tuple[str, ...] = ("title", "rating")


def _is_filled_string(value: object) -> bool:
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _check_filled_string(raw: Mapping[str, Any], name: str) -> list[str]:
    if name not in raw:
        return [MISSING]
    if not _is_filled_string(raw[name]):
        return [NOT_A_STRING]
    return []


def validate(raw: object) -> Outcome[PostDraft]:
    """Check *raw* against the post contract.

    Returns ``Ok(PostDraft)`` when every field passes, otherwise
    ``Err(ValidationFailed(errors))`` naming exactly the offending fields.
    A *raw* that is not a mapping is treated as empty.
    """
    params: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}

    errors: FieldErrors = {}
    for name in REQUIRED_STRING_FIELDS:
        messages = _check_filled_string(params, name)
        if messages:
            errors[name] = messages

    if errors:
        return Err(ValidationFailed(errors))
    return Ok(PostDraft(title=params["title"], rating=params["rating"]))
