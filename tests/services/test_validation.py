"""Tests for the post contract (field validation)."""

from __future__ import annotations

from typing import Any

import pytest

from postrail.domain.post import PostDraft
from postrail.services.result import Err, Ok, ValidationFailed
from postrail.services.validation import MISSING, NOT_A_STRING, validate


def _errors(raw: Any) -> dict[str, list[str]]:
    outcome = validate(raw)
    assert isinstance(outcome, Err)
    assert isinstance(outcome.kind, ValidationFailed)
    return outcome.kind.errors


class TestValidInput:
    def test_returns_draft(self) -> None:
        outcome = validate({"title": "Title", "rating": "Good"})
        assert outcome == Ok(PostDraft(title="Title", rating="Good"))

    def test_extra_keys_ignored(self) -> None:
        outcome = validate({"title": "Title", "rating": "Good", "id": 99, "admin": True})
        assert isinstance(outcome, Ok)
        assert outcome.value == PostDraft(title="Title", rating="Good")

    def test_values_kept_as_given(self) -> None:
        outcome = validate({"title": "  Padded  ", "rating": "Good"})
        assert isinstance(outcome, Ok)
        assert outcome.value.title == "  Padded  "


class TestInvalidInput:
    def test_title_not_a_string(self) -> None:
        assert _errors({"title": 100, "rating": "Good"}) == {"title": [NOT_A_STRING]}

    def test_rating_not_a_string(self) -> None:
        assert _errors({"title": "Title", "rating": 100}) == {"rating": [NOT_A_STRING]}

    @pytest.mark.parametrize("value", ["", "   ", None, 1.5, ["a"], {"a": 1}, True])
    def test_title_rejected_values(self, value: object) -> None:
        assert _errors({"title": value, "rating": "Good"}) == {"title": [NOT_A_STRING]}

    @pytest.mark.parametrize("value", ["\t\n", "\u00a0"])
    def test_whitespace_only_rejected(self, value: str) -> None:
        assert _errors({"title": "Title", "rating": value}) == {"rating": [NOT_A_STRING]}

    @pytest.mark.parametrize("value", ["\ud800", "ok \udfff"])
    def test_lone_surrogate_rejected(self, value: str) -> None:
        assert _errors({"title": value, "rating": "Good"}) == {"title": [NOT_A_STRING]}

    def test_missing_field(self) -> None:
        assert _errors({"rating": "Good"}) == {"title": [MISSING]}

    def test_collects_every_field(self) -> None:
        errors = _errors({"title": 1, "rating": ""})
        assert errors == {"title": [NOT_A_STRING], "rating": [NOT_A_STRING]}
        assert list(errors) == ["title", "rating"]

    def test_empty_mapping(self) -> None:
        assert _errors({}) == {"title": [MISSING], "rating": [MISSING]}

    @pytest.mark.parametrize("raw", [None, [], "title=x", 42])
    def test_non_mapping_treated_as_empty(self, raw: object) -> None:
        assert _errors(raw) == {"title": [MISSING], "rating": [MISSING]}
