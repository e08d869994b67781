"""Post models — the single resource exposed by postrail.

``PostDraft`` is what validation hands to persistence; ``Post`` is what
persistence hands back. Both are frozen: a stored post is read-only.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class PostDraft(BaseModel):
    """Validated input for a new post (not yet persisted)."""

    model_config = {"frozen": True}

    title: str
    rating: str


class Post(BaseModel):
    """A persisted post.

    Attributes:
        id: Store-assigned identifier, opaque to callers.
        title: Non-empty title.
        rating: Non-empty free-form rating (e.g. ``"Good"``).
    """

    model_config = {"frozen": True}

    id: int
    title: str
    rating: str

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> Post:
        """Build a Post from a store row mapping."""
        return cls(id=row["id"], title=row["title"], rating=row["rating"])
