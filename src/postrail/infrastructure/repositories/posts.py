"""Posts store — insert-one, select-all, select-by-id over SQLAlchemy Core.

Faults are never handled here. Every fault raised is a
``sqlalchemy.exc.SQLAlchemyError``, with two distinguishable cases:

- ``IntegrityError`` — a table constraint rejected an insert.
- ``NoResultFound`` — ``select_by_id`` found no row.
"""

from __future__ import annotations

import re
from typing import Any

from sqlalchemy import insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import NoResultFound

from postrail.infrastructure.database.schema import posts


# SQLite INTEGER PRIMARY KEY is a signed 64-bit rowid; autoincrement starts at 1.
MAX_ROW_ID = 2**63 - 1
_CANONICAL_ID = re.compile(r"[1-9][0-9]*")


def _coerce_id(post_id: object) -> int | None:
    """Normalise an opaque identifier to a row id, or None if it cannot match.

    Only the canonical spelling of an id matches: ASCII digits with no
    leading zero, within the rowid range.
    """
    if isinstance(post_id, bool):
        return None
    if isinstance(post_id, str):
        if _CANONICAL_ID.fullmatch(post_id) is None:
            return None
        post_id = int(post_id)
    if isinstance(post_id, int) and 1 <= post_id <= MAX_ROW_ID:
        return post_id
    return None


class PostStore:
    """Encapsulates SQL for the posts table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def insert_one(self, *, title: str, rating: str) -> dict[str, Any]:
        """Insert one post atomically and return the stored row."""
        with self._engine.begin() as conn:
            result = conn.execute(insert(posts).values(title=title, rating=rating))
            new_id = result.inserted_primary_key[0]
            row = conn.execute(select(posts).where(posts.c.id == new_id)).mappings().one()
        return dict(row)

    def select_all(self) -> list[dict[str, Any]]:
        """Fetch every post, oldest first."""
        with self._engine.connect() as conn:
            rows = conn.execute(select(posts).order_by(posts.c.id)).mappings().all()
        return [dict(row) for row in rows]

    def select_by_id(self, post_id: object) -> dict[str, Any]:
        """Fetch one post row. Raises ``NoResultFound`` on a miss."""
        row_id = _coerce_id(post_id)
        if row_id is None:
            raise NoResultFound(f"No post with id {post_id!r}")
        with self._engine.connect() as conn:
            row = conn.execute(select(posts).where(posts.c.id == row_id)).mappings().one()
        return dict(row)
