"""PostsRepository — create, list, and fetch posts as Outcome values.

Pipeline for create: VALIDATE → PERSIST → RESPOND (as Outcome).
Each step runs only when the previous one is on the success track; a
validation failure short-circuits before the store is touched.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog
from sqlalchemy.exc import NoResultFound

from postrail.domain.post import Post
from postrail.services.base import BaseService
from postrail.services.result import Err, NotFound, Ok, Outcome
from postrail.services.validation import validate

logger = structlog.get_logger(__name__)


class PostsRepository(BaseService):
    """Validation plus persistence for the post resource."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def create(self, title: object, rating: object) -> Outcome[Post]:
        """Validate and persist a new post."""
        return self.create_from_params({"title": title, "rating": rating})

    def create_from_params(self, params: Mapping[str, Any]) -> Outcome[Post]:
        """Validate a raw parameter mapping and persist a new post.

        Absent keys are reported as missing rather than as wrong types.
        A validation ``Err`` is returned as-is, never re-wrapped.
        """
        validated = validate(params)
        if isinstance(validated, Err):
            logger.debug("post.invalid", kind=type(validated.kind).__name__)
            return validated

        draft = validated.value
        try:
            row = self._store.insert_one(title=draft.title, rating=draft.rating)
            post = Post.from_row(row)
        except Exception as exc:
            return self._fault("create", exc)

        logger.info("post.created", id=post.id)
        return Ok(post)

    def find_all(self) -> Outcome[list[Post]]:
        """Fetch every post. An empty store is ``Ok([])``."""
        try:
            found = [Post.from_row(row) for row in self._store.select_all()]
        except Exception as exc:
            return self._fault("find_all", exc)
        return Ok(found)

    def find_by_id(self, post_id: object) -> Outcome[Post]:
        """Fetch one post.

        A miss is checked before generic store faults: it becomes
        ``NotFound``, not ``PersistenceFailed``.
        """
        try:
            post = Post.from_row(self._store.select_by_id(post_id))
        except NoResultFound:
            logger.debug("post.not_found", id=post_id)
            return Err(NotFound(post_id))
        except Exception as exc:
            return self._fault("find_by_id", exc)
        return Ok(post)
