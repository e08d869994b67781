"""BaseService — abstract foundation for postrail services.

Every service receives a :class:`PostStore` at construction time and
holds no other state, so one instance can serve concurrent requests.
Services are the single seam where store faults become Outcome values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from sqlalchemy.exc import SQLAlchemyError

from postrail.services.result import Err, PersistenceFailed, Unexpected

if TYPE_CHECKING:
    from postrail.infrastructure.repositories.posts import PostStore

logger = structlog.get_logger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class PostsRepository(BaseService):
            def find_all(self) -> Outcome[list[Post]]:
                try:
                    rows = self._store.select_all()
                except Exception as exc:
                    return self._fault("find_all", exc)
                ...
    """

    def __init__(self, store: PostStore) -> None:
        self._store = store

    def _fault(self, op: str, exc: Exception) -> Err:
        """Classify a fault raised by the store, wrapping it exactly once.

        Store faults (any ``SQLAlchemyError``) become ``PersistenceFailed``;
        everything else becomes ``Unexpected``. Callers check narrower
        kinds, such as a lookup miss, before delegating here.
        """
        if isinstance(exc, SQLAlchemyError):
            logger.warning("store.fault", op=op, error=type(exc).__name__)
            return Err(PersistenceFailed(exc))
        logger.error("service.unexpected", op=op, error=type(exc).__name__, exc_info=exc)
        return Err(Unexpected(exc))
