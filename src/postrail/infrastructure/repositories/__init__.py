"""SQL access objects for the posts store."""

from postrail.infrastructure.repositories.posts import PostStore

__all__ = ["PostStore"]
