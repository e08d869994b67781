"""SQLite database engine and schema via SQLAlchemy Core."""

from postrail.infrastructure.database.engine import create_db_engine, init_database
from postrail.infrastructure.database.schema import metadata, posts

__all__ = [
    "create_db_engine",
    "init_database",
    "metadata",
    "posts",
]
