"""SQLAlchemy Core table definitions for the postrail database.

The CHECK constraints are the store's own integrity rules. They overlap
with, but are stricter than, input validation (e.g. length limits), so
an insert can still fail with ``IntegrityError`` after validation passes.
"""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Column, Integer, MetaData, Table, Text

TITLE_MAX_LENGTH = 255
RATING_MAX_LENGTH = 255

metadata = MetaData()

posts = Table(
    "posts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", Text, nullable=False),
    Column("rating", Text, nullable=False),
    CheckConstraint("length(title) > 0", name="ck_posts_title_filled"),
    CheckConstraint(f"length(title) <= {TITLE_MAX_LENGTH}", name="ck_posts_title_length"),
    CheckConstraint("length(rating) > 0", name="ck_posts_rating_filled"),
    CheckConstraint(f"length(rating) <= {RATING_MAX_LENGTH}", name="ck_posts_rating_length"),
)
