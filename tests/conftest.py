"""Shared pytest fixtures and test helpers for postrail tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from postrail.infrastructure.database.engine import init_database
from postrail.infrastructure.repositories.posts import PostStore
from postrail.services.posts import PostsRepository


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo CLI logging setup so later tests never write to a closed stream."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    structlog.reset_defaults()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / ".postrail" / "postrail.db"


@pytest.fixture
def db_engine(db_path: Path) -> Iterator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(db_path)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def store(db_engine: Engine) -> PostStore:
    return PostStore(db_engine)


@pytest.fixture
def repository(store: PostStore) -> PostsRepository:
    """Repository over a real, empty SQLite store."""
    return PostsRepository(store)


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI creates an isolated database.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.delenv("POSTRAIL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Stub stores (simulate store faults without a database)
# ---------------------------------------------------------------------------


class FaultyStore:
    """Store double whose every operation raises *exc*.

    Records calls so tests can assert the store was (or was not) touched.
    """

    def __init__(self, exc: BaseException) -> None:
        self.exc = exc
        self.calls: list[str] = []

    def insert_one(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append("insert_one")
        raise self.exc

    def select_all(self) -> list[dict[str, Any]]:
        self.calls.append("select_all")
        raise self.exc

    def select_by_id(self, post_id: object) -> dict[str, Any]:
        self.calls.append("select_by_id")
        raise self.exc


def create_post(repository: PostsRepository, title: str = "Title", rating: str = "Good") -> Any:
    """Create a post via the repository, asserting success."""
    from postrail.services.result import Ok

    outcome = repository.create(title, rating)
    assert isinstance(outcome, Ok), outcome
    return outcome.value
