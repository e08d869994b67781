"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy repository initialization and
centralized response emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from postrail.output.formatters import format_response
from postrail.output.responder import respond

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from postrail.config.settings import PostrailSettings
    from postrail.services.posts import PostsRepository


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The database is opened lazily on first use so ``--help`` and
    ``--version`` never touch the store.
    """

    def __init__(self, settings: PostrailSettings) -> None:
        self.settings = settings
        self._engine: Engine | None = None
        self._repository: PostsRepository | None = None

        from postrail.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def repository(self) -> PostsRepository:
        """The posts repository (database initialized on first access)."""
        if self._repository is None:
            from postrail.infrastructure.database.engine import init_database
            from postrail.infrastructure.repositories.posts import PostStore
            from postrail.services.posts import PostsRepository

            self._engine = init_database(self.settings.database_path)
            self._repository = PostsRepository(PostStore(self._engine))
        return self._repository

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._repository = None

    def emit(self, op: str, outcome: object) -> None:
        """Map an Outcome to a Response and output it with exit semantics.

        * 200: writes to stdout, returns normally.
        * Anything else: writes to stderr, exits with code 1.
        """
        response = respond(outcome)
        output = format_response(op, response, json_output=self.settings.json_output)
        if response.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
