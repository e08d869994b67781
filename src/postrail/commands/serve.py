"""serve — run the HTTP API under uvicorn."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from postrail.commands._base import PostrailCommand

if TYPE_CHECKING:
    from postrail.commands._context import AppContext


@click.command(
    cls=PostrailCommand,
    examples=(
        "postrail serve",
        "postrail --database /srv/posts.db serve --host 0.0.0.0 --port 9000",
    ),
)
@click.option("--host", default=None, help="Bind address (default: [server] host).")
@click.option("--port", default=None, type=int, help="Listen port (default: [server] port).")
@click.pass_obj
def serve(app: AppContext, host: str | None, port: int | None) -> None:
    """Serve POST /posts, GET /posts, and GET /posts/{id} over HTTP."""
    import uvicorn

    from postrail.api.app import create_app

    settings = app.settings
    uvicorn.run(
        create_app(settings),
        host=host or settings.server.host,
        port=port or settings.server.port,
        log_config=None,
    )
