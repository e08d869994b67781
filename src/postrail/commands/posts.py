"""Command group: posts (create, list, show)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from postrail.commands._base import PostrailGroup

if TYPE_CHECKING:
    from postrail.commands._context import AppContext


@click.group(
    cls=PostrailGroup,
    examples=(
        'postrail posts create "Cool post" Good',
        "postrail posts list",
        "postrail --json posts show 1",
    ),
)
@click.pass_obj
def posts(app: AppContext) -> None:
    """Create, list, and show posts."""


@posts.command(
    examples=(
        'postrail posts create "Cool post" Good',
        'postrail --json posts create "Cool post" Good',
    )
)
@click.argument("title")
@click.argument("rating")
@click.pass_obj
def create(app: AppContext, title: str, rating: str) -> None:
    """Create a new post with TITLE and RATING."""
    app.emit("create_post", app.repository.create(title, rating))


@posts.command(name="list", examples=("postrail posts list", "postrail --json posts list"))
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List every post, oldest first."""
    app.emit("list_posts", app.repository.find_all())


@posts.command(examples=("postrail posts show 1", "postrail --json posts show 42"))
@click.argument("post_id")
@click.pass_obj
def show(app: AppContext, post_id: str) -> None:
    """Show the post with POST_ID."""
    app.emit("show_post", app.repository.find_by_id(post_id))
