"""Subcommand modules for postrail.

Provides register_commands() which uses deferred imports to keep
``postrail --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the posts group and the serve command on the root CLI group."""
    from postrail.commands.posts import posts
    from postrail.commands.serve import serve

    cli.add_command(posts)
    cli.add_command(serve)
