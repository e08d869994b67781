"""Click base classes: every postrail command carries runnable examples.

``examples`` is a sequence of command lines. ``--examples`` prints them,
one per line, and exits before the command runs or touches the database.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click


class _ExamplesMixin:
    """Append an eager ``--examples`` option when examples are given."""

    def __init__(self, *args: Any, examples: Sequence[str] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        if examples:
            self.params.append(_examples_option(tuple(examples)))  # type: ignore[attr-defined]


def _examples_option(lines: tuple[str, ...]) -> click.Option:
    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        for line in lines:
            click.echo(f"  {line}" if line else "")
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples and exit.",
    )


class PostrailCommand(_ExamplesMixin, click.Command):
    pass


class PostrailGroup(_ExamplesMixin, click.Group):
    # Subcommands accept ``examples=`` without an explicit ``cls=``.
    command_class = PostrailCommand
