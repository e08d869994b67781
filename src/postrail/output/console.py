"""Rich theme and buffered Console for postrail's human output.

Renderers print into an in-memory Console and return the text, so the
CLI decides whether it goes to stdout or stderr. Rich drops colour
codes on its own when the buffer is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

# Fixed so post tables wrap the same way in a terminal, a pipe, or a test.
CONSOLE_WIDTH = 120

POSTRAIL_THEME = Theme(
    {
        "pr.ok": "bold green",
        "pr.error": "bold red",
        "pr.op": "bold cyan",
        "pr.key": "dim",
        "pr.id": "bold blue",
        "pr.title": "bold",
        "pr.rating": "magenta",
        "pr.code": "yellow",
    }
)


def create_console() -> Console:
    return Console(
        file=StringIO(),
        theme=POSTRAIL_THEME,
        highlight=False,
        width=CONSOLE_WIDTH,
    )


def get_output(console: Console) -> str:
    """Return everything printed to *console* so far."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
