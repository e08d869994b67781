"""Rich renderers for Responder output.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Success bodies are dispatched on shape: a list renders as a table, a
single post as key-value fields.  Failure bodies render as one ERROR
line followed by any field errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from postrail.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from postrail.output.responder import Response


# ── Public API ────────────────────────────────────────────────────────


def render_response(op: str, response: Response) -> str:
    """Render a Response to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if response.ok:
        _status_line(console, op)
        if isinstance(response.body, list):
            _render_post_table(console, response.body)
        elif isinstance(response.body, dict):
            _render_post(console, response.body)
    else:
        _render_error(console, op, response)

    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, op: str) -> None:
    label = Text("OK", style="pr.ok")
    console.print(label, Text(f"  {op}", style="pr.op"), end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    style = {"id": "pr.id", "title": "pr.title", "rating": "pr.rating"}.get(key, "")
    console.print(Text.assemble((f"  {key}: ", "pr.key"), (str(value), style)))


def _render_post(console: Console, post: dict[str, Any]) -> None:
    for key in ("id", "title", "rating"):
        if key in post:
            _field(console, key, post[key])


def _render_post_table(console: Console, posts: list[dict[str, Any]]) -> None:
    if not posts:
        console.print(Text("  (no posts)", style="dim"))
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="pr.id", no_wrap=True)
    table.add_column("Title", style="pr.title")
    table.add_column("Rating", style="pr.rating")
    for post in posts:
        table.add_row(
            str(post.get("id", "")),
            str(post.get("title", "")),
            str(post.get("rating", "")),
        )
    console.print(table)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(console: Console, op: str, response: Response) -> None:
    body = response.body if isinstance(response.body, dict) else {}
    msg = body.get("message", "Unknown error")
    label = Text("ERROR", style="pr.error")
    parts = [label, Text(f"  {op}", style="pr.op"), Text(" — "), Text(f"{response.status} {msg}")]
    if "code" in body:
        parts.append(Text(f" (code {body['code']})", style="pr.code"))
    console.print(*parts, sep="")

    for field_name, messages in body.get("errors", {}).items():
        for message in messages:
            _field(console, field_name, message)
