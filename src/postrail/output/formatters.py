"""Rich/JSON output helpers.

The CLI renders a Response for humans (Rich output, colors) or machines
(--json). In JSON mode the output is exactly the response body, the same
document the HTTP surface returns.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from postrail.output.responder import Response


def format_response(op: str, response: Response, *, json_output: bool = False) -> str:
    """Format a Response for display.

    Args:
        op: Name of the operation (e.g. ``"create_post"``).
        response: The mapped response to format.
        json_output: If True, return the JSON body; otherwise Rich text.
    """
    if json_output:
        return response.to_json(indent=2)

    from postrail.output.renderers import render_response

    return render_response(op, response)
