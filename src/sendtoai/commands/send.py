"""Send commands - the editor-facing entry points.

PUBLIC API:
  - location: Send a file:line location
  - code: Send a selection with its line range
"""

import logging
import sys
from typing import Any, Optional

from ..app import app
from ..dispatch import send_code, send_location
from ..errors import ConfigurationError
from ._errors import error_response, result_response

logger = logging.getLogger(__name__)


# Only the CLI owns stdin; under MCP it carries the protocol stream
_stdin_selection = False


def enable_stdin_selection() -> None:
    """Let `code` read the selection from stdin when --text is omitted."""
    global _stdin_selection
    _stdin_selection = True


def _selected_text(text: Optional[str]) -> Optional[str]:
    """Explicit text, else whatever the editor piped in, else None."""
    if text is not None:
        return text
    if not _stdin_selection or sys.stdin is None or sys.stdin.isatty():
        return None
    return sys.stdin.read() or None


@app.command(
    display="markdown",
    typer={"help": "Send a file:line location to the AI pane"},
    fastmcp={
        "type": "tool",
        "mime_type": "text/markdown",
        "tags": {"send"},
        "description": "Send a file location to the AI assistant's tmux pane",
    },
)
def location(state, file: str, line: int, buftype: str = "") -> dict[str, Any]:
    """Send `File: <path>:<line>` to the AI pane, or the clipboard.

    Args:
        state: Application state.
        file: Buffer path.
        line: 1-indexed cursor line.
        buftype: Editor buffer type, empty for file buffers.

    Examples:
        sendtoai location src/app.py 42
    """
    try:
        config = state.config
    except ConfigurationError as e:
        return error_response(f"Configuration error: {e}", hint=e.hint)

    notices: list[str] = []
    result = send_location(file, line, config, buftype=buftype, notify=notices.append)
    return result_response(result, notices)


@app.command(
    display="markdown",
    typer={"help": "Send a selection (text on stdin or --text) to the AI pane"},
    fastmcp={
        "type": "tool",
        "mime_type": "text/markdown",
        "tags": {"send"},
        "description": "Send a code selection to the AI assistant's tmux pane",
    },
)
def code(state, file: str, start: int, end: int, text: str = None, buftype: str = "") -> dict[str, Any]:  # pyright: ignore[reportArgumentType]
    """Send `File: <path>:<start>-<end>` followed by the selected lines.

    Args:
        state: Application state.
        file: Buffer path.
        start: First selected line (1-indexed).
        end: Last selected line, inclusive.
        text: Selected text. On the CLI, read from stdin when omitted.
        buftype: Editor buffer type, empty for file buffers.

    Examples:
        sed -n 10,12p src/app.py | sendtoai code src/app.py 10 12
    """
    try:
        config = state.config
    except ConfigurationError as e:
        return error_response(f"Configuration error: {e}", hint=e.hint)

    text = _selected_text(text)
    if text is None:
        return error_response("No selected text", hint="Pass text=... or pipe the selection on stdin")

    lines = text.split("\n")
    # Editors pipe lines with a terminating newline
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()

    notices: list[str] = []
    result = send_code(file, start, end, lines, config, buftype=buftype, notify=notices.append)
    return result_response(result, notices)
