"""Panes command - show tmux panes running a configured AI process."""

from ..app import app
from ..errors import SendToAIError
from ..locate import list_ai_panes
from ._errors import table_error_response


@app.command(
    display="table",
    headers=["Pane", "Session", "Command", "Title"],
    typer={"help": "List tmux panes running an AI assistant"},
    fastmcp={"type": "tool", "description": "List tmux panes running an AI assistant"},
)
def panes(state):
    """List AI panes in tmux listing order. The first row is the send target
    unless a pane in the current session matches."""
    try:
        ai_panes = list_ai_panes(state.config)
    except SendToAIError as e:
        return table_error_response(str(e))

    return [
        {"Pane": pane.pane_id, "Session": pane.session, "Command": pane.command, "Title": pane.title}
        for pane in ai_panes
    ]
