"""Pure tmux operations - thin wrappers over the tmux CLI.

PUBLIC API:
  - run_tmux: Run tmux command and return result
  - is_in_tmux: Check whether $TMUX is set
  - get_current_session: Current session name or None
  - list_panes: List all panes as PaneDescriptor
  - send_literal: Send literal text to a pane
  - select_pane: Focus a pane
"""

from .core import run_tmux, is_in_tmux

from .pane import (
    list_panes,
    send_literal,
    select_pane,
)

from .session import get_current_session

__all__ = [
    "run_tmux",
    "is_in_tmux",
    "get_current_session",
    "list_panes",
    "send_literal",
    "select_pane",
]
