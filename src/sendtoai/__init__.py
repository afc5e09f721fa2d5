"""Send code locations and selections from an editor to an AI assistant in tmux.

Finds the tmux pane running claude, codex, opencode (or any configured
process), sends a `File: path:line` message in literal mode, and falls back
to the system clipboard when no pane is available. Built on ReplKit2 for
CLI, REPL and MCP access.

PUBLIC API:
  - Config: Immutable configuration
  - load_config: Build a validated Config
  - send_location: Send a file:line location
  - send_code: Send a selection
  - dispatch: Deliver a preformatted message
  - DispatchResult: Outcome of a send
"""

from .config import Config, load_config
from .dispatch import dispatch, send_code, send_location
from .types import DispatchResult

__version__ = "0.1.0"
__all__ = ["Config", "load_config", "send_location", "send_code", "dispatch", "DispatchResult"]
