"""Tmux-specific exceptions.

PUBLIC API:
  - TmuxError: Base exception for all tmux operations
  - NotInTmuxError: Caller is not running inside a tmux client
  - NoPanesError: Pane listing failed or returned nothing
  - NoAIPaneError: No pane runs a configured AI process
  - SendError: Literal send to a pane failed
"""

from ..errors import SendToAIError


class TmuxError(SendToAIError):
    """Base exception for all tmux operations."""

    kind = "tmux_error"


class NotInTmuxError(TmuxError):
    """Raised when $TMUX is not set."""

    kind = "not_in_host_environment"
    hint = "Start tmux to enable AI pane detection"

    def __init__(self, message: str = "Not in tmux session"):
        super().__init__(message)


class NoPanesError(TmuxError):
    """Raised when tmux cannot list any panes."""

    kind = "no_panes_available"

    def __init__(self, message: str = "Failed to query tmux panes"):
        super().__init__(message)


class NoAIPaneError(TmuxError):
    """Raised when no pane matches the configured AI processes."""

    kind = "no_ai_pane_found"
    hint = "Start an AI tool (claude, codex, opencode, ...) in a tmux pane"

    def __init__(self, message: str = "No AI panes found"):
        super().__init__(message)


class SendError(TmuxError):
    """Raised when text could not be delivered to a pane."""

    kind = "send_failed"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)
