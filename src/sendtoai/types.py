"""Type definitions for sendtoai.

A message is built from a file location or a selection, then delivered to
exactly one tmux pane or to the clipboard.
"""

from dataclasses import dataclass
from typing import Literal, get_args

# Pane identifiers
type PaneID = str  # e.g., "%42" - tmux native pane ID

# Path display styles
type PathStyle = Literal["git_relative", "cwd_relative", "absolute"]
type PathStyleFallback = Literal["filename_only", "cwd_relative", "absolute"]

PATH_STYLES: tuple[str, ...] = get_args(PathStyle.__value__)
PATH_STYLE_FALLBACKS: tuple[str, ...] = get_args(PathStyleFallback.__value__)

# Dispatcher terminal states
type DispatchStatus = Literal["sent_to_pane", "sent_to_clipboard", "failed"]

type ErrorKind = Literal[
    "not_in_host_environment",
    "no_panes_available",
    "no_ai_pane_found",
    "send_failed",
    "clipboard_unavailable",
    "clipboard_copy_failed",
    "invalid_buffer",
    "invalid_selection",
    "selection_too_large",
    "configuration_invalid",
    "no_pane_and_no_fallback",
]

NO_NAME = "[No Name]"


@dataclass(frozen=True)
class PaneDescriptor:
    """One row of `tmux list-panes -a`."""

    session: str
    pane_id: PaneID
    command: str
    title: str


@dataclass(frozen=True)
class Selection:
    """Inclusive, 1-indexed line range with the captured text."""

    start: int
    end: int
    lines: tuple[str, ...]

    @classmethod
    def from_marks(cls, first: int, last: int, lines) -> "Selection":
        """Build a selection from editor marks in either order.

        Raises:
            ValueError: If a mark is unset (0) or negative, or the captured
                lines do not cover the range.
        """
        if first <= 0 or last <= 0:
            raise ValueError("Invalid selection")
        if first > last:
            first, last = last, first
        lines = tuple(lines)
        if len(lines) != last - first + 1:
            raise ValueError(f"Invalid selection: {len(lines)} lines captured for range {first}-{last}")
        return cls(start=first, end=last, lines=lines)

    @property
    def line_count(self) -> int:
        return self.end - self.start + 1


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of one dispatch.

    Attributes:
        status: Terminal state reached.
        detail: One-line human-readable summary.
        pane: Pane the message went to, if any.
        error: Error kind for failures, or the pane error that caused a fallback.
        after_send_failure: Clipboard was used because the pane send failed.
        hint: One-line remedial hint for failures.
        warning: Non-fatal notice raised before dispatch (large selection).
    """

    status: DispatchStatus
    detail: str | None = None
    pane: PaneDescriptor | None = None
    error: ErrorKind | None = None
    after_send_failure: bool = False
    hint: str | None = None
    warning: str | None = None

    @property
    def ok(self) -> bool:
        return self.status != "failed"
