"""Dispatch a message to an AI pane, falling back to the clipboard.

One pass per call, ending in sent_to_pane, sent_to_clipboard or failed.
Errors from the components never escape; they become a DispatchResult.

PUBLIC API:
  - dispatch: Deliver a formatted message
  - send_location: Validate, format and dispatch a file:line location
  - send_code: Validate, format and dispatch a selection
"""

import logging
from dataclasses import replace
from typing import Callable, Optional, Sequence

from .clipboard import copy_to_clipboard
from .config import Config
from .errors import ClipboardError, SendToAIError
from .formatters import format_code_message, format_location_message
from .locate import locate_ai_pane
from .selection import check_selection_size, validate_buffer
from .tmux.exceptions import SendError, TmuxError
from .transmit import send_to_pane
from .types import DispatchResult, Selection

logger = logging.getLogger(__name__)

type Notify = Callable[[str], None]


def _notify(notify: Optional[Notify], message: str) -> None:
    if notify:
        notify(message)


def _failure(error: SendToAIError) -> DispatchResult:
    return DispatchResult(status="failed", detail=str(error), error=error.kind, hint=error.hint)


def _to_clipboard(
    message: str, config: Config, notify: Optional[Notify], cause: TmuxError, after_send_failure: bool
) -> DispatchResult:
    try:
        copy_to_clipboard(message, timeout=config.command_timeout)
    except ClipboardError as e:
        logger.error(f"Clipboard fallback failed: {e}")
        _notify(notify, f"Failed: {e}")
        return _failure(e)

    _notify(notify, "Copied to clipboard")
    return DispatchResult(
        status="sent_to_clipboard",
        detail=f"Copied to clipboard ({cause})",
        error=cause.kind,
        after_send_failure=after_send_failure,
    )


def dispatch(message: str, config: Config, notify: Optional[Notify] = None) -> DispatchResult:
    """Send content to an AI pane or the clipboard.

    Args:
        message: Formatted message.
        config: Active configuration.
        notify: Receives one-line progress notices for the user.

    Returns:
        DispatchResult describing the terminal state.
    """
    try:
        pane = locate_ai_pane(config, notify=notify)
    except TmuxError as e:
        logger.info(f"No AI pane: {e}")
        if not config.fallback_clipboard:
            return DispatchResult(
                status="failed",
                detail=f"{e}. Clipboard fallback is disabled",
                error="no_pane_and_no_fallback",
                hint=e.hint or "Enable fallback_clipboard or start an AI tool in tmux",
            )
        _notify(notify, "No AI pane found. Trying clipboard...")
        return _to_clipboard(message, config, notify, e, after_send_failure=False)

    try:
        send_to_pane(pane.pane_id, message, timeout=config.command_timeout)
    except SendError as e:
        logger.warning(f"Pane send failed: {e}")
        if not config.fallback_clipboard:
            _notify(notify, f"Failed: {e}")
            return DispatchResult(status="failed", detail=str(e), pane=pane, error=e.kind)
        _notify(notify, f"Pane send failed: {e}. Trying clipboard...")
        return _to_clipboard(message, config, notify, e, after_send_failure=True)

    _notify(notify, f"Sent to AI pane {pane.pane_id}")
    return DispatchResult(status="sent_to_pane", detail=f"Sent to AI pane {pane.pane_id} ({pane.command})", pane=pane)


def send_location(
    filepath: Optional[str],
    line_number: int,
    config: Config,
    buftype: str = "",
    notify: Optional[Notify] = None,
) -> DispatchResult:
    """Send a `File: path:line` location.

    Args:
        filepath: Buffer path from the editor.
        line_number: 1-indexed cursor line.
        config: Active configuration.
        buftype: Editor buffer type, empty for file buffers.
        notify: Receives user-facing notices.
    """
    try:
        validate_buffer(filepath, buftype)
    except SendToAIError as e:
        return _failure(e)

    message = format_location_message(filepath, line_number, config)
    return dispatch(message, config, notify=notify)


def send_code(
    filepath: Optional[str],
    start: int,
    end: int,
    lines: Sequence[str],
    config: Config,
    buftype: str = "",
    notify: Optional[Notify] = None,
) -> DispatchResult:
    """Send a selection as `File: path:start-end` followed by the code.

    Marks may arrive in either order. The size check runs before any
    formatting or I/O.
    """
    try:
        validate_buffer(filepath, buftype)
        selection = Selection.from_marks(start, end, lines)
        warning = check_selection_size(selection.line_count, config)
    except ValueError as e:
        return DispatchResult(status="failed", detail=str(e), error="invalid_selection")
    except SendToAIError as e:
        return _failure(e)

    if warning:
        logger.warning(warning)
        _notify(notify, warning)

    message = format_code_message(filepath, selection, config)
    result = dispatch(message, config, notify=notify)
    if warning:
        return replace(result, warning=warning)
    return result
