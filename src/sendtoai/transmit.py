"""Literal transmission to a tmux pane.

PUBLIC API:
  - escape_for_tmux: Escape text for literal send
  - build_payload: Escaped text plus the trailing newline
  - send_to_pane: Send text to a pane and focus it
"""

import logging
from typing import Optional

from .tmux import is_in_tmux, select_pane, send_literal
from .tmux.core import DEFAULT_TIMEOUT
from .tmux.exceptions import SendError

logger = logging.getLogger(__name__)


def escape_for_tmux(text: str) -> str:
    """In literal mode (-l) only backslashes need escaping."""
    return text.replace("\\", "\\\\")


def build_payload(text: str) -> str:
    """Escaped text with one trailing newline so the cursor lands on a fresh line."""
    return escape_for_tmux(text) + "\n"


def send_to_pane(pane_id: str, text: str, timeout: Optional[float] = DEFAULT_TIMEOUT) -> None:
    """Send text to a tmux pane in literal mode, then focus the pane.

    Args:
        pane_id: Target pane ID (e.g., "%2").
        text: Message to send.
        timeout: Seconds to wait for each tmux call.

    Raises:
        SendError: If not in tmux or tmux rejects the send.
    """
    if not is_in_tmux():
        raise SendError("Not in tmux session")

    ok, stderr = send_literal(pane_id, build_payload(text), timeout=timeout)
    if not ok:
        raise SendError(f"Tmux send-keys failed: {stderr or 'unknown error'}")

    logger.info(f"Sent {len(text)} characters to pane {pane_id}")

    ok, stderr = select_pane(pane_id, timeout=timeout)
    if not ok:
        # Text is already delivered; a focus failure must not trigger a fallback copy.
        logger.warning(f"Failed to focus pane {pane_id}: {stderr or 'unknown error'}")
