"""Pane operations - listing, literal send and focus."""

import logging
from typing import List, Optional

from .core import run_tmux, DEFAULT_TIMEOUT
from ..types import PaneDescriptor

logger = logging.getLogger(__name__)

# Title goes last so a title containing the separator still parses.
_FIELD_SEP = "|:|"
_LIST_FORMAT = _FIELD_SEP.join(["#{session_name}", "#{pane_id}", "#{pane_current_command}", "#{pane_title}"])


def parse_pane_line(line: str) -> Optional[PaneDescriptor]:
    """Parse one `list-panes` output line, None if malformed."""
    parts = line.rstrip("\n").split(_FIELD_SEP, 3)
    if len(parts) < 3:
        return None

    session, pane_id, command = parts[0], parts[1], parts[2]
    title = parts[3] if len(parts) > 3 else ""
    if not session or not pane_id.startswith("%"):
        return None

    return PaneDescriptor(session=session, pane_id=pane_id, command=command, title=title)


def list_panes(timeout: Optional[float] = DEFAULT_TIMEOUT) -> Optional[List[PaneDescriptor]]:
    """List all panes across all sessions in tmux listing order.

    Returns:
        List of PaneDescriptor, or None if the query failed.
    """
    code, stdout, stderr = run_tmux(["list-panes", "-a", "-F", _LIST_FORMAT], timeout=timeout)
    if code != 0:
        logger.warning(f"tmux list-panes failed: {stderr.strip()}")
        return None

    panes = []
    for line in stdout.splitlines():
        if not line:
            continue
        pane = parse_pane_line(line)
        if pane is None:
            logger.debug(f"Skipping malformed pane line: {line!r}")
            continue
        panes.append(pane)

    return panes


def send_literal(pane_id: str, text: str, timeout: Optional[float] = DEFAULT_TIMEOUT) -> tuple[bool, str]:
    """Send text with `send-keys -l` so no key names or shell syntax are interpreted.

    Returns:
        (success, stderr)
    """
    code, _, stderr = run_tmux(["send-keys", "-t", pane_id, "-l", text], timeout=timeout)
    return code == 0, stderr.strip()


def select_pane(pane_id: str, timeout: Optional[float] = DEFAULT_TIMEOUT) -> tuple[bool, str]:
    """Make pane the active one, switching its window into view first.

    Returns:
        (success, stderr)
    """
    code, _, stderr = run_tmux(["select-window", "-t", pane_id], timeout=timeout)
    if code != 0:
        return False, stderr.strip()

    code, _, stderr = run_tmux(["select-pane", "-t", pane_id], timeout=timeout)
    return code == 0, stderr.strip()
