"""Session queries for tmux.

PUBLIC API:
  - get_current_session: Name of the session this client is attached to
"""

import logging
from typing import Optional

from .core import run_tmux, is_in_tmux, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


def get_current_session(timeout: Optional[float] = DEFAULT_TIMEOUT) -> Optional[str]:
    """Get the current tmux session name.

    Returns:
        Session name, or None when outside tmux or the query fails.
    """
    if not is_in_tmux():
        return None

    code, stdout, stderr = run_tmux(["display-message", "-p", "#{session_name}"], timeout=timeout)
    if code != 0 or not stdout.strip():
        logger.debug(f"Failed to get tmux session name: {stderr.strip()}")
        return None

    return stdout.strip().splitlines()[0]
