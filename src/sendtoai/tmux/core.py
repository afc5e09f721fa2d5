"""Core tmux operations - shared utilities for all tmux modules.

PUBLIC API:
  - run_tmux: Execute tmux command and return result
  - is_in_tmux: Check whether we run inside a tmux client
"""

import logging
import os
import subprocess
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 2.0


def run_tmux(args: List[str], timeout: Optional[float] = DEFAULT_TIMEOUT) -> Tuple[int, str, str]:
    """Run tmux command, return (returncode, stdout, stderr).

    A missing tmux binary or a hung server is reported as a non-zero
    return code so callers only ever inspect the tuple.
    """
    cmd = ["tmux"] + args
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    except FileNotFoundError:
        return 127, "", "tmux not found"
    except subprocess.TimeoutExpired:
        logger.warning(f"tmux {args[0]} timed out after {timeout}s")
        return 124, "", f"tmux {args[0]} timed out after {timeout}s"
    except OSError as e:
        return 1, "", str(e)
    return result.returncode, result.stdout, result.stderr


def is_in_tmux() -> bool:
    """Check if running inside a tmux session."""
    return bool(os.environ.get("TMUX"))
