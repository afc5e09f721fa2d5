"""System clipboard access.

PUBLIC API:
  - CLIPBOARD_COMMANDS: Clipboard executables in order of preference
  - detect_clipboard_command: First available clipboard executable
  - copy_to_clipboard: Pipe text to the clipboard
"""

import functools
import logging
import shutil
import subprocess
import tempfile
from typing import Optional

from .errors import ClipboardCopyError, ClipboardUnavailableError

logger = logging.getLogger(__name__)

CLIPBOARD_COMMANDS = (
    "pbcopy",  # macOS
    "clip.exe",  # WSL
    "wl-copy",  # Wayland
    "xclip",  # X11
    "xsel",  # X11 fallback
)

_COMMAND_ARGS = {
    "xclip": ["-selection", "clipboard"],
    "xsel": ["-b"],
}


@functools.cache
def _cached_command() -> str:
    for cmd in CLIPBOARD_COMMANDS:
        if shutil.which(cmd):
            logger.debug(f"Using clipboard command {cmd}")
            return cmd
    raise LookupError("no clipboard command")


def detect_clipboard_command() -> Optional[str]:
    """Detect available clipboard command.

    The first hit is memoized for the process; a miss is not, so a tool
    installed mid-session is picked up.
    """
    try:
        return _cached_command()
    except LookupError:
        return None


def copy_to_clipboard(text: str, timeout: Optional[float] = 2.0) -> None:
    """Copy text to system clipboard.

    Args:
        text: Text to copy.
        timeout: Seconds to wait for the clipboard command.

    Raises:
        ClipboardUnavailableError: If no clipboard command is installed.
        ClipboardCopyError: If the command fails or times out.
    """
    cmd = detect_clipboard_command()
    if cmd is None:
        raise ClipboardUnavailableError()

    args = [cmd] + _COMMAND_ARGS.get(cmd, [])
    # wl-copy, xclip and xsel fork a selection owner that inherits stderr; a pipe would block until it exits.
    with tempfile.TemporaryFile() as err:
        try:
            result = subprocess.run(
                args, input=text, stdout=subprocess.DEVNULL, stderr=err, text=True, timeout=timeout
            )
        except subprocess.TimeoutExpired:
            raise ClipboardCopyError(f"{cmd} timed out after {timeout}s")
        except OSError as e:
            raise ClipboardCopyError(str(e)) from e

        if result.returncode != 0:
            err.seek(0)
            reason = err.read().decode(errors="replace").strip()
            raise ClipboardCopyError(reason or f"{cmd} exited with {result.returncode}")

    logger.info(f"Copied {len(text)} characters to clipboard via {cmd}")
