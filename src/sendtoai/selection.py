"""Pre-send checks on the buffer and the selection.

Both checks are pure: no subprocess, no filesystem access.

PUBLIC API:
  - validate_buffer: Reject unnamed and special buffers
  - check_selection_size: Enforce max/warn selection thresholds
"""

from typing import Optional

from .config import Config
from .errors import InvalidBufferError, SelectionTooLargeError

_SPECIAL_BUFTYPES = {
    "help": "Cannot send from help buffer",
    "terminal": "Cannot send from terminal buffer",
    "quickfix": "Cannot send from quickfix buffer",
}

_SPECIAL_SCHEMES = {
    "oil://": "Cannot send from oil.nvim buffer",
    "fugitive://": "Cannot send from fugitive buffer",
    "term://": "Cannot send from terminal buffer",
}


def validate_buffer(name: Optional[str], buftype: str = "") -> None:
    """Check that a buffer can be sent from.

    Args:
        name: Buffer name (file path) as reported by the editor.
        buftype: Editor buffer type, empty for normal file buffers.

    Raises:
        InvalidBufferError: For unnamed, special-type or special-scheme buffers.
    """
    if not name:
        err = InvalidBufferError("Cannot send from unnamed buffer")
        err.hint = "Save file first or use visual mode to copy code."
        raise err

    if buftype:
        raise InvalidBufferError(_SPECIAL_BUFTYPES.get(buftype, f"Cannot send from special buffer: {buftype}"))

    for scheme, message in _SPECIAL_SCHEMES.items():
        if name.startswith(scheme):
            raise InvalidBufferError(message)


def check_selection_size(line_count: int, config: Config) -> Optional[str]:
    """Validate selection size against configured thresholds.

    Returns:
        Warning text when above warn_selection_lines, else None.

    Raises:
        SelectionTooLargeError: When above max_selection_lines.
    """
    if line_count > config.max_selection_lines:
        raise SelectionTooLargeError(line_count, config.max_selection_lines)

    if line_count > config.warn_selection_lines:
        return f"Selection is large ({line_count} lines). Sending..."

    return None
