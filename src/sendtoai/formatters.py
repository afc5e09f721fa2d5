"""Message formatting.

PUBLIC API:
  - format_location_message: "File: path:line"
  - format_code_message: "File: path:start-end" followed by the selected code
"""

from typing import Optional

from .config import Config
from .paths import resolve_path
from .types import Selection


def format_location_message(filepath: Optional[str], line_number: int, config: Config) -> str:
    """Format location message (file:line)."""
    path = resolve_path(filepath, config)
    return f"File: {path}:{line_number}"


def format_code_message(filepath: Optional[str], selection: Selection, config: Config) -> str:
    """Format code message (file:start-end, then code).

    Lines are joined with newlines exactly as captured.
    """
    path = resolve_path(filepath, config)
    header = f"File: {path}:{selection.start}-{selection.end}"
    code = "\n".join(selection.lines)
    return f"{header}\n{code}"
