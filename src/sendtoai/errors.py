"""Error types for sendtoai.

Components raise these; the dispatcher converts them into a DispatchResult
so nothing in the taxonomy escapes to the editor.

PUBLIC API:
  - SendToAIError: Base exception, carries an error kind and remedial hint
  - ConfigurationError: Invalid configuration value
  - InvalidBufferError: Buffer cannot be sent from
  - SelectionTooLargeError: Selection exceeds the hard limit
  - ClipboardError: Base for clipboard failures
  - ClipboardUnavailableError: No clipboard command installed
  - ClipboardCopyError: Clipboard command failed
"""


class SendToAIError(Exception):
    """Base exception for sendtoai.

    Attributes:
        kind: Error kind reported in DispatchResult.error.
        hint: One-line remedial hint, or None.
    """

    kind = "error"
    hint: str | None = None


class ConfigurationError(SendToAIError):
    """Raised when a configuration value fails validation."""

    kind = "configuration_invalid"

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")


class InvalidBufferError(SendToAIError):
    """Raised for unnamed or special buffers."""

    kind = "invalid_buffer"


class SelectionTooLargeError(SendToAIError):
    """Raised when a selection exceeds max_selection_lines."""

    kind = "selection_too_large"
    hint = "Please select a smaller range."

    def __init__(self, line_count: int, maximum: int):
        self.line_count = line_count
        self.maximum = maximum
        super().__init__(f"Selection too large ({line_count} lines). Maximum is {maximum} lines.")


class ClipboardError(SendToAIError):
    """Base for clipboard failures."""

    kind = "clipboard_copy_failed"


class ClipboardUnavailableError(ClipboardError):
    """Raised when no clipboard command is on PATH."""

    kind = "clipboard_unavailable"
    hint = "Install pbcopy (macOS), xclip, or wl-copy (Linux)."

    def __init__(self, message: str = "No clipboard command found"):
        super().__init__(message)


class ClipboardCopyError(ClipboardError):
    """Raised when the clipboard command fails."""

    kind = "clipboard_copy_failed"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Clipboard copy failed: {reason}")
