"""Markdown responses for sendtoai commands.

PUBLIC API:
  - error_response: Build formatted error responses
  - result_response: Render a DispatchResult
  - table_error_response: Log and return an empty table
"""

import logging
from typing import Any

from replkit2.textkit import markdown

from ..types import DispatchResult

logger = logging.getLogger(__name__)


def error_response(message: str, hint: str | None = None, **kwargs) -> dict:
    """Build consistent error response in markdown.

    Args:
        message: Error message.
        hint: One-line remedial hint. Defaults to None.
        **kwargs: Additional context to add to error response.

    Returns:
        Markdown dict with error formatting.
    """
    builder = markdown().element("alert", message=message, level="error")

    if hint:
        builder.text(f"**How to fix:** {hint}")

    for key, value in kwargs.items():
        if value:
            builder.text(f"_{key}: {value}_")

    return builder.build()


def result_response(result: DispatchResult, notices: list[str] | None = None) -> dict:
    """Render a dispatch outcome as one alert plus any notices.

    Args:
        result: Dispatcher outcome.
        notices: Progress notices collected during dispatch.

    Returns:
        Markdown dict; frontmatter carries status and error kind.
    """
    if result.status == "failed":
        builder = markdown().element("alert", message=result.detail or "Failed", level="error")
        if result.hint:
            builder.text(f"**How to fix:** {result.hint}")
    elif result.status == "sent_to_clipboard":
        message = "Pane send failed, copied to clipboard" if result.after_send_failure else "Copied to clipboard"
        builder = markdown().element("alert", message=message, level="warning")
        if result.detail:
            builder.text(result.detail)
    else:
        builder = markdown().element("alert", message=result.detail or "Sent", level="success")

    if result.warning:
        builder.element("alert", message=result.warning, level="warning")

    if notices:
        builder.list(notices)

    response = builder.build()
    response["frontmatter"] = {
        "status": result.status,
        "error": result.error,
        "pane": result.pane.pane_id if result.pane else None,
    }
    return response


def table_error_response(message: str) -> list[dict[str, Any]]:
    """Create error response for table display commands.

    Args:
        message: The error message (will be logged)

    Returns:
        Empty list (tables show nothing on error)
    """
    logger.warning(f"Command failed: {message}")
    return []
