"""Settings command - show the effective configuration."""

from dataclasses import asdict
from typing import Any

from replkit2.textkit import markdown

from ..app import app
from ..clipboard import detect_clipboard_command
from ..config import find_config_file
from ..errors import ConfigurationError
from ._errors import error_response


@app.command(
    display="markdown",
    typer={"name": "config", "help": "Show the effective configuration"},
    fastmcp={"type": "resource", "mime_type": "text/markdown", "description": "Effective sendtoai configuration"},
)
def settings(state) -> dict[str, Any]:
    """Show configuration values and where they came from."""
    try:
        config = state.config
    except ConfigurationError as e:
        return error_response(f"Configuration error: {e}", hint="Fix the value in sendtoai.toml")

    builder = markdown().heading("sendtoai configuration", level=2)

    source = find_config_file()
    builder.text(f"**Source:** `{source}`" if source else "**Source:** defaults")

    for key, value in asdict(config).items():
        if isinstance(value, (list, tuple)):
            value = ", ".join(value)
        builder.text(f"**{key}:** {value}")

    clipboard = detect_clipboard_command()
    if clipboard is None:
        builder.element("alert", message="No clipboard command found, clipboard fallback unavailable", level="warning")
    else:
        builder.text(f"**clipboard:** {clipboard}")

    return builder.build()
