"""Entry point for sendtoai.

With a subcommand (`sendtoai location FILE LINE`) runs it through the CLI,
with --mcp runs the MCP server, otherwise starts the REPL.
"""

import logging
import os
import sys

from .app import app
from .commands.send import enable_stdin_selection

_LOG_LEVELS = {"0": logging.WARNING, "1": logging.INFO, "2": logging.DEBUG}

logging.basicConfig(
    level=_LOG_LEVELS.get(os.environ.get("SENDTOAI_DEBUG", "0"), logging.WARNING),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)

CLI_SUBCOMMANDS = {"location", "code", "panes", "config"}


def main():
    """Run sendtoai as CLI, MCP server or REPL based on arguments.

    - Subcommand: runs that command and exits (editor integration)
    - --mcp: runs as MCP server
    - Otherwise: interactive REPL
    """
    if len(sys.argv) > 1 and sys.argv[1] in CLI_SUBCOMMANDS:
        enable_stdin_selection()
        app.cli()
    elif "--mcp" in sys.argv:
        app.mcp.run()
    else:
        app.run(title="sendtoai - Send code to AI panes")


if __name__ == "__main__":
    main()
