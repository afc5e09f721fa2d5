"""sendtoai ReplKit2 application.

Commands are callable from the editor through the CLI, from an MCP client,
or interactively from the REPL.
"""

from dataclasses import dataclass, field
from typing import Optional

from replkit2 import App

from .config import Config, load_config


@dataclass
class SendToAIState:
    """Application state.

    The configuration is loaded on first use and then kept for the life of
    the process.
    """

    _config: Optional[Config] = field(default=None, init=False)

    @property
    def config(self) -> Config:
        """Effective configuration.

        Raises:
            ConfigurationError: If the config file holds an invalid value.
        """
        if self._config is None:
            self._config = load_config()
        return self._config


# Must be created before command imports for decorator registration
app = App(
    "sendtoai",
    SendToAIState,
    uri_scheme="sendtoai",
    fastmcp={
        "description": "Send code locations and selections to an AI pane in tmux",
        "tags": {"editor", "tmux", "ai"},
    },
)


# Command imports trigger @app.command decorator registration
from .commands import send  # noqa: E402, F401
from .commands import panes  # noqa: E402, F401
from .commands import settings  # noqa: E402, F401
