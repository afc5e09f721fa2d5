"""sendtoai commands."""

from .send import location, code
from .panes import panes
from .settings import settings

__all__ = ["location", "code", "panes", "settings"]
