"""Shared fixtures for sendtoai tests."""

import pytest

from sendtoai import clipboard
from sendtoai.config import Config


@pytest.fixture
def config():
    """Default configuration."""
    return Config()


@pytest.fixture
def in_tmux(monkeypatch):
    """Pretend we run inside a tmux client."""
    monkeypatch.setenv("TMUX", "/tmp/tmux-1000/default,1234,0")


@pytest.fixture
def not_in_tmux(monkeypatch):
    monkeypatch.delenv("TMUX", raising=False)


@pytest.fixture(autouse=True)
def clear_clipboard_cache():
    clipboard._cached_command.cache_clear()
    yield
    clipboard._cached_command.cache_clear()
