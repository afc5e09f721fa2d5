"""Configuration management for sendtoai.

Defaults merged with overrides from sendtoai.toml (nearest in cwd or its
parents) or ~/.config/sendtoai/config.toml, then explicit overrides.

PUBLIC API:
  - Config: Immutable configuration record
  - DEFAULTS: Default configuration values
  - load_config: Build a validated Config
  - validate_overrides: Validate a dict of user overrides
  - find_config_file: Locate the config file in use
"""

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional
import tomllib

from .errors import ConfigurationError
from .types import PATH_STYLES, PATH_STYLE_FALLBACKS, PathStyle, PathStyleFallback

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "sendtoai.toml"


@dataclass(frozen=True)
class Config:
    """Immutable configuration, built once and passed to every component."""

    ai_processes: tuple[str, ...] = ("claude", "codex", "opencode")
    prefer_session: bool = True
    fallback_clipboard: bool = True
    path_style: PathStyle = "git_relative"
    path_style_fallback: PathStyleFallback = "filename_only"
    max_selection_lines: int = 10000
    warn_selection_lines: int = 5000
    command_timeout: float = 2.0


DEFAULTS = Config()
_FIELD_NAMES = {f.name for f in fields(Config)}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_overrides(overrides: Mapping[str, Any]) -> None:
    """Validate user overrides before merging.

    Raises:
        ConfigurationError: On the first invalid field.
    """
    for key in overrides:
        if key not in _FIELD_NAMES:
            raise ConfigurationError(key, f"unknown option. Valid options: {', '.join(sorted(_FIELD_NAMES))}")

    if "path_style" in overrides and overrides["path_style"] not in PATH_STYLES:
        raise ConfigurationError(
            "path_style",
            f"'{overrides['path_style']}'. Must be one of: {', '.join(PATH_STYLES)}",
        )

    if "path_style_fallback" in overrides and overrides["path_style_fallback"] not in PATH_STYLE_FALLBACKS:
        raise ConfigurationError(
            "path_style_fallback",
            f"'{overrides['path_style_fallback']}'. Must be one of: {', '.join(PATH_STYLE_FALLBACKS)}",
        )

    if "ai_processes" in overrides:
        processes = overrides["ai_processes"]
        if isinstance(processes, str) or not isinstance(processes, (list, tuple)):
            raise ConfigurationError("ai_processes", "must be a list of strings")
        if not processes:
            raise ConfigurationError("ai_processes", "cannot be empty. Provide at least one AI process name.")
        for i, process in enumerate(processes):
            if not isinstance(process, str):
                raise ConfigurationError(f"ai_processes[{i}]", f"must be a string, got {type(process).__name__}")
            if not process.strip():
                raise ConfigurationError(f"ai_processes[{i}]", "must not be empty")

    for key in ("prefer_session", "fallback_clipboard"):
        if key in overrides and not isinstance(overrides[key], bool):
            raise ConfigurationError(key, "must be true or false")

    if "max_selection_lines" in overrides:
        value = overrides["max_selection_lines"]
        if not _is_int(value) or value <= 0:
            raise ConfigurationError("max_selection_lines", "must be a positive number")

    if "warn_selection_lines" in overrides:
        value = overrides["warn_selection_lines"]
        if not _is_int(value) or value < 0:
            raise ConfigurationError("warn_selection_lines", "must be a non-negative number")

    if "command_timeout" in overrides:
        value = overrides["command_timeout"]
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ConfigurationError("command_timeout", "must be a positive number of seconds")


def find_config_file() -> Optional[Path]:
    """Find sendtoai.toml in current or parent directories, then the user config dir."""
    current = Path.cwd()

    for parent in [current] + list(current.parents):
        config_file = parent / CONFIG_FILENAME
        if config_file.exists():
            return config_file

    config_home = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    user_file = Path(config_home) / "sendtoai" / "config.toml"
    if user_file.exists():
        return user_file

    return None


def _load_file(path: Optional[Path] = None) -> dict:
    """Load raw overrides from a TOML file.

    Keys may sit at the top level or under a [sendtoai] table.
    """
    if path is None:
        path = find_config_file()

    if path is None or not path.exists():
        return {}

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(str(path), f"not valid TOML: {e}") from e

    logger.debug(f"Loaded configuration from {path}")
    section = data.get("sendtoai")
    return dict(section) if isinstance(section, dict) else data


def load_config(overrides: Optional[Mapping[str, Any]] = None, path: Optional[Path] = None) -> Config:
    """Build a validated Config from defaults, the config file and overrides.

    Args:
        overrides: Explicit overrides, applied last.
        path: Config file to read instead of searching for one.

    Raises:
        ConfigurationError: If any value is invalid.
    """
    merged: dict[str, Any] = {}

    file_values = _load_file(path)
    validate_overrides(file_values)
    merged.update(file_values)

    if overrides:
        validate_overrides(overrides)
        merged.update(overrides)

    if "ai_processes" in merged:
        merged["ai_processes"] = tuple(merged["ai_processes"])

    # A lowered max pulls the default warn threshold down with it
    if "warn_selection_lines" not in merged and "max_selection_lines" in merged:
        merged["warn_selection_lines"] = min(DEFAULTS.warn_selection_lines, merged["max_selection_lines"])

    config = replace(DEFAULTS, **merged)

    if config.warn_selection_lines > config.max_selection_lines:
        raise ConfigurationError(
            "warn_selection_lines",
            f"must not exceed max_selection_lines ({config.max_selection_lines})",
        )

    return config
