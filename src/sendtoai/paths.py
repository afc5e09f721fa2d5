"""Display path resolution.

PUBLIC API:
  - resolve_path: Display path for a file according to the configured style
  - get_git_root: Repository root for a file, or None
"""

import logging
import os
import subprocess
from typing import Optional, assert_never

from .config import Config
from .types import NO_NAME, PathStyleFallback

logger = logging.getLogger(__name__)


def _normalize(path: str) -> str:
    """Forward slashes only."""
    return path.replace("\\", "/")


def _absolute(filepath: str) -> str:
    try:
        return _normalize(os.path.abspath(filepath))
    except OSError as e:
        # cwd was deleted; a relative path cannot be anchored
        logger.debug(f"Cannot make {filepath} absolute: {e}")
        return filepath


def _cwd_relative(filepath: str) -> str:
    """Relative to cwd when under it, otherwise absolute."""
    abs_path = _absolute(filepath)
    try:
        cwd = _normalize(os.getcwd()).rstrip("/")
    except OSError as e:
        logger.debug(f"No usable cwd: {e}")
        return abs_path
    if abs_path.startswith(cwd + "/"):
        return abs_path[len(cwd) + 1 :]
    return abs_path


def get_git_root(filepath: str, timeout: Optional[float] = 2.0) -> Optional[str]:
    """Get git repository root for a file.

    Args:
        filepath: File path.
        timeout: Seconds to wait for git.

    Returns:
        Slash-normalized root without trailing slash, or None when the file is
        not in a repository or git cannot be run.
    """
    directory = os.path.dirname(_absolute(filepath))

    try:
        result = subprocess.run(
            ["git", "-C", directory, "rev-parse", "--show-toplevel"],
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except (OSError, ValueError, subprocess.TimeoutExpired) as e:
        logger.debug(f"git root lookup failed for {directory}: {e}")
        return None

    if result.returncode != 0:
        return None

    lines = result.stdout.splitlines()
    if not lines or not lines[0].strip():
        return None

    return _normalize(lines[0].strip()).rstrip("/")


def _apply_fallback(filepath: str, fallback: PathStyleFallback) -> str:
    match fallback:
        case "filename_only":
            return os.path.basename(filepath)
        case "cwd_relative":
            return _cwd_relative(filepath)
        case "absolute":
            return _absolute(filepath)
        case _:
            assert_never(fallback)


def _git_relative(filepath: str, config: Config) -> str:
    git_root = get_git_root(filepath, timeout=config.command_timeout)
    if git_root is None:
        logger.debug(f"No git root for {filepath}, using {config.path_style_fallback}")
        return _apply_fallback(filepath, config.path_style_fallback)

    prefix = git_root + "/"
    abs_path = _absolute(filepath)
    if abs_path.startswith(prefix):
        return abs_path[len(prefix) :]

    # git reports the resolved root, e.g. /private/var on macOS
    try:
        real_path = _normalize(os.path.realpath(filepath))
    except (OSError, ValueError):
        real_path = abs_path
    if real_path.startswith(prefix):
        return real_path[len(prefix) :]

    logger.warning(f"{abs_path} is not under git root {git_root}")
    return abs_path


def resolve_path(filepath: Optional[str], config: Config) -> str:
    """Resolve file path based on configuration.

    Args:
        filepath: File path from the editor, possibly empty.
        config: Active configuration.

    Returns:
        Display path with forward slashes, or "[No Name]" for an empty path.
    """
    if not filepath:
        return NO_NAME

    filepath = _normalize(filepath)

    style = config.path_style
    match style:
        case "git_relative":
            return _git_relative(filepath, config)
        case "cwd_relative":
            return _cwd_relative(filepath)
        case "absolute":
            return _absolute(filepath)
        case _:
            assert_never(style)
