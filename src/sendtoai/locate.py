"""AI pane discovery.

Pane detection is a fresh tmux query on every call; nothing is cached.

PUBLIC API:
  - expand_process_names: Configured names plus their symlink targets
  - pane_matches: Whether a pane runs one of the names
  - list_ai_panes: All matching panes in listing order
  - locate_ai_pane: Pick the pane to send to
"""

import logging
import os
import shutil
from typing import Callable, Iterable, List, Optional

from .config import Config
from .tmux import get_current_session, is_in_tmux, list_panes
from .tmux.exceptions import NoAIPaneError, NoPanesError, NotInTmuxError
from .types import PaneDescriptor

logger = logging.getLogger(__name__)

type Notify = Callable[[str], None]


def _resolve_symlink_name(name: str) -> Optional[str]:
    """Base name of the binary a PATH entry links to, one level deep."""
    found = shutil.which(name)
    if not found or not os.path.islink(found):
        return None

    try:
        target = os.readlink(found)
    except OSError as e:
        logger.debug(f"Could not read link {found}: {e}")
        return None

    return os.path.basename(target.rstrip("/\\")) or None


def expand_process_names(patterns: Iterable[str]) -> List[str]:
    """Expand process patterns with the real names of symlinked binaries.

    A tool installed as `claude -> versions/2.0.1` shows up in tmux as
    `2.0.1`, so the link target joins the match set.

    Returns:
        Lowercased, de-duplicated names in configuration order, each
        pattern followed by its discovered target.
    """
    names: List[str] = []
    for pattern in patterns:
        lowered = pattern.lower()
        if lowered not in names:
            names.append(lowered)

    base_count = len(names)
    for pattern in list(names):
        target = _resolve_symlink_name(pattern)
        if target is None:
            continue
        target = target.lower()
        if target not in names:
            logger.debug(f"Resolved {pattern} -> {target}")
            names.append(target)

    if len(names) == base_count:
        logger.debug(f"No symlinked binaries found for {', '.join(names)}")

    return names


def pane_matches(pane: PaneDescriptor, names: Iterable[str]) -> bool:
    """Case-insensitive substring match on command or title."""
    command = pane.command.lower()
    title = pane.title.lower()
    return any(name in command or name in title for name in names)


def list_ai_panes(config: Config) -> List[PaneDescriptor]:
    """List all panes running a configured AI process.

    Raises:
        NotInTmuxError: If $TMUX is not set.
        NoPanesError: If tmux cannot list panes.
    """
    if not is_in_tmux():
        raise NotInTmuxError()

    panes = list_panes(timeout=config.command_timeout)
    if not panes:
        raise NoPanesError()

    names = expand_process_names(config.ai_processes)
    return [pane for pane in panes if pane_matches(pane, names)]


def locate_ai_pane(config: Config, notify: Optional[Notify] = None) -> PaneDescriptor:
    """Find the AI pane to send to.

    Prefers the first match in the current session when `prefer_session` is
    set, otherwise takes the first match in tmux listing order.

    Args:
        config: Active configuration.
        notify: Called with an informational notice when several panes match.

    Raises:
        NotInTmuxError: If $TMUX is not set.
        NoPanesError: If tmux cannot list panes.
        NoAIPaneError: If no pane matches.
    """
    if not is_in_tmux():
        raise NotInTmuxError()

    current_session = None
    if config.prefer_session:
        current_session = get_current_session(timeout=config.command_timeout)

    ai_panes = list_ai_panes(config)
    if not ai_panes:
        raise NoAIPaneError()

    if current_session is not None:
        for pane in ai_panes:
            if pane.session == current_session:
                return pane

    selected = ai_panes[0]

    if len(ai_panes) > 1:
        notice = f"Multiple AI panes found. Using {selected.pane_id} ({selected.command})"
        logger.info(notice)
        if notify:
            notify(notice)

    return selected
