"""
OutputManager — the THAC0 verbosity system core.

A message shows when ``message.level <= threshold``, where the threshold
is the channel's override if one is set, otherwise the global verbosity.
A threshold of -4 or below is the hard wall: nothing is printed.

    -v increments, -Q decrements. They compose: -vv -Q = 1

    --show config:2   pins the config channel to threshold 2
"""

import sys
from typing import Any, Dict, Iterable, Optional, Set, TextIO

from . import channels as _channels
from .hints import get_hint


HARD_WALL = -4


class OutputManager:
    """Verbosity-gated writer with per-channel thresholds.

    Output goes to ``file`` (stderr unless given). Hints are remembered
    once shown so each appears at most once per session.

    Usage::

        out = OutputManager(verbosity=1)
        out.emit(2, "Loaded {path}", channel='config', path=p)
        out.hint('command.available', 'error', commands="dump, solve")
        out.error("Something went wrong")
    """

    def __init__(
        self,
        verbosity: int = 0,
        channel_overrides: Optional[Dict[str, int]] = None,
        file: Optional[TextIO] = None,
    ):
        self.verbosity = verbosity
        self.channel_overrides: Dict[str, int] = dict(channel_overrides or {})
        self.file = file if file is not None else sys.stderr
        self._shown_hints: Set[str] = set()

    def threshold(self, channel: str) -> int:
        """Effective threshold for a channel."""
        return self.channel_overrides.get(channel, self.verbosity)

    def emit(self, level: int, message: str, *,
             channel: str = 'general', **kwargs: Any) -> None:
        """Print ``message`` (formatted with kwargs) if the channel allows ``level``."""
        threshold = self.threshold(channel)
        if threshold <= HARD_WALL or level > threshold:
            return
        text = message.format(**kwargs) if kwargs else message
        print(text, file=self.file)

    def hint(self, hint_id: str, context: str = 'result', **kwargs: Any) -> None:
        """Show a registered hint once, if it applies to ``context``.

        Unknown hint IDs are ignored. The hint's min_level is checked
        against the 'hint' channel threshold.
        """
        if hint_id in self._shown_hints:
            return
        h = get_hint(hint_id)
        if h is None or context not in h.context:
            return

        threshold = self.threshold('hint')
        if threshold <= HARD_WALL or h.min_level > threshold:
            return

        text = h.message.format(**kwargs) if kwargs else h.message
        print(text, file=self.file)
        self._shown_hints.add(hint_id)

    def error(self, message: str) -> None:
        """Emit at level -3 on the error channel (silenced only by the hard wall)."""
        self.emit(-3, message, channel='error')

    def channel_active(self, channel: str) -> bool:
        """True if a level-0 message on ``channel`` would be shown."""
        threshold = self.threshold(channel)
        return threshold > HARD_WALL and threshold >= 0

    @property
    def shown_hints(self) -> Set[str]:
        return self._shown_hints.copy()


# =============================================================================
# Module-level singleton
# =============================================================================

_manager: Optional[OutputManager] = None


def init_output(verbosity: int = 0,
                channels: Optional[Iterable[str]] = None,
                file: Optional[TextIO] = None) -> OutputManager:
    """Create the module-level OutputManager.

    Call once at startup after the CLI flags are parsed.

    Args:
        verbosity: THAC0 level (0 default, positive louder, negative quieter)
        channels: Channel specs from --show (e.g. ['config:2', 'dispatch'])
        file: Destination stream (default stderr)

    Raises:
        ValueError: if a channel spec is malformed.
    """
    global _manager

    overrides = {ch: -1 for ch in _channels.OPT_IN_CHANNELS}
    for spec in channels or ():
        cfg = _channels.parse_channel_spec(spec)
        overrides[cfg.name] = cfg.level

    _manager = OutputManager(
        verbosity=verbosity,
        channel_overrides=overrides,
        file=file,
    )
    return _manager


def get_output() -> OutputManager:
    """Return the module-level OutputManager, creating a default one if needed."""
    global _manager
    if _manager is None:
        _manager = OutputManager()
    return _manager
