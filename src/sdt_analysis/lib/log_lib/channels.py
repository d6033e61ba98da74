"""
Channel registry and spec parsing for the THAC0 verbosity system.

A channel is a named output category that may carry its own threshold,
overriding the global verbosity. Specs come from ``--show``::

    config        # channel at level 0
    config:2      # channel pinned to threshold 2
    error:-3      # negative levels are allowed

The module-level registries hold generic defaults. Applications replace
them at startup with their own channel set.
"""

from dataclasses import dataclass


KNOWN_CHANNELS = {
    'general',      # Default channel
    'hint',         # Hint messages
    'error',        # Error messages
}

CHANNEL_DESCRIPTIONS = {
    'general':  'General output',
    'hint':     'Contextual tips and suggestions',
    'error':    'Error messages',
}

# Channels that stay silent unless enabled with --show (default override -1)
OPT_IN_CHANNELS = set()


@dataclass
class ChannelConfig:
    """A parsed channel spec."""
    name: str
    level: int = 0


def parse_channel_spec(spec: str) -> ChannelConfig:
    """Parse ``NAME[:LEVEL]`` into a ChannelConfig.

    Raises:
        ValueError: if the name is empty or LEVEL is not an integer.
    """
    name, _, level_text = spec.partition(':')
    name = name.strip()
    if not name:
        raise ValueError(f"Channel spec has no channel name: {spec!r}")
    level = 0
    if level_text:
        try:
            level = int(level_text)
        except ValueError:
            raise ValueError(
                f"Channel level must be an integer: {spec!r}"
            ) from None
    return ChannelConfig(name=name, level=level)


def format_channel_list() -> str:
    """Format the registered channels for display, opt-in ones marked."""
    lines = ["Available channels:"]
    width = max(len(name) for name in KNOWN_CHANNELS)
    for name in sorted(KNOWN_CHANNELS):
        desc = CHANNEL_DESCRIPTIONS.get(name, '')
        opt_in = " (opt-in)" if name in OPT_IN_CHANNELS else ""
        lines.append(f"  {name:<{width}}  {desc}{opt_in}")
    return "\n".join(lines)
