"""
log_lib — THAC0 verbosity system with named channels.

Project-agnostic output management:
- Single-axis THAC0 verbosity (level <= threshold)
- Named output channels with per-channel overrides
- Hint registry with context filtering and per-session dedup

Public API:
    OutputManager      — central coordinator
    init_output        — singleton initialization
    get_output         — access singleton
    Hint               — hint dataclass
    register_hint      — register a hint
    register_hints     — register multiple hints
    get_hint           — look up hint by ID
    ChannelConfig      — parsed channel spec
    parse_channel_spec — parse a NAME[:LEVEL] spec
    format_channel_list — listing for bare --show
"""

from .manager import OutputManager, init_output, get_output
from .hints import (
    Hint, register_hint, register_hints, get_hint, get_hints_by_category,
)
from .channels import (
    ChannelConfig, parse_channel_spec, KNOWN_CHANNELS,
    CHANNEL_DESCRIPTIONS, OPT_IN_CHANNELS, format_channel_list,
)

__all__ = [
    'OutputManager', 'init_output', 'get_output',
    'Hint', 'register_hint', 'register_hints', 'get_hint', 'get_hints_by_category',
    'ChannelConfig', 'parse_channel_spec', 'KNOWN_CHANNELS',
    'CHANNEL_DESCRIPTIONS', 'OPT_IN_CHANNELS', 'format_channel_list',
]
