"""sdt-analysis channel definitions for the THAC0 verbosity system.

Keeps log_lib itself project-agnostic: this module installs the
channel set used by sdt-analysis.

Usage:
    from sdt_analysis.channels import configure_channels
    configure_channels()   # once, before init_output()
"""

from sdt_analysis.lib.log_lib import channels as _ch


SDT_CHANNELS = {
    'config',       # Configuration file discovery and verbosity resolution
    'command',      # Command keyword resolution and options
    'dispatch',     # Hand-off to the analysis backends
    'general',      # Default channel
    'hint',         # Contextual tips and suggestions
    'error',        # Error messages
}

SDT_CHANNEL_DESCRIPTIONS = {
    'config':   'Configuration file discovery and verbosity resolution',
    'command':  'Command keyword resolution and resulting options',
    'dispatch': 'Hand-off to the analysis backends',
    'general':  'General output',
    'hint':     'Contextual tips and suggestions',
    'error':    'Error messages',
}

SDT_OPT_IN_CHANNELS = set()


def configure_channels():
    """Install the sdt-analysis channel set into log_lib."""
    _ch.KNOWN_CHANNELS = SDT_CHANNELS
    _ch.CHANNEL_DESCRIPTIONS = SDT_CHANNEL_DESCRIPTIONS
    _ch.OPT_IN_CHANNELS = SDT_OPT_IN_CHANNELS
