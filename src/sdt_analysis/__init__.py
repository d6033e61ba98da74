"""sdt_analysis — command front end for the SDT constraint analysis.

Resolves the requested analysis command (dump or solve, transient or
persisted) and packages it with a verbosity level for the analysis
pipeline.
"""

from sdt_analysis._version import __version__, __app_name__
from sdt_analysis.options import Command, Options, make_options, parse_command

__all__ = [
    "__version__", "__app_name__",
    "Command", "Options", "make_options", "parse_command",
]
