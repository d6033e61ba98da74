"""sdt-analysis hints for the THAC0 verbosity system.

Import this module to register the hints with the global registry.
"""

from sdt_analysis.lib.log_lib import Hint, register_hints


register_hints(
    Hint(
        id='command.available',
        message='  Available commands: {commands}',
        context={'error'},
        min_level=-1,
        category='command',
    ),
    Hint(
        id='command.persisted',
        message=('  Note: {keyword} works on previously stored constraint '
                 'state, not on a fresh analysis.'),
        context={'verbose'},
        min_level=1,
        category='command',
    ),
)
