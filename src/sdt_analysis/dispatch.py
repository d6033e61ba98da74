"""Hand-off from resolved Options to the analysis backends.

The dump/solve pipelines live outside this package. A backend registers
one handler per Command::

    from sdt_analysis.dispatch import register_handler
    register_handler(Command.SOLVE_CONSTRAINTS, solve_main)

A handler takes the Options and returns an exit code (None means 0).
"""

from typing import Callable, Dict, Optional

from sdt_analysis.lib.log_lib import get_output
from sdt_analysis.options import Command, Options
from sdt_analysis.output import print_error


Handler = Callable[[Options], Optional[int]]

_HANDLERS: Dict[Command, Handler] = {}


def register_handler(command: Command, handler: Handler) -> None:
    """Install ``handler`` for ``command``, replacing any earlier one."""
    _HANDLERS[command] = handler


def get_handler(command: Command) -> Optional[Handler]:
    return _HANDLERS.get(command)


def clear_handlers() -> None:
    _HANDLERS.clear()


def dispatch(options: Options) -> int:
    """Run the backend registered for ``options.command``.

    Returns the handler's exit code, or 1 when nothing is registered.
    """
    out = get_output()
    handler = get_handler(options.command)
    if handler is None:
        print_error(
            f"No analysis backend registered for '{options.command.keyword}'"
        )
        return 1

    out.emit(1, "  [dispatch] {kw} -> {fn}", channel='dispatch',
             kw=options.command.keyword,
             fn=getattr(handler, "__qualname__", repr(handler)))
    return handler(options) or 0
