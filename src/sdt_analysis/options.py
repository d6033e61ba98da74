"""Analysis command resolution and the options value handed to the pipeline.

The four commands cover two axes, dump vs. solve and transient vs.
persisted::

    dump              DUMP_CONSTRAINTS
    solve             SOLVE_CONSTRAINTS
    dump-persisted    DUMP_PERSISTED_CONSTRAINTS
    solve-persisted   SOLVE_PERSISTED_CONSTRAINTS

Keywords match verbatim: no case folding, no trimming. Anything else
resolves to None, which callers report as an unrecognized command.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class Command(Enum):
    """The analysis action requested on the command line."""

    DUMP_CONSTRAINTS = "dump"
    SOLVE_CONSTRAINTS = "solve"
    DUMP_PERSISTED_CONSTRAINTS = "dump-persisted"
    SOLVE_PERSISTED_CONSTRAINTS = "solve-persisted"

    @property
    def keyword(self) -> str:
        return self.value

    @property
    def persisted(self) -> bool:
        return self in (Command.DUMP_PERSISTED_CONSTRAINTS,
                        Command.SOLVE_PERSISTED_CONSTRAINTS)


# Declaration order, used when listing the available commands
COMMAND_KEYWORDS = tuple(c.value for c in Command)

_BY_KEYWORD = {c.value: c for c in Command}


def parse_command(keyword: str) -> Optional[Command]:
    """Resolve a command keyword, or return None when it is not one of ours."""
    return _BY_KEYWORD.get(keyword)


@dataclass(frozen=True)
class Options:
    """Resolved command plus the verbosity the pipeline should run with.

    ``verbosity`` is passed through untouched; its meaning belongs to the
    consumer.
    """
    command: Command
    verbosity: Any


def make_options(command: Command, verbosity: Any) -> Options:
    """Bundle an already-resolved command with a verbosity level."""
    return Options(command=command, verbosity=verbosity)
