"""Main CLI entry point for sdt-analysis.

Two-pass argument parsing:
  1. First pass: extract global flags (--verbose, --quiet, --show, --config)
  2. Second pass: parse the command keyword

Global flags can appear before OR after the command:
  sdt-analysis -vv solve
  sdt-analysis solve -vv

The keyword is resolved with parse_command() rather than argparse
choices, so an unknown keyword is reported with the list of available
commands and exit code 2.
"""

import argparse
import sys

from sdt_analysis._version import BASE_VERSION, VERSION
from sdt_analysis.options import COMMAND_KEYWORDS, make_options, parse_command


EXIT_UNKNOWN_COMMAND = 2


# ---------------------------------------------------------------------------
# Global flags (may precede or follow the command)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = [
    (("--verbose", "-v"), {"action": "count", "default": 0,
                           "help": "Increase verbosity (-v, -vv, -vvv)"}),
    (("--quiet", "-Q"), {"action": "count", "default": 0,
                         "help": "Decrease verbosity (-Q, -QQ, -QQQ, -QQQQ=silent)"}),
    (("--show",), {"nargs": "?", "action": "append", "metavar": "CHANNEL[:LEVEL]",
                   "help": "Show output channel (bare --show lists channels)"}),
    (("--config",), {"metavar": "PATH", "default": None,
                     "help": "Global config file "
                             "(default: ~/.sdt-analysis/config.json)"}),
]


def _add_global_flags(parser):
    for names, kwargs in GLOBAL_FLAGS:
        parser.add_argument(*names, **kwargs)


def _extract_global_flags(argv):
    """First pass: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False)
    _add_global_flags(global_parser)
    return global_parser.parse_known_args(argv)


def _build_parser():
    """Build the second-pass parser for the command keyword."""
    parser = argparse.ArgumentParser(
        prog="sdt-analysis",
        description="sdt-analysis — dump or solve SDT constraints",
        epilog=(
            "Commands:\n"
            "  dump              Dump the constraints of a fresh analysis\n"
            "  solve             Solve the constraints of a fresh analysis\n"
            "  dump-persisted    Dump previously stored constraints\n"
            "  solve-persisted   Solve previously stored constraints\n"
            "\n"
            "Global flags (-v, -Q, --show, --config) can appear\n"
            "before or after the command."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"sdt-analysis {BASE_VERSION} ({VERSION})",
    )
    # Listed for --help only; the first pass has already consumed them
    _add_global_flags(parser)
    parser.add_argument("command", metavar="COMMAND",
                        help="One of: " + ", ".join(COMMAND_KEYWORDS))
    return parser


def _report_unknown_command(keyword):
    from sdt_analysis.lib.log_lib import get_output
    from sdt_analysis.output import print_error

    print_error(f"Unrecognized command: {keyword!r}")
    get_output().hint('command.available', 'error',
                      commands=", ".join(COMMAND_KEYWORDS))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for the sdt-analysis CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success, 2 = unrecognized command).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    try:
        return _run(global_args, remaining)
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130


def _run(global_args, remaining):
    """Everything after the global flag pass: output setup, config, dispatch."""
    from sdt_analysis.channels import configure_channels
    from sdt_analysis.lib.log_lib import format_channel_list, init_output
    configure_channels()

    # Bare --show lists channels and exits
    if global_args.show and None in global_args.show:
        print(format_channel_list())
        return 0

    channels = [s for s in (global_args.show or []) if s is not None]
    try:
        out = init_output(
            verbosity=global_args.verbose - global_args.quiet,
            channels=channels,
        )
    except ValueError as e:
        print(f"sdt-analysis: error: {e}", file=sys.stderr)
        return 2
    import sdt_analysis.hints  # noqa: F401  (registers hints)

    from sdt_analysis.config import resolve_verbosity
    out.verbosity = resolve_verbosity(global_args)

    # Pass 2: the command keyword
    parser = _build_parser()
    if not remaining:
        parser.print_help()
        return 0
    args = parser.parse_args(remaining)

    command = parse_command(args.command)
    if command is None:
        _report_unknown_command(args.command)
        return EXIT_UNKNOWN_COMMAND

    options = make_options(command, out.verbosity)
    out.emit(2, "  [command] {kw} -> {name}, verbosity={v}", channel='command',
             kw=command.keyword, name=command.name, v=options.verbosity)
    if command.persisted:
        out.hint('command.persisted', 'verbose', keyword=command.keyword)

    from sdt_analysis.dispatch import dispatch
    return dispatch(options)


if __name__ == "__main__":
    sys.exit(main())
