"""Output helpers for sdt-analysis.

User-facing messages routed through the THAC0 verbosity system:
plain status lines are dropped below -2 (-QQQ and quieter), errors
only at the hard wall (-QQQQ).
"""

from sdt_analysis.lib.log_lib import get_output


def _should_print():
    """Status lines behave like level -2 (WARNING) messages."""
    return get_output().verbosity >= -2


def print_ok(msg):
    """Print a success message."""
    if _should_print():
        print(f"  [OK] {msg}")


def print_warn(msg):
    """Print a warning message."""
    if _should_print():
        print(f"  [WARN] {msg}")


def print_error(msg):
    """Print an error message via OutputManager.error() (stderr, level -3)."""
    get_output().error(f"  ERROR: {msg}")
