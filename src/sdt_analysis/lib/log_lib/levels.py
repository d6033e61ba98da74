"""
THAC0 verbosity level constants.

Informational only: the manager works on raw integers. The emit rule:

    message.level <= threshold  ->  message is shown

    <-- quieter ---------- default ---------- louder -->
    -4    -3     -2       -1      0       1      2      3
    wall  errors warnings minimal default timing config debug
"""

# Positive levels (-v, -vv, -vvv)
DEBUG = 3
CONFIG = 2
TIMING = 1
DEFAULT = 0

# Negative levels (-Q, -QQ, -QQQ, -QQQQ)
MINIMAL = -1       # suppress hints
WARNING = -2       # warnings and errors
ERROR = -3         # errors only
NOTHING = -4       # hard wall, exit code only
