"""Allow ``python -m sdt_analysis``."""

import sys

from sdt_analysis.cli import main

if __name__ == "__main__":
    sys.exit(main())
