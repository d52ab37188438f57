"""Allow running as ``python -m bmichecker``."""

import sys

from bmichecker.cli import main

if __name__ == "__main__":
    sys.exit(main())
