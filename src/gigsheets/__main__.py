"""Allow ``python -m gigsheets``."""

import sys

from gigsheets.cli import main

if __name__ == "__main__":
    sys.exit(main())
