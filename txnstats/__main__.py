"""Entry point for ``python -m txnstats``."""

import sys

from txnstats.cli import main

if __name__ == "__main__":
    sys.exit(main())
