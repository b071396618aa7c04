"""Entry point for ``python -m generate_summary``."""

import sys

from generate_summary.cli import main

if __name__ == "__main__":
    sys.exit(main())
