"""Entry point for ``python -m doccheck``."""

import sys

from doccheck.cli import main

if __name__ == "__main__":
    sys.exit(main())
