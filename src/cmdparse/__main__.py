"""Entry point for running cmdparse as a module."""

# No try/except here: main() in cli.py is the error boundary for both
# `python -m cmdparse` and the installed console script.

import sys

from cmdparse.cli import main

if __name__ == "__main__":
    sys.exit(main())
