"""Entry point for running Monkey as a module.

Usage:
    python -m monkey repl
"""

import sys

from monkey.cli import main

if __name__ == "__main__":
    sys.exit(main())
