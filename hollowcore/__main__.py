"""
Entry point for running hollowcore as a module.

Usage:
    python -m hollowcore calculate --thickness "8''" --span 24 --load 120
    python -m hollowcore serve --port 8000
"""

import sys

from hollowcore.cli.main import cli

if __name__ == "__main__":
    sys.exit(cli())
