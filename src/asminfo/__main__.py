"""
Entry point for running asminfo as a module.

Usage:
    python -m asminfo CONFIG [options]
"""

import sys

from asminfo.cli import main

if __name__ == "__main__":
    sys.exit(main())
