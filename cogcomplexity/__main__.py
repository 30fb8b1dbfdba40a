"""
Entry point for running the analyzer as a module.

Usage:
    python -m cogcomplexity analyze ./src
    python -m cogcomplexity --help
"""

import sys
from cogcomplexity.cli import main

if __name__ == "__main__":
    sys.exit(main())
