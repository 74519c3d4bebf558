"""
aegraph CLI entry point.

Usage:
    python -m aegraph.cli show "<graph>"
    python -m aegraph.cli moves "<graph>"
    python -m aegraph.cli apply <rule> "<graph>" <path>
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
