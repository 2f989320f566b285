"""
Main module entry point.

This allows running a single health evaluation as: python -m src.main
"""

import sys

from .check import main

if __name__ == "__main__":
    sys.exit(main())
