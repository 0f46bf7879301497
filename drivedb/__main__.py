# Path: drivedb/__main__.py
"""
Module entry point for drivedb.

Allows running the package with:
    python -m drivedb --identity "ST3000DM001-9YN166"
"""

import sys

from .main import main

if __name__ == '__main__':
    sys.exit(main())
