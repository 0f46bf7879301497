# Path: drivedb/core/__init__.py
"""
drivedb Core Package

Core utilities for the drive database.

Submodules:
    - logger: IPO-aware logging system
"""

from .logger import setup_ipo_logging

__all__ = [
    'setup_ipo_logging',
]
