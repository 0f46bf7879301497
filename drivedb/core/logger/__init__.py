# Path: drivedb/core/logger/__init__.py
"""
drivedb Logger Package

IPO-aware logging for the drive database.

Provides separate log streams for:
- INPUT layer (rule file loading)
- PROCESS layer (drive resolution)
- OUTPUT layer (reporting)
"""

from .ipo_logging import (
    IPOFilter,
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'IPOFilter',
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
