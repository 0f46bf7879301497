# Path: drivedb/core/logger/ipo_logging.py
"""
IPO-Aware Logging for drivedb

Input-Process-Output separated logging for the drive database.

This module sets up logging with separate files for:
- INPUT layer (rule file loading)
- PROCESS layer (drive resolution, database reloads)
- OUTPUT layer (CLI reporting)
- Full activity (everything combined)
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from ...constants import FULL_ACTIVITY_LOG, LogCategory


class IPOFilter(logging.Filter):
    """Filter logs by IPO layer prefix."""

    def __init__(self, layer: str):
        """
        Initialize filter for specific IPO layer.

        Args:
            layer: 'input', 'process', or 'output'
        """
        super().__init__()
        self.layer = layer

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter records by logger name prefix."""
        return record.name.startswith(self.layer)


def setup_ipo_logging(
    log_dir: Optional[Path] = None,
    log_level: str = 'INFO',
    console_output: bool = True
) -> None:
    """
    Set up IPO-aware logging for drivedb.

    When a log directory is given, creates:
    - input_activity.log (INPUT layer)
    - process_activity.log (PROCESS layer)
    - output_activity.log (OUTPUT layer)
    - full_activity.log (all activities combined)

    Without a log directory only the console handler is installed.

    Args:
        log_dir: Directory for log files, or None for console only
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to also output to console

    Example:
        setup_ipo_logging(
            log_dir=Path('/var/log/drivedb'),
            log_level='INFO',
            console_output=True
        )
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        '[%(asctime)s] [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)

        full_handler = logging.FileHandler(log_dir / FULL_ACTIVITY_LOG)
        full_handler.setLevel(logging.DEBUG)
        full_handler.setFormatter(formatter)
        root_logger.addHandler(full_handler)

        for layer in LogCategory:
            layer_handler = logging.FileHandler(
                log_dir / f'{layer.value}_activity.log'
            )
            layer_handler.setLevel(logging.DEBUG)
            layer_handler.setFormatter(formatter)
            layer_handler.addFilter(IPOFilter(layer.value))
            root_logger.addHandler(layer_handler)

    if console_output:
        # stderr keeps stdout clean for CLI reports
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(
            logging.Formatter('[%(levelname)s] %(name)s - %(message)s')
        )
        root_logger.addHandler(console_handler)


def get_input_logger(name: str) -> logging.Logger:
    """
    Get logger for INPUT layer.

    Args:
        name: Logger name (e.g., 'ruleset_loader')

    Returns:
        Logger configured for INPUT layer
    """
    return logging.getLogger(f'{LogCategory.INPUT.value}.{name}')


def get_process_logger(name: str) -> logging.Logger:
    """
    Get logger for PROCESS layer.

    Args:
        name: Logger name (e.g., 'drive_resolver')

    Returns:
        Logger configured for PROCESS layer
    """
    return logging.getLogger(f'{LogCategory.PROCESS.value}.{name}')


def get_output_logger(name: str) -> logging.Logger:
    """
    Get logger for OUTPUT layer.

    Args:
        name: Logger name (e.g., 'cli')

    Returns:
        Logger configured for OUTPUT layer
    """
    return logging.getLogger(f'{LogCategory.OUTPUT.value}.{name}')


__all__ = [
    'IPOFilter',
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
