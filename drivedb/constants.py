# Path: drivedb/constants.py
"""
System-Wide Constants for drivedb

Central repository for constant values used across the system.
NO HARDCODED VALUES in module code - all constants defined here.

Constants are organized by category:
- Structural Keywords
- Rule File Keys
- Logging Layers
- Status Codes
- File Names
"""

from enum import Enum
from typing import Final


# ==============================================================================
# STRUCTURAL KEYWORDS
# ==============================================================================

# Family value of the baseline entry
DEFAULT_FAMILY: Final[str] = 'DEFAULT'

# Rows left behind by version-control keyword substitution ($Id$)
PLACEHOLDER_PREFIX: Final[str] = '$Id'

# Encoding used to turn an IDENTIFY buffer into text (invalid bytes become U+FFFD)
IDENTITY_ENCODING: Final[str] = 'utf-8'


# ==============================================================================
# RULE FILE KEYS
# ==============================================================================

# Top-level key holding the list of drive records
DRIVES_KEY: Final[str] = 'drives'


# ==============================================================================
# LOGGING LAYERS
# ==============================================================================

class LogCategory(str, Enum):
    """
    IPO logging layers.

    INPUT: rule file loading
    PROCESS: drive resolution
    OUTPUT: reporting (CLI)
    """
    INPUT = 'input'
    PROCESS = 'process'
    OUTPUT = 'output'


# ==============================================================================
# STATUS CODES
# ==============================================================================

# ASCII-only status markers for console output
STATUS_OK: Final[str] = '[OK]'
STATUS_FAIL: Final[str] = '[FAIL]'
STATUS_WARN: Final[str] = '[WARN]'
STATUS_INFO: Final[str] = '[INFO]'

MENU_HEADER: Final[str] = '=' * 60
MENU_SEPARATOR: Final[str] = '-' * 60


# ==============================================================================
# FILE NAMES
# ==============================================================================

ENV_FILE: Final[str] = '.env'
FULL_ACTIVITY_LOG: Final[str] = 'full_activity.log'
SAMPLE_RULES_FILE: Final[str] = 'sample_drivedb.yaml'


__all__ = [
    'DEFAULT_FAMILY',
    'PLACEHOLDER_PREFIX',
    'IDENTITY_ENCODING',
    'DRIVES_KEY',
    'LogCategory',
    'STATUS_OK',
    'STATUS_FAIL',
    'STATUS_WARN',
    'STATUS_INFO',
    'MENU_HEADER',
    'MENU_SEPARATOR',
    'ENV_FILE',
    'FULL_ACTIVITY_LOG',
    'SAMPLE_RULES_FILE',
]
