# Path: drivedb/dictionary/__init__.py
"""
Dictionary Module - Built-in Drive Definitions

Holds the built-in DEFAULT attribute table and a sample YAML rule file
showing the rule file layout.

Structure:
    dictionary/
    ├── default_presets.py    # DEFAULT attribute table
    └── sample_drivedb.yaml   # Example rule file

Example:
    from drivedb.dictionary import default_rule_set, SAMPLE_RULES_PATH

    rule_set = open_rule_set(SAMPLE_RULES_PATH).with_defaults(default_rule_set())
"""

from pathlib import Path

from ..constants import SAMPLE_RULES_FILE
from .default_presets import DEFAULT_PRESETS, default_rule_set

# Dictionary root path
DICTIONARY_ROOT = Path(__file__).parent

SAMPLE_RULES_PATH = DICTIONARY_ROOT / SAMPLE_RULES_FILE

__all__ = [
    'DICTIONARY_ROOT',
    'SAMPLE_RULES_PATH',
    'DEFAULT_PRESETS',
    'default_rule_set',
]
