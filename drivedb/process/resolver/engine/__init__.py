# Path: drivedb/process/resolver/engine/__init__.py
"""
Resolver Engine

- drive_resolver: single-pass lookup and merge
- drive_database: DriveDatabase, the current rule set holder (import
  from its module)
"""

from .drive_resolver import resolve_drive, merge_presets, normalize_identity

__all__ = [
    'resolve_drive',
    'merge_presets',
    'normalize_identity',
]
