# Path: drivedb/process/resolver/__init__.py
"""
Drive Resolver - Model Lookup and Preset Merge

Maps a drive's IDENTIFY model string to the SMART attribute decoding
rules that apply to it.

Core Components:
    - DriveDatabase (engine.drive_database): Holds the current rule set
    - resolve_drive: The lookup-and-merge pass
    - Models: AttributeOverride, ModelDefinition, RuleSet, ResolvedModel

Key Principle:
    Precedence is position. The first matching definition wins and its
    overrides are merged onto a copy of the DEFAULT baseline.

Example:
    from drivedb import DriveDatabase

    db = DriveDatabase.open('/etc/drivedb/drivedb.yaml')
    model = db.lookup_drive(b'ST3000DM001-9YN166')
    model.get_preset(190)
"""

from .engine import resolve_drive
from .models import (
    AttributeOverride,
    ModelDefinition,
    RuleSet,
    ResolvedModel,
)

__all__ = [
    'resolve_drive',
    'AttributeOverride',
    'ModelDefinition',
    'RuleSet',
    'ResolvedModel',
]
