# Path: drivedb/__init__.py
"""
drivedb - Drive Rule Database

Resolves a drive's IDENTIFY model string to the SMART attribute decoding
rules that apply to it, merging model-specific overrides onto the
DEFAULT baseline.

Data Flow:
    INPUT:   YAML rule file (loaders)
    PROCESS: Model lookup and preset merge (process.resolver)
    OUTPUT:  ResolvedModel / CLI report (main)

Example:
    from drivedb import DriveDatabase

    db = DriveDatabase.open('/etc/drivedb/drivedb.yaml')
    model = db.lookup_drive(b'ST3000DM001-9YN166')
    print(model.family, model.get_preset(9))
"""

# Import order matters: models first, then the loaders and dictionary
# built on them, then the database that uses all three.
from .process.resolver import (
    AttributeOverride,
    ModelDefinition,
    RuleSet,
    ResolvedModel,
    resolve_drive,
)
from .loaders import RuleSetLoader, RuleSetFormatError, open_rule_set
from .dictionary import default_rule_set
from .process.resolver.engine.drive_database import DriveDatabase

__version__ = '0.1.0'

__all__ = [
    'AttributeOverride',
    'ModelDefinition',
    'RuleSet',
    'ResolvedModel',
    'resolve_drive',
    'RuleSetLoader',
    'RuleSetFormatError',
    'open_rule_set',
    'default_rule_set',
    'DriveDatabase',
]
