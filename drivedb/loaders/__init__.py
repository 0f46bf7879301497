# Path: drivedb/loaders/__init__.py
"""
drivedb Loaders Package

INPUT layer: reads the external YAML rule file into a RuleSet.

Example:
    from drivedb.loaders import open_rule_set

    rule_set = open_rule_set('/etc/drivedb/drivedb.yaml')
"""

from .ruleset_loader import RuleSetLoader, RuleSetFormatError, open_rule_set

__all__ = [
    'RuleSetLoader',
    'RuleSetFormatError',
    'open_rule_set',
]
