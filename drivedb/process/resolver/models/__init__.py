# Path: drivedb/process/resolver/models/__init__.py
"""
Resolver Models

Data models for drive resolution:
- AttributeOverride: Decoding rule for one SMART attribute
- ModelDefinition: One rule file entry
- RuleSet: Ordered collection of definitions
- ResolvedModel: Result of a lookup
"""

from .drive_model import AttributeOverride, ModelDefinition
from .rule_set import RuleSet
from .resolved_model import ResolvedModel

__all__ = [
    'AttributeOverride',
    'ModelDefinition',
    'RuleSet',
    'ResolvedModel',
]
