# Path: drivedb/process/resolver/engine/drive_resolver.py
"""
Drive Resolver

Finds the rule set entry for a drive's IDENTIFY model string and merges
its attribute overrides onto the DEFAULT baseline.

Resolution is a single pass over the rule set in stored order:
    1. Placeholder rows ($Id...) are skipped.
    2. A DEFAULT row becomes the working baseline (copied).
    3. The first other row whose pattern matches is merged onto the
       baseline and ends the scan.

The rule set is never modified; every call works on its own copy of the
baseline.
"""

from typing import Union

from ....constants import IDENTITY_ENCODING
from ....core.logger.ipo_logging import get_process_logger
from ..models.drive_model import AttributeOverride, ModelDefinition
from ..models.resolved_model import ResolvedModel
from ..models.rule_set import RuleSet


logger = get_process_logger('drive_resolver')


def normalize_identity(identity: Union[bytes, bytearray, str, None]) -> str:
    """
    Turn an IDENTIFY buffer into text for pattern matching.

    Bytes are decoded as UTF-8 like the rule file's patterns. Invalid
    sequences are replaced with U+FFFD, so any buffer decodes.
    """
    if identity is None:
        return ''
    if isinstance(identity, (bytes, bytearray)):
        return bytes(identity).decode(IDENTITY_ENCODING, errors='replace')
    return str(identity)


def merge_presets(
    baseline: dict[str, AttributeOverride],
    overrides: dict[str, AttributeOverride]
) -> None:
    """
    Apply model overrides onto a working baseline, in place.

    Some definitions change only the conv of an attribute and leave the
    name empty; those keep the baseline's name.

    Args:
        baseline: Working copy owned by the caller
        overrides: Overrides of the matched definition
    """
    for attr_id, preset in overrides.items():
        existing = baseline.get(attr_id)
        if existing is not None and not preset.name:
            preset = AttributeOverride(conv=preset.conv, name=existing.name)
        baseline[attr_id] = preset


def resolve_drive(
    rule_set: RuleSet,
    identity: Union[bytes, bytearray, str, None]
) -> ResolvedModel:
    """
    Resolve the attribute rules for one drive.

    Args:
        rule_set: Ordered rule set
        identity: IDENTIFY model string (bytes or str)

    Returns:
        New ResolvedModel. With no match it holds only the baseline
        presets and an empty family.
    """
    model_string = normalize_identity(identity)
    resolved = ResolvedModel()

    for definition in rule_set:
        if definition.is_placeholder:
            continue

        if definition.is_default:
            resolved.presets = dict(definition.presets)
            continue

        if definition.matches(model_string):
            _apply_match(resolved, definition)
            logger.debug(
                f"Matched '{model_string.strip()}' to family '{definition.family}'"
            )
            return resolved

    logger.debug(f"No model-specific rules for '{model_string.strip()}'")
    return resolved


def _apply_match(resolved: ResolvedModel, definition: ModelDefinition) -> None:
    """Copy the matched definition's metadata and merge its presets."""
    resolved.family = definition.family
    resolved.model_regex = definition.model_regex
    resolved.compiled_regex = definition.compiled_regex
    resolved.firmware_regex = definition.firmware_regex
    resolved.warning = definition.warning
    merge_presets(resolved.presets, definition.presets)


__all__ = ['resolve_drive', 'merge_presets', 'normalize_identity']
