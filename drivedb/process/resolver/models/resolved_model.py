# Path: drivedb/process/resolver/models/resolved_model.py
"""
Resolved Model

Result of looking up a drive: the matched definition's metadata plus the
baseline presets merged with the matched definition's overrides.
"""

import re
from dataclasses import dataclass, field
from typing import Optional, Union

from .drive_model import AttributeOverride


@dataclass
class ResolvedModel:
    """
    Attribute rules that apply to one drive.

    Attributes:
        family: Matched family name ('' when only the baseline applied)
        model_regex: Pattern of the matched definition
        firmware_regex: Firmware pattern of the matched definition
        warning: Warning message of the matched definition
        presets: Merged attribute id -> AttributeOverride mapping
        compiled_regex: Compiled pattern of the matched definition
    """
    family: str = ''
    model_regex: str = ''
    firmware_regex: str = ''
    warning: str = ''
    presets: dict[str, AttributeOverride] = field(default_factory=dict)
    compiled_regex: Optional[re.Pattern] = field(default=None, repr=False)

    @property
    def matched(self) -> bool:
        """Whether a model-specific definition matched."""
        return bool(self.family)

    def get_preset(self, attr_id: Union[int, str]) -> Optional[AttributeOverride]:
        """
        Get the rule for one attribute.

        Args:
            attr_id: SMART attribute id (int or str)

        Returns:
            AttributeOverride or None
        """
        return self.presets.get(str(attr_id))

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'family': self.family,
            'model_regex': self.model_regex,
            'firmware_regex': self.firmware_regex,
            'warning': self.warning,
            'presets': {
                attr_id: {'conv': preset.conv, 'name': preset.name}
                for attr_id, preset in self.presets.items()
            },
        }


__all__ = ['ResolvedModel']
