# Path: drivedb/process/resolver/models/drive_model.py
"""
Drive Model Definitions

Pydantic models representing drive definitions loaded from the YAML
rule file. A definition describes which drives it applies to (by model
string pattern) and how their SMART attributes should be decoded.
"""

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from ....constants import DEFAULT_FAMILY, PLACEHOLDER_PREFIX


def _coerce_text(value: Any) -> Any:
    """YAML nulls become empty strings, booleans and numbers become text."""
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


# =============================================================================
# ATTRIBUTE OVERRIDE
# =============================================================================

class AttributeOverride(BaseModel):
    """How one numbered SMART attribute is decoded and labeled."""
    model_config = ConfigDict(frozen=True)

    conv: str = Field(
        default='',
        description="Decoding method (e.g., 'raw48', 'tempminmax')"
    )
    name: str = Field(
        default='',
        description="Display name; empty means inherit from the baseline"
    )

    @field_validator('conv', 'name', mode='before')
    @classmethod
    def _text_fields(cls, value: Any) -> Any:
        return _coerce_text(value)


# =============================================================================
# MODEL DEFINITION (one rule file entry)
# =============================================================================

class ModelDefinition(BaseModel):
    """
    One entry of the drive rule set.

    The DEFAULT family is the baseline entry. Families starting with
    the $Id marker are placeholder rows and carry no data.

    Example:
        definition = ModelDefinition(
            family="Seagate Barracuda 7200.14 (AF)",
            model_regex="ST[0-9]+DM00[0-9]-.*",
            presets={"190": AttributeOverride(conv="raw48")},
        )
    """
    model_config = ConfigDict(frozen=True)

    family: str = Field(
        default='',
        description="Drive family name, DEFAULT, or a $Id placeholder"
    )
    model_regex: str = Field(
        default='',
        description="Pattern matched against the IDENTIFY model string"
    )
    firmware_regex: str = Field(
        default='',
        description="Firmware pattern (informational)"
    )
    warning: str = Field(
        default='',
        description="Warning message shown for matching drives"
    )
    presets: dict[str, AttributeOverride] = Field(
        default_factory=dict,
        description="Attribute overrides keyed by attribute id"
    )
    _compiled_regex: Optional[re.Pattern] = PrivateAttr(default=None)

    @field_validator('family', 'model_regex', 'firmware_regex', 'warning',
                     mode='before')
    @classmethod
    def _text_fields(cls, value: Any) -> Any:
        return _coerce_text(value)

    @field_validator('presets', mode='before')
    @classmethod
    def _preset_keys(cls, value: Any) -> Any:
        """Attribute ids are kept as text keys."""
        if value is None:
            return {}
        if isinstance(value, dict):
            return {
                str(attr_id): ({} if preset is None else preset)
                for attr_id, preset in value.items()
            }
        return value

    @property
    def is_default(self) -> bool:
        """Whether this is the baseline entry."""
        return self.family == DEFAULT_FAMILY

    @property
    def is_placeholder(self) -> bool:
        """Whether this is a version-control placeholder row."""
        return self.family.startswith(PLACEHOLDER_PREFIX)

    def compile(self) -> 'ModelDefinition':
        """
        Return a copy with model_regex compiled.

        Raises:
            re.error: If model_regex is not a valid pattern
            OverflowError: If a repeat count is too large
            RecursionError: If the pattern nests too deeply
        """
        compiled = self.model_copy()
        compiled._compiled_regex = re.compile(self.model_regex)
        return compiled

    @property
    def compiled_regex(self) -> Optional[re.Pattern]:
        """Compiled model_regex, or None until compile() is called."""
        return self._compiled_regex

    def matches(self, identity: str) -> bool:
        """
        Test the compiled pattern against a model string.

        Definitions that were never compiled do not match anything.
        """
        if self.compiled_regex is None:
            return False
        return self.compiled_regex.search(identity) is not None


__all__ = ['AttributeOverride', 'ModelDefinition']
