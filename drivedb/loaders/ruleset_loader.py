# Path: drivedb/loaders/ruleset_loader.py
"""
Rule Set Loader

Loads the drive rule set from a YAML file and compiles each
definition's model pattern.

File layout:
    drives:
      - family: DEFAULT
        presets:
          "9": {conv: "raw24(raw8)", name: Power_On_Hours}
      - family: Seagate Barracuda 7200.14 (AF)
        model_regex: "ST[0-9]+DM00[0-9]-.*"
        presets:
          "190": {conv: raw48, name: ""}

A bare top-level list of records is accepted as well.
"""

import re
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import ValidationError

from ..constants import DRIVES_KEY
from ..core.logger.ipo_logging import get_input_logger
from ..process.resolver.models.drive_model import ModelDefinition
from ..process.resolver.models.rule_set import RuleSet


class RuleSetFormatError(ValueError):
    """The rule file exists but could not be decoded into a rule set."""


# Implicit tags that would turn plain scalars such as `on`, `2.50` or
# `0100` into bool, float or int values. Rule fields are text.
_NON_TEXT_TAGS = frozenset({
    'tag:yaml.org,2002:bool',
    'tag:yaml.org,2002:int',
    'tag:yaml.org,2002:float',
    'tag:yaml.org,2002:timestamp',
})


class TextScalarLoader(yaml.SafeLoader):
    """SafeLoader that keeps plain scalars as their source text (nulls stay null)."""


TextScalarLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _NON_TEXT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class RuleSetLoader:
    """
    Loads a RuleSet from a YAML rule file.

    A missing file is not an error: it yields an empty rule set so the
    system runs with no model-specific rules. A file that cannot be
    decoded raises RuleSetFormatError and no partial rule set is returned.

    Definitions whose model_regex does not compile are dropped with a
    warning (kept in `warnings`). With strict_patterns=True they raise
    RuleSetFormatError instead.

    Example:
        loader = RuleSetLoader()
        rule_set = loader.load(Path('/etc/drivedb/drivedb.yaml'))
        for message in loader.warnings:
            print(message)
    """

    def __init__(self, strict_patterns: bool = False):
        """
        Initialize rule set loader.

        Args:
            strict_patterns: Fail the load on an invalid model_regex
        """
        self.logger = get_input_logger('ruleset_loader')
        self.strict_patterns = strict_patterns
        self.warnings: list[str] = []

    def load(self, file_path: Union[str, Path]) -> RuleSet:
        """
        Load a rule set from a YAML file.

        Args:
            file_path: Path to the rule file

        Returns:
            RuleSet in file order (empty if the file does not exist)

        Raises:
            RuleSetFormatError: If the file cannot be decoded
        """
        file_path = Path(file_path)
        self.warnings = []

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.load(f, Loader=TextScalarLoader)
        except OSError as e:
            self.logger.info(
                f"Rule file unavailable ({e.strerror}), using empty rule set: "
                f"{file_path}"
            )
            return RuleSet()
        except yaml.YAMLError as e:
            self.logger.error(f"YAML parse error in {file_path}: {e}")
            raise RuleSetFormatError(f"YAML parse error in {file_path}: {e}") from e
        except UnicodeDecodeError as e:
            self.logger.error(f"Rule file is not valid UTF-8: {file_path}")
            raise RuleSetFormatError(f"Rule file is not valid UTF-8: {file_path}") from e

        rule_set = self.parse(data, source=str(file_path))
        self.logger.info(f"Loaded {len(rule_set)} drive definitions from {file_path}")
        return rule_set

    def parse(self, data: Any, source: str = '<data>') -> RuleSet:
        """
        Build a RuleSet from already deserialized YAML data.

        Args:
            data: Parsed YAML document
            source: Source name for messages

        Returns:
            RuleSet in document order

        Raises:
            RuleSetFormatError: If the document has the wrong shape
        """
        records = self._extract_records(data, source)

        definitions = []
        for index, record in enumerate(records):
            definition = self._parse_definition(record, index, source)
            if definition is not None:
                definitions.append(definition)

        return RuleSet(definitions)

    def _extract_records(self, data: Any, source: str) -> list:
        """Get the list of drive records from the document."""
        if data is None:
            return []

        if isinstance(data, dict):
            records = data.get(DRIVES_KEY)
            if records is None:
                return []
        else:
            records = data

        if not isinstance(records, list):
            message = (
                f"{source}: expected a list of drive records, "
                f"got {type(records).__name__}"
            )
            self.logger.error(message)
            raise RuleSetFormatError(message)

        return records

    def _parse_definition(
        self,
        record: Any,
        index: int,
        source: str
    ) -> Union[ModelDefinition, None]:
        """
        Parse and compile one drive record.

        Returns:
            Compiled ModelDefinition, or None if it was dropped
        """
        if not isinstance(record, dict):
            message = f"{source}: drive record {index} is not a mapping"
            self.logger.error(message)
            raise RuleSetFormatError(message)

        try:
            definition = ModelDefinition.model_validate(record)
        except ValidationError as e:
            message = f"{source}: invalid drive record {index}: {e}"
            self.logger.error(message)
            raise RuleSetFormatError(message) from e

        # DEFAULT and placeholder rows are never matched
        if definition.is_default or definition.is_placeholder:
            return definition

        try:
            return definition.compile()
        except (re.error, OverflowError, RecursionError) as e:
            message = (
                f"{source}: invalid model_regex for '{definition.family}' "
                f"(record {index}): {e}"
            )
            if self.strict_patterns:
                self.logger.error(message)
                raise RuleSetFormatError(message) from e
            self.logger.warning(f"{message}; definition dropped")
            self.warnings.append(message)
            return None


def open_rule_set(
    file_path: Union[str, Path],
    strict_patterns: bool = False
) -> RuleSet:
    """
    Open a YAML rule file and return its RuleSet.

    Args:
        file_path: Path to the rule file
        strict_patterns: Fail the load on an invalid model_regex

    Returns:
        RuleSet (empty if the file does not exist)

    Raises:
        RuleSetFormatError: If the file exists but cannot be decoded
    """
    return RuleSetLoader(strict_patterns=strict_patterns).load(file_path)


__all__ = ['RuleSetLoader', 'RuleSetFormatError', 'open_rule_set']
