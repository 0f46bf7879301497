# Path: drivedb/process/resolver/models/rule_set.py
"""
Rule Set Model

An ordered, read-only collection of drive definitions. Position in the
collection is the match precedence: the first matching definition wins.
"""

from typing import Iterable, Iterator, Optional

from .drive_model import ModelDefinition


class RuleSet:
    """
    Ordered sequence of ModelDefinition entries.

    Built once (by the loader or default_rule_set()) and never modified
    afterwards, so it can be shared between threads without locking.

    Example:
        rule_set = RuleSet([default_entry, seagate_entry])
        for definition in rule_set:
            print(definition.family)
    """

    __slots__ = ('_definitions',)

    def __init__(self, definitions: Optional[Iterable[ModelDefinition]] = None):
        self._definitions: tuple[ModelDefinition, ...] = tuple(definitions or ())

    def __iter__(self) -> Iterator[ModelDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __getitem__(self, index: int) -> ModelDefinition:
        return self._definitions[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleSet):
            return NotImplemented
        return self._definitions == other._definitions

    def __repr__(self) -> str:
        return f"RuleSet(definitions={len(self._definitions)})"

    @property
    def is_empty(self) -> bool:
        """Whether the rule set holds no definitions at all."""
        return not self._definitions

    @property
    def default_entry(self) -> Optional[ModelDefinition]:
        """The first DEFAULT entry, or None."""
        for definition in self._definitions:
            if definition.is_default:
                return definition
        return None

    def families(self) -> list[str]:
        """Family names of all data entries (placeholders excluded), in order."""
        return [
            definition.family for definition in self._definitions
            if not definition.is_placeholder
        ]

    def with_defaults(self, defaults: 'RuleSet') -> 'RuleSet':
        """
        Compose this rule set with a baseline rule set.

        If this rule set already carries a DEFAULT entry it is kept
        unchanged. Otherwise the DEFAULT entry of `defaults` is
        prepended so it is captured before any model is matched.

        Args:
            defaults: Rule set supplying the baseline (e.g. default_rule_set())

        Returns:
            New RuleSet
        """
        if self.default_entry is not None:
            return self

        baseline = defaults.default_entry
        if baseline is None:
            return self

        return RuleSet((baseline,) + self._definitions)


__all__ = ['RuleSet']
