# Path: drivedb/process/resolver/engine/drive_database.py
"""
Drive Database

Holds the current RuleSet and answers drive lookups against it.

Lookups read the current rule set reference without locking. A reload
builds a complete new rule set first and then swaps the reference, so a
lookup always sees either the old or the new rule set, never a mix.
"""

import threading
from pathlib import Path
from typing import Optional, Union

from ....core.logger.ipo_logging import get_process_logger
from ....dictionary import default_rule_set
from ....loaders.ruleset_loader import RuleSetLoader
from ..models.resolved_model import ResolvedModel
from ..models.rule_set import RuleSet
from .drive_resolver import resolve_drive


class DriveDatabase:
    """
    Drive rule database.

    Example:
        db = DriveDatabase.open('/etc/drivedb/drivedb.yaml')
        model = db.lookup_drive(b'ST3000DM001-9YN166')
        print(model.family)

        # Pick up an edited rule file
        db.reload()
    """

    def __init__(
        self,
        rule_set: Optional[RuleSet] = None,
        source: Optional[Path] = None,
        include_defaults: bool = True,
        strict_patterns: bool = False
    ):
        """
        Initialize drive database.

        Args:
            rule_set: Initial rule set (empty if None)
            source: Rule file used by reload()
            include_defaults: Compose loaded rule sets with the built-in DEFAULT
            strict_patterns: Fail loads on an invalid model_regex
        """
        self.logger = get_process_logger('drive_database')
        self.source = source
        self.include_defaults = include_defaults
        self.strict_patterns = strict_patterns
        self.load_warnings: list[str] = []

        self._rule_set = rule_set if rule_set is not None else RuleSet()
        self._reload_lock = threading.Lock()

    @classmethod
    def open(
        cls,
        file_path: Optional[Union[str, Path]],
        include_defaults: bool = True,
        strict_patterns: bool = False
    ) -> 'DriveDatabase':
        """
        Create a database from a rule file.

        Args:
            file_path: Rule file path, or None for the built-in defaults only
            include_defaults: Compose with the built-in DEFAULT entry
            strict_patterns: Fail on an invalid model_regex

        Returns:
            DriveDatabase

        Raises:
            RuleSetFormatError: If the rule file cannot be decoded
        """
        source = Path(file_path) if file_path is not None else None
        database = cls(
            source=source,
            include_defaults=include_defaults,
            strict_patterns=strict_patterns,
        )
        database.reload()
        return database

    @property
    def rule_set(self) -> RuleSet:
        """The rule set currently in use."""
        return self._rule_set

    def lookup_drive(self, identity: Union[bytes, str]) -> ResolvedModel:
        """
        Resolve the attribute rules for a drive.

        Args:
            identity: IDENTIFY model string (bytes or str)

        Returns:
            ResolvedModel
        """
        return resolve_drive(self._rule_set, identity)

    def reload(self) -> RuleSet:
        """
        Re-read the rule source and swap in the new rule set.

        On failure the current rule set stays in place and the error
        propagates.

        Returns:
            The newly installed RuleSet

        Raises:
            RuleSetFormatError: If the rule file cannot be decoded
        """
        with self._reload_lock:
            warnings: list[str] = []
            if self.source is not None:
                loader = RuleSetLoader(strict_patterns=self.strict_patterns)
                rule_set = loader.load(self.source)
                warnings = loader.warnings
            else:
                rule_set = RuleSet()

            if self.include_defaults:
                rule_set = rule_set.with_defaults(default_rule_set())

            self._rule_set = rule_set
            self.load_warnings = warnings

        self.logger.info(
            f"Drive database ready: {len(rule_set)} definitions"
            + (f", {len(warnings)} dropped" if warnings else "")
        )
        return rule_set


__all__ = ['DriveDatabase']
