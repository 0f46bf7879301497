#!/usr/bin/env python3
# Path: drivedb/main.py
"""
drivedb - Main Entry Point

Looks up the SMART attribute rules for a drive model string.

Data Flow:
    INPUT:   YAML rule file (DRIVEDB_RULES_PATH or --rules)
    PROCESS: Model lookup and preset merge
    OUTPUT:  Attribute table (text or JSON) on stdout

Usage:
    python -m drivedb --identity "ST3000DM001-9YN166"
    python -m drivedb --identity "ST3000DM001-9YN166" --json
    python -m drivedb --list
    python -m drivedb --rules ./drivedb.yaml --no-defaults --list
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from .config_loader import ConfigLoader
from .constants import (
    STATUS_OK, STATUS_FAIL, STATUS_INFO, STATUS_WARN,
    MENU_HEADER, MENU_SEPARATOR,
)
from .core.logger import setup_ipo_logging, get_output_logger
from .loaders.ruleset_loader import RuleSetFormatError
from .process.resolver.engine.drive_database import DriveDatabase
from .process.resolver.models.resolved_model import ResolvedModel


def print_banner() -> None:
    """Print application banner."""
    print()
    print(MENU_HEADER)
    print("  DRIVEDB - Drive Rule Database")
    print("  SMART attribute rules by drive model")
    print(MENU_HEADER)
    print()


def print_resolved(identity: str, model: ResolvedModel) -> None:
    """
    Print a resolved model as a text table.

    Args:
        identity: Model string that was looked up
        model: Lookup result
    """
    if model.matched:
        print(f"{STATUS_OK} {identity}: {model.family}")
    else:
        print(f"{STATUS_INFO} {identity}: no model-specific rules")

    if model.warning:
        print(f"{STATUS_WARN} {model.warning}")

    if not model.presets:
        print(f"\n{STATUS_INFO} No attribute rules available.")
        return

    print(f"\n  {'ID':>3}  {'Name':<28} {'Conv':<20}")
    print(f"  {MENU_SEPARATOR}")

    for attr_id in sorted(model.presets, key=_attr_sort_key):
        preset = model.presets[attr_id]
        print(f"  {attr_id:>3}  {preset.name:<28} {preset.conv:<20}")

    print()


def list_families(database: DriveDatabase) -> None:
    """
    Print the families of the current rule set in match order.

    Args:
        database: Loaded drive database
    """
    families = database.rule_set.families()

    if not families:
        print(f"\n{STATUS_INFO} Rule set is empty.")
        return

    print(f"\n{STATUS_OK} {len(families)} definitions (match order):\n")
    for i, family in enumerate(families, 1):
        print(f"  {i:3d}  {family}")
    print()


def _attr_sort_key(attr_id: str) -> tuple:
    """Numeric ids in numeric order, anything else after."""
    return (0, int(attr_id), '') if attr_id.isdigit() else (1, 0, attr_id)


def initialize_system(debug: bool = False) -> ConfigLoader:
    """
    Load configuration and set up logging.

    Args:
        debug: Force DEBUG log level

    Returns:
        ConfigLoader
    """
    config = ConfigLoader()

    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level='DEBUG' if debug or config.get('debug') else config.get('log_level', 'INFO'),
        console_output=config.get('log_console', True)
    )

    return config


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog='drivedb',
        description='drivedb - SMART attribute rules by drive model',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m drivedb --identity "ST3000DM001-9YN166"
  python -m drivedb --identity "Samsung SSD 850 EVO 500GB" --json
  python -m drivedb --rules ./drivedb.yaml --list
        """
    )

    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        '--identity', '-i',
        type=str,
        help='Drive model string to look up'
    )
    mode.add_argument(
        '--list', '-l',
        action='store_true',
        help='List the families of the rule set'
    )

    parser.add_argument(
        '--rules', '-r',
        type=Path,
        help='YAML rule file (default: DRIVEDB_RULES_PATH)'
    )
    parser.add_argument(
        '--no-defaults',
        action='store_true',
        help='Do not add the built-in DEFAULT attribute table'
    )
    parser.add_argument(
        '--strict',
        action='store_true',
        help='Fail on invalid model patterns instead of dropping them'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the lookup result as JSON'
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress banner'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for drivedb.

    Args:
        argv: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, 1 for an unreadable rule file)
    """
    args = build_parser().parse_args(argv)

    if not (args.quiet or args.json):
        print_banner()

    config = initialize_system(debug=args.debug)
    logger = get_output_logger('cli')

    rules_path = args.rules or config.get('rules_path')
    include_defaults = config.get('include_defaults', True) and not args.no_defaults
    strict = args.strict or config.get('strict_patterns', False)

    try:
        database = DriveDatabase.open(
            rules_path,
            include_defaults=include_defaults,
            strict_patterns=strict,
        )
    except RuleSetFormatError as e:
        print(f"\n{STATUS_FAIL} Cannot load rule file: {e}", file=sys.stderr)
        logger.error(f"Rule file load failed: {e}")
        return 1

    for message in database.load_warnings:
        print(f"{STATUS_WARN} {message}", file=sys.stderr)

    if args.list:
        list_families(database)
        return 0

    model = database.lookup_drive(args.identity)
    logger.info(f"Looked up '{args.identity}': {model.family or 'no match'}")

    if args.json:
        print(json.dumps(model.to_dict(), indent=2))
    else:
        print_resolved(args.identity, model)

    return 0


if __name__ == '__main__':
    sys.exit(main())
