# Path: drivedb/tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for drivedb

Provides common test fixtures used across all test modules.
"""

import logging
import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

# Add the repository root to path so drivedb imports without installing
REPO_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(REPO_ROOT))
sys.path.insert(0, str(Path(__file__).parent))

from fixtures.sample_rules import (
    create_default_record,
    create_drive_record,
    create_rules_document,
    dump_rules,
)


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars(temp_dir):
    """Provide mock environment variables for testing."""
    env_vars = {
        'DRIVEDB_ENVIRONMENT': 'test',
        'DRIVEDB_DEBUG': 'false',
        'DRIVEDB_RULES_PATH': str(temp_dir / 'drivedb.yaml'),
        'DRIVEDB_INCLUDE_DEFAULTS': 'true',
        'DRIVEDB_STRICT_PATTERNS': 'false',
        'DRIVEDB_LOG_LEVEL': 'WARNING',
        'DRIVEDB_LOG_CONSOLE': 'false',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        os.environ.pop('DRIVEDB_LOG_DIR', None)
        yield env_vars


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ==============================================================================
# RULE FILE FIXTURES
# ==============================================================================

@pytest.fixture
def sample_records():
    """Placeholder, DEFAULT and two Seagate entries, in match order."""
    return [
        create_drive_record('$Id$', model_regex='-', warning='Version information'),
        create_default_record(),
        create_drive_record(
            'Seagate Barracuda 7200.14 (AF)',
            model_regex='ST(1000|2000|3000)DM00[1-3]-.*',
            presets={'190': {'conv': 'raw48', 'name': ''}},
        ),
        create_drive_record(
            'Seagate (generic)',
            model_regex='^ST[0-9]+',
            presets={'9': {'conv': 'raw48', 'name': 'Custom_Hours'}},
            warning='Generic Seagate rules',
        ),
    ]


@pytest.fixture
def write_rules(temp_dir):
    """
    Write a rule file and return its path.

    Accepts a list of records, a full document, or raw YAML text.
    """
    def _write(content, name: str = 'drivedb.yaml') -> Path:
        path = temp_dir / name
        if isinstance(content, str):
            text = content
        elif isinstance(content, list):
            text = dump_rules(create_rules_document(content))
        else:
            text = dump_rules(content)
        path.write_text(text, encoding='utf-8')
        return path

    return _write


@pytest.fixture
def sample_rules_file(write_rules, sample_records):
    """Rule file built from sample_records."""
    return write_rules(sample_records)


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

@pytest.fixture
def capture_logs():
    """Capture log output for testing."""
    from io import StringIO

    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)

    root_logger = logging.getLogger()
    previous_level = root_logger.level
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(handler)

    yield log_capture

    root_logger.removeHandler(handler)
    root_logger.setLevel(previous_level)


@pytest.fixture
def restore_logging():
    """Restore root logger handlers replaced by setup_ipo_logging()."""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level

    yield

    for handler in list(root_logger.handlers):
        if handler not in saved_handlers:
            handler.close()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)


@pytest.fixture
def reset_singletons():
    """Reset any singleton instances between tests."""
    from drivedb.config_loader import ConfigLoader

    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False
