# Path: drivedb/config_loader.py
"""
Configuration Loader for drivedb

Loads configuration from .env file for the drive database.
Singleton pattern ensures consistent configuration across all components.

NO hardcoded paths. The rule file location comes from the environment;
when it is not configured only the built-in defaults are used.
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv

from .constants import ENV_FILE


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

# Logging Defaults
DEFAULT_LOG_LEVEL: str = 'INFO'

# Rule Set Defaults
DEFAULT_INCLUDE_DEFAULTS: bool = True
DEFAULT_STRICT_PATTERNS: bool = False


class ConfigLoader:
    """
    Singleton configuration loader for drivedb.

    Loads configuration from environment variables with type conversion
    and sensible defaults.

    Example:
        config = ConfigLoader()
        rules_path = config.get('rules_path')  # Path or None
        strict = config.get('strict_patterns')  # bool
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads the .env file
        from the current working directory, if present.
        """
        if ConfigLoader._initialized:
            return

        env_path = Path.cwd() / ENV_FILE
        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types
        """
        config = {
            # ================================================================
            # ENVIRONMENT & DEBUG
            # ================================================================
            'environment': self._get_env('DRIVEDB_ENVIRONMENT', 'development'),
            'debug': self._get_bool('DRIVEDB_DEBUG', False),

            # ================================================================
            # RULE SET
            # ================================================================
            'rules_path': self._get_path('DRIVEDB_RULES_PATH'),
            'include_defaults': self._get_bool(
                'DRIVEDB_INCLUDE_DEFAULTS', DEFAULT_INCLUDE_DEFAULTS
            ),
            'strict_patterns': self._get_bool(
                'DRIVEDB_STRICT_PATTERNS', DEFAULT_STRICT_PATTERNS
            ),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('DRIVEDB_LOG_DIR'),
            'log_level': self._get_env('DRIVEDB_LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_console': self._get_bool('DRIVEDB_LOG_CONSOLE', True),
        }

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value = self._config.get(key)
        return default if value is None else value

    def _get_path(self, key: str, required: bool = False) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Environment variable name
            required: If True, raise error when missing

        Returns:
            Path object or None

        Raises:
            ValueError: If required and missing
        """
        value = os.getenv(key)

        if not value:
            if required:
                raise ValueError(f"Required path not configured: {key}")
            return None

        # Handle variable interpolation
        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value).expanduser()

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(key, default)

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def __repr__(self) -> str:
        """String representation showing the rule source."""
        return (
            f"ConfigLoader("
            f"rules_path={self._config.get('rules_path')}, "
            f"environment={self._config.get('environment')})"
        )


__all__ = ['ConfigLoader']
