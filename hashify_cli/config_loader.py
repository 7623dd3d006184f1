# Path: hashify_cli/config_loader.py
"""
Configuration Loader for hashify_cli

Loads runtime settings from environment variables, after reading an
optional .env file from the working directory. Singleton pattern ensures
consistent configuration across all components.

These settings control the tool itself (logging, default scripts). Hash
algorithm configuration comes from profiles and config documents instead.
"""

import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from hashify_cli.constants import (
    DEFAULT_INPUT_FINALIZER,
    DEFAULT_OUTPUT_FINALIZER,
    DEFAULT_OUTPUT_SCRIPT,
)


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

DEFAULT_LOG_LEVEL: str = 'INFO'
DEFAULT_TEXT_ENCODING: str = 'utf-8'


class ConfigLoader:
    """
    Singleton configuration loader for hashify_cli.

    Loads configuration from environment variables with type conversion
    and defaults.

    Example:
        config = ConfigLoader()
        level = config.get('log_level')            # 'INFO'
        finalizer = config.get('input_finalizer')  # 'StringToArray(Input)'
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

        Only runs once due to singleton pattern. Loads .env from the
        current working directory when present.
        """
        if ConfigLoader._initialized:
            return

        env_path = Path.cwd() / '.env'
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
        return {
            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_level': self._get_env('HASHIFY_LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_dir': self._get_path('HASHIFY_LOG_DIR'),
            'log_console': self._get_bool('HASHIFY_LOG_CONSOLE', True),
            'show_banner': self._get_bool('HASHIFY_SHOW_BANNER', True),

            # ================================================================
            # SCRIPT DEFAULTS
            # ================================================================
            'text_encoding': self._get_env('HASHIFY_TEXT_ENCODING', DEFAULT_TEXT_ENCODING),
            'input_finalizer': self._get_env(
                'HASHIFY_INPUT_FINALIZER', DEFAULT_INPUT_FINALIZER
            ),
            'output_finalizer': self._get_env(
                'HASHIFY_OUTPUT_FINALIZER', DEFAULT_OUTPUT_FINALIZER
            ),
            'output_script': self._get_env(
                'HASHIFY_OUTPUT_SCRIPT', DEFAULT_OUTPUT_SCRIPT
            ),
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self._config.get(key, default)

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

        if value is None or not value.strip():
            if required:
                raise ValueError(f"Required path not configured: {key}")
            return None

        # Handle variable interpolation
        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value)

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(key, default)

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')
