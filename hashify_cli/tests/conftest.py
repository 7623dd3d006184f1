# Path: hashify_cli/tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for hashify_cli

Provides common test fixtures used across all test modules.
"""

import json
import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from hashify_cli.process.scripting import ScriptHelpers, ScriptRuntime, install_helpers
from hashify_cli.registry import default_registry


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def clean_env(tmp_path, monkeypatch):
    """Run without HASHIFY_* variables and without a .env file."""
    env = {key: value for key, value in os.environ.items() if not key.startswith('HASHIFY_')}
    monkeypatch.chdir(tmp_path)
    with patch.dict(os.environ, env, clear=True):
        yield env


@pytest.fixture
def mock_env_vars(clean_env):
    """Provide mock environment variables for testing."""
    env_vars = {
        'HASHIFY_LOG_LEVEL': 'DEBUG',
        'HASHIFY_LOG_CONSOLE': 'false',
        'HASHIFY_SHOW_BANNER': 'no',
        'HASHIFY_TEXT_ENCODING': 'utf-16-le',
        'HASHIFY_OUTPUT_FINALIZER': 'AsHexString()',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def reset_singletons():
    """Reset any singleton instances between tests."""
    from hashify_cli.config_loader import ConfigLoader
    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False


# ==============================================================================
# COMPONENT FIXTURES
# ==============================================================================

@pytest.fixture
def registry():
    """Registry with every bundled algorithm."""
    return default_registry()


@pytest.fixture
def runtime():
    """Script runtime with the helper surface installed."""
    with ScriptRuntime() as script_runtime:
        install_helpers(script_runtime, ScriptHelpers())
        yield script_runtime


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document to a temporary file and return its path."""
    def _write(document, name: str = 'configs.json') -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding='utf-8')
        return path
    return _write


@pytest.fixture(autouse=True)
def isolate_logging():
    """Remove handlers installed by setup_ipo_logging after each test."""
    root_logger = logging.getLogger()
    level = root_logger.level

    yield

    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        if getattr(handler, '_hashify_ipo_handler', False):
            root_logger.removeHandler(handler)
            handler.close()
