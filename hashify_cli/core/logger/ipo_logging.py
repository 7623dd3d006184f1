# Path: hashify_cli/core/logger/ipo_logging.py
"""
IPO-Aware Logging for hashify_cli

Input-Process-Output separated logging for the hashing pipeline.

This module sets up logging with separate files for:
- INPUT layer (CLI, command-line files, config documents, query resolution)
- PROCESS layer (config matching, scripting, digest computation)
- OUTPUT layer (listings, messages printed by scripts)
- Full activity (everything combined)

Console lines are single-line and timestamped in UTC:
    [10/18/26-14:03:11] [WARNING]: Could not find a hash algorithm ...
"""

import logging
import sys
import time
from pathlib import Path
from typing import Optional

from hashify_cli.constants import (
    CONSOLE_DATE_FORMAT,
    SCRIPT_LOG_LEVEL,
    SCRIPT_LOG_LEVEL_NAME,
)


logging.addLevelName(SCRIPT_LOG_LEVEL, SCRIPT_LOG_LEVEL_NAME)

# Marks handlers installed by setup_ipo_logging so re-runs replace only those
_HANDLER_MARK = '_hashify_ipo_handler'


class IPOFilter(logging.Filter):
    """Filter logs by IPO layer prefix."""

    def __init__(self, layer: str):
        """
        Initialize filter for specific IPO layer.

        Args:
            layer: 'input', 'process', or 'output'
        """
        super().__init__()
        self.layer = layer

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter records by logger name prefix."""
        return record.name.startswith(self.layer)


class ConsoleFormatter(logging.Formatter):
    """Single-line, UTC-timestamped console format."""

    converter = time.gmtime

    def __init__(self):
        super().__init__(
            '[%(asctime)s] [%(levelname)s]: %(message)s',
            datefmt=CONSOLE_DATE_FORMAT,
        )

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        return text.replace('\r', ' ').replace('\n', ' ')


def _mark(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_MARK, True)
    return handler


def setup_ipo_logging(
    log_dir: Optional[Path] = None,
    log_level: str = 'INFO',
    console_output: bool = True
) -> None:
    """
    Set up IPO-aware logging for hashify_cli.

    When log_dir is given, creates separate log files for:
    - input_activity.log (INPUT layer)
    - process_activity.log (PROCESS layer)
    - output_activity.log (OUTPUT layer)
    - full_activity.log (all activities combined)

    Args:
        log_dir: Directory for log files, or None for console only
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to also output to console

    Example:
        setup_ipo_logging(
            log_dir=Path('/var/log/hashify'),
            log_level='INFO',
            console_output=True
        )
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Replace only handlers installed by a previous call
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)

        formatter = logging.Formatter(
            '[%(asctime)s] [%(levelname)s] %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Full activity log (everything)
        full_handler = logging.FileHandler(log_dir / 'full_activity.log', encoding='utf-8')
        full_handler.setLevel(logging.DEBUG)
        full_handler.setFormatter(formatter)
        root_logger.addHandler(_mark(full_handler))

        for layer in ('input', 'process', 'output'):
            layer_handler = logging.FileHandler(
                log_dir / f'{layer}_activity.log', encoding='utf-8'
            )
            layer_handler.setLevel(logging.DEBUG)
            layer_handler.setFormatter(formatter)
            layer_handler.addFilter(IPOFilter(layer))
            root_logger.addHandler(_mark(layer_handler))

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(ConsoleFormatter())
        root_logger.addHandler(_mark(console_handler))


def get_input_logger(name: str) -> logging.Logger:
    """
    Get logger for INPUT layer.

    Args:
        name: Logger name (e.g., 'cli', 'config_document')

    Returns:
        Logger configured for INPUT layer
    """
    return logging.getLogger(f'input.{name}')


def get_process_logger(name: str) -> logging.Logger:
    """
    Get logger for PROCESS layer.

    Args:
        name: Logger name (e.g., 'matcher', 'pipeline')

    Returns:
        Logger configured for PROCESS layer
    """
    return logging.getLogger(f'process.{name}')


def get_output_logger(name: str) -> logging.Logger:
    """
    Get logger for OUTPUT layer.

    Args:
        name: Logger name (e.g., 'listings', 'script')

    Returns:
        Logger configured for OUTPUT layer
    """
    return logging.getLogger(f'output.{name}')


__all__ = [
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
