# Path: hashify_cli/core/logger/__init__.py
"""
hashify_cli Logger Package

IPO-aware logging for the hashing pipeline.

Provides separate log streams for:
- INPUT layer (CLI, config documents, query resolution)
- PROCESS layer (matching, scripting, computation)
- OUTPUT layer (listings, script output)
"""

from .ipo_logging import (
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
