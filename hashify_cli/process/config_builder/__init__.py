# Path: hashify_cli/process/config_builder/__init__.py
"""
Typed Configuration Builder

JSON config documents to ConfigEntries, with closed-policy value coercion.
"""

from .coercion import coerce_value
from .json_config import (
    ConfigCatalog,
    ConfigDocumentBuilder,
    ConfigEntry,
    ConfigProvenance,
)

__all__ = [
    'coerce_value',
    'ConfigCatalog',
    'ConfigDocumentBuilder',
    'ConfigEntry',
    'ConfigProvenance',
]
