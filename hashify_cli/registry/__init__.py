# Path: hashify_cli/registry/__init__.py
"""
hashify_cli Algorithm Registry

Descriptors, configuration models, profiles, digest values and the
bundled hash algorithms.
"""

from .catalog import AlgorithmRegistry, default_registry
from .digest_value import DigestValue
from .field_types import FieldKind, FieldType, array_of
from .models import (
    AlgorithmCategory,
    AlgorithmDescriptor,
    ConfigField,
    ConfigProfile,
    HashConfig,
)

__all__ = [
    'AlgorithmRegistry',
    'default_registry',
    'DigestValue',
    'FieldKind',
    'FieldType',
    'array_of',
    'AlgorithmCategory',
    'AlgorithmDescriptor',
    'ConfigField',
    'ConfigProfile',
    'HashConfig',
]
