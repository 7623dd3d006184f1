# Path: hashify_cli/core/__init__.py
"""
hashify_cli Core Package

Shared infrastructure: error taxonomy, logging, command-line file
expansion and the script surface interface.
"""

from .errors import (
    HashifyError,
    ArgumentError,
    UnknownReferenceError,
    CoercionError,
    ScriptRuntimeError,
    ScriptFailure,
    ComputeError,
    describe_exception,
)
from .script_surface import ScriptOperation, ScriptSurface

__all__ = [
    'HashifyError',
    'ArgumentError',
    'UnknownReferenceError',
    'CoercionError',
    'ScriptRuntimeError',
    'ScriptFailure',
    'ComputeError',
    'describe_exception',
    'ScriptOperation',
    'ScriptSurface',
]
