# Path: hashify_cli/process/scripting/__init__.py
"""
Script Environment

Runtime, helper surface and result binding for the pipeline scripts.
"""

from .runtime import ScriptRuntime
from .helpers import ScriptHelpers, install_helpers
from .binding import bind_surface, plan_bindings

__all__ = [
    'ScriptRuntime',
    'ScriptHelpers',
    'install_helpers',
    'bind_surface',
    'plan_bindings',
]
