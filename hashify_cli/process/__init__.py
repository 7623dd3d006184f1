# Path: hashify_cli/process/__init__.py
"""
hashify_cli Process Package

Query resolution, configuration building and matching, the script
environment and the pipeline orchestrator.
"""

from .resolver import FunctionVariable, resolve_query
from .config_builder import ConfigCatalog, ConfigDocumentBuilder, ConfigEntry
from .matcher import ConfigMatcher, ConfigSource, parse_profile_query
from .scripting import ScriptHelpers, ScriptRuntime, install_helpers
from .pipeline import PipelineOrchestrator, PipelineScripts, PipelineStage

__all__ = [
    'FunctionVariable',
    'resolve_query',
    'ConfigCatalog',
    'ConfigDocumentBuilder',
    'ConfigEntry',
    'ConfigMatcher',
    'ConfigSource',
    'parse_profile_query',
    'ScriptHelpers',
    'ScriptRuntime',
    'install_helpers',
    'PipelineOrchestrator',
    'PipelineScripts',
    'PipelineStage',
]
