# Path: hashify_cli/process/scripting/binding.py
"""
Script Surface Binding

Binds the members a value declares through ScriptSurface into a script
runtime.

Rules:
- Readable fields are bound as snapshots of their value at bind time
- An operation whose name is unique is bound under that name
- In an overload set, the zero-parameter member is the primary binding;
  without one, the member with the fewest parameters wins, ties broken
  by signature text. The primary takes the plain name.
- Every other member of the set is bound under its alias, or under the
  name followed by '_' and its parameter types joined with '_':
      AsHexString(bool)  ->  AsHexString_bool
"""

from dataclasses import dataclass
from typing import Any

from hashify_cli.core.logger import get_process_logger
from hashify_cli.core.script_surface import ScriptOperation, ScriptSurface


logger = get_process_logger('binding')


@dataclass(frozen=True)
class PlannedBinding:
    """One name to install, with where it came from."""
    name: str
    value: Any
    source: str


def derived_name(operation: ScriptOperation) -> str:
    """Binding name of a non-primary overload."""
    if operation.alias:
        return operation.alias
    return '_'.join((operation.name, *operation.parameter_types))


def choose_primary(overloads: list[ScriptOperation]) -> ScriptOperation:
    """Pick the overload bound under the plain name."""
    return min(overloads, key=lambda operation: (operation.arity, operation.signature))


def plan_bindings(surface: ScriptSurface) -> list[PlannedBinding]:
    """
    Compute the bindings for a surface.

    Args:
        surface: Value implementing ScriptSurface

    Returns:
        Bindings in declaration order: fields, then operations

    Raises:
        ValueError: If two members end up under the same name
    """
    planned = [
        PlannedBinding(name, value, 'field')
        for name, value in surface.script_fields().items()
    ]

    overload_sets: dict[str, list[ScriptOperation]] = {}
    for operation in surface.script_operations():
        overload_sets.setdefault(operation.name, []).append(operation)

    for name, overloads in overload_sets.items():
        primary = choose_primary(overloads)
        planned.append(PlannedBinding(name, primary.function, primary.signature))
        for operation in overloads:
            if operation is not primary:
                planned.append(
                    PlannedBinding(derived_name(operation), operation.function, operation.signature)
                )

    seen: dict[str, str] = {}
    for binding in planned:
        if binding.name in seen:
            raise ValueError(
                f"Script name '{binding.name}' is claimed by both "
                f"{seen[binding.name]} and {binding.source}"
            )
        seen[binding.name] = binding.source

    return planned


def bind_surface(runtime, surface: ScriptSurface) -> list[str]:
    """
    Install a surface's members as scoped bindings.

    Args:
        runtime: ScriptRuntime
        surface: Value implementing ScriptSurface

    Returns:
        Names bound
    """
    if not isinstance(surface, ScriptSurface):
        raise TypeError(f"{type(surface).__name__} does not implement ScriptSurface")

    names = []
    for binding in plan_bindings(surface):
        runtime.bind(binding.name, binding.value, scoped=True)
        names.append(binding.name)

    logger.debug(f"Bound {len(names)} members of {type(surface).__name__}")
    return names
