# Path: hashify_cli/core/script_surface.py
"""
Script Surface Interface

Explicit declaration of what a value exposes to scripts. A type that
wants its members visible to the output stages implements ScriptSurface
and lists its readable fields and its operations, including overloads.
The binding layer enumerates this declaration; it never inspects the
object itself.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class ScriptOperation:
    """
    One callable member of a script surface.

    Several operations may share a name (an overload set). Each one keeps
    its own parameter type list, used to order the set and to derive the
    names of non-primary members.

    Attributes:
        name: Name shared by the overload set
        parameter_types: Type names of the parameters, in order
        function: Callable invoked by scripts
        alias: Explicit binding name used instead of the derived one
    """
    name: str
    parameter_types: tuple[str, ...]
    function: Callable[..., Any]
    alias: Optional[str] = None

    @property
    def arity(self) -> int:
        """Number of parameters."""
        return len(self.parameter_types)

    @property
    def signature(self) -> str:
        """Full textual signature, e.g. 'AsHexString(bool)'."""
        return f"{self.name}({', '.join(self.parameter_types)})"


@runtime_checkable
class ScriptSurface(Protocol):
    """Values whose members are bound into the script environment."""

    def script_fields(self) -> dict[str, Any]:
        """Readable fields and their current values."""
        ...

    def script_operations(self) -> list[ScriptOperation]:
        """Callable members, overloads listed separately."""
        ...


__all__ = ['ScriptOperation', 'ScriptSurface']
