# Path: hashify_cli/process/scripting/runtime.py
"""
Script Runtime

Evaluates user scripts as Python source inside one persistent namespace.

A script's value is its trailing expression statement:
    StringToArray(Input)          one value
    Hash, BitLength               two values (tuple expression)
    x = 1                         no values (no trailing expression)
    Print(Result)                 no values (None)

Bindings are either permanent (helpers) or scoped to one algorithm run
(Input, Result, digest members); reset_bindings() drops the scoped ones.
Binding over an existing name releases the previous value first when it
holds a resource (has a close() method).

Usage:
    with ScriptRuntime() as runtime:
        runtime.bind('Input', 'abc')
        values = runtime.evaluate('StringToArray(Input)', 'input-finalizer')
"""

import ast
import builtins
from typing import Any, Protocol, runtime_checkable

from hashify_cli.core.errors import ScriptFailure, ScriptRuntimeError
from hashify_cli.core.logger import get_process_logger


logger = get_process_logger('script_runtime')


@runtime_checkable
class Releasable(Protocol):
    """A bound value owning a resource."""

    def close(self) -> Any:
        ...


class ScriptRuntime:
    """One script environment, shared by every stage of a batch."""

    def __init__(self):
        self._namespace: dict[str, Any] = {'__builtins__': builtins}
        self._bound: set[str] = set()
        self._scoped: set[str] = set()
        self._closed = False

    def __enter__(self) -> 'ScriptRuntime':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    # =========================================================================
    # BINDINGS
    # =========================================================================

    def bind(self, name: str, value: Any, scoped: bool = True) -> None:
        """
        Bind a name in the script namespace.

        Args:
            name: Variable or function name
            value: Value or callable
            scoped: Drop the binding on reset_bindings()
        """
        self._check_open()
        if not name.isidentifier():
            raise ValueError(f"'{name}' is not a valid script name")

        self._release(name)
        self._namespace[name] = value
        self._bound.add(name)
        if scoped:
            self._scoped.add(name)
        else:
            self._scoped.discard(name)

    def unbind(self, name: str) -> None:
        """Remove a binding, releasing its value."""
        self._release(name)
        self._namespace.pop(name, None)
        self._bound.discard(name)
        self._scoped.discard(name)

    def reset_bindings(self) -> None:
        """Remove every scoped binding."""
        for name in sorted(self._scoped):
            self.unbind(name)

    def lookup(self, name: str) -> Any:
        """Current value bound to name; KeyError when unbound."""
        return self._namespace[name]

    def is_bound(self, name: str) -> bool:
        return name in self._bound

    def _release(self, name: str) -> None:
        if name not in self._namespace:
            return
        previous = self._namespace[name]
        if isinstance(previous, Releasable) and not isinstance(previous, type):
            logger.debug(f"Releasing previous binding of '{name}'")
            previous.close()

    # =========================================================================
    # EVALUATION
    # =========================================================================

    def evaluate(self, source: str, stage: str) -> list[Any]:
        """
        Evaluate a script and collect its values.

        Args:
            source: Python source
            stage: Pipeline stage name, used in errors and tracebacks

        Returns:
            Values of the trailing expression (possibly empty)

        Raises:
            ScriptFailure: The script called Fail()
            ScriptRuntimeError: Syntax error or any other exception, including
                SystemExit from exit() or quit()
        """
        self._check_open()
        filename = f'<{stage}>'

        try:
            tree = ast.parse(source, filename=filename, mode='exec')
        except SyntaxError as e:
            raise ScriptRuntimeError(stage, f"syntax error: {e.msg} (line {e.lineno})") from e

        trailing = None
        if tree.body and isinstance(tree.body[-1], ast.Expr):
            trailing = tree.body.pop().value

        try:
            if tree.body:
                exec(compile(tree, filename, 'exec'), self._namespace)
            if trailing is None:
                return []
            value = eval(compile(ast.Expression(body=trailing), filename, 'eval'), self._namespace)
        except ScriptFailure:
            raise
        except (Exception, SystemExit) as e:
            raise ScriptRuntimeError(stage, f"{type(e).__name__}: {e}") from e

        if value is None:
            return []
        if isinstance(trailing, ast.Tuple) and isinstance(value, tuple):
            return list(value)
        return [value]

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def close(self) -> None:
        """Release every binding; later calls do nothing."""
        if self._closed:
            return
        for name in sorted(self._bound):
            self.unbind(name)
        self._namespace.clear()
        self._closed = True
        logger.debug("Script runtime closed")

    def _check_open(self) -> None:
        if self._closed:
            raise RuntimeError("Script runtime is closed")
