# Path: hashify_cli/core/errors.py
"""
Error Taxonomy

Exception classes raised across hashify_cli. Each class carries the
process exit code the CLI reports for it.

Classes:
    ArgumentError: malformed command line, query or config document
    UnknownReferenceError: unknown algorithm or profile reference
    CoercionError: JSON value cannot map onto a configuration field
    ScriptRuntimeError: unexpected failure while evaluating a script
    ScriptFailure: failure raised on purpose by a script through Fail()
    ComputeError: the digest computation raised
"""

from typing import Optional

from hashify_cli.constants import ExitCode


class HashifyError(Exception):
    """Base class for all hashify_cli errors."""

    exit_code: int = ExitCode.FAILURE


class ArgumentError(HashifyError, ValueError):
    """Malformed CLI argument, query string or JSON document."""


class UnknownReferenceError(HashifyError, LookupError):
    """Reference to an algorithm or profile the registry does not know."""


class CoercionError(HashifyError, ValueError):
    """
    A JSON value could not be converted into a configuration field.

    Attributes:
        path: Location of the value inside the document (e.g. 'Key[3]')
        target: Name of the field kind the value was coerced into
    """

    def __init__(self, message: str, path: str = '', target: str = ''):
        super().__init__(message)
        self.path = path
        self.target = target


class ScriptRuntimeError(HashifyError):
    """
    A script failed to evaluate or returned an unusable result.

    Attributes:
        stage: Pipeline stage whose script failed
    """

    def __init__(self, stage: str, message: str):
        super().__init__(f"{stage} script failed: {message}")
        self.stage = stage


class ScriptFailure(HashifyError):
    """Failure signaled on purpose by a script; message is reported verbatim."""

    exit_code: int = ExitCode.SCRIPT_FAILURE


class ComputeError(HashifyError):
    """
    Digest computation failed.

    Attributes:
        algorithm: Display name of the failing algorithm
    """

    def __init__(self, algorithm: str, message: str):
        super().__init__(f"Hash computation failed for '{algorithm}': {message}")
        self.algorithm = algorithm


def describe_exception(exc: BaseException) -> str:
    """
    Render an exception and its cause chain on a single line.

    Args:
        exc: Exception to describe

    Returns:
        Text like "ComputeError: ... <- ValueError: ..."
    """
    parts = []
    current: Optional[BaseException] = exc
    seen = set()

    while current is not None and id(current) not in seen:
        seen.add(id(current))
        text = str(current).replace('\n', ' ').strip()
        parts.append(f"{type(current).__name__}: {text}" if text else type(current).__name__)
        if current.__cause__ is not None or current.__suppress_context__:
            current = current.__cause__
        else:
            current = current.__context__

    return ' <- '.join(parts)


__all__ = [
    'HashifyError',
    'ArgumentError',
    'UnknownReferenceError',
    'CoercionError',
    'ScriptRuntimeError',
    'ScriptFailure',
    'ComputeError',
    'describe_exception',
]
