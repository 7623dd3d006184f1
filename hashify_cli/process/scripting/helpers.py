# Path: hashify_cli/process/scripting/helpers.py
"""
Script Helper Surface

Functions available to every script stage.

Output:
    Print(message, *args)          SCRIPT-level log line
    PrintDirect(message, *args)    raw line on stdout
    Fail(message, *args)           abort the run with exit code 2

Bytes:
    StringToArray(text)
    StringToArrayWithEncoding(text, encoding)
    HexToArray(hex)
    ToByteArray(values)
    Join(separator, values)

Files:
    ReadAllText, ReadAllBytes, WriteAllText, AppendAllText,
    FileExists, DirectoryExists, GetFiles

Messages with extra arguments are formatted with str.format positional
placeholders: Print("{0} -> {1}", Algorithm, Result).
"""

import sys
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, Union

from hashify_cli.constants import SCRIPT_LOG_LEVEL
from hashify_cli.core.errors import ScriptFailure
from hashify_cli.core.logger import get_output_logger


script_logger = get_output_logger('script')

PathLike = Union[str, Path]


def _format(message: Any, args: tuple) -> str:
    text = 'N/A' if message is None else str(message)
    return text.format(*args) if args else text


class ScriptHelpers:
    """
    Helper functions bound into the script namespace.

    Args:
        encoding: Text encoding used by StringToArray and the file helpers
    """

    def __init__(self, encoding: str = 'utf-8'):
        self.encoding = encoding

    # =========================================================================
    # OUTPUT
    # =========================================================================

    def print_message(self, message: Any, *args: Any) -> None:
        script_logger.log(SCRIPT_LOG_LEVEL, _format(message, args))

    def print_direct(self, message: Any, *args: Any) -> None:
        text = _format(message, args)
        if not text.endswith('\n'):
            text += '\n'
        sys.stdout.write(text)
        sys.stdout.flush()

    def fail(self, message: Any, *args: Any) -> None:
        raise ScriptFailure(_format(message, args))

    # =========================================================================
    # BYTES
    # =========================================================================

    def string_to_array(self, text: Any) -> bytes:
        if isinstance(text, (bytes, bytearray)):
            return bytes(text)
        return str(text).encode(self.encoding)

    def string_to_array_with_encoding(self, text: Any, encoding: str) -> bytes:
        return str(text).encode(encoding)

    def hex_to_array(self, text: str) -> bytes:
        cleaned = ''.join(str(text).split())
        if cleaned[:2].lower() == '0x':
            cleaned = cleaned[2:]
        if len(cleaned) % 2:
            raise ValueError("Hex string must have an even length")
        return bytes.fromhex(cleaned)

    def to_byte_array(self, values: Iterable[int]) -> bytes:
        if isinstance(values, str):
            raise TypeError("ToByteArray expects a sequence of integers, not a string")
        items = list(values)
        for item in items:
            if isinstance(item, bool) or not isinstance(item, int):
                raise TypeError(f"ToByteArray expects integers, got {type(item).__name__}")
        return bytes(items)

    def join(self, separator: Any, values: Iterable[Any]) -> str:
        return str(separator).join(str(value) for value in values)

    # =========================================================================
    # FILES
    # =========================================================================

    def read_all_text(self, path: PathLike, encoding: Optional[str] = None) -> str:
        return Path(path).read_text(encoding=encoding or self.encoding)

    def read_all_bytes(self, path: PathLike) -> bytes:
        return Path(path).read_bytes()

    def write_all_text(self, path: PathLike, text: Any) -> None:
        Path(path).write_text(str(text), encoding=self.encoding)

    def append_all_text(self, path: PathLike, text: Any) -> None:
        with open(path, 'a', encoding=self.encoding) as handle:
            handle.write(str(text))

    def file_exists(self, path: PathLike) -> bool:
        return Path(path).is_file()

    def directory_exists(self, path: PathLike) -> bool:
        return Path(path).is_dir()

    def get_files(self, path: PathLike, pattern: str = '*', recursive: bool = False) -> list[str]:
        root = Path(path)
        matches = root.rglob(pattern) if recursive else root.glob(pattern)
        return sorted(str(item) for item in matches if item.is_file())

    # =========================================================================
    # BINDING TABLE
    # =========================================================================

    def table(self) -> dict[str, Callable[..., Any]]:
        """Script names mapped to helper functions."""
        return {
            'Print': self.print_message,
            'PrintDirect': self.print_direct,
            'Fail': self.fail,
            'StringToArray': self.string_to_array,
            'StringToArrayWithEncoding': self.string_to_array_with_encoding,
            'HexToArray': self.hex_to_array,
            'ToByteArray': self.to_byte_array,
            'Join': self.join,
            'ReadAllText': self.read_all_text,
            'ReadAllBytes': self.read_all_bytes,
            'WriteAllText': self.write_all_text,
            'AppendAllText': self.append_all_text,
            'FileExists': self.file_exists,
            'DirectoryExists': self.directory_exists,
            'GetFiles': self.get_files,
        }


def install_helpers(runtime, helpers: Optional[ScriptHelpers] = None) -> list[str]:
    """
    Bind the helper surface permanently into a runtime.

    Args:
        runtime: ScriptRuntime
        helpers: Helper instance; default settings when None

    Returns:
        Bound names
    """
    helpers = helpers or ScriptHelpers()
    table = helpers.table()
    for name, function in table.items():
        runtime.bind(name, function, scoped=False)
    return list(table)
