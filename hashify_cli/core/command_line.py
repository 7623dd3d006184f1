# Path: hashify_cli/core/command_line.py
"""
Command-Line File Expansion

Lets a long command line live in a file:

    hashify --command-line job.args -o 'Print(Result)'

The file's arguments are placed before the remaining arguments, so flags
given directly still apply and argparse keeps the last value of repeated
options. A file may name another file; each file is read at most once.
"""

import shlex
from pathlib import Path
from typing import Optional, Sequence

from hashify_cli.core.errors import ArgumentError
from hashify_cli.core.logger import get_input_logger


COMMAND_LINE_FLAGS = ('-cl', '--command-line')

logger = get_input_logger('command_line')


def read_command_line_file(path: Path) -> list[str]:
    """
    Split the contents of a command-line file into arguments.

    Newlines act as separators; quoting follows shell rules.

    Args:
        path: File to read

    Returns:
        List of arguments

    Raises:
        ArgumentError: If the file is missing, unreadable or cannot be split
    """
    if not path.is_file():
        raise ArgumentError(f"Command line file does not exist: {path}")

    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise ArgumentError(f"Could not read command line file '{path}': {e}") from e

    try:
        return shlex.split(text, comments=False, posix=True)
    except ValueError as e:
        raise ArgumentError(f"Could not parse command line file '{path}': {e}") from e


def _take_command_line_flag(args: list[str]) -> tuple[Optional[str], list[str]]:
    """Remove the first --command-line occurrence and return its value."""
    for index, arg in enumerate(args):
        if arg in COMMAND_LINE_FLAGS:
            if index + 1 >= len(args):
                raise ArgumentError(f"{arg} requires a file path")
            return args[index + 1], args[:index] + args[index + 2:]

        for flag in COMMAND_LINE_FLAGS:
            if arg.startswith(flag + '='):
                return arg[len(flag) + 1:], args[:index] + args[index + 1:]

    return None, args


def expand_command_line(argv: Sequence[str]) -> list[str]:
    """
    Replace --command-line FILE occurrences with the file's arguments.

    Args:
        argv: Raw arguments (without program name)

    Returns:
        Fully expanded argument list

    Raises:
        ArgumentError: On a missing file or a file reference cycle
    """
    args = list(argv)
    visited: set[Path] = set()

    while True:
        file_arg, remaining = _take_command_line_flag(args)
        if file_arg is None:
            return args

        path = Path(file_arg).expanduser().resolve()
        if path in visited:
            raise ArgumentError(f"Command line file '{file_arg}' is referenced more than once")
        visited.add(path)

        file_args = read_command_line_file(path)
        logger.debug(f"Read {len(file_args)} arguments from {path}")
        args = file_args + remaining
