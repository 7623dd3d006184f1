#!/usr/bin/env python3
# Path: hashify_cli/main.py
"""
hashify - Main Entry Point

Computes digests of a scripted input with one or more algorithms and
hands each digest to user scripts for formatting and output.

Data Flow:
    INPUT:   command line, command-line files, config documents
    PROCESS: [per algorithm: input >> input-finalizer >> compute >>
             output-finalizer >> output]
    OUTPUT:  whatever the output script prints or writes

Usage:
    hashify -i "'abc'" -a "CRC:CRC32"
    hashify -i "'abc'" -a "*" -of "AsHexString()"
    hashify -i "ReadAllBytes('data.bin')" -if "Input" -a SHA256 -cf configs.json
    hashify -lp CRC
    hashify -cl job.args

Exit codes:
    0  success, or help/list handled
    1  any failure
    2  a script called Fail()
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from hashify_cli.config_loader import ConfigLoader
from hashify_cli.constants import ExitCode
from hashify_cli.core.command_line import expand_command_line
from hashify_cli.core.errors import (
    ArgumentError,
    HashifyError,
    ScriptFailure,
    UnknownReferenceError,
    describe_exception,
)
from hashify_cli.core.logger import get_input_logger, setup_ipo_logging
from hashify_cli.output import print_algorithms, print_banner, print_profiles, print_usage
from hashify_cli.process import (
    ConfigCatalog,
    ConfigDocumentBuilder,
    ConfigMatcher,
    PipelineOrchestrator,
    PipelineScripts,
    ScriptHelpers,
    ScriptRuntime,
    install_helpers,
    parse_profile_query,
    resolve_query,
)
from hashify_cli.registry import AlgorithmRegistry, default_registry


logger = get_input_logger('main')


class CommandLineParser(argparse.ArgumentParser):
    """ArgumentParser that raises ArgumentError instead of exiting."""

    def error(self, message: str):
        raise ArgumentError(message)


def build_parser() -> CommandLineParser:
    """Create the command-line parser."""
    parser = CommandLineParser(prog='hashify', add_help=False, allow_abbrev=False)

    parser.add_argument('-h', '--help', action='store_true')
    parser.add_argument('-l', '--list', action='store_true')
    parser.add_argument('-lp', '--list-profiles', dest='list_profiles')
    parser.add_argument('-i', '--input', dest='input_script')
    parser.add_argument('-if', '--input-finalizer', dest='input_finalizer')
    parser.add_argument('-a', '--algorithms')
    parser.add_argument('-o', '--output', dest='output_script')
    parser.add_argument('-of', '--output-finalizer', dest='output_finalizer')
    parser.add_argument('-cp', '--config-profiles', dest='config_profiles')
    parser.add_argument('-cf', '--config-file', dest='config_file')

    return parser


def parse_arguments(argv: Sequence[str]) -> argparse.Namespace:
    """
    Expand command-line files and parse the result.

    Raises:
        ArgumentError: On unknown options or missing option values
    """
    return build_parser().parse_args(expand_command_line(argv))


def _require_script(value: Optional[str], option: str) -> str:
    if value is None or not value.strip():
        raise ArgumentError(f"{option} requires a non-empty script")
    return value


def run(args: argparse.Namespace, config: ConfigLoader, registry: AlgorithmRegistry) -> int:
    """
    Execute a parsed command line.

    Args:
        args: Parsed arguments
        config: Runtime settings
        registry: Algorithm registry

    Returns:
        Exit code

    Raises:
        HashifyError: On any argument, config or pipeline failure
    """
    if args.help:
        print_usage()
        return ExitCode.SUCCESS

    if args.list:
        print_algorithms(registry)
        return ExitCode.SUCCESS

    if args.config_profiles is not None and args.config_file is not None:
        logger.warning(
            "Both --config-profiles and --config-file were given. "
            "--config-profiles takes precedence where they overlap; consider using only one."
        )

    if args.list_profiles is not None:
        found = resolve_query(args.list_profiles, registry)
        if not found:
            raise UnknownReferenceError(
                f"No algorithm found with '{args.list_profiles}' to retrieve profiles for"
            )
        print_profiles(registry, found[0].descriptor)
        return ExitCode.SUCCESS

    scripts = PipelineScripts(
        input=_require_script(args.input_script, '--input'),
        input_finalizer=_require_script(
            args.input_finalizer or config.get('input_finalizer'), '--input-finalizer'
        ),
        output_finalizer=_require_script(
            args.output_finalizer or config.get('output_finalizer'), '--output-finalizer'
        ),
        output=_require_script(
            args.output_script or config.get('output_script'), '--output'
        ),
    )

    if args.algorithms is None or not args.algorithms.strip():
        raise ArgumentError("--algorithms requires an algorithm query")

    profile_query = None
    if args.config_profiles is not None:
        profile_query = parse_profile_query(args.config_profiles)

    catalog = ConfigCatalog()
    if args.config_file is not None:
        if not args.config_file.strip():
            raise ArgumentError("--config-file requires a file path")
        catalog = ConfigDocumentBuilder(registry).load(Path(args.config_file))

    variables = resolve_query(args.algorithms, registry)
    if not variables:
        logger.error(f"Invalid or unsupported algorithm query '{args.algorithms}'")
        print_algorithms(registry)
        return ExitCode.FAILURE

    matcher = ConfigMatcher(registry, profile_query, catalog)
    with ScriptRuntime() as runtime:
        install_helpers(runtime, ScriptHelpers(config.get('text_encoding')))
        orchestrator = PipelineOrchestrator(registry, runtime, matcher, scripts)
        orchestrator.run(variables)

    return ExitCode.SUCCESS


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for hashify.

    Args:
        argv: Arguments without the program name; sys.argv[1:] when None

    Returns:
        Exit code (0 success, 1 failure, 2 script-raised failure)
    """
    arguments = list(sys.argv[1:] if argv is None else argv)

    config = ConfigLoader()
    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level=config.get('log_level', 'INFO'),
        console_output=config.get('log_console', True)
    )

    if config.get('show_banner', True):
        print_banner()

    if not arguments:
        print_usage()
        return ExitCode.SUCCESS

    try:
        args = parse_arguments(arguments)
        return int(run(args, config, default_registry()))

    except ScriptFailure as e:
        logger.error(str(e))
        return e.exit_code

    except ArgumentError as e:
        logger.error(describe_exception(e))
        print_usage()
        return e.exit_code

    except HashifyError as e:
        logger.error(describe_exception(e))
        return e.exit_code

    except KeyboardInterrupt:
        logger.error("Interrupted")
        return 130


if __name__ == '__main__':
    sys.exit(main())
