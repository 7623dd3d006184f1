# Path: hashify_cli/output/listings.py
"""
Console Listings

Usage text, banner, algorithm list and profile list. Everything goes
through the OUTPUT layer logger so it shares the console line format.
"""

from hashify_cli import __version__
from hashify_cli.constants import APP_NAME, PIPELINE_DIAGRAM
from hashify_cli.core.logger import get_output_logger
from hashify_cli.registry import AlgorithmCategory, AlgorithmDescriptor, AlgorithmRegistry


logger = get_output_logger('listings')


USAGE_OPTIONS = (
    ('-cl, --command-line FILE', 'Read further arguments from FILE.'),
    ('-h, --help', 'Show this help message and exit.'),
    ('-l, --list', 'List available hash algorithms and exit.'),
    ('-lp, --list-profiles NAME', 'List the config profiles of an algorithm and exit: blake2b'),
    ('-i, --input SCRIPT', "Input script: \"'Foo Bar'\""),
    ('-if, --input-finalizer SCRIPT', 'Finalizes the input: StringToArray(Input)'),
    ('-a, --algorithms QUERY', 'Hash algorithms: "CRC:Fast SHA256" or "*" (case-insensitive).'),
    ('-o, --output SCRIPT', 'Output script: Print(Result)'),
    ('-of, --output-finalizer SCRIPT', 'Finalizes the output: Join(", ", Coerce(16).AsByteArray())'),
    ('-cp, --config-profiles QUERY', 'Profiles per algorithm: "CRC=CRC32 Argon2id=OWASP".'),
    ('-cf, --config-file FILE', 'JSON config document: configs.json'),
)


def print_banner() -> None:
    """Log the application banner."""
    logger.info(f"{APP_NAME} v{__version__}")


def print_usage() -> None:
    """Log the usage text."""
    logger.info("Usage: hashify [options]")
    logger.info(f"Pipeline: {PIPELINE_DIAGRAM}")
    logger.info("Options:")
    width = max(len(flags) for flags, _ in USAGE_OPTIONS) + 2
    for flags, description in USAGE_OPTIONS:
        logger.info(f"  {flags:<{width}}{description}")


def print_algorithms(registry: AlgorithmRegistry) -> None:
    """Log every registered algorithm with its category."""
    logger.info("Available Hash Algorithms:")
    for category in (AlgorithmCategory.CRYPTOGRAPHIC, AlgorithmCategory.NONCRYPTOGRAPHIC):
        for descriptor in registry.descriptors(category):
            logger.info(f"  - {descriptor.name} ({category.display_name})")


def print_profiles(registry: AlgorithmRegistry, descriptor: AlgorithmDescriptor) -> None:
    """
    Log the profiles of one algorithm.

    Args:
        registry: Algorithm registry
        descriptor: Algorithm to list
    """
    profiles = registry.profiles(descriptor)
    if not profiles:
        logger.warning(f"No config profile available for '{descriptor.name}'.")
        return

    logger.info(f"Available Config Profiles of '{descriptor.name}':")
    for profile in profiles:
        if profile.description:
            logger.info(f"  - {profile.name}: {profile.description}")
        else:
            logger.info(f"  - {profile.name}")
