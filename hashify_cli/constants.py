# Path: hashify_cli/constants.py
"""
System-Wide Constants for hashify_cli

Central repository for constant values used across the tool.
Module code refers to these names instead of repeating literals.

Constants are organized by category:
- Exit Codes
- Query Syntax
- Default Scripts
- Script Variable Names
- Console Text
"""

from enum import IntEnum
from typing import Final


# ==============================================================================
# EXIT CODES
# ==============================================================================

class ExitCode(IntEnum):
    """Process exit codes reported by the CLI."""
    SUCCESS = 0
    FAILURE = 1
    SCRIPT_FAILURE = 2


# ==============================================================================
# QUERY SYNTAX
# ==============================================================================

# Selects every registered algorithm
WILDCARD_TOKEN: Final[str] = '*'

# Separates algorithm name from instance variable: "CRC:CRC32"
VARIABLE_SEPARATOR: Final[str] = ':'

# Separates selector from profile name: "CRC:Fast=CRC32"
PROFILE_ASSIGNMENT: Final[str] = '='

# Recognized body properties of a config document entry
CONFIG_BODY_PROFILE: Final[str] = 'profile'
CONFIG_BODY_CONFIG: Final[str] = 'config'


# ==============================================================================
# DEFAULT SCRIPTS
# ==============================================================================

DEFAULT_INPUT_FINALIZER: Final[str] = 'StringToArray(Input)'
DEFAULT_OUTPUT_FINALIZER: Final[str] = 'Join(", ", AsByteArray())'
DEFAULT_OUTPUT_SCRIPT: Final[str] = 'Print(f"{Algorithm}: {Result}")'


# ==============================================================================
# SCRIPT VARIABLE NAMES
# ==============================================================================

INPUT_VARIABLE: Final[str] = 'Input'
RESULT_VARIABLE: Final[str] = 'Result'
ALGORITHM_VARIABLE: Final[str] = 'Algorithm'


# ==============================================================================
# CONSOLE TEXT
# ==============================================================================

APP_NAME: Final[str] = 'HashifyCLI'
CONSOLE_DATE_FORMAT: Final[str] = '%m/%d/%y-%H:%M:%S'

# Custom log level for messages printed by scripts (between INFO and WARNING)
SCRIPT_LOG_LEVEL: Final[int] = 25
SCRIPT_LOG_LEVEL_NAME: Final[str] = 'SCRIPT'

PIPELINE_DIAGRAM: Final[str] = (
    '[for each algorithm: -input >> --input-finalizer >> '
    'Compute >> --output-finalizer >> --output]'
)
