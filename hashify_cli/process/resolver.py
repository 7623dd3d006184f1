# Path: hashify_cli/process/resolver.py
"""
Algorithm Query Resolver

Turns an algorithm query into an ordered list of FunctionVariables.

Query forms:
    *                     every registered algorithm, cryptographic first
    CRC SHA256            bare names, whitespace or comma separated
    CRC:Fast CRC:Slow     named instances of the same algorithm

A malformed token (more than one ':' or an empty side) invalidates the
whole query. Unknown names are skipped.
"""

import re
from dataclasses import dataclass
from typing import Optional

from hashify_cli.constants import VARIABLE_SEPARATOR, WILDCARD_TOKEN
from hashify_cli.core.logger import get_input_logger
from hashify_cli.registry import AlgorithmCategory, AlgorithmDescriptor, AlgorithmRegistry


logger = get_input_logger('resolver')

TOKEN_SPLIT = re.compile(r'[\s,]+')


@dataclass(frozen=True, eq=False)
class FunctionVariable:
    """
    An algorithm together with an optional instance name.

    Two FunctionVariables are equal when the descriptors are equal and the
    instance names match case-insensitively. An unqualified variable never
    equals a named one.
    """
    descriptor: AlgorithmDescriptor
    variable: Optional[str] = None

    @property
    def is_qualified(self) -> bool:
        return self.variable is not None

    @property
    def qualified_name(self) -> str:
        if self.variable is None:
            return self.descriptor.name
        return f"{self.descriptor.name}{VARIABLE_SEPARATOR}{self.variable}"

    @property
    def key(self) -> tuple:
        variable = None if self.variable is None else self.variable.casefold()
        return self.descriptor.key, variable

    def unqualified(self) -> 'FunctionVariable':
        return FunctionVariable(self.descriptor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FunctionVariable):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return self.qualified_name


def split_token(token: str) -> Optional[tuple[str, Optional[str]]]:
    """
    Split 'Name' or 'Name:Variable'.

    Returns:
        (name, variable) or None when the token is malformed
    """
    parts = token.split(VARIABLE_SEPARATOR)
    if len(parts) == 1:
        return (parts[0], None) if parts[0] else None
    if len(parts) == 2 and parts[0] and parts[1]:
        return parts[0], parts[1]
    return None


def resolve_query(query: str, registry: AlgorithmRegistry) -> list[FunctionVariable]:
    """
    Resolve an algorithm query.

    Args:
        query: Query string
        registry: Algorithm registry

    Returns:
        FunctionVariables in token order; empty when the query is malformed
        or no token names a known algorithm
    """
    text = query.strip()
    if text == WILDCARD_TOKEN:
        return [
            FunctionVariable(descriptor)
            for category in (AlgorithmCategory.CRYPTOGRAPHIC, AlgorithmCategory.NONCRYPTOGRAPHIC)
            for descriptor in registry.descriptors(category)
        ]

    resolved = []
    for token in TOKEN_SPLIT.split(text):
        if not token:
            continue

        parts = split_token(token)
        if parts is None:
            logger.debug(f"Malformed algorithm token '{token}' invalidates query '{query}'")
            return []

        name, variable = parts
        descriptor = registry.find(name)
        if descriptor is None:
            logger.debug(f"Skipping unknown algorithm '{name}'")
            continue

        resolved.append(FunctionVariable(descriptor, variable))

    return resolved
