# Path: hashify_cli/process/matcher.py
"""
Profile / Config Matcher

Chooses the configuration an algorithm instance runs with.

Resolution order (first hit wins):
1. Profile query entry for "Name:Variable" or "Name" naming an existing profile
2. Config document entry for this exact FunctionVariable
3. Config document entry for the algorithm without an instance name
4. The algorithm's default configuration

Profile query syntax: "CRC=CRC32C FNV1a:Wide=FNV128"
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from hashify_cli.constants import PROFILE_ASSIGNMENT
from hashify_cli.core.errors import ArgumentError
from hashify_cli.core.logger import get_process_logger
from hashify_cli.process.config_builder import ConfigCatalog
from hashify_cli.process.resolver import FunctionVariable
from hashify_cli.registry import AlgorithmRegistry, HashConfig


logger = get_process_logger('matcher')

TOKEN_SPLIT = re.compile(r'[\s,]+')


class ConfigSource(str, Enum):
    """Which rule produced the configuration."""
    PROFILE_QUERY = 'profile_query'
    INSTANCE_OVERRIDE = 'instance_override'
    ALGORITHM_OVERRIDE = 'algorithm_override'
    DEFAULT = 'default'


@dataclass(frozen=True)
class MatchResult:
    config: HashConfig
    source: ConfigSource
    detail: Optional[str] = None


def parse_profile_query(text: str) -> dict[str, str]:
    """
    Parse 'Name=Profile' / 'Name:Variable=Profile' pairs.

    Args:
        text: Profile query

    Returns:
        Mapping of selector to profile name, in query order. Selectors
        keep their spelling; lookups compare case-insensitively.

    Raises:
        ArgumentError: On an empty query, a token without exactly one '=',
            an empty side or a repeated selector
    """
    tokens = [token for token in TOKEN_SPLIT.split(text.strip()) if token]
    if not tokens:
        raise ArgumentError("Profile query is empty")

    result: dict[str, str] = {}
    seen = set()
    for token in tokens:
        parts = token.split(PROFILE_ASSIGNMENT)
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise ArgumentError(
                f"Invalid profile query token '{token}'; expected Name=Profile"
            )

        selector, profile = parts
        if selector.casefold() in seen:
            raise ArgumentError(f"Profile query selects '{selector}' more than once")
        seen.add(selector.casefold())
        result[selector] = profile

    return result


class ConfigMatcher:
    """
    Picks the configuration for each FunctionVariable.

    Example:
        matcher = ConfigMatcher(registry, parse_profile_query('CRC=CRC64'), catalog)
        result = matcher.match(variable)
    """

    def __init__(
        self,
        registry: AlgorithmRegistry,
        profile_query: Optional[dict[str, str]] = None,
        catalog: Optional[ConfigCatalog] = None
    ):
        self.registry = registry
        self.catalog = catalog if catalog is not None else ConfigCatalog()
        self._profile_query = {
            selector.casefold(): profile
            for selector, profile in (profile_query or {}).items()
        }

    def match(self, variable: FunctionVariable) -> MatchResult:
        """
        Resolve the configuration for variable.

        Args:
            variable: Algorithm instance about to run

        Returns:
            MatchResult holding a configuration and its source
        """
        result = self._match_profile_query(variable)
        if result is not None:
            shadowed = self.catalog.get(variable) or self.catalog.algorithm_wide(variable.descriptor)
            if shadowed is not None:
                logger.warning(
                    f"Profile query overrides the config file entry for '{variable}'"
                )
            return result

        entry = self.catalog.get(variable)
        if entry is not None:
            logger.debug(f"'{variable}' uses its own config file entry")
            return MatchResult(entry.config, ConfigSource.INSTANCE_OVERRIDE, entry.profile_name)

        if variable.is_qualified:
            entry = self.catalog.algorithm_wide(variable.descriptor)
            if entry is not None:
                logger.debug(f"'{variable}' falls back to the '{variable.descriptor}' entry")
                return MatchResult(entry.config, ConfigSource.ALGORITHM_OVERRIDE, entry.profile_name)

        return MatchResult(self.registry.default_config(variable.descriptor), ConfigSource.DEFAULT)

    def _match_profile_query(self, variable: FunctionVariable) -> Optional[MatchResult]:
        selectors = [variable.qualified_name]
        if variable.is_qualified:
            selectors.append(variable.descriptor.name)

        for selector in selectors:
            profile_name = self._profile_query.get(selector.casefold())
            if profile_name is None:
                continue

            profile = self.registry.find_profile(variable.descriptor, profile_name)
            if profile is None:
                logger.warning(
                    f"Algorithm '{variable.descriptor}' has no profile named '{profile_name}'"
                )
                continue

            logger.debug(f"'{variable}' uses profile '{profile.name}' from the profile query")
            return MatchResult(profile.create(), ConfigSource.PROFILE_QUERY, profile.name)

        return None
