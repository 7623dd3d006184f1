# Path: hashify_cli/registry/catalog.py
"""
Algorithm Registry

Holds the registered algorithms and answers the questions the pipeline
asks of them: which descriptors exist per category, which algorithm a
name refers to, and which profiles an algorithm offers.

The registry is populated once and is read-only afterwards.
"""

from typing import Iterable, Optional

from hashify_cli.core.errors import UnknownReferenceError
from hashify_cli.registry.algorithms import ALL_ALGORITHMS, HashAlgorithm
from hashify_cli.registry.models import (
    AlgorithmCategory,
    AlgorithmDescriptor,
    ConfigProfile,
    HashConfig,
)


class AlgorithmRegistry:
    """
    Lookup table from descriptors to algorithm instances.

    Example:
        registry = default_registry()
        crc = registry.find('crc')
        config = registry.algorithm(crc).default_config()
    """

    def __init__(self, algorithms: Iterable[HashAlgorithm]):
        self._algorithms: dict[AlgorithmDescriptor, HashAlgorithm] = {}
        for algorithm in algorithms:
            descriptor = algorithm.descriptor
            if self.find(descriptor.name) is not None:
                raise ValueError(f"Algorithm '{descriptor.name}' is registered twice")
            self._algorithms[descriptor] = algorithm

    def descriptors(self, category: Optional[AlgorithmCategory] = None) -> list[AlgorithmDescriptor]:
        """
        List registered descriptors in registration order.

        Args:
            category: Restrict to one category; all when None

        Returns:
            List of AlgorithmDescriptor
        """
        return [
            descriptor for descriptor in self._algorithms
            if category is None or descriptor.category is category
        ]

    def find(self, name: str) -> Optional[AlgorithmDescriptor]:
        """Find a descriptor by name (case-insensitive)."""
        wanted = name.strip().casefold()
        for descriptor in self._algorithms:
            if descriptor.name.casefold() == wanted:
                return descriptor
        return None

    def algorithm(self, descriptor: AlgorithmDescriptor) -> HashAlgorithm:
        """
        Get the algorithm registered under descriptor.

        Raises:
            UnknownReferenceError: If the descriptor is not registered
        """
        try:
            return self._algorithms[descriptor]
        except KeyError:
            raise UnknownReferenceError(f"Algorithm '{descriptor}' is not registered") from None

    def default_config(self, descriptor: AlgorithmDescriptor) -> HashConfig:
        return self.algorithm(descriptor).default_config()

    def profiles(self, descriptor: AlgorithmDescriptor) -> list[ConfigProfile]:
        return self.algorithm(descriptor).profiles()

    def find_profile(self, descriptor: AlgorithmDescriptor, name: str) -> Optional[ConfigProfile]:
        return self.algorithm(descriptor).find_profile(name)

    def __len__(self) -> int:
        return len(self._algorithms)

    def __contains__(self, descriptor: object) -> bool:
        return descriptor in self._algorithms


def default_registry() -> AlgorithmRegistry:
    """Build a registry holding every bundled algorithm."""
    return AlgorithmRegistry(algorithm_class() for algorithm_class in ALL_ALGORITHMS)
