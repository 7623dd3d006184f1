# Path: hashify_cli/registry/algorithms/base.py
"""
Base Hash Algorithm

Abstract base class for registered hash algorithms. Each algorithm
declares its descriptor, its configuration model and its named profiles,
and computes a DigestValue from bytes under a given configuration.
"""

from abc import ABC, abstractmethod
from typing import ClassVar, Optional

from ..digest_value import DigestValue
from ..models import AlgorithmCategory, AlgorithmDescriptor, ConfigProfile, HashConfig


class EmptyConfig(HashConfig):
    """Configuration of algorithms without tunable parameters."""


class HashAlgorithm(ABC):
    """
    Abstract base class for hash algorithms.

    Subclasses set the class attributes and implement compute():

        class Adler32(HashAlgorithm):
            name = 'Adler32'
            category = AlgorithmCategory.NONCRYPTOGRAPHIC

            def compute(self, data, config):
                ...
    """

    name: ClassVar[str]
    category: ClassVar[AlgorithmCategory]
    config_type: ClassVar[type[HashConfig]] = EmptyConfig

    @property
    def descriptor(self) -> AlgorithmDescriptor:
        return AlgorithmDescriptor(self.name, self.category)

    def default_config(self) -> HashConfig:
        """Build the algorithm's default configuration."""
        return self.config_type()

    def profiles(self) -> list[ConfigProfile]:
        """Named configuration templates, in display order."""
        return []

    def find_profile(self, name: str) -> Optional[ConfigProfile]:
        """
        Find a profile by name (case-insensitive).

        Args:
            name: Profile name

        Returns:
            Matching ConfigProfile or None
        """
        for profile in self.profiles():
            if profile.matches(name):
                return profile
        return None

    def compute(self, data: bytes, config: Optional[HashConfig] = None) -> DigestValue:
        """
        Compute the digest of data.

        Args:
            data: Input bytes
            config: Configuration; the default configuration when None

        Returns:
            DigestValue
        """
        if config is None:
            config = self.default_config()
        if not isinstance(config, self.config_type):
            raise TypeError(
                f"{self.name} expects {self.config_type.__name__}, "
                f"got {type(config).__name__}"
            )
        return self._compute(bytes(data), config)

    @abstractmethod
    def _compute(self, data: bytes, config: HashConfig) -> DigestValue:
        """Algorithm-specific digest computation."""
        pass
