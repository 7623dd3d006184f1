# Path: hashify_cli/registry/models.py
"""
Registry Models

Descriptors, configuration base model and named profiles shared by all
hash algorithms.

Design:
- AlgorithmDescriptor identifies an algorithm; names compare case-insensitively
- HashConfig is a pydantic model; configurable fields carry a FieldType
  through typing.Annotated and read-only fields are declared frozen
- ConfigProfile is a named factory producing a fresh config object
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict

from .field_types import FieldType


# =============================================================================
# ENUMS
# =============================================================================

class AlgorithmCategory(str, Enum):
    """Hash algorithm families."""
    CRYPTOGRAPHIC = 'Cryptographic'
    NONCRYPTOGRAPHIC = 'Noncryptographic'

    @property
    def display_name(self) -> str:
        if self is AlgorithmCategory.NONCRYPTOGRAPHIC:
            return 'Non-Cryptographic'
        return self.value


# =============================================================================
# DESCRIPTORS
# =============================================================================

@dataclass(frozen=True, eq=False)
class AlgorithmDescriptor:
    """
    Identity of a registered hash algorithm.

    Attributes:
        name: Canonical display name (e.g. 'CRC', 'Blake2b')
        category: Algorithm family
    """
    name: str
    category: AlgorithmCategory

    @property
    def key(self) -> tuple[str, AlgorithmCategory]:
        return self.name.casefold(), self.category

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AlgorithmDescriptor):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return self.name


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass(frozen=True)
class ConfigField:
    """
    A configurable field of a HashConfig model.

    Attributes:
        name: Python attribute name
        field_type: Declared value type
        writable: False for frozen (read-only) fields
    """
    name: str
    field_type: FieldType
    writable: bool = True

    def matches(self, property_name: str) -> bool:
        """
        Check whether a document property names this field.

        Comparison ignores case and underscores, so 'ReflectIn',
        'reflectin' and 'reflect_in' all name the same field.
        """
        return _normalize(property_name) == _normalize(self.name)


def _normalize(name: str) -> str:
    return name.replace('_', '').casefold()


class HashConfig(BaseModel):
    """
    Base class of all algorithm configuration objects.

    Subclasses declare fields with an annotated FieldType:

        class CRCConfig(HashConfig):
            hash_size_in_bits: Annotated[int, INT32] = 32
            reflect_in: Annotated[bool, BOOLEAN] = True

    Fields without a FieldType are internal and never exposed to config
    documents.
    """

    model_config = ConfigDict(extra='forbid')

    @classmethod
    def config_fields(cls) -> list[ConfigField]:
        """
        List the fields a config document may address.

        Returns:
            ConfigField entries in declaration order
        """
        fields = []
        for name, info in cls.model_fields.items():
            field_type = next(
                (item for item in info.metadata if isinstance(item, FieldType)),
                None
            )
            if field_type is None:
                continue
            fields.append(ConfigField(
                name=name,
                field_type=field_type,
                writable=not bool(info.frozen),
            ))
        return fields

    @classmethod
    def find_field(cls, property_name: str) -> Optional[ConfigField]:
        """Find the field addressed by a document property name."""
        for config_field in cls.config_fields():
            if config_field.matches(property_name):
                return config_field
        return None


# =============================================================================
# PROFILES
# =============================================================================

@dataclass(frozen=True)
class ConfigProfile:
    """
    Named configuration template supplied by an algorithm.

    Attributes:
        name: Profile name, matched case-insensitively
        factory: Callable returning a fresh config object
        description: Optional one-line description
    """
    name: str
    factory: Callable[[], HashConfig] = field(repr=False)
    description: Optional[str] = None

    def create(self) -> HashConfig:
        """Instantiate the profile's configuration."""
        return self.factory()

    def matches(self, name: str) -> bool:
        return self.name.casefold() == name.strip().casefold()
