# Path: hashify_cli/registry/field_types.py
"""
Configuration Field Types

Closed set of value kinds a configuration field may hold. Config models
attach a FieldType to each configurable field through typing.Annotated:

    polynomial: Annotated[int, BIG_INTEGER] = 0x04C11DB7
    key: Annotated[tuple[int, ...], array_of(UINT8)] = ()

Only these kinds can be set from a config document.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Final, Optional


class FieldKind(str, Enum):
    """Value kinds supported by configuration fields."""
    BOOLEAN = 'bool'
    STRING = 'str'
    BIG_INTEGER = 'bigint'
    INT8 = 'int8'
    UINT8 = 'uint8'
    INT16 = 'int16'
    UINT16 = 'uint16'
    INT32 = 'int32'
    UINT32 = 'uint32'
    INT64 = 'int64'
    UINT64 = 'uint64'
    FLOAT32 = 'float32'
    FLOAT64 = 'float64'
    DECIMAL = 'decimal'
    ARRAY = 'array'


# Inclusive bounds of the fixed-width integer kinds
INTEGER_RANGES: Final[dict[FieldKind, tuple[int, int]]] = {
    FieldKind.INT8: (-(2 ** 7), 2 ** 7 - 1),
    FieldKind.UINT8: (0, 2 ** 8 - 1),
    FieldKind.INT16: (-(2 ** 15), 2 ** 15 - 1),
    FieldKind.UINT16: (0, 2 ** 16 - 1),
    FieldKind.INT32: (-(2 ** 31), 2 ** 31 - 1),
    FieldKind.UINT32: (0, 2 ** 32 - 1),
    FieldKind.INT64: (-(2 ** 63), 2 ** 63 - 1),
    FieldKind.UINT64: (0, 2 ** 64 - 1),
}

FLOAT_KINDS: Final[frozenset[FieldKind]] = frozenset({FieldKind.FLOAT32, FieldKind.FLOAT64})

# Largest finite single-precision value
FLOAT32_MAX: Final[float] = 3.4028234663852886e38

# High-precision decimal: 28 significant digits, magnitude below 2**96
DECIMAL_PRECISION: Final[int] = 28
DECIMAL_MAX: Final[Decimal] = Decimal(2 ** 96 - 1)


@dataclass(frozen=True)
class FieldType:
    """
    Type of a configuration field.

    Attributes:
        kind: Value kind
        element: Element type when kind is ARRAY, otherwise None
    """
    kind: FieldKind
    element: Optional['FieldType'] = None

    def __post_init__(self):
        if self.kind is FieldKind.ARRAY:
            if self.element is None:
                raise ValueError("Array field type requires an element type")
            if self.element.kind is FieldKind.ARRAY:
                raise ValueError("Only one-dimensional arrays are supported")
        elif self.element is not None:
            raise ValueError(f"Field kind '{self.kind.value}' cannot have an element type")

    @property
    def is_array(self) -> bool:
        return self.kind is FieldKind.ARRAY

    def __str__(self) -> str:
        if self.is_array:
            return f"{self.element}[]"
        return self.kind.value


def array_of(element: FieldType) -> FieldType:
    """Build a one-dimensional array type over element."""
    return FieldType(FieldKind.ARRAY, element)


BOOLEAN = FieldType(FieldKind.BOOLEAN)
STRING = FieldType(FieldKind.STRING)
BIG_INTEGER = FieldType(FieldKind.BIG_INTEGER)
INT8 = FieldType(FieldKind.INT8)
UINT8 = FieldType(FieldKind.UINT8)
INT16 = FieldType(FieldKind.INT16)
UINT16 = FieldType(FieldKind.UINT16)
INT32 = FieldType(FieldKind.INT32)
UINT32 = FieldType(FieldKind.UINT32)
INT64 = FieldType(FieldKind.INT64)
UINT64 = FieldType(FieldKind.UINT64)
FLOAT32 = FieldType(FieldKind.FLOAT32)
FLOAT64 = FieldType(FieldKind.FLOAT64)
DECIMAL = FieldType(FieldKind.DECIMAL)
