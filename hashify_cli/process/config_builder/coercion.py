# Path: hashify_cli/process/config_builder/coercion.py
"""
JSON Value Coercion

Converts a decoded JSON value into the Python value of a configuration
field, according to the field's FieldType. The policy is closed:

    JSON boolean  -> bool
    JSON string   -> str, or big integer (decimal or 0x-prefixed hex digits)
    JSON number   -> fixed-width integers, float32/float64, decimal
    JSON array    -> one-dimensional array; every element coerced
    anything else -> CoercionError

Numbers should be decoded as Decimal (see decode_document) so the range
and precision checks see the literal exactly as written. A value that does
not fit is an error; nothing is ever rounded into range or truncated.
"""

import math
import re
import struct
from decimal import Context, Decimal, Inexact, InvalidOperation
from typing import Any

from hashify_cli.core.errors import CoercionError
from hashify_cli.registry.field_types import (
    DECIMAL_MAX,
    DECIMAL_PRECISION,
    FLOAT32_MAX,
    FieldKind,
    FieldType,
    INTEGER_RANGES,
)


_DECIMAL_CONTEXT = Context(prec=DECIMAL_PRECISION, traps=[Inexact, InvalidOperation])

# Optional sign, then decimal digits or 0x and hex digits
BIG_INTEGER_PATTERN = re.compile(r'([+-]?)(?:0[xX]([0-9a-fA-F]+)|([0-9]+))')


def describe_json(value: Any) -> str:
    """Name the JSON type of a decoded value."""
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, (int, float, Decimal)):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, list):
        return 'array'
    if isinstance(value, dict):
        return 'object'
    return type(value).__name__


def coerce_value(value: Any, field_type: FieldType, path: str = '') -> Any:
    """
    Coerce a decoded JSON value into field_type.

    Args:
        value: Value produced by json.loads(..., parse_float=Decimal)
        field_type: Target field type
        path: Location of the value, used in error messages

    Returns:
        bool, str, int, float, Decimal, or a tuple for array types

    Raises:
        CoercionError: If the value cannot be represented exactly
    """
    kind = field_type.kind

    # bool is an int subclass; check it before numbers
    if isinstance(value, bool):
        if kind is FieldKind.BOOLEAN:
            return value
    elif isinstance(value, str):
        if kind is FieldKind.STRING:
            return value
        if kind is FieldKind.BIG_INTEGER:
            return _parse_big_integer(value, field_type, path)
    elif isinstance(value, (int, Decimal)):
        if kind in INTEGER_RANGES:
            return _to_fixed_integer(value, field_type, path)
        if kind is FieldKind.FLOAT32 or kind is FieldKind.FLOAT64:
            return _to_float(value, field_type, path)
        if kind is FieldKind.DECIMAL:
            return _to_decimal(value, field_type, path)
    elif isinstance(value, list):
        if kind is FieldKind.ARRAY:
            return tuple(
                coerce_value(item, field_type.element, f"{path}[{index}]")
                for index, item in enumerate(value)
            )

    raise _fail(f"Cannot convert JSON {describe_json(value)} to {field_type}", field_type, path)


def _fail(message: str, field_type: FieldType, path: str) -> CoercionError:
    if path:
        message = f"{message} at '{path}'"
    return CoercionError(message, path=path, target=str(field_type))


def _integral(value: Any) -> bool:
    if isinstance(value, int):
        return True
    return value.is_finite() and value == value.to_integral_value()


def _parse_big_integer(text: str, field_type: FieldType, path: str) -> int:
    cleaned = text.strip().replace(',', '').replace('_', '')
    match = BIG_INTEGER_PATTERN.fullmatch(cleaned)
    if match is None:
        raise _fail(f"Cannot parse '{text}' as an integer", field_type, path)

    sign, hex_digits, decimal_digits = match.groups()
    try:
        if hex_digits is not None:
            result = int(hex_digits, 16)
        else:
            result = int(decimal_digits)
    except ValueError as e:
        raise _fail(f"Cannot parse '{text}' as an integer", field_type, path) from e

    return -result if sign == '-' else result


def _to_fixed_integer(value: Any, field_type: FieldType, path: str) -> int:
    if not _integral(value):
        raise _fail(f"{value} is not an integer", field_type, path)

    low, high = INTEGER_RANGES[field_type.kind]
    if not low <= value <= high:
        raise _fail(f"{value} is outside the {field_type} range [{low}, {high}]", field_type, path)
    return int(value)


def _to_float(value: Any, field_type: FieldType, path: str) -> float:
    try:
        result = float(value)
    except OverflowError as e:
        raise _fail(f"{value} overflows {field_type}", field_type, path) from e

    if not math.isfinite(result):
        raise _fail(f"{value} overflows {field_type}", field_type, path)

    if field_type.kind is FieldKind.FLOAT32:
        if abs(result) > FLOAT32_MAX:
            raise _fail(f"{value} overflows {field_type}", field_type, path)
        result = struct.unpack('<f', struct.pack('<f', result))[0]
    return result


def _to_decimal(value: Any, field_type: FieldType, path: str) -> Decimal:
    try:
        result = _DECIMAL_CONTEXT.plus(Decimal(value))
    except (Inexact, InvalidOperation) as e:
        raise _fail(
            f"{value} exceeds {DECIMAL_PRECISION} significant digits", field_type, path
        ) from e

    if abs(result) > DECIMAL_MAX:
        raise _fail(f"{value} overflows {field_type}", field_type, path)
    return result
