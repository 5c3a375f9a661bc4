# Commander CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercion utilities for Commander descriptors.

Converts a single string token into an expected Python type, including `Enum`,
`bool`, `datetime`, `Literal` and unions.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_enum: Convert a string to an Enum member.
- coerce_value: General-purpose coercion to a target type.
"""
import types
from datetime import datetime
from enum import EnumMeta
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

_TRUE_VALUES = {"true", "t", "1", "yes", "y", "on"}
_FALSE_VALUES = {"false", "f", "0", "no", "n", "off"}


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Unlike `bool(value)`, unrecognized strings are rejected rather than being
    treated as truthy.

    Raises:
        ValueError: If the string is not a recognized boolean spelling.
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"'{value}' is not a boolean")


def coerce_enum(value: str, enum_type: EnumMeta) -> Any:
    """
    Convert a string to an Enum member, by name first, then by value.

    Raises:
        ValueError: If the value does not resolve to a member.
    """
    try:
        return enum_type[value]
    except KeyError:
        pass

    base_type = type(next(iter(enum_type)).value)
    try:
        return enum_type(base_type(value))
    except (ValueError, TypeError):
        values = [str(member.value) for member in enum_type]
        raise ValueError(f"'{value}' should be one of {{{', '.join(values)}}}") from None


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Attempt to convert a string to the given target type.

    Raises:
        ValueError: If conversion fails or the value is invalid.
    """
    origin = get_origin(target_type)
    args = get_args(target_type)

    if origin is Literal:
        if value not in args:
            raise ValueError(
                f"Value '{value}' is not a valid literal for type {target_type}"
            )
        return value

    if isinstance(target_type, types.UnionType) or origin is Union:
        for arg in args:
            if arg is type(None):
                continue
            try:
                return coerce_value(value, arg)
            except (ValueError, TypeError):
                continue
        raise ValueError(f"Value '{value}' could not be coerced to any of {args}")

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)

    if target_type is bool:
        return coerce_bool(value)

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(f"Value '{value}' could not be parsed as a datetime") from error

    return target_type(value)
