# Clearopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value coercion and type inspection utilities for clearopt argument binding.

This module provides type coercion functions for converting string tokens into
expected Python types, including `Enum`, `bool`, `datetime`, and `Literal`. It
also exposes the small amount of `typing` inspection needed to tell nullable,
sequence and scalar field types apart when an option is registered.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_enum: Convert a string or raw value to an Enum instance.
- coerce_value: General-purpose coercion to a target type (including unions, enums, etc.).
- unwrap_optional: Return `T` for `T | None`, else None.
- sequence_element_type: Return `(origin, T)` for `list[T]` / `tuple[T, ...]`, else None.
"""
import types
from datetime import datetime
from enum import EnumMeta
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

_TRUE_WORDS = frozenset({"true", "t", "1", "yes", "y", "on"})
_FALSE_WORDS = frozenset({"false", "f", "0", "no", "n", "off"})


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts truthy and falsy spellings such as 'true', 'yes', '0', 'off'.

    Args:
        value (str): The input string or boolean.

    Returns:
        bool: Parsed boolean result.

    Raises:
        ValueError: If the string is not a recognised boolean spelling.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in _TRUE_WORDS:
        return True
    elif normalized in _FALSE_WORDS:
        return False
    raise ValueError(f"'{value}' is not a valid boolean")


def coerce_enum(value: Any, enum_type: EnumMeta) -> Any:
    """
    Convert a raw value or string to an Enum instance.

    Tries to resolve by name (exact, then case-insensitive), then by value or
    coerced base type.

    Args:
        value (Any): The input value to convert.
        enum_type (EnumMeta): The target Enum class.

    Returns:
        Enum: The corresponding Enum instance.

    Raises:
        ValueError: If the value cannot be resolved to a valid Enum member.
    """
    if isinstance(value, enum_type):
        return value

    if isinstance(value, str):
        try:
            return enum_type[value]
        except KeyError:
            pass
        folded = value.strip().casefold()
        for name, member in enum_type.__members__.items():
            if name.casefold() == folded:
                return member

    base_type = type(next(iter(enum_type)).value)
    try:
        coerced_value = base_type(value)
        return enum_type(coerced_value)
    except (ValueError, TypeError):
        names = [member.name for member in enum_type]
        raise ValueError(f"'{value}' should be one of {{{', '.join(names)}}}") from None


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Attempt to convert a string to the given target type.

    Handles typing constructs such as Union, Literal, Enum, and datetime. Any
    other target type is called with the string.

    Args:
        value (str): The input string to convert.
        target_type (type): The desired type.

    Returns:
        Any: The coerced value.

    Raises:
        ValueError: If conversion fails or the value is invalid.
    """
    origin = get_origin(target_type)
    args = get_args(target_type)

    if target_type is Any or target_type is str:
        return value if isinstance(value, str) else str(value)

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
            except (ValueError, TypeError, ArithmeticError):
                continue
        raise ValueError(f"Value '{value}' could not be coerced to any of {args}")

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)

    if target_type is bool:
        return coerce_bool(value)

    if target_type is datetime:
        if isinstance(value, datetime):
            return value
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(f"Value '{value}' could not be parsed as a datetime") from error

    return target_type(value)


def unwrap_optional(target_type: Any) -> Any | None:
    """Return `T` when `target_type` is `T | None` (or `Optional[T]`), else None."""
    if not (
        isinstance(target_type, types.UnionType) or get_origin(target_type) is Union
    ):
        return None
    args = [arg for arg in get_args(target_type) if arg is not type(None)]
    if len(args) == len(get_args(target_type)):
        return None
    if len(args) == 1:
        return args[0]
    return Union[tuple(args)]


def sequence_element_type(target_type: Any) -> tuple[type, Any] | None:
    """
    Return `(container, element_type)` for array-shaped field types.

    `list`, `list[T]`, `tuple[T, ...]` and bare `tuple` are array-shaped.
    Anything else (including `str`) returns None.
    """
    if target_type in (list, tuple):
        return target_type, str
    origin = get_origin(target_type)
    if origin not in (list, tuple):
        return None
    args = get_args(target_type)
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple, args[0]
        if not args:
            return tuple, str
        return None
    return list, args[0] if args else str
