# Clearopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionArity`, an enum describing how many values a declared option binds.

Supports alias coercion for shorthand or config-friendly values, so declarations
loaded from YAML or TOML can use short names.

Exports:
    - OptionArity: Enum of allowed arities for declared options.

Example:
    OptionArity("scalar") → OptionArity.SCALAR
    OptionArity("list")   → OptionArity.DELIMITED_LIST (via alias)
    OptionArity("many")   → OptionArity.ARRAY (via alias)
"""
from __future__ import annotations

from enum import Enum


class OptionArity(Enum):
    """
    Defines how the value(s) of an option are collected from the token stream.

    Members:
        SCALAR: A single value (or a presence-only flag for boolean fields).
        ARRAY: Every positional-looking token that follows the option.
        DELIMITED_LIST: A single token split on a separator character.

    Aliases:
        - "single" → "scalar"
        - "many" → "array"
        - "list" / "delimited" → "delimited_list"
    """

    SCALAR = "scalar"
    ARRAY = "array"
    DELIMITED_LIST = "delimited_list"

    @classmethod
    def choices(cls) -> list[OptionArity]:
        """Return a list of all option arities."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "single": "scalar",
            "many": "array",
            "list": "delimited_list",
            "delimited": "delimited_list",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionArity:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower().replace("-", "_")
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the option arity."""
        return self.value
