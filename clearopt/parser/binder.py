# Clearopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Type-directed binding of raw string tokens onto a target's fields.

Every option carries a `Binding`, resolved once when the option is registered
from its declared field type and `OptionArity`:

- BOOLEAN: `bool` fields. Presence sets True.
- SCALAR: any other single-valued type (`str`, `int`, `float`, `Enum`, `Path`, ...).
- NULLABLE: `T | None`. Requires an explicit value; an empty string binds None.
- ARRAY: `list[T]` / `tuple[T, ...]` with `OptionArity.ARRAY`.
- DELIMITED_LIST: `list[str]` with `OptionArity.DELIMITED_LIST`. One token is split
  on the option's separator and every piece is kept verbatim.

Binding functions return False when a value cannot be converted. They never let
a conversion error escape, so the calling parser can turn the failure into a
format violation. Each write to the target happens under the option's own lock.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from clearopt.exceptions import OptionContractError
from clearopt.logger import logger
from clearopt.parser.option_arity import OptionArity
from clearopt.parser.utils import coerce_value, sequence_element_type, unwrap_optional

if TYPE_CHECKING:
    from clearopt.parser.option import Option

CONVERSION_ERRORS = (ValueError, TypeError, ArithmeticError)


class BindingKind(Enum):
    """The binding variants supported by the value binder."""

    BOOLEAN = "boolean"
    SCALAR = "scalar"
    NULLABLE = "nullable"
    ARRAY = "array"
    DELIMITED_LIST = "delimited_list"


@dataclass(frozen=True)
class Binding:
    """Resolved binding for one option: the variant, the element type and container."""

    kind: BindingKind
    value_type: Any = str
    container: type | None = None

    @property
    def is_boolean(self) -> bool:
        return self.kind == BindingKind.BOOLEAN

    @property
    def is_array(self) -> bool:
        return self.kind == BindingKind.ARRAY


def resolve_binding(field_type: Any, arity: OptionArity, dest: str) -> Binding:
    """
    Resolve the binding variant for a declared field type and arity.

    Raises:
        OptionContractError: If the arity does not fit the shape of the field type.
    """
    sequence = sequence_element_type(field_type)

    if arity == OptionArity.ARRAY:
        if sequence is None:
            raise OptionContractError(
                f"Option '{dest}' is declared with array arity but its field type "
                f"{field_type!r} is not a list or tuple"
            )
        container, element_type = sequence
        return Binding(BindingKind.ARRAY, element_type, container)

    if arity == OptionArity.DELIMITED_LIST:
        if sequence is None or sequence[0] is not list or sequence[1] is not str:
            raise OptionContractError(
                f"Option '{dest}' is declared with delimited_list arity and must be "
                f"bound to a list[str] field, got {field_type!r}"
            )
        return Binding(BindingKind.DELIMITED_LIST, str, list)

    if sequence is not None:
        raise OptionContractError(
            f"Option '{dest}' has a sequence field type {field_type!r}; declare it "
            "with array or delimited_list arity"
        )
    if field_type is bool:
        return Binding(BindingKind.BOOLEAN, bool)
    inner = unwrap_optional(field_type)
    if inner is not None:
        return Binding(BindingKind.NULLABLE, inner)
    return Binding(BindingKind.SCALAR, field_type)


def _write(option: Option, target: Any, value: Any) -> None:
    with option.lock:
        setattr(target, option.dest, value)


def bind_flag(option: Option, target: Any) -> bool:
    """Set a boolean option to True."""
    _write(option, target, True)
    return True


def bind_value(option: Option, target: Any, value: str) -> bool:
    """Bind a single raw value according to the option's binding."""
    binding = option.binding
    if binding.kind == BindingKind.DELIMITED_LIST:
        _write(option, target, value.split(option.separator))
        return True
    if binding.kind == BindingKind.ARRAY:
        return bind_values(option, target, [value])
    if binding.kind == BindingKind.NULLABLE and value == "":
        _write(option, target, None)
        return True
    try:
        converted = coerce_value(value, binding.value_type)
    except CONVERSION_ERRORS as error:
        logger.debug("Rejected value %r for '%s': %s", value, option.dest, error)
        return False
    _write(option, target, converted)
    return True


def bind_values(option: Option, target: Any, values: list[str]) -> bool:
    """Bind an ordered list of raw values to an array option, all or nothing."""
    binding = option.binding
    converted = []
    for value in values:
        try:
            converted.append(coerce_value(value, binding.value_type))
        except CONVERSION_ERRORS as error:
            logger.debug("Rejected value %r for '%s': %s", value, option.dest, error)
            return False
    container = binding.container or list
    _write(option, target, container(converted))
    return True
