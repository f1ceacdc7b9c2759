# Clearopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` dataclass used by `OptionRegistry` to describe a single
declared command-line option, and `HelpOption` for the option that requests
the help screen.

An `Option` is immutable metadata: its names, the attribute it binds on the
target, the declared field type, default, help text, mutual-exclusion group and
arity. Whether an option was seen during a parse is tracked separately by
`OptionState`, so one `Option` can be shared by every parse of a target type.

Key Attributes:
- `short_name`: Single character name, used as `-x` (optional)
- `long_name`: Word name, used as `--long-name` (optional)
- `dest`: Attribute name set on the target
- `type`: Declared field type (`str`, `int | None`, `list[int]`, an `Enum`, ...)
- `arity`: `OptionArity` describing how values are collected
- `binding`: `Binding` resolved from `type` and `arity` at construction

Options should be created using `OptionRegistry.add_option()`.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from clearopt.parser.binder import Binding, resolve_binding
from clearopt.parser.option_arity import OptionArity


def format_option_names(
    short_name: str | None, long_name: str | None, add_dashes: bool = True
) -> str:
    """Return the name column for an option, e.g. `-d, --directory`."""
    parts = []
    if short_name:
        parts.append(f"-{short_name}" if add_dashes else short_name)
    if long_name:
        parts.append(f"--{long_name}" if add_dashes else long_name)
    return ", ".join(parts)


@dataclass(frozen=True)
class Option:
    """
    Represents a declared command-line option.

    Attributes:
        dest (str): The attribute set on the target.
        short_name (str | None): Single character short name.
        long_name (str | None): Long name.
        type (Any): Declared type of the target field.
        required (bool): True if the option must be present on the command line.
        default (Any): Value assigned to the target before each parse, if not None.
        help (str): Help text for the option.
        mutually_exclusive_set (str | None): Group in which only one option may be defined.
        arity (OptionArity): How values are collected.
        separator (str): Separator for `OptionArity.DELIMITED_LIST`.
        binding (Binding): Binding variant resolved from `type` and `arity`.
    """

    dest: str
    short_name: str | None = None
    long_name: str | None = None
    type: Any = str
    required: bool = False
    default: Any = None
    help: str = ""
    mutually_exclusive_set: str | None = None
    arity: OptionArity = OptionArity.SCALAR
    separator: str = ":"
    binding: Binding = field(default=None, compare=False)  # type: ignore[assignment]
    lock: Any = field(
        default_factory=threading.Lock, compare=False, hash=False, repr=False
    )

    def __post_init__(self) -> None:
        if self.binding is None:
            object.__setattr__(
                self, "binding", resolve_binding(self.type, self.arity, self.dest)
            )

    @property
    def canonical_name(self) -> str:
        """The unique key of the option: the short name if present, else the long name."""
        return self.short_name or self.long_name or ""

    @property
    def has_short_name(self) -> bool:
        return bool(self.short_name)

    @property
    def has_long_name(self) -> bool:
        return bool(self.long_name)

    @property
    def has_both_names(self) -> bool:
        return self.has_short_name and self.has_long_name

    @property
    def has_default(self) -> bool:
        return self.default is not None

    @property
    def is_boolean(self) -> bool:
        return self.binding.is_boolean

    @property
    def is_array(self) -> bool:
        return self.binding.is_array

    def get_names_text(self, add_dashes: bool = True) -> str:
        """Get the name column text for the option."""
        return format_option_names(self.short_name, self.long_name, add_dashes)

    def __str__(self) -> str:
        return (
            f"Option(names='{self.get_names_text()}', dest='{self.dest}', "
            f"arity={self.arity}, required={self.required})"
        )


@dataclass(frozen=True)
class HelpOption:
    """The option that requests the help screen. It is never bound or required."""

    short_name: str | None = None
    long_name: str | None = "help"
    help: str = "Display this help screen."

    required = False

    @property
    def has_short_name(self) -> bool:
        return bool(self.short_name)

    @property
    def has_long_name(self) -> bool:
        return bool(self.long_name)

    def get_names_text(self, add_dashes: bool = True) -> str:
        """Get the name column text for the help option."""
        return format_option_names(self.short_name, self.long_name, add_dashes)
