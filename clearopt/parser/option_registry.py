# Clearopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `OptionRegistry`, the explicit registration step that turns option
declarations into an ordered list of immutable `Option` descriptors.

A registry is built once per target type (see `CommandLineOptions.declare_options`)
and shared by every parse of that type. All declaration problems are reported
here, at registration time, as `OptionDeclarationError`; arity/field-shape
mismatches raise the more specific `OptionContractError`.

Example Usage:
    registry = OptionRegistry()
    registry.add_option("-d", "--directory", required=True, help="Denotes log directory.")
    registry.add_option("-v", "--verbose", type=bool, default=True)
    registry.add_option("--files", type=list[str], arity="array")
    registry.add_help_option("--help")
"""
from __future__ import annotations

import re
from typing import Any, Iterator

from clearopt.exceptions import OptionDeclarationError
from clearopt.logger import logger
from clearopt.parser.binder import (
    CONVERSION_ERRORS,
    Binding,
    BindingKind,
    resolve_binding,
)
from clearopt.parser.option import HelpOption, Option
from clearopt.parser.option_arity import OptionArity
from clearopt.parser.parser_types import ValueList
from clearopt.parser.utils import coerce_value

_LONG_NAME = re.compile(r"^[^\W_][\w-]*$")


class OptionRegistry:
    """
    Ordered collection of the options declared for one target type.

    Features:
    - Declarative option registration via `add_option()`.
    - Short (`-x`) and long (`--long-name`) names with a derived canonical name.
    - Validation of names, destinations, defaults, separators and arity.
    - Optional help option and positional value list declarations.
    """

    def __init__(self) -> None:
        self._options: list[Option] = []
        self._names: dict[str, Option] = {}
        self._dest_set: set[str] = set()
        self._help_option: HelpOption | None = None
        self._value_list: ValueList | None = None

    @property
    def options(self) -> tuple[Option, ...]:
        """Declared options in declaration order."""
        return tuple(self._options)

    @property
    def help_option(self) -> HelpOption | None:
        return self._help_option

    @property
    def value_list(self) -> ValueList | None:
        return self._value_list

    def _split_flags(self, flags: tuple[str, ...]) -> tuple[str | None, str | None]:
        """Validate the flags and return `(short_name, long_name)`."""
        if not flags:
            raise OptionDeclarationError(
                "No flags provided: an option needs a short name, a long name or both"
            )
        short_name: str | None = None
        long_name: str | None = None
        for flag in flags:
            if not isinstance(flag, str):
                raise OptionDeclarationError(f"Flag '{flag}' must be a string")
            if flag.startswith("--"):
                name = flag[2:]
                if not _LONG_NAME.match(name):
                    raise OptionDeclarationError(
                        f"Flag '{flag}' must be '--' followed by a word"
                    )
                if long_name is not None:
                    raise OptionDeclarationError(
                        f"Only one long name is allowed, got '--{long_name}' and '{flag}'"
                    )
                long_name = name
            elif flag.startswith("-"):
                name = flag[1:]
                if len(name) != 1 or name in "-= ":
                    raise OptionDeclarationError(
                        f"Flag '{flag}' must be a single character or start with '--'"
                    )
                if short_name is not None:
                    raise OptionDeclarationError(
                        f"Only one short name is allowed, got '-{short_name}' and '{flag}'"
                    )
                short_name = name
            else:
                raise OptionDeclarationError(
                    f"Flag '{flag}' must start with '-' or '--'"
                )
        return short_name, long_name

    def _get_dest(
        self, short_name: str | None, long_name: str | None, dest: str | None
    ) -> str:
        """Convert names to a destination attribute name."""
        if not dest:
            dest = (long_name or short_name or "").replace("-", "_").lower()
        if not dest:
            raise OptionDeclarationError("dest must not be empty")
        if not dest.replace("_", "").isalnum():
            raise OptionDeclarationError(
                "dest must be a valid identifier (letters, digits, and underscores only)"
            )
        if dest[0].isdigit():
            raise OptionDeclarationError("dest must not start with a digit")
        return dest

    def _validate_arity(self, arity: OptionArity | str) -> OptionArity:
        if isinstance(arity, OptionArity):
            return arity
        try:
            return OptionArity(arity)
        except ValueError as error:
            raise OptionDeclarationError(str(error)) from error

    def _validate_separator(self, separator: str, arity: OptionArity) -> str:
        if not isinstance(separator, str) or len(separator) != 1:
            raise OptionDeclarationError(
                f"separator must be a single character, got {separator!r}"
            )
        if separator != ":" and arity != OptionArity.DELIMITED_LIST:
            raise OptionDeclarationError(
                f"separator can only be set for {OptionArity.DELIMITED_LIST} options"
            )
        return separator

    def _resolve_default(self, default: Any, binding: Binding, dest: str) -> Any:
        """Validate the default against the binding and return it in its typed form."""
        if default is None:
            return None
        try:
            if binding.kind == BindingKind.BOOLEAN:
                if not isinstance(default, bool):
                    raise ValueError("boolean options need a bool default")
                return default
            if binding.kind in (BindingKind.ARRAY, BindingKind.DELIMITED_LIST):
                if not isinstance(default, (list, tuple)):
                    raise ValueError("sequence options need a list or tuple default")
                items = [coerce_value(item, binding.value_type) for item in default]
                return (binding.container or list)(items)
            return coerce_value(default, binding.value_type)
        except CONVERSION_ERRORS as error:
            raise OptionDeclarationError(
                f"Default value {default!r} for '{dest}' is invalid: {error}"
            ) from error

    def _check_name_collisions(self, *names: str | None) -> None:
        for name in names:
            if name and name in self._names:
                existing = self._names[name]
                raise OptionDeclarationError(
                    f"Name '{name}' is already used by option '{existing.dest}'"
                )
            if (
                name
                and self._help_option
                and name in (self._help_option.short_name, self._help_option.long_name)
            ):
                raise OptionDeclarationError(
                    f"Name '{name}' is already used by the help option"
                )

    def add_option(
        self,
        *flags: str,
        dest: str | None = None,
        type: Any = str,
        required: bool = False,
        default: Any = None,
        help: str = "",
        mutually_exclusive_set: str | None = None,
        arity: OptionArity | str = OptionArity.SCALAR,
        separator: str = ":",
    ) -> Option:
        """
        Declare a new option.

        Args:
            *flags (str): Short and/or long name, e.g. "-d", "--directory".
            dest (str | None): Target attribute. Derived from the long name if omitted.
            type (Any): Declared type of the target field.
            required (bool): Whether the option must appear on the command line.
            default (Any): Value assigned to the target before each parse.
            help (str): Help text shown in the help screen.
            mutually_exclusive_set (str | None): Exclusion group name.
            arity (OptionArity | str): "scalar", "array" or "delimited_list".
            separator (str): Separator character for delimited lists.

        Returns:
            Option: The registered option.

        Raises:
            OptionDeclarationError: If the declaration is invalid.
            OptionContractError: If the arity does not match the field type.
        """
        short_name, long_name = self._split_flags(flags)
        dest = self._get_dest(short_name, long_name, dest)
        if dest in self._dest_set:
            raise OptionDeclarationError(f"Destination '{dest}' is already defined.")
        self._check_name_collisions(short_name, long_name)
        arity = self._validate_arity(arity)
        separator = self._validate_separator(separator, arity)
        if mutually_exclusive_set is not None and not str(mutually_exclusive_set).strip():
            raise OptionDeclarationError("mutually_exclusive_set must not be empty")
        if not isinstance(required, bool):
            raise OptionDeclarationError(
                f"required must be a boolean, got {required.__class__.__name__}"
            )

        binding = resolve_binding(type, arity, dest)
        option = Option(
            dest=dest,
            short_name=short_name,
            long_name=long_name,
            type=type,
            required=required,
            default=self._resolve_default(default, binding, dest),
            help=help or "",
            mutually_exclusive_set=mutually_exclusive_set,
            arity=arity,
            separator=separator,
            binding=binding,
        )

        self._options.append(option)
        self._dest_set.add(dest)
        for name in (short_name, long_name):
            if name:
                self._names[name] = option
        logger.debug("Registered %s", option)
        return option

    def add_help_option(
        self, *flags: str, help: str = "Display this help screen."
    ) -> HelpOption:
        """
        Declare the option that requests the help screen.

        Defaults to `--help` when no flags are given.
        """
        if self._help_option is not None:
            raise OptionDeclarationError("A help option is already defined")
        short_name, long_name = self._split_flags(flags or ("--help",))
        self._check_name_collisions(short_name, long_name)
        self._help_option = HelpOption(short_name=short_name, long_name=long_name, help=help)
        return self._help_option

    def set_value_list(self, dest: str, maximum_elements: int = -1) -> ValueList:
        """Declare the target attribute collecting positional values."""
        if self._value_list is not None:
            raise OptionDeclarationError(
                f"A value list is already defined as '{self._value_list.dest}'"
            )
        if not isinstance(maximum_elements, int) or maximum_elements < -1:
            raise OptionDeclarationError(
                "maximum_elements must be -1 (unbounded) or a non-negative integer"
            )
        dest = self._get_dest(None, None, dest)
        if dest in self._dest_set:
            raise OptionDeclarationError(f"Destination '{dest}' is already defined.")
        self._value_list = ValueList(dest=dest, maximum_elements=maximum_elements)
        return self._value_list

    def get_option(self, dest: str) -> Option | None:
        """Return the Option bound to a given destination, if declared."""
        return next((option for option in self._options if option.dest == dest), None)

    def to_definition_list(self) -> list[dict[str, Any]]:
        """
        Convert option metadata into a serializable list of dicts.

        Returns:
            List of definitions for use in config introspection or documentation.
        """
        return [
            {
                "short_name": option.short_name,
                "long_name": option.long_name,
                "dest": option.dest,
                "type": option.type,
                "required": option.required,
                "default": option.default,
                "help": option.help,
                "mutually_exclusive_set": option.mutually_exclusive_set,
                "arity": option.arity,
                "separator": option.separator,
            }
            for option in self._options
        ]

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __str__(self) -> str:
        required = sum(option.required for option in self._options)
        return (
            f"OptionRegistry(options={len(self._options)}, names={len(self._names)}, "
            f"required={required}, help={self._help_option is not None}, "
            f"value_list={self._value_list is not None})"
        )

    def __repr__(self) -> str:
        return str(self)
