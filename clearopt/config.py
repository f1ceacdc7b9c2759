# Clearopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for clearopt option declarations.

Options, help text and parser settings can be declared in a YAML or TOML file
instead of in `declare_options()`:

    program_name: ClearLogs
    version: "0.1"
    pre_options_lines:
      - "Usage: ClearLogs -d [log directory]"
    settings:
      mutually_exclusive: true
    help_option:
      long_name: help
    options:
      - short_name: d
        long_name: directory
        required: true
        help: Denotes log directory.
      - short_name: v
        long_name: verbose
        type: bool
        default: true
"""
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Literal

import toml
import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from clearopt.logger import logger
from clearopt.options import CommandLineOptions
from clearopt.parser.option_arity import OptionArity
from clearopt.parser.option_registry import OptionRegistry
from clearopt.settings import ParserSettings

TypeName = Literal["str", "int", "float", "bool", "path", "datetime"]

TYPE_NAMES: dict[str, type] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "path": Path,
    "datetime": datetime,
}


class OptionDeclaration(BaseModel):
    """One option declared in a config file."""

    model_config = ConfigDict(extra="forbid")

    short_name: str | None = None
    long_name: str | None = None
    dest: str | None = None
    type: TypeName = "str"
    nullable: bool = False
    required: bool = False
    default: Any = None
    help: str = ""
    mutually_exclusive_set: str | None = None
    arity: OptionArity = OptionArity.SCALAR
    separator: str = ":"

    @field_validator("arity", mode="before")
    @classmethod
    def validate_arity(cls, value: OptionArity | str) -> OptionArity:
        if isinstance(value, OptionArity):
            return value
        return OptionArity(value)

    @model_validator(mode="after")
    def validate_names(self) -> OptionDeclaration:
        if not self.short_name and not self.long_name:
            raise ValueError("An option needs a short_name, a long_name or both")
        if self.short_name is not None and len(self.short_name) != 1:
            raise ValueError(
                f"short_name must be a single character, got '{self.short_name}'"
            )
        if self.nullable and self.type == "bool":
            raise ValueError("A bool option cannot be nullable")
        return self

    @property
    def flags(self) -> tuple[str, ...]:
        flags = []
        if self.short_name:
            flags.append(f"-{self.short_name}")
        if self.long_name:
            flags.append(f"--{self.long_name}")
        return tuple(flags)

    def get_field_type(self) -> Any:
        """Return the field type for the declared type name, nullable and arity."""
        value_type: Any = TYPE_NAMES[self.type]
        if self.arity == OptionArity.ARRAY:
            return list[value_type]  # type: ignore[valid-type]
        if self.arity == OptionArity.DELIMITED_LIST:
            return list[str]
        if self.nullable:
            return value_type | None
        return value_type


class HelpOptionDeclaration(BaseModel):
    """The help option declared in a config file."""

    model_config = ConfigDict(extra="forbid")

    short_name: str | None = None
    long_name: str | None = "help"
    help: str = "Display this help screen."


class ValueListDeclaration(BaseModel):
    """The positional value list declared in a config file."""

    model_config = ConfigDict(extra="forbid")

    dest: str
    maximum_elements: int = Field(default=-1, ge=-1)


class ParserConfig(BaseModel):
    """clearopt configuration model."""

    model_config = ConfigDict(extra="forbid")

    program_name: str = ""
    version: str = ""
    pre_options_lines: list[str] = Field(default_factory=list)
    post_options_lines: list[str] = Field(default_factory=list)
    settings: ParserSettings = Field(default_factory=ParserSettings)
    help_option: HelpOptionDeclaration | None = None
    value_list: ValueListDeclaration | None = None
    options: list[OptionDeclaration] = Field(default_factory=list)

    def to_registry(self) -> OptionRegistry:
        """Build an `OptionRegistry` from the declared options."""
        registry = OptionRegistry()
        for declaration in self.options:
            registry.add_option(
                *declaration.flags,
                dest=declaration.dest,
                type=declaration.get_field_type(),
                required=declaration.required,
                default=declaration.default,
                help=declaration.help,
                mutually_exclusive_set=declaration.mutually_exclusive_set,
                arity=declaration.arity,
                separator=declaration.separator,
            )
        if self.help_option is not None:
            help_flags = []
            if self.help_option.short_name:
                help_flags.append(f"-{self.help_option.short_name}")
            if self.help_option.long_name:
                help_flags.append(f"--{self.help_option.long_name}")
            registry.add_help_option(*help_flags, help=self.help_option.help)
        if self.value_list is not None:
            registry.set_value_list(
                self.value_list.dest, self.value_list.maximum_elements
            )
        return registry

    def to_options(self) -> CommandLineOptions:
        """Return a parse target using the declared options and help text."""
        options = CommandLineOptions(self.to_registry())
        options.program_name = self.program_name
        options.version = self.version
        options.pre_options_lines = tuple(self.pre_options_lines)
        options.post_options_lines = tuple(self.post_options_lines)
        return options


def loader(file_path: Path | str) -> ParserConfig:
    """
    Load a clearopt configuration from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file (`.yaml`, `.yml` or `.toml`).

    Returns:
        ParserConfig: The validated configuration.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the content is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix.lower()
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a dictionary with option declarations."
        )

    try:
        config = ParserConfig.model_validate(raw_config)
    except ValidationError as error:
        logger.error("Invalid config file '%s': %s", path, error)
        raise ValueError(f"Invalid config file '{path}': {error}") from error
    logger.debug("Loaded %d option(s) from '%s'", len(config.options), path)
    return config
