"""
Clearopt Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .option import HelpOption, Option
from .option_arity import OptionArity
from .option_registry import OptionRegistry
from .parser_types import ParserState, ParsingError, PostParsingState, ValueList
from .command_line_parser import CommandLineParser

__all__ = [
    "CommandLineParser",
    "HelpOption",
    "Option",
    "OptionArity",
    "OptionRegistry",
    "ParserState",
    "ParsingError",
    "PostParsingState",
    "ValueList",
]
