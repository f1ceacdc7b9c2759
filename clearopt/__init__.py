"""
Clearopt Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    ClearOptError,
    EnumeratorError,
    OptionContractError,
    OptionDeclarationError,
)
from .help import HeadingInfo, HelpText
from .options import CommandLineOptions
from .parser import CommandLineParser, OptionArity, OptionRegistry
from .settings import ParserSettings

logger = logging.getLogger("clearopt")


__all__ = [
    "ClearOptError",
    "CommandLineOptions",
    "CommandLineParser",
    "EnumeratorError",
    "HeadingInfo",
    "HelpText",
    "OptionArity",
    "OptionContractError",
    "OptionDeclarationError",
    "OptionRegistry",
    "ParserSettings",
]
