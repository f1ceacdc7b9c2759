"""
Clearopt Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .heading import HeadingInfo
from .help_text import HelpText
from .sentence_builder import BaseSentenceBuilder, EnglishSentenceBuilder
from .wrapping import wrap_text

__all__ = [
    "BaseSentenceBuilder",
    "EnglishSentenceBuilder",
    "HeadingInfo",
    "HelpText",
    "wrap_text",
]
