# Clearopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Sentence builders supply the words used in help and parsing error text.

Subclass `BaseSentenceBuilder` to localise the help screen and pass the
instance to `HelpText`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod


class BaseSentenceBuilder(ABC):
    """Words and phrases used to render parsing errors."""

    @classmethod
    def create_built_in(cls) -> BaseSentenceBuilder:
        """Return the sentence builder used when none is given."""
        return EnglishSentenceBuilder()

    @property
    @abstractmethod
    def option_word(self) -> str: ...

    @property
    @abstractmethod
    def and_word(self) -> str: ...

    @property
    @abstractmethod
    def required_option_missing_text(self) -> str: ...

    @property
    @abstractmethod
    def violates_format_text(self) -> str: ...

    @property
    @abstractmethod
    def violates_mutual_exclusiveness_text(self) -> str: ...

    @property
    @abstractmethod
    def errors_heading_text(self) -> str: ...


class EnglishSentenceBuilder(BaseSentenceBuilder):
    """English words for the help screen."""

    @property
    def option_word(self) -> str:
        return "option"

    @property
    def and_word(self) -> str:
        return "and"

    @property
    def required_option_missing_text(self) -> str:
        return "required option is missing"

    @property
    def violates_format_text(self) -> str:
        return "violates format"

    @property
    def violates_mutual_exclusiveness_text(self) -> str:
        return "violates mutual exclusiveness"

    @property
    def errors_heading_text(self) -> str:
        return "ERROR(S):"
