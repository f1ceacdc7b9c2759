# Clearopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token-shape parsers used by `CommandLineParser`.

`ArgumentParser.create()` picks a parser for a token:

- `"-"` is a positional value (no parser).
- `"--name"` / `"--name=value"` → `LongOptionParser`.
- `"-abc"` / `"-dvalue"` → `OptionGroupParser` (POSIX-style bundling of short flags).
- anything else is a positional value (no parser).

Each parser consumes the current token (and, when the option needs it, the
tokens that follow), binds the value(s) through the binder and returns a
`ParserState`. Format problems are collected in `post_parsing_state`; the
dispatcher copies them to the target when the parser reports `FAILURE`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from clearopt.logger import logger
from clearopt.parser.binder import bind_flag, bind_value, bind_values
from clearopt.parser.enumerators import ArgumentEnumerator, CharEnumerator
from clearopt.parser.option import Option
from clearopt.parser.option_map import OptionMap
from clearopt.parser.parser_types import ParserState, ParsingError


class ArgumentParser(ABC):
    """Base class for the long-option and option-group parsers."""

    def __init__(self, ignore_unknown_arguments: bool = False) -> None:
        self.ignore_unknown_arguments = ignore_unknown_arguments
        self.post_parsing_state: list[ParsingError] = []

    @abstractmethod
    def parse(
        self, arguments: ArgumentEnumerator, option_map: OptionMap, target: Any
    ) -> ParserState:
        """Parse the token under the cursor and bind its option(s) onto the target."""

    @staticmethod
    def create(
        argument: str, ignore_unknown_arguments: bool = False
    ) -> ArgumentParser | None:
        """Return the parser for a token, or None if the token is a positional value."""
        if argument == "-" or not argument.startswith("-"):
            return None
        if argument.startswith("--"):
            return LongOptionParser(ignore_unknown_arguments)
        return OptionGroupParser(ignore_unknown_arguments)

    @staticmethod
    def is_input_value(argument: str | None) -> bool:
        """True if a token is a value rather than an option."""
        if argument is None:
            return False
        return argument == "-" or not argument.startswith("-")

    @staticmethod
    def compare_short(argument: str, name: str, case_sensitive: bool = True) -> bool:
        if case_sensitive:
            return argument == f"-{name}"
        return argument.casefold() == f"-{name}".casefold()

    @staticmethod
    def compare_long(argument: str, name: str, case_sensitive: bool = True) -> bool:
        if case_sensitive:
            return argument == f"--{name}"
        return argument.casefold() == f"--{name}".casefold()

    @classmethod
    def _get_next_input_values(cls, arguments: ArgumentEnumerator) -> list[str]:
        """
        Consume every value token that follows the cursor.

        The cursor is left on the last consumed value (or where it started if
        none was consumed).
        """
        values = []
        while arguments.move_next():
            if cls.is_input_value(arguments.current):
                values.append(arguments.current)
            else:
                break
        arguments.move_previous()
        return values

    def _define_option_that_violates_format(self, option: Option) -> None:
        logger.debug("Option '%s' violates format", option.canonical_name)
        self.post_parsing_state.append(ParsingError.format_violation(option))

    def _unknown(self, name: str) -> ParserState:
        if self.ignore_unknown_arguments:
            logger.debug("Ignoring unknown option '%s'", name)
            return ParserState.SUCCESS
        logger.debug("Unknown option '%s'", name)
        return ParserState.FAILURE

    def _to_parser_state(
        self, option: Option, value_setting: bool, move_next: bool = False
    ) -> ParserState:
        if not value_setting:
            self._define_option_that_violates_format(option)
        state = ParserState.SUCCESS if value_setting else ParserState.FAILURE
        if move_next:
            state |= ParserState.MOVE_ON_NEXT_ELEMENT
        return state

    def _fail_missing_value(self, option: Option) -> ParserState:
        logger.debug("Option '%s' requires a value", option.canonical_name)
        self._define_option_that_violates_format(option)
        return ParserState.FAILURE

    def _bind_following(
        self,
        arguments: ArgumentEnumerator,
        option: Option,
        target: Any,
        leading: str | None = None,
    ) -> ParserState:
        """
        Bind a value-bearing option from an attached value and/or the following tokens.

        `leading` is the value attached to the option token itself (`--name=value`
        or `-dvalue`). Scalars use `leading` when given, else the next token.
        Arrays start with `leading` and continue with every following value token.
        """
        if option.is_array:
            values = [] if leading is None else [leading]
            values.extend(self._get_next_input_values(arguments))
            return self._to_parser_state(option, bind_values(option, target, values))
        if leading is not None:
            return self._to_parser_state(option, bind_value(option, target, leading))
        assert arguments.next is not None, "next token should have been checked"
        return self._to_parser_state(
            option, bind_value(option, target, arguments.next), move_next=True
        )


class LongOptionParser(ArgumentParser):
    """Parses `--name`, `--name value`, `--name=value` and `--name=v1 v2 ...`."""

    def parse(
        self, arguments: ArgumentEnumerator, option_map: OptionMap, target: Any
    ) -> ParserState:
        name, separator, value = arguments.current[2:].partition("=")
        has_value = bool(separator)
        option = option_map.get(name)
        if option is None:
            return self._unknown(f"--{name}")

        option_map.define(option)

        if option.is_boolean:
            if has_value:
                logger.debug("Flag '%s' does not take a value", option.canonical_name)
                self._define_option_that_violates_format(option)
                return ParserState.FAILURE
            return self._to_parser_state(option, bind_flag(option, target))

        if not has_value and not self.is_input_value(arguments.next):
            return self._fail_missing_value(option)

        return self._bind_following(
            arguments, option, target, leading=value if has_value else None
        )


class OptionGroupParser(ArgumentParser):
    """Parses grouped short options such as `-vi`, `-dC:\\logs` and `-vd value`."""

    def _find_unknown(self, group: str, option_map: OptionMap) -> str | None:
        """Return the first unknown flag before the first value-bearing option."""
        characters = CharEnumerator(group)
        while characters.move_next():
            option = option_map.get(characters.current)
            if option is None:
                return characters.current
            if not option.is_boolean:
                return None
        return None

    def parse(
        self, arguments: ArgumentEnumerator, option_map: OptionMap, target: Any
    ) -> ParserState:
        group_text = arguments.current[1:]
        unknown = self._find_unknown(group_text, option_map)
        if unknown is not None:
            return self._unknown(f"-{unknown}")

        group = CharEnumerator(group_text)
        while group.move_next():
            option = option_map[group.current]
            option_map.define(option)

            if option.is_boolean:
                bind_flag(option, target)
                continue

            if not group.is_last:
                return self._bind_following(
                    arguments, option, target, leading=group.remaining_from_next()
                )
            if not self.is_input_value(arguments.next):
                return self._fail_missing_value(option)
            return self._bind_following(arguments, option, target)

        return ParserState.SUCCESS
