# Clearopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `CommandLineParser`, the entry point that binds a list of
command-line tokens onto a `CommandLineOptions` target.

Parsing is synchronous and strictly sequential:

1. If a help writer is configured and the target declares a help option, the
   tokens are scanned for `-h` / `--help` first. A match renders the help screen
   and the parse returns False without binding anything.
2. Declared defaults are assigned to the target.
3. Each token is dispatched by shape to `LongOptionParser` or
   `OptionGroupParser`; everything else is collected into the target's value
   list, if one is declared. A failing token does not stop the parse, so later
   options still get a chance to bind.
4. The mutual-exclusion and required-option rules are enforced.

On failure the parse returns False, the target's `last_post_parsing_state`
holds the errors, and, with a help writer configured, the target's help screen
(errors included) is printed.

Example Usage:
    parser = CommandLineParser(ParserSettings(mutually_exclusive=True), help_writer=console)
    options = ClearLogsOptions()
    if not parser.parse_arguments(["-d", "C:\\logs", "-v"], options):
        raise SystemExit(1)
"""
from __future__ import annotations

import threading
from typing import Any, Sequence

from rich.console import Console

from clearopt.logger import logger
from clearopt.options import CommandLineOptions
from clearopt.parser.argument_parser import ArgumentParser
from clearopt.parser.enumerators import ArgumentEnumerator
from clearopt.parser.option import HelpOption
from clearopt.parser.option_map import OptionMap
from clearopt.parser.parser_types import ParserState, ValueList
from clearopt.parser.validator import enforce_rules
from clearopt.settings import ParserSettings


class TargetWrapper:
    """Collects positional values into the target's declared value list."""

    def __init__(self, target: Any, value_list: ValueList | None) -> None:
        self._target = target
        self._value_list = value_list
        self._lock = threading.Lock()
        self._items: list[str] | None = None
        if value_list is not None:
            self._items = []
            setattr(target, value_list.dest, self._items)

    @property
    def is_value_list_defined(self) -> bool:
        return self._value_list is not None

    def add_value_item_if_allowed(self, item: str) -> bool:
        assert self._value_list is not None and self._items is not None
        maximum = self._value_list.maximum_elements
        if maximum == 0 or len(self._items) == maximum:
            logger.debug(
                "Value list '%s' rejected '%s' (maximum %d)",
                self._value_list.dest,
                item,
                maximum,
            )
            return False
        with self._lock:
            self._items.append(item)
        return True


class CommandLineParser:
    """
    Binds command-line tokens onto `CommandLineOptions` targets.

    A parser is an explicitly configured value; create one per configuration
    and reuse it for any number of targets.
    """

    def __init__(
        self,
        settings: ParserSettings | None = None,
        help_writer: Console | None = None,
    ) -> None:
        self.settings: ParserSettings = settings or ParserSettings()
        self.help_writer: Console | None = help_writer

    def parse_arguments(
        self,
        args: Sequence[str],
        target: CommandLineOptions,
        help_writer: Console | None = None,
    ) -> bool:
        """
        Parse `args` into `target`.

        Args:
            args (Sequence[str]): Command-line tokens, without the program name.
            target (CommandLineOptions): Object receiving the values.
            help_writer (Console | None): Overrides the parser's help writer for this call.

        Returns:
            bool: True if every token bound and every rule holds.
        """
        if args is None:
            raise ValueError("args must not be None")
        if target is None:
            raise ValueError("target must not be None")

        writer = help_writer or self.help_writer
        if writer is None:
            return self._do_parse_arguments(args, target)

        help_option = target.get_registry().help_option
        if self.parse_help(args, help_option) or not self._do_parse_arguments(
            args, target
        ):
            writer.print(
                target.get_usage(self.settings.maximum_display_width),
                markup=False,
                highlight=False,
                emoji=False,
                soft_wrap=True,
            )
            return False
        return True

    def parse_help(self, args: Sequence[str], help_option: HelpOption | None) -> bool:
        """True if any token literally names the help option."""
        if help_option is None:
            return False
        case_sensitive = self.settings.case_sensitive
        for token in args:
            if help_option.has_short_name and ArgumentParser.compare_short(
                token, help_option.short_name or "", case_sensitive
            ):
                return True
            if help_option.has_long_name and ArgumentParser.compare_long(
                token, help_option.long_name or "", case_sensitive
            ):
                return True
        return False

    def _do_parse_arguments(self, args: Sequence[str], target: CommandLineOptions) -> bool:
        registry = target.get_registry()
        logger.debug(
            "Parsing %d token(s) into %s", len(args), target.__class__.__name__
        )
        had_error = False
        option_map = OptionMap.create(registry, self.settings)
        option_map.set_defaults(target)
        wrapper = TargetWrapper(target, registry.value_list)
        post_parsing_state = target.last_post_parsing_state

        arguments = ArgumentEnumerator(args)
        while arguments.move_next():
            argument = arguments.current
            if not argument.strip():
                continue

            parser = ArgumentParser.create(
                argument, self.settings.ignore_unknown_arguments
            )
            if parser is not None:
                result = parser.parse(arguments, option_map, target)
                if ParserState.FAILURE in result:
                    post_parsing_state.add_errors(parser.post_parsing_state)
                    had_error = True
                if ParserState.MOVE_ON_NEXT_ELEMENT in result:
                    arguments.move_next()
            elif wrapper.is_value_list_defined:
                if not wrapper.add_value_item_if_allowed(argument):
                    had_error = True
            else:
                logger.debug("Ignoring positional value '%s'", argument)

        had_error |= not enforce_rules(option_map, post_parsing_state)
        logger.debug("Parse %s", "failed" if had_error else "succeeded")
        return not had_error

    def __repr__(self) -> str:
        return f"CommandLineParser(settings={self.settings!r})"
