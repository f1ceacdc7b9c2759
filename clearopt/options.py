# Clearopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `CommandLineOptions`, the base class for parse targets.

A target type declares its options once, in `declare_options()`, and every
instance owns a `PostParsingState` collecting the errors of the parses run
against it. Class attributes provide the heading and free text used by the
automatic help screen.

Example:
    class ClearLogsOptions(CommandLineOptions):
        program_name = "ClearLogs"
        version = "0.1"
        pre_options_lines = ("Usage: ClearLogs -d [log directory]",)

        directory: str | None = None
        verbose: bool = True

        @classmethod
        def declare_options(cls, registry: OptionRegistry) -> None:
            registry.add_option("-d", "--directory", required=True,
                                help="Denotes log directory.")
            registry.add_option("-v", "--verbose", type=bool, default=True,
                                help="Prints all messages to standard output.")
            registry.add_help_option()
"""
from __future__ import annotations

import threading

from clearopt.parser.option_registry import OptionRegistry
from clearopt.parser.parser_types import PostParsingState

_REGISTRY_LOCK = threading.Lock()


class CommandLineOptions:
    """
    Base class for objects receiving parsed command-line values.

    Subclasses override `declare_options()`; the resulting registry is built
    on first use and cached for the life of the class. An explicit registry can
    be passed to the constructor instead, e.g. one built from a config file.
    """

    program_name: str = ""
    version: str = ""
    pre_options_lines: tuple[str, ...] = ()
    post_options_lines: tuple[str, ...] = ()

    def __init__(self, registry: OptionRegistry | None = None) -> None:
        self._registry = registry
        self._last_post_parsing_state = PostParsingState()
        declared = self.get_registry()
        for option in declared.options:
            if not hasattr(self, option.dest):
                setattr(self, option.dest, False if option.is_boolean else None)
        if declared.value_list is not None and not hasattr(
            self, declared.value_list.dest
        ):
            setattr(self, declared.value_list.dest, [])

    @classmethod
    def declare_options(cls, registry: OptionRegistry) -> None:
        """Register the options of this target type. Override in subclasses."""

    @classmethod
    def get_class_registry(cls) -> OptionRegistry:
        """Return the registry declared by this class, building it on first use."""
        registry = cls.__dict__.get("_class_registry")
        if registry is None:
            with _REGISTRY_LOCK:
                registry = cls.__dict__.get("_class_registry")
                if registry is None:
                    registry = OptionRegistry()
                    cls.declare_options(registry)
                    cls._class_registry = registry
        return registry

    def get_registry(self) -> OptionRegistry:
        """Return the registry used to parse into this instance."""
        if self._registry is not None:
            return self._registry
        return type(self).get_class_registry()

    @property
    def last_post_parsing_state(self) -> PostParsingState:
        """Errors recorded by the parses run against this instance."""
        return self._last_post_parsing_state

    def get_usage(self, maximum_display_width: int = 80) -> str:
        """
        Return the help screen for this target, wrapped at `maximum_display_width`.

        Errors from the last parse are folded into the pre-options block.
        Override to customise the help screen.
        """
        from clearopt.help.help_text import HelpText

        return str(
            HelpText.auto_build(
                self, HelpText.default_parsing_errors_handler, maximum_display_width
            )
        )
