# Clearopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module defines `HelpText`, which builds the help screen of a
`CommandLineOptions` target.

The screen is made of four blocks separated by blank lines:

    ClearLogs 0.1

    Usage: ClearLogs -d [log directory]

      -d, --directory      Required. Denotes log directory.

      -v, --verbose        Prints all messages to standard output.

      --help               Display this help screen.

    Example: ClearLogs -d C:\\temp\\logs

Key Features:
- Name column sized to the longest option, help option listed last
- Help text word-wrapped to `maximum_display_width`, continuation lines
  aligned under the help column
- "Required." prefix for required options and an optional per-option
  formatting hook
- Parsing errors of the last parse folded into the pre-options block

Rendering never mutates option metadata, so the same target always renders
the same text.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from clearopt.help.heading import HeadingInfo
from clearopt.help.sentence_builder import BaseSentenceBuilder
from clearopt.help.wrapping import wrap_text
from clearopt.parser.option import HelpOption, Option
from clearopt.parser.option_registry import OptionRegistry
from clearopt.parser.parser_types import ParsingError
from clearopt.utils import get_program_invocation

if TYPE_CHECKING:
    from clearopt.options import CommandLineOptions

FormatOptionHelpText = Callable[[Any, str], str]
ParsingErrorsHandler = Callable[["CommandLineOptions", "HelpText"], None]

DEFAULT_MAXIMUM_DISPLAY_WIDTH = 80
DEFAULT_REQUIRED_WORD = "Required."


class HelpText:
    """
    Builds the help screen shown for `--help` or after a failed parse.

    Args:
        heading (HeadingInfo | str): First line of the screen.
        sentence_builder (BaseSentenceBuilder | None): Words used for error text.
        maximum_display_width (int): Column at which text is wrapped.
        add_dashes_to_option (bool): Render names as `-d, --directory` rather than `d, directory`.
        additional_new_line_after_option (bool): Separate options with a blank line.
        format_option_help_text (Callable | None): Called with `(option, text)` before
            an option's help is wrapped; returns the text to render.
    """

    def __init__(
        self,
        heading: HeadingInfo | str = "",
        sentence_builder: BaseSentenceBuilder | None = None,
        maximum_display_width: int = DEFAULT_MAXIMUM_DISPLAY_WIDTH,
        add_dashes_to_option: bool = False,
        additional_new_line_after_option: bool = False,
        format_option_help_text: FormatOptionHelpText | None = None,
    ) -> None:
        if maximum_display_width < 1:
            raise ValueError(
                f"maximum_display_width must be at least 1, got {maximum_display_width}"
            )
        self.heading = heading
        self.sentence_builder = sentence_builder or BaseSentenceBuilder.create_built_in()
        self.maximum_display_width = maximum_display_width
        self.add_dashes_to_option = add_dashes_to_option
        self.additional_new_line_after_option = additional_new_line_after_option
        self.format_option_help_text = format_option_help_text
        self._pre_options_lines: list[str] = []
        self._options_lines: list[str] = []
        self._post_options_lines: list[str] = []

    @classmethod
    def auto_build(
        cls,
        target: CommandLineOptions,
        handler: ParsingErrorsHandler | None = None,
        maximum_display_width: int = DEFAULT_MAXIMUM_DISPLAY_WIDTH,
    ) -> HelpText:
        """
        Build the standard help screen from a target's class attributes.

        Uses `program_name`, `version`, `pre_options_lines` and
        `post_options_lines`. `handler` runs after the pre-options lines are
        added, typically to report the errors of the last parse.
        """
        heading = HeadingInfo(
            target.program_name or get_program_invocation(), target.version
        )
        auto = cls(
            heading,
            maximum_display_width=maximum_display_width,
            add_dashes_to_option=True,
            additional_new_line_after_option=True,
        )
        for line in target.pre_options_lines:
            auto.add_pre_options_line(line)
        if handler is not None:
            handler(target, auto)
        auto.add_options(target)
        for line in target.post_options_lines:
            auto.add_post_options_line(line)
        return auto

    @staticmethod
    def default_parsing_errors_handler(
        target: CommandLineOptions, current: HelpText
    ) -> None:
        """Add the errors of the target's last parse under the errors heading."""
        if target is None:
            raise ValueError("target must not be None")
        if current is None:
            raise ValueError("current must not be None")
        if not target.last_post_parsing_state:
            return
        errors = current.render_parsing_errors_text(target, 2)
        if not errors.strip():
            return
        current.add_pre_options_line(f"\n{current.sentence_builder.errors_heading_text}")
        for line in errors.splitlines():
            current.add_pre_options_line(line)

    def add_pre_options_line(self, value: str) -> None:
        """Add a line between the heading and the options, wrapped to the display width."""
        self._pre_options_lines.extend(self._wrap_line(value))

    def add_post_options_line(self, value: str) -> None:
        """Add a line after the options, wrapped to the display width."""
        self._post_options_lines.extend(self._wrap_line(value))

    def _wrap_line(self, value: str) -> list[str]:
        if value is None:
            raise ValueError("value must not be None")
        return wrap_text(value, self.maximum_display_width) or [""]

    def add_options(
        self,
        target: CommandLineOptions | OptionRegistry,
        required_word: str = DEFAULT_REQUIRED_WORD,
        maximum_length: int | None = None,
    ) -> None:
        """
        Render the options block for a target or registry.

        Replaces any options block added before.

        Args:
            target (CommandLineOptions | OptionRegistry): Source of the declared options.
            required_word (str): Prefix for the help of required options.
            maximum_length (int | None): Wrapping width, defaults to `maximum_display_width`.
        """
        if not required_word:
            raise ValueError("required_word must not be empty")
        registry = target if isinstance(target, OptionRegistry) else target.get_registry()
        entries: list[Option | HelpOption] = list(registry.options)
        if registry.help_option is not None:
            entries.append(registry.help_option)

        self._options_lines = []
        if not entries:
            return

        names = [entry.get_names_text(self.add_dashes_to_option) for entry in entries]
        max_length = max(len(name) for name in names)
        display_width = maximum_length or self.maximum_display_width
        help_width = max(display_width - (max_length + 6), 1)
        continuation = " " * (max_length + 6)

        for index, (entry, name) in enumerate(zip(entries, names)):
            if index and self.additional_new_line_after_option:
                self._options_lines.append("")
            text = entry.help or ""
            if entry.required:
                text = f"{required_word} {text}"
            if self.format_option_help_text is not None:
                text = self.format_option_help_text(entry, text)
            wrapped = wrap_text(text.strip(), help_width)
            first = wrapped[0] if wrapped else ""
            self._options_lines.append(f"  {name:<{max_length}}    {first}".rstrip())
            self._options_lines.extend(
                f"{continuation}{line}".rstrip() for line in wrapped[1:]
            )

    def render_parsing_errors_text(self, target: CommandLineOptions, indent: int = 2) -> str:
        """
        Return one line per error of the target's last parse.

        Each line reads `-x/--long <clause>[ and <clause>].`, indented by
        `indent` spaces.
        """
        if target is None:
            raise ValueError("target must not be None")
        return "\n".join(
            self._render_parsing_error(error, indent)
            for error in target.last_post_parsing_state.errors
        )

    def _render_parsing_error(self, error: ParsingError, indent: int) -> str:
        words = self.sentence_builder
        line = " " * indent + str(error.bad_option) + " "
        line += words.required_option_missing_text if error.violates_required else words.option_word
        if error.violates_format:
            line += f" {words.violates_format_text}"
        if error.violates_mutual_exclusiveness:
            if error.violates_format or error.violates_required:
                line += f" {words.and_word}"
            line += f" {words.violates_mutual_exclusiveness_text}"
        return f"{line}."

    def __str__(self) -> str:
        blocks = [str(self.heading)] if str(self.heading) else []
        for lines in (
            self._pre_options_lines,
            self._options_lines,
            self._post_options_lines,
        ):
            block = "\n".join(lines).strip("\n")
            if block:
                blocks.append(block)
        return "\n\n".join(blocks)

    def __repr__(self) -> str:
        return (
            f"HelpText(heading={str(self.heading)!r}, "
            f"maximum_display_width={self.maximum_display_width})"
        )
