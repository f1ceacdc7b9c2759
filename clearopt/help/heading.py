# Clearopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""`HeadingInfo` renders the first line of the help screen, e.g. `ClearLogs 0.1`."""
from __future__ import annotations

from rich.console import Console

from clearopt.console import console as default_console
from clearopt.console import error_console


class HeadingInfo:
    """
    Program name and version shown at the top of the help screen.

    Also writes short `Name: message` lines, handy for reporting progress or
    failures in the same voice as the help screen.
    """

    def __init__(self, program_name: str, version: str | None = None) -> None:
        if not program_name:
            raise ValueError("program_name must not be empty")
        self.program_name = program_name
        self.version = version

    def write_message(self, message: str, console: Console | None = None) -> None:
        if message is None:
            raise ValueError("message must not be None")
        (console or default_console).print(
            f"{self.program_name}: {message}",
            markup=False,
            highlight=False,
            emoji=False,
        )

    def write_error(self, message: str) -> None:
        self.write_message(message, error_console)

    def __str__(self) -> str:
        if self.version and self.version.strip():
            return f"{self.program_name} {self.version}"
        return self.program_name

    def __repr__(self) -> str:
        return f"HeadingInfo(program_name={self.program_name!r}, version={self.version!r})"
