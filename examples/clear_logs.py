"""clear_logs.py

Truncates every file in a log directory.

    python clear_logs.py -d /var/log/myapp
    python clear_logs.py -vi -d /var/log/myapp
    python clear_logs.py --help
"""
import sys
from pathlib import Path

from clearopt import CommandLineOptions, CommandLineParser, HeadingInfo, OptionRegistry
from clearopt.console import console
from clearopt.utils import setup_logging

setup_logging(log_filename=None)


class ClearLogsOptions(CommandLineOptions):
    program_name = "ClearLogs"
    version = "0.1"
    pre_options_lines = ("Usage: ClearLogs -d [log directory]",)
    post_options_lines = (r"Example: ClearLogs -d C:\temp\logs",)

    @classmethod
    def declare_options(cls, registry: OptionRegistry) -> None:
        registry.add_option(
            "-d", "--directory", required=True, help="Denotes log directory."
        )
        registry.add_option(
            "-v",
            "--verbose",
            type=bool,
            default=True,
            help="Prints all messages to standard output.",
        )
        registry.add_option(
            "-i",
            "--interactive",
            type=bool,
            default=False,
            help="Interactive mode between clearing logs.",
        )
        registry.add_help_option()


def clear_logs(options: ClearLogsOptions) -> int:
    heading = HeadingInfo(options.program_name, options.version)
    directory = Path(options.directory)
    if not directory.is_dir():
        heading.write_error(f"The specified log directory '{directory}' doesn't exist!")
        return 1

    log_files = sorted(path for path in directory.iterdir() if path.is_file())
    if not log_files:
        heading.write_message(
            f"The specified log directory '{directory}' didn't contain any log files."
        )
        return 0

    cleared = False
    for log_file in log_files:
        try:
            line_count = len(log_file.read_text(encoding="UTF-8").splitlines())
            if line_count == 0:
                continue
            if options.interactive and not console.input(
                f"Clear '{log_file}' ({line_count:,} lines)? [y/N] "
            ).lower().startswith("y"):
                continue
            if options.verbose:
                heading.write_message(
                    f"Clearing log file '{log_file}' ({line_count:,} lines of text)."
                )
            log_file.write_text("", encoding="UTF-8")
            cleared = True
        except (OSError, UnicodeDecodeError) as error:
            heading.write_error(str(error))
            return 1

    if cleared:
        heading.write_message(f"Success! Cleared all log files at {directory} successfully.")
    else:
        heading.write_message(
            f"All clear! There wasn't any log files with log lines at {directory} to clear."
        )
    return 0


if __name__ == "__main__":
    options = ClearLogsOptions()
    parser = CommandLineParser(help_writer=console)
    if not parser.parse_arguments(sys.argv[1:], options):
        sys.exit(1)
    sys.exit(clear_logs(options))
