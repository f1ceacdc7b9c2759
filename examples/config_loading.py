"""config_loading.py"""
import sys

from clearopt import CommandLineParser
from clearopt.config import loader
from clearopt.console import console

config = loader("clear_logs.yaml")
options = config.to_options()
parser = CommandLineParser(config.settings, help_writer=console)

if __name__ == "__main__":
    if not parser.parse_arguments(sys.argv[1:], options):
        sys.exit(1)
    for option in options.get_registry().options:
        console.print(f"{option.dest}: {getattr(options, option.dest)!r}")
