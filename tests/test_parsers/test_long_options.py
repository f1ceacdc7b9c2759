from enum import Enum

from clearopt import (
    CommandLineOptions,
    CommandLineParser,
    OptionRegistry,
    ParserSettings,
)


class Level(Enum):
    LOW = "low"
    HIGH = "high"


class LongOptions(CommandLineOptions):
    @classmethod
    def declare_options(cls, registry: OptionRegistry) -> None:
        registry.add_option("-d", "--directory")
        registry.add_option("-v", "--verbose", type=bool)
        registry.add_option("-n", "--count", type=int, default=1)
        registry.add_option("--level", type=Level)
        registry.add_option("--limit", type=int | None)
        registry.add_option("--files", type=list[str], arity="array")
        registry.add_option("--ports", type=list[int], arity="array")
        registry.add_option(
            "--exclude", type=list[str], arity="delimited_list", separator=","
        )


def parse(args):
    options = LongOptions()
    result = CommandLineParser().parse_arguments(args, options)
    return result, options


def test_long_option_with_separate_value():
    result, options = parse(["--directory", "C:\\logs"])
    assert result is True
    assert options.directory == "C:\\logs"


def test_long_option_with_attached_value():
    result, options = parse(["--directory=C:\\logs", "--count=4"])
    assert result is True
    assert options.directory == "C:\\logs"
    assert options.count == 4


def test_attached_value_keeps_extra_equals():
    result, options = parse(["--directory=a=b"])
    assert result is True
    assert options.directory == "a=b"


def test_default_applied_when_absent():
    result, options = parse(["--verbose"])
    assert result is True
    assert options.verbose is True
    assert options.count == 1
    assert options.directory is None


def test_long_flag_rejects_attached_value():
    result, options = parse(["--verbose=false"])
    assert result is False
    (error,) = options.last_post_parsing_state.errors
    assert error.violates_format
    assert error.bad_option.long_name == "verbose"


def test_missing_value_is_a_format_violation():
    result, options = parse(["--directory", "--verbose"])
    assert result is False
    assert options.verbose is True
    (error,) = options.last_post_parsing_state.errors
    assert error.violates_format
    assert str(error.bad_option) == "-d/--directory"


def test_missing_value_at_end():
    result, options = parse(["--count"])
    assert result is False
    assert options.count == 1


def test_bad_value_is_not_read_as_positional():
    result, options = parse(["--count", "many", "--verbose"])
    assert result is False
    assert options.count == 1
    assert options.verbose is True
    assert len(options.last_post_parsing_state) == 1


def test_enum_value():
    result, options = parse(["--level", "high"])
    assert result is True
    assert options.level is Level.HIGH


def test_nullable_value():
    result, options = parse(["--limit=", "--directory", "x"])
    assert result is True
    assert options.limit is None

    result, options = parse(["--limit", "5"])
    assert result is True
    assert options.limit == 5


def test_array_collects_following_values():
    result, options = parse(["--files", "a.txt", "b.txt", "-v"])
    assert result is True
    assert options.files == ["a.txt", "b.txt"]
    assert options.verbose is True


def test_array_with_attached_first_value():
    result, options = parse(["--files=a.txt", "b.txt"])
    assert result is True
    assert options.files == ["a.txt", "b.txt"]


def test_array_accepts_dash_as_value():
    result, options = parse(["--files", "-", "b.txt"])
    assert result is True
    assert options.files == ["-", "b.txt"]


def test_array_conversion_failure():
    result, options = parse(["--ports", "80", "http", "--verbose"])
    assert result is False
    assert options.ports is None
    assert options.verbose is True
    (error,) = options.last_post_parsing_state.errors
    assert error.bad_option.long_name == "ports"


def test_delimited_list():
    result, options = parse(["--exclude", "a.log,b.log"])
    assert result is True
    assert options.exclude == ["a.log", "b.log"]


def test_unknown_long_option_fails_without_error_entry():
    result, options = parse(["--unknown", "--verbose"])
    assert result is False
    assert options.verbose is True
    assert len(options.last_post_parsing_state) == 0


def test_unknown_long_option_ignored():
    options = LongOptions()
    parser = CommandLineParser(ParserSettings(ignore_unknown_arguments=True))
    assert parser.parse_arguments(["--unknown", "--verbose"], options)
    assert options.verbose is True
