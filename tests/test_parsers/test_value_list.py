import pytest

from clearopt import CommandLineOptions, CommandLineParser, OptionRegistry


def make_options(maximum_elements=-1):
    registry = OptionRegistry()
    registry.add_option("-v", "--verbose", type=bool)
    registry.add_option("-d", "--directory")
    registry.set_value_list("patterns", maximum_elements=maximum_elements)
    return CommandLineOptions(registry)


def test_positional_values_collected_in_order():
    options = make_options()
    assert CommandLineParser().parse_arguments(
        ["*.log", "-v", "-", "*.txt", "-d", "logs"], options
    )
    assert options.patterns == ["*.log", "-", "*.txt"]
    assert options.directory == "logs"


def test_value_list_starts_empty_on_each_parse():
    options = make_options()
    parser = CommandLineParser()
    assert parser.parse_arguments(["a"], options)
    assert parser.parse_arguments(["b"], options)
    assert options.patterns == ["b"]


@pytest.mark.parametrize(
    "maximum, args, expected_result, expected_values",
    [
        (2, ["a", "b"], True, ["a", "b"]),
        (2, ["a", "b", "c"], False, ["a", "b"]),
        (0, ["a"], False, []),
        (0, ["-v"], True, []),
    ],
)
def test_value_list_maximum(maximum, args, expected_result, expected_values):
    options = make_options(maximum)
    assert CommandLineParser().parse_arguments(args, options) is expected_result
    assert options.patterns == expected_values


def test_positional_values_ignored_without_value_list():
    registry = OptionRegistry()
    registry.add_option("-v", "--verbose", type=bool)
    options = CommandLineOptions(registry)
    assert CommandLineParser().parse_arguments(["stray", "-v"], options)
    assert options.verbose is True


def test_whitespace_tokens_skipped():
    options = make_options()
    assert CommandLineParser().parse_arguments(["  ", "", "-v", "a"], options)
    assert options.patterns == ["a"]
    assert options.verbose is True
