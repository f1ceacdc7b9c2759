import pytest

from clearopt import (
    CommandLineOptions,
    CommandLineParser,
    OptionRegistry,
    ParserSettings,
)


class ExclusiveOptions(CommandLineOptions):
    @classmethod
    def declare_options(cls, registry: OptionRegistry) -> None:
        registry.add_option("-a", "--alpha", type=bool, mutually_exclusive_set="output")
        registry.add_option("-b", "--beta", type=bool, mutually_exclusive_set="Output")
        registry.add_option("-c", "--charlie", type=bool, mutually_exclusive_set="mode")
        registry.add_option("-e", "--echo", type=bool, mutually_exclusive_set="mode")
        registry.add_option("-d", "--directory", required=True)
        registry.add_option("-f", "--file", required=True)


def parse(args, **settings):
    options = ExclusiveOptions()
    result = CommandLineParser(ParserSettings(**settings)).parse_arguments(args, options)
    return result, options


def test_required_options_present():
    result, options = parse(["-d", "logs", "-f", "app.log"])
    assert result is True
    assert len(options.last_post_parsing_state) == 0


def test_first_missing_required_option_reported():
    result, options = parse([])
    assert result is False
    (error,) = options.last_post_parsing_state.errors
    assert error.violates_required
    assert error.bad_option.long_name == "directory"


def test_all_missing_required_options_reported():
    result, options = parse([], report_all_violations=True)
    assert result is False
    assert [error.bad_option.long_name for error in options.last_post_parsing_state.errors] == [
        "directory",
        "file",
    ]


def test_mutual_exclusion_disabled_by_default():
    result, _ = parse(["-ab", "-d", "x", "-f", "y"])
    assert result is True


def test_mutual_exclusion_violation():
    result, options = parse(["-ab", "-d", "x", "-f", "y"], mutually_exclusive=True)
    assert result is False
    (error,) = options.last_post_parsing_state.errors
    assert error.violates_mutual_exclusiveness
    assert error.bad_option.short_name == "a"


def test_mutual_exclusion_single_member_allowed():
    result, _ = parse(["-a", "-c", "-d", "x", "-f", "y"], mutually_exclusive=True)
    assert result is True


def test_mutual_exclusion_first_group_only():
    result, options = parse(["-abce", "-d", "x", "-f", "y"], mutually_exclusive=True)
    assert result is False
    assert len(options.last_post_parsing_state) == 1


def test_mutual_exclusion_all_groups():
    result, options = parse(
        ["-abce", "-d", "x", "-f", "y"],
        mutually_exclusive=True,
        report_all_violations=True,
    )
    assert result is False
    assert [
        error.bad_option.short_name for error in options.last_post_parsing_state.errors
    ] == ["a", "c"]


def test_both_passes_run():
    result, options = parse(["-ab"], mutually_exclusive=True)
    assert result is False
    errors = options.last_post_parsing_state.errors
    assert len(errors) == 2
    assert errors[0].violates_mutual_exclusiveness
    assert errors[1].violates_required


def test_post_parsing_state_accumulates_across_parses():
    options = ExclusiveOptions()
    parser = CommandLineParser()
    assert not parser.parse_arguments([], options)
    assert not parser.parse_arguments(["-d", "x"], options)
    assert len(options.last_post_parsing_state) == 2


def test_post_parsing_state_rejects_none():
    options = ExclusiveOptions()
    with pytest.raises(ValueError):
        options.last_post_parsing_state.add_error(None)
