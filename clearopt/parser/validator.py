# Clearopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Post-parse rule enforcement.

Two passes run after the whole token stream has been consumed:

1. `enforce_mutually_exclusive`: when `ParserSettings.mutually_exclusive` is on,
   at most one option of each `mutually_exclusive_set` may be defined. A
   violating group is reported against its first defined member.
2. `enforce_required`: every required option must be defined.

Each pass stops at its first violation unless
`ParserSettings.report_all_violations` is set. Violations are appended to the
target's `PostParsingState`.
"""
from __future__ import annotations

from clearopt.logger import logger
from clearopt.parser.option import Option
from clearopt.parser.option_map import OptionMap
from clearopt.parser.parser_types import ParsingError, PostParsingState


def enforce_mutually_exclusive(
    option_map: OptionMap, post_parsing_state: PostParsingState
) -> bool:
    """Check exclusion groups. Returns False if any group has several defined members."""
    settings = option_map.settings
    if not settings.mutually_exclusive:
        return True

    groups: dict[str, list[Option]] = {}
    for option in option_map.defined_options():
        if option.mutually_exclusive_set is None:
            continue
        groups.setdefault(option.mutually_exclusive_set.casefold(), []).append(option)

    valid = True
    for set_name, members in groups.items():
        if len(members) < 2:
            continue
        logger.debug(
            "Mutually exclusive set '%s' has %d defined options: %s",
            set_name,
            len(members),
            ", ".join(member.canonical_name for member in members),
        )
        post_parsing_state.add_error(
            ParsingError.mutual_exclusiveness_violation(members[0])
        )
        valid = False
        if not settings.report_all_violations:
            break
    return valid


def enforce_required(option_map: OptionMap, post_parsing_state: PostParsingState) -> bool:
    """Check required options in declaration order."""
    valid = True
    for option in option_map:
        if not option.required or option_map.is_defined(option):
            continue
        logger.debug("Required option '%s' is missing", option.canonical_name)
        post_parsing_state.add_error(ParsingError.required_missing(option))
        valid = False
        if not option_map.settings.report_all_violations:
            break
    return valid


def enforce_rules(option_map: OptionMap, post_parsing_state: PostParsingState) -> bool:
    """Run both passes, in order, and return True only if both pass."""
    exclusive_ok = enforce_mutually_exclusive(option_map, post_parsing_state)
    required_ok = enforce_required(option_map, post_parsing_state)
    return exclusive_ok and required_ok
