# Clearopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionMap`, the per-parse index over a target's declared options.

The map is keyed by each option's canonical name (short name if present, else
long name). Long names of options that also have a short name are resolved
through an alias table, so `map["directory"]` and `map["d"]` return the same
`Option`. Lookups are case-insensitive when `ParserSettings.case_sensitive` is
False.

The map also owns the `OptionState` of every option for the current parse and
is discarded once the parse finishes.
"""
from __future__ import annotations

from copy import deepcopy
from typing import Any, Iterator

from clearopt.exceptions import OptionDeclarationError
from clearopt.parser.option import Option
from clearopt.parser.option_registry import OptionRegistry
from clearopt.parser.parser_types import OptionState
from clearopt.settings import ParserSettings
from clearopt.utils import CaseInsensitiveDict


class OptionMap:
    """Canonical-name index with alias resolution and per-parse defined state."""

    def __init__(self, settings: ParserSettings | None = None) -> None:
        self.settings: ParserSettings = settings or ParserSettings()
        dict_type = dict if self.settings.case_sensitive else CaseInsensitiveDict
        self._map: dict[str, Option] = dict_type()
        self._names: dict[str, str] = dict_type()
        self._states: dict[str, OptionState] = {}

    @classmethod
    def create(
        cls, registry: OptionRegistry, settings: ParserSettings | None = None
    ) -> OptionMap:
        """Build a fresh map over every option of a registry."""
        option_map = cls(settings)
        for option in registry.options:
            option_map[option.canonical_name] = option
        return option_map

    def get(self, key: str) -> Option | None:
        """Return the option for a canonical name or long-name alias, if any."""
        option = self._map.get(key)
        if option is None and key in self._names:
            option = self._map.get(self._names[key])
        return option

    def __getitem__(self, key: str) -> Option:
        option = self.get(key)
        if option is None:
            raise KeyError(key)
        return option

    def __setitem__(self, key: str, option: Option) -> None:
        if key in self._map or key in self._names:
            raise OptionDeclarationError(f"Option name '{key}' is already mapped")
        self._map[key] = option
        self._states[option.dest] = OptionState(option)
        if option.has_both_names:
            assert option.long_name is not None and option.short_name is not None
            self._names[option.long_name] = option.short_name

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __iter__(self) -> Iterator[Option]:
        return (state.option for state in self._states.values())

    def __len__(self) -> int:
        return len(self._states)

    @property
    def options(self) -> list[Option]:
        """Options in declaration order."""
        return list(self)

    def define(self, option: Option) -> None:
        """Mark an option as seen on the command line."""
        self._states[option.dest].set_defined()

    def is_defined(self, option: Option) -> bool:
        return self._states[option.dest].defined

    def defined_options(self) -> list[Option]:
        return [state.option for state in self._states.values() if state.defined]

    def set_defaults(self, target: Any) -> None:
        """Assign every declared default onto the target."""
        for option in self:
            if not option.has_default:
                continue
            with option.lock:
                setattr(target, option.dest, deepcopy(option.default))
