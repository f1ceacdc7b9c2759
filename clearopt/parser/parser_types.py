# Clearopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
State models and error records for clearopt's command-line parser.

Contents:
- `ParserState`: Flag enum returned by every argument parser.
- `OptionState`: Tracks whether an `Option` has been defined during one parse.
- `ValueList`: Declaration of the target attribute collecting positional values.
- `BadOptionInfo` / `ParsingError`: One user-facing parse problem.
- `PostParsingState`: Append-only collection of `ParsingError` owned by a target.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Flag, auto
from typing import Iterable

from clearopt.parser.option import Option


class ParserState(Flag):
    """
    Outcome of parsing one token.

    `MOVE_ON_NEXT_ELEMENT` is combined with `SUCCESS` or `FAILURE` when the
    parser consumed the following token as the option's value, telling the
    dispatcher to advance the cursor one extra step.
    """

    SUCCESS = auto()
    FAILURE = auto()
    MOVE_ON_NEXT_ELEMENT = auto()


@dataclass
class OptionState:
    """Tracks an option and whether it has been defined."""

    option: Option
    defined: bool = False

    def set_defined(self) -> None:
        self.defined = True

    def reset(self) -> None:
        self.defined = False


@dataclass(frozen=True)
class ValueList:
    """
    Declares the target attribute that collects positional values.

    `maximum_elements` of -1 means unbounded and 0 means no positional value is
    accepted.
    """

    dest: str
    maximum_elements: int = -1


@dataclass(frozen=True)
class BadOptionInfo:
    """Names of the option a `ParsingError` refers to."""

    short_name: str | None = None
    long_name: str | None = None

    @classmethod
    def from_option(cls, option: Option) -> BadOptionInfo:
        return cls(short_name=option.short_name, long_name=option.long_name)

    def __str__(self) -> str:
        names = []
        if self.short_name:
            names.append(f"-{self.short_name}")
        if self.long_name:
            names.append(f"--{self.long_name}")
        return "/".join(names)


@dataclass(frozen=True)
class ParsingError:
    """A single user-facing parse problem and the rules it violates."""

    bad_option: BadOptionInfo
    violates_format: bool = False
    violates_required: bool = False
    violates_mutual_exclusiveness: bool = False

    @classmethod
    def format_violation(cls, option: Option) -> ParsingError:
        return cls(BadOptionInfo.from_option(option), violates_format=True)

    @classmethod
    def required_missing(cls, option: Option) -> ParsingError:
        return cls(BadOptionInfo.from_option(option), violates_required=True)

    @classmethod
    def mutual_exclusiveness_violation(cls, option: Option) -> ParsingError:
        return cls(BadOptionInfo.from_option(option), violates_mutual_exclusiveness=True)


class PostParsingState:
    """Append-only collection of the parsing errors recorded against a target."""

    def __init__(self, errors: Iterable[ParsingError] | None = None) -> None:
        self._errors: list[ParsingError] = list(errors or [])
        self._lock = threading.Lock()

    @property
    def errors(self) -> tuple[ParsingError, ...]:
        """Read-only view of the recorded errors."""
        return tuple(self._errors)

    def add_error(self, error: ParsingError) -> None:
        if error is None:
            raise ValueError("error must not be None")
        with self._lock:
            self._errors.append(error)

    def add_errors(self, errors: Iterable[ParsingError]) -> None:
        for error in errors:
            self.add_error(error)

    def __len__(self) -> int:
        return len(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def __repr__(self) -> str:
        return f"PostParsingState(errors={len(self._errors)})"
