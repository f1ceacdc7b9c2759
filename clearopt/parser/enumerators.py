# Clearopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Cursors over the token stream used by the argument parsers.

- `ArgumentEnumerator` walks the command-line tokens. It supports lookahead
  (`next`) and a single-step pushback (`move_previous`), used to un-consume a
  token that turned out not to belong to an array option.
- `CharEnumerator` walks the characters of one grouped short-option token
  (`-abc`). It adds `remaining_from_next()`, the attached value after the
  current flag, and does not support pushback.

Both cursors start before the first element; `move_next()` must be called
before `current` can be read.
"""
from __future__ import annotations

from typing import Sequence

from clearopt.exceptions import EnumeratorError


class ArgumentEnumerator:
    """Cursor over an ordered sequence of command-line tokens."""

    def __init__(self, tokens: Sequence[str]) -> None:
        self._data: tuple[str, ...] = tuple(tokens)
        self._index = -1
        self._end_index = len(self._data)

    @property
    def current(self) -> str:
        if self._index == -1:
            raise EnumeratorError("move_next() must be called before reading current")
        if self._index >= self._end_index:
            raise EnumeratorError("cursor is past the last token")
        return self._data[self._index]

    @property
    def next(self) -> str | None:
        """The following token without advancing, or None at the end."""
        if self._index == -1:
            raise EnumeratorError("move_next() must be called before reading next")
        if self.is_last or self._index >= self._end_index:
            return None
        return self._data[self._index + 1]

    @property
    def is_last(self) -> bool:
        return self._index == self._end_index - 1

    def move_next(self) -> bool:
        if self._index < self._end_index:
            self._index += 1
            return self._index < self._end_index
        return False

    def move_previous(self) -> bool:
        if self._index <= 0:
            raise EnumeratorError("cannot move before the first token")
        self._index -= 1
        return True

    def remaining_from_next(self) -> str:
        raise NotImplementedError("ArgumentEnumerator does not expose remaining text")

    def __repr__(self) -> str:
        return f"ArgumentEnumerator(index={self._index}, tokens={len(self._data)})"


class CharEnumerator:
    """Cursor over the characters of a single token."""

    def __init__(self, value: str) -> None:
        self._data = value
        self._index = -1

    @property
    def current(self) -> str:
        if self._index == -1:
            raise EnumeratorError("move_next() must be called before reading current")
        if self._index >= len(self._data):
            raise EnumeratorError("cursor is past the last character")
        return self._data[self._index]

    @property
    def next(self) -> str | None:
        """The following character without advancing, or None at the end."""
        if self._index == -1:
            raise EnumeratorError("move_next() must be called before reading next")
        if self.is_last or self._index >= len(self._data):
            return None
        return self._data[self._index + 1]

    @property
    def is_last(self) -> bool:
        return self._index == len(self._data) - 1

    def move_next(self) -> bool:
        if self._index < len(self._data) - 1:
            self._index += 1
            return True
        self._index = len(self._data)
        return False

    def move_previous(self) -> bool:
        raise NotImplementedError("CharEnumerator does not support pushback")

    def remaining_from_next(self) -> str:
        """The characters after the current one, without advancing."""
        if self._index == -1:
            raise EnumeratorError(
                "move_next() must be called before reading the remaining text"
            )
        return self._data[self._index + 1 :]

    def reset(self) -> None:
        self._index = -1

    def __repr__(self) -> str:
        return f"CharEnumerator(index={self._index}, value={self._data!r})"
