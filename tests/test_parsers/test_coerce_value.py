from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Literal, Optional

import pytest

from clearopt.parser.utils import coerce_value, sequence_element_type, unwrap_optional


# --- Tests ---
@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", int, 42),
        ("3.14", float, 3.14),
        ("True", bool, True),
        ("hello", str, "hello"),
        ("", str, ""),
        ("False", bool, False),
    ],
)
def test_coerce_value_basic(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", int | float, 42),
        ("3.14", int | float, 3.14),
        ("hello", str | int, "hello"),
        ("1", bool | str, True),
    ],
)
def test_coerce_value_union_success(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


def test_coerce_value_union_failure():
    with pytest.raises(ValueError) as excinfo:
        coerce_value("abc", int | float)
    assert "could not be coerced" in str(excinfo.value)


def test_coerce_value_typing_union_equivalent():
    from typing import Union

    assert coerce_value("123", Union[int, str]) == 123
    assert coerce_value("abc", Union[int, str]) == "abc"


def test_coerce_value_optional_skips_none():
    assert coerce_value("7", Optional[int]) == 7
    with pytest.raises(ValueError):
        coerce_value("seven", int | None)


def test_coerce_value_enum():
    class Color(Enum):
        RED = "red"
        GREEN = "green"
        BLUE = "blue"

    assert coerce_value("red", Color) == Color.RED
    assert coerce_value("GREEN", Color) == Color.GREEN
    assert coerce_value("Blue", Color) == Color.BLUE

    with pytest.raises(ValueError):
        coerce_value("yellow", Color)


def test_coerce_value_int_enum():
    class Status(Enum):
        SUCCESS = 0
        FAILURE = 1
        PENDING = 2

    assert coerce_value("0", Status) == Status.SUCCESS
    assert coerce_value("PENDING", Status) == Status.PENDING
    assert coerce_value("pending", Status) == Status.PENDING

    with pytest.raises(ValueError):
        coerce_value("3", Status)


def test_literal_coercion():
    assert coerce_value("dev", Literal["dev", "prod"]) == "dev"
    with pytest.raises(ValueError):
        coerce_value("staging", Literal["dev", "prod"])


def test_path_coercion():
    result = coerce_value("/tmp/test.txt", Path)
    assert isinstance(result, Path)
    assert str(result) == "/tmp/test.txt"


def test_datetime_coercion():
    result = coerce_value("2023-10-01T13:00:00", datetime)
    assert isinstance(result, datetime)
    assert result.year == 2023 and result.month == 10

    with pytest.raises(ValueError):
        coerce_value("not-a-date", datetime)


@pytest.mark.parametrize("value", ["true", "1", "yes", "on", "Y"])
def test_bool_coercion_true(value):
    assert coerce_value(value, bool) is True


@pytest.mark.parametrize("value", ["False", "0", "no", "off", "n"])
def test_bool_coercion_false(value):
    assert coerce_value(value, bool) is False


@pytest.mark.parametrize("value", ["", "maybe", "2"])
def test_bool_coercion_rejects_unknown_words(value):
    with pytest.raises(ValueError):
        coerce_value(value, bool)


def test_unwrap_optional():
    assert unwrap_optional(int | None) is int
    assert unwrap_optional(Optional[str]) is str
    assert unwrap_optional(int) is None
    assert unwrap_optional(int | str) is None


@pytest.mark.parametrize(
    "target_type, expected",
    [
        (list[int], (list, int)),
        (list, (list, str)),
        (tuple[float, ...], (tuple, float)),
        (str, None),
        (int | None, None),
        (tuple[int, str], None),
    ],
)
def test_sequence_element_type(target_type, expected):
    assert sequence_element_type(target_type) == expected
