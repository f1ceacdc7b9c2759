import pytest

from clearopt.help.wrapping import wrap_text


@pytest.mark.parametrize(
    "text, width, expected",
    [
        ("", 10, []),
        ("short", 10, ["short"]),
        ("aaa bbb ccc", 7, ["aaa bbb", "ccc"]),
        ("aaa bbb ccc", 8, ["aaa bbb", "ccc"]),
        ("aaa  bbb", 20, ["aaa bbb"]),
        ("abcdefghij", 4, ["abcd", "efgh", "ij"]),
        ("ab abcdefgh cd", 4, ["ab", "abcd", "efgh", "cd"]),
        ("one\n\ntwo", 10, ["one", "", "two"]),
        ("  one two three", 9, ["  one two", "  three"]),
    ],
)
def test_wrap_text(text, width, expected):
    assert wrap_text(text, width) == expected


def test_wrap_text_respects_width():
    text = "Prints all messages to standard output and keeps a copy in the log directory."
    for width in range(1, 40):
        lines = wrap_text(text, width)
        assert all(len(line) <= width for line in lines)
        assert "".join(lines).replace(" ", "") == text.replace(" ", "")


def test_wrap_text_rejects_bad_width():
    with pytest.raises(ValueError):
        wrap_text("text", 0)
