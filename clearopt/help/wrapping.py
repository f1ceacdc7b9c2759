# Clearopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Word wrapping used by the help screen."""
from __future__ import annotations


def _wrap_paragraph(paragraph: str, width: int) -> list[str]:
    stripped = paragraph.lstrip(" ")
    indent = paragraph[: len(paragraph) - len(stripped)]
    if len(indent) >= width:
        indent = ""
    available = width - len(indent)

    lines: list[str] = []
    current = ""
    for word in stripped.split():
        while len(word) > available:
            if current:
                lines.append(current)
                current = ""
            lines.append(word[:available])
            word = word[available:]
        if not current:
            current = word
        elif len(current) + 1 + len(word) <= available:
            current = f"{current} {word}"
        else:
            lines.append(current)
            current = word
    if current or not lines:
        lines.append(current)
    return [f"{indent}{line}" if line else "" for line in lines]


def wrap_text(text: str, width: int) -> list[str]:
    """
    Break `text` into lines of at most `width` characters.

    Words are separated on whitespace; a word longer than `width` is split
    across as many lines as it needs. Each line break in `text` starts a new
    paragraph, an empty paragraph gives an empty line, and the leading spaces
    of a paragraph are repeated on each of its lines.

    Args:
        text (str): Text to wrap.
        width (int): Maximum line length, at least 1.

    Returns:
        list[str]: The wrapped lines; empty for empty text.
    """
    if width < 1:
        raise ValueError(f"width must be at least 1, got {width}")
    if not text:
        return []
    lines: list[str] = []
    for paragraph in text.splitlines():
        lines.extend(_wrap_paragraph(paragraph, width))
    return lines
