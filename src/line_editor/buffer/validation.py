"""Validation helpers shared by the buffer and its commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .sync import InvalidIndex, InvalidLine

if TYPE_CHECKING:
    from .document import LineBuffer


def ensure_line(buffer: "LineBuffer", line: int) -> str:
    """Return the text of ``line`` or raise ``InvalidLine``."""

    if line < 0 or line >= buffer.total_lines:
        raise InvalidLine(
            f"Invalid line number {line} (buffer has {buffer.total_lines} lines)",
            position=(line, 0),
        )
    text = buffer.get_line(line)
    assert text is not None
    return text


def ensure_index(buffer: "LineBuffer", line: int, index: int) -> str:
    """Validate ``(line, index)`` and return the line text."""

    text = ensure_line(buffer, line)
    if index < 0 or index > len(text):
        raise InvalidIndex(
            f"Invalid index {index} for line {line} of length {len(text)}",
            position=(line, index),
        )
    return text
