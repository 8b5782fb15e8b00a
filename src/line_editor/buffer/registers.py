"""Clipboard register shared by cut, copy and paste."""

from __future__ import annotations


class ClipboardSlot:
    """Single mutable string register owned by an editing session.

    The slot keeps no history of its own: undoing a cut or paste leaves the
    clipboard as it is.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str = "") -> None:
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def store(self, text: str) -> None:
        self._text = text

    def is_empty(self) -> bool:
        return not self._text

    def clear(self) -> None:
        self._text = ""

    def __repr__(self) -> str:
        return f"ClipboardSlot({self._text!r})"


__all__ = ["ClipboardSlot"]
