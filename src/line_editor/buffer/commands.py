"""Reversible edit commands applied to a ``LineBuffer``.

The command set is closed: ``EditCommand`` is the union of the six variants
below, each tagged with a ``CommandKind``. Coordinates are fixed when a
command is built; the text needed to reverse it is captured either at
construction or at execute time and is owned by the command alone.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional, Union

from .document import LineBuffer
from .registers import ClipboardSlot
from .sync import InvalidIndex
from .validation import ensure_index, ensure_line


class CommandKind(str, Enum):
    INSERT = "insert"
    DELETE = "delete"
    CUT = "cut"
    COPY = "copy"
    PASTE = "paste"
    INSERT_REPLACE = "insert_replace"


def _capture(buffer: LineBuffer, line: int, index: int, length: int) -> str:
    text = ensure_index(buffer, line, index)
    if length < 0:
        raise InvalidIndex(f"Invalid length {length}", position=(line, index))
    return text[index : index + length]


@dataclass(slots=True)
class InsertCommand:
    kind: ClassVar[CommandKind] = CommandKind.INSERT

    buffer: LineBuffer
    line: int
    index: int
    text: str

    def execute(self) -> None:
        self.buffer.insert(self.line, self.index, self.text)

    def undo(self) -> None:
        self.buffer.delete(self.line, self.index, len(self.text))


@dataclass(slots=True)
class DeleteCommand:
    kind: ClassVar[CommandKind] = CommandKind.DELETE

    buffer: LineBuffer
    line: int
    index: int
    length: int
    deleted_text: Optional[str] = field(default=None, repr=False)

    def execute(self) -> None:
        # captured on every execute, redo included
        removed = self.buffer.delete(self.line, self.index, self.length)
        self.deleted_text = removed

    def undo(self) -> None:
        if self.deleted_text is None:
            return
        self.buffer.insert(self.line, self.index, self.deleted_text)
        self.deleted_text = None


@dataclass(slots=True)
class CutCommand:
    kind: ClassVar[CommandKind] = CommandKind.CUT

    buffer: LineBuffer
    clipboard: ClipboardSlot
    line: int
    index: int
    length: int
    cut_text: Optional[str] = field(default=None, repr=False)

    def execute(self) -> None:
        snapshot = _capture(self.buffer, self.line, self.index, self.length)
        self.buffer.delete(self.line, self.index, self.length)
        self.cut_text = snapshot
        self.clipboard.store(snapshot)

    def undo(self) -> None:
        if self.cut_text is None:
            return
        self.buffer.insert(self.line, self.index, self.cut_text)
        self.cut_text = None


@dataclass(slots=True)
class CopyCommand:
    kind: ClassVar[CommandKind] = CommandKind.COPY

    buffer: LineBuffer
    clipboard: ClipboardSlot
    line: int
    index: int
    length: int

    def execute(self) -> None:
        self.clipboard.store(
            _capture(self.buffer, self.line, self.index, self.length)
        )

    def undo(self) -> None:
        pass


@dataclass(slots=True)
class PasteCommand:
    """Insert the clipboard text at ``(line, index)``.

    The clipboard is read on every execute, redo included. A copy made
    between undo and redo therefore changes what the redo inserts.
    """

    kind: ClassVar[CommandKind] = CommandKind.PASTE

    buffer: LineBuffer
    clipboard: ClipboardSlot
    line: int
    index: int
    pasted_text: Optional[str] = field(default=None, repr=False)

    def execute(self) -> None:
        if self.clipboard.is_empty():
            return
        text = self.clipboard.text
        self.buffer.insert(self.line, self.index, text)
        self.pasted_text = text

    def undo(self) -> None:
        if self.pasted_text is None:
            return
        self.buffer.delete(self.line, self.index, len(self.pasted_text))
        self.pasted_text = None


@dataclass(slots=True)
class InsertReplaceCommand:
    """Insert ``new_text``; undo restores the whole line captured at build time.

    Undo overwrites the line instead of reversing the splice, so any edit made
    to the same line after this command ran is lost when it is undone.
    """

    kind: ClassVar[CommandKind] = CommandKind.INSERT_REPLACE

    buffer: LineBuffer
    line: int
    index: int
    new_text: str
    old_line: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.old_line = ensure_line(self.buffer, self.line)

    def execute(self) -> None:
        self.buffer.insert(self.line, self.index, self.new_text)

    def undo(self) -> None:
        self.buffer.replace_line(self.line, self.old_line)


EditCommand = Union[
    InsertCommand,
    DeleteCommand,
    CutCommand,
    CopyCommand,
    PasteCommand,
    InsertReplaceCommand,
]


def describe(command: EditCommand) -> dict[str, object]:
    """Flatten a command into loggable fields."""

    payload: dict[str, object] = {
        "kind": command.kind.value,
        "line": command.line,
        "index": command.index,
    }
    if isinstance(command, (DeleteCommand, CutCommand, CopyCommand)):
        payload["length"] = command.length
    elif isinstance(command, InsertCommand):
        payload["length"] = len(command.text)
    elif isinstance(command, InsertReplaceCommand):
        payload["length"] = len(command.new_text)
    return payload


__all__ = [
    "CommandKind",
    "EditCommand",
    "InsertCommand",
    "DeleteCommand",
    "CutCommand",
    "CopyCommand",
    "PasteCommand",
    "InsertReplaceCommand",
    "describe",
]
