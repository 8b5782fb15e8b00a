"""Adapter boundary types and the buffer error taxonomy."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from line_editor.errors import LineEditorError

from .state import Position


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot describing the current session state."""

    lines: Tuple[str, ...]
    clipboard: str
    undo_depth: int
    redo_depth: int
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class BufferValidationError(LineEditorError):
    """Raised when a line or character position is out of range."""

    def __init__(self, message: str, *, position: Optional[Position] = None) -> None:
        super().__init__(message)
        self.position = position


class InvalidLine(BufferValidationError):
    """Line index outside ``[0, total_lines)``."""


class InvalidIndex(BufferValidationError):
    """Character index outside ``[0, len(line)]`` or a negative length."""


class AllocationFailure(LineEditorError):
    """Raised when the buffer cannot grow past its configured capacity."""

    def __init__(self, message: str, *, capacity: int) -> None:
        super().__init__(message)
        self.capacity = capacity


__all__ = [
    "BufferMirror",
    "BufferValidationError",
    "InvalidLine",
    "InvalidIndex",
    "AllocationFailure",
]
