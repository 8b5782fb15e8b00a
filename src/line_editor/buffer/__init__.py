"""Line storage, edit commands, and undo/redo history."""

from .commands import (
    CommandKind,
    CopyCommand,
    CutCommand,
    DeleteCommand,
    EditCommand,
    InsertCommand,
    InsertReplaceCommand,
    PasteCommand,
)
from .document import GROWTH_INCREMENT, INITIAL_CAPACITY, LineBuffer
from .registers import ClipboardSlot
from .state import Position, SearchHit
from .sync import (
    AllocationFailure,
    BufferMirror,
    BufferValidationError,
    InvalidIndex,
    InvalidLine,
)
from .undo import HistoryEngine
from .validation import ensure_index, ensure_line

__all__ = [
    "LineBuffer",
    "INITIAL_CAPACITY",
    "GROWTH_INCREMENT",
    "ClipboardSlot",
    "CommandKind",
    "EditCommand",
    "InsertCommand",
    "DeleteCommand",
    "CutCommand",
    "CopyCommand",
    "PasteCommand",
    "InsertReplaceCommand",
    "HistoryEngine",
    "Position",
    "SearchHit",
    "BufferMirror",
    "BufferValidationError",
    "InvalidLine",
    "InvalidIndex",
    "AllocationFailure",
    "ensure_line",
    "ensure_index",
]
