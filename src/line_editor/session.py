"""Editing session façade combining buffer, clipboard, history, and cipher."""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, List, Optional

from line_editor.buffer import (
    BufferMirror,
    ClipboardSlot,
    CopyCommand,
    CutCommand,
    DeleteCommand,
    EditCommand,
    HistoryEngine,
    InsertCommand,
    InsertReplaceCommand,
    LineBuffer,
    PasteCommand,
    SearchHit,
)
from line_editor.cipher import Cipher, load_cipher
from line_editor.runtime import telemetry
from line_editor.runtime.settings import Settings, load_settings
from line_editor.storage import read_lines, write_lines

Transform = Callable[[str, int], str]


class EditorSession:
    """Entry points consumed by the command line and interactive hosts.

    The cipher is resolved once here; a ``ModuleLoadError`` raised while
    resolving it propagates out of the constructor and the session never
    starts.
    """

    def __init__(
        self,
        cipher: Optional[Cipher] = None,
        *,
        settings: Optional[Settings] = None,
        buffer: Optional[LineBuffer] = None,
        clipboard: Optional[ClipboardSlot] = None,
        history: Optional[HistoryEngine] = None,
        name: str = "default",
    ) -> None:
        self.name = name
        self.settings = settings if settings is not None else load_settings()
        self.cipher = cipher if cipher is not None else load_cipher(self.settings.cipher)
        self.buffer = (
            buffer if buffer is not None else LineBuffer(max_lines=self.settings.max_lines)
        )
        self.clipboard = clipboard if clipboard is not None else ClipboardSlot()
        self.history = history if history is not None else HistoryEngine()
        self.modified = False
        self.logger = telemetry.get_logger("line_editor.session")

    # -- direct buffer operations (not recorded in history) --------------------

    def append(self, text: Optional[str]) -> None:
        with self._operation("append"):
            self.buffer.append(text)
            self.modified = True

    def new_line(self) -> None:
        with self._operation("new_line"):
            self.buffer.new_line()
            self.modified = True

    def get_line(self, line: int) -> Optional[str]:
        return self.buffer.get_line(line)

    @property
    def total_lines(self) -> int:
        return self.buffer.total_lines

    @property
    def clipboard_text(self) -> str:
        return self.clipboard.text

    def print_text(self) -> List[str]:
        return list(self.buffer.lines())

    def search_text(self, needle: str) -> List[SearchHit]:
        with self._operation("search") as span:
            hits = self.buffer.search(needle)
            span.add_metadata("hits", len(hits))
            return hits

    # -- history-tracked edits -------------------------------------------------

    def insert_text(self, line: int, index: int, text: str) -> None:
        self._perform("insert", InsertCommand(self.buffer, line, index, text))

    def delete_text(self, line: int, index: int, length: int) -> None:
        self._perform("delete", DeleteCommand(self.buffer, line, index, length))

    def cut_text(self, line: int, index: int, length: int) -> None:
        self._perform(
            "cut", CutCommand(self.buffer, self.clipboard, line, index, length)
        )

    def copy_text(self, line: int, index: int, length: int) -> None:
        with self._operation("copy"):
            self.history.run_untracked(
                CopyCommand(self.buffer, self.clipboard, line, index, length)
            )

    def paste_text(self, line: int, index: int) -> None:
        self._perform("paste", PasteCommand(self.buffer, self.clipboard, line, index))

    def insert_replace_text(self, line: int, index: int, text: str) -> None:
        with self._operation("insert_replace"):
            command = InsertReplaceCommand(self.buffer, line, index, text)
            self.history.perform(command)
            self.modified = True

    def undo(self) -> bool:
        with self._operation("undo"):
            command = self.history.undo()
            if command is None:
                return False
            self.modified = True
            return True

    def redo(self) -> bool:
        with self._operation("redo"):
            command = self.history.redo()
            if command is None:
                return False
            self.modified = True
            return True

    def _perform(self, label: str, command: EditCommand) -> None:
        with self._operation(label):
            self.history.perform(command)
            self.modified = True

    @contextmanager
    def _operation(self, label: str, **metadata: object) -> Iterator[telemetry.SpanHandle]:
        """Wrap one session call in a telemetry span."""

        with telemetry.span(
            f"session::{label}",
            component="session",
            metadata={"session": self.name, **metadata},
        ) as handle:
            yield handle

    # -- files ------------------------------------------------------------------

    def load_from_file(self, path: Path | str) -> int:
        """Append every line of ``path`` to the buffer; return how many were read."""

        count = 0
        with self._operation("load", path=path) as span:
            try:
                for line in read_lines(path, encoding=self.settings.encoding):
                    self.buffer.append(line)
                    count += 1
            finally:
                span.add_metadata("lines", count)
                if count:
                    self.modified = True
        return count

    def save_to_file(self, path: Path | str) -> int:
        with self._operation("save", path=path):
            written = write_lines(
                path, self.buffer.lines(), encoding=self.settings.encoding
            )
            self.modified = False
            return written

    def encrypt_file(self, in_path: Path | str, out_path: Path | str, key: int) -> int:
        return self._transform_file("encrypt", self.cipher.encrypt, in_path, out_path, key)

    def decrypt_file(self, in_path: Path | str, out_path: Path | str, key: int) -> int:
        return self._transform_file("decrypt", self.cipher.decrypt, in_path, out_path, key)

    def _transform_file(
        self,
        label: str,
        transform: Transform,
        in_path: Path | str,
        out_path: Path | str,
        key: int,
    ) -> int:
        with self._operation(label, path=in_path, target=out_path):
            scratch = LineBuffer.from_lines(
                list(read_lines(in_path, encoding=self.settings.encoding))
            )
            return write_lines(
                out_path,
                (transform(line, key) for line in scratch),
                encoding=self.settings.encoding,
            )

    # -- host support -----------------------------------------------------------

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            lines=self.buffer.lines(),
            clipboard=self.clipboard.text,
            undo_depth=self.history.undo_depth,
            redo_depth=self.history.redo_depth,
            attributes=dict(attributes or {}),
        )

    def close(self) -> None:
        """Release the history and every buffer slot."""

        self.history.clear()
        self.buffer.clear()
        self.clipboard.clear()
        telemetry.record_event("session.close", data={"session": self.name})

    def __enter__(self) -> "EditorSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False


__all__ = ["EditorSession"]
