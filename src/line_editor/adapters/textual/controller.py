"""Host-neutral controller that feeds command lines into a session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from line_editor.actions import CommandResult, submit_command_line
from line_editor.buffer import BufferMirror
from line_editor.session import EditorSession


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    show_output: Callable[[List[str]], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges an ``EditorSession`` to a Textual-friendly surface."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self.history: List[str] = []
        self._refresh_buffer()

    def submit(self, raw: str) -> CommandResult:
        """Run one command line and push the resulting state to the hooks."""

        self._log_state("command ->", text=raw)
        result = submit_command_line(self.session, raw)
        if result.consumed:
            self.history.append(raw.strip())
        self._after_result(raw, result)
        self._log_state(
            "result <-",
            status=result.status,
            message=result.message,
            quit=result.quit or None,
        )
        return result

    def _after_result(self, raw: str, result: CommandResult) -> None:
        self.hooks.update_status(result.message or result.status)
        if result.lines or result.status in {"print", "clear"}:
            self.hooks.show_output(list(result.lines))
        self.hooks.handle_event(f"command.{result.status}", raw.strip() or None)
        self._refresh_buffer()

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.session.mirror())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        history = self.session.history
        return {
            "session": self.session.name,
            "lines": self.session.total_lines,
            "undo": history.undo_depth,
            "redo": history.redo_depth,
        }

    @property
    def last_command(self) -> Optional[str]:
        return self.history[-1] if self.history else None


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
