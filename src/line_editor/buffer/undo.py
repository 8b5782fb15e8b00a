"""Linear undo/redo history for edit commands."""

from __future__ import annotations

from typing import List, Optional

from line_editor.runtime import telemetry

from .commands import EditCommand, describe


class HistoryEngine:
    """Two LIFO stacks of executed commands.

    Every command is on exactly one stack or released. Performing a new edit
    drops the redo stack, so redo is only available right after an undo.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._undo: List[EditCommand] = []
        self._redo: List[EditCommand] = []
        self._logger_name = logger_name

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def perform(self, command: EditCommand) -> EditCommand:
        """Execute ``command`` and record it; a failing execute records nothing."""

        command.execute()
        self._undo.append(command)
        self._redo.clear()
        self._record("history.perform", command)
        return command

    def run_untracked(self, command: EditCommand) -> EditCommand:
        command.execute()
        self._record("history.untracked", command)
        return command

    def undo(self) -> Optional[EditCommand]:
        if not self._undo:
            return None
        command = self._undo.pop()
        command.undo()
        self._redo.append(command)
        self._record("history.undo", command)
        return command

    def redo(self) -> Optional[EditCommand]:
        if not self._redo:
            return None
        command = self._redo.pop()
        command.execute()
        self._undo.append(command)
        self._record("history.redo", command)
        return command

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()

    def _record(self, event: str, command: EditCommand) -> None:
        data = describe(command)
        data.update(undo_depth=len(self._undo), redo_depth=len(self._redo))
        telemetry.record_event(
            event, level="debug", data=data, logger_name=self._logger_name
        )


__all__ = ["HistoryEngine"]
