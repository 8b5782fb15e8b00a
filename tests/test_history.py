from __future__ import annotations

import pytest

from line_editor.buffer import (
    ClipboardSlot,
    CopyCommand,
    CutCommand,
    DeleteCommand,
    HistoryEngine,
    InsertCommand,
    InvalidIndex,
    LineBuffer,
    PasteCommand,
)


def make_buffer(*lines: str) -> LineBuffer:
    return LineBuffer.from_lines(lines)


def test_empty_history_undo_and_redo_are_noops() -> None:
    history = HistoryEngine()

    assert history.undo() is None
    assert history.redo() is None
    assert not history.can_undo()
    assert not history.can_redo()


def test_inserts_undone_in_reverse_restore_original() -> None:
    buffer = make_buffer("base", "second")
    history = HistoryEngine()
    before = buffer.lines()

    history.perform(InsertCommand(buffer, 0, 4, "-one"))
    history.perform(InsertCommand(buffer, 0, 0, "zero-"))
    history.perform(InsertCommand(buffer, 1, 6, "!"))
    while history.undo() is not None:
        pass

    assert buffer.lines() == before
    assert history.redo_depth == 3


def test_redo_after_undo_restores_post_execute_state() -> None:
    buffer = make_buffer("hello world")
    history = HistoryEngine()
    history.perform(DeleteCommand(buffer, 0, 5, 6))
    after_execute = buffer.lines()

    history.undo()
    history.redo()

    assert buffer.lines() == after_execute
    assert history.undo_depth == 1
    assert history.redo_depth == 0


def test_new_edit_invalidates_redo_stack() -> None:
    buffer = make_buffer("abc")
    history = HistoryEngine()
    history.perform(InsertCommand(buffer, 0, 0, "1"))
    history.perform(InsertCommand(buffer, 0, 0, "2"))
    history.undo()
    history.undo()
    assert history.redo_depth == 2

    history.perform(InsertCommand(buffer, 0, 3, "!"))

    assert history.redo() is None
    assert buffer.get_line(0) == "abc!"


def test_failed_execute_records_nothing() -> None:
    buffer = make_buffer("abc")
    history = HistoryEngine()
    history.perform(InsertCommand(buffer, 0, 0, "x"))
    history.undo()

    with pytest.raises(InvalidIndex):
        history.perform(InsertCommand(buffer, 0, 10, "y"))

    assert history.undo_depth == 0
    assert history.redo_depth == 1
    assert buffer.get_line(0) == "abc"


def test_untracked_copy_does_not_touch_stacks() -> None:
    buffer = make_buffer("abc")
    clipboard = ClipboardSlot()
    history = HistoryEngine()
    history.perform(InsertCommand(buffer, 0, 0, "x"))
    history.undo()

    history.run_untracked(CopyCommand(buffer, clipboard, 0, 0, 2))

    assert clipboard.text == "ab"
    assert history.undo_depth == 0
    assert history.redo_depth == 1


def test_clear_releases_both_stacks() -> None:
    buffer = make_buffer("abc")
    history = HistoryEngine()
    history.perform(InsertCommand(buffer, 0, 0, "x"))
    history.perform(InsertCommand(buffer, 0, 0, "y"))
    history.undo()

    history.clear()

    assert history.undo_depth == 0
    assert history.redo_depth == 0


def test_cut_undo_redo_undo_tracks_buffer_and_clipboard() -> None:
    buffer = make_buffer("hello world")
    clipboard = ClipboardSlot()
    history = HistoryEngine()
    steps = []

    history.perform(CutCommand(buffer, clipboard, 0, 5, 6))
    steps.append((buffer.lines(), clipboard.text))
    history.undo()
    steps.append((buffer.lines(), clipboard.text))
    history.redo()
    steps.append((buffer.lines(), clipboard.text))
    history.undo()
    steps.append((buffer.lines(), clipboard.text))

    assert steps == [
        (("hello",), " world"),
        (("hello world",), " world"),
        (("hello",), " world"),
        (("hello world",), " world"),
    ]
    assert history.undo_depth == 0
    assert history.redo_depth == 1


def test_cut_redo_recaptures_text_and_refills_clipboard() -> None:
    buffer = make_buffer("hello world")
    clipboard = ClipboardSlot()
    history = HistoryEngine()
    history.perform(CutCommand(buffer, clipboard, 0, 5, 6))
    history.undo()

    history.run_untracked(CopyCommand(buffer, clipboard, 0, 0, 2))
    assert clipboard.text == "he"
    history.redo()

    assert buffer.lines() == ("hello",)
    assert clipboard.text == " world"


def test_paste_undo_redo_cycles_restore_post_execute_state() -> None:
    buffer = make_buffer("ab", "xy")
    clipboard = ClipboardSlot()
    history = HistoryEngine()
    history.run_untracked(CopyCommand(buffer, clipboard, 0, 0, 1))

    history.perform(PasteCommand(buffer, clipboard, 1, 0))
    after_paste = buffer.lines()
    for _ in range(2):
        history.undo()
        assert buffer.lines() == ("ab", "xy")
        history.redo()
        assert buffer.lines() == after_paste

    assert after_paste == ("ab", "axy")
    assert clipboard.text == "a"


def test_paste_redo_uses_current_clipboard() -> None:
    buffer = make_buffer("a", "xyz")
    clipboard = ClipboardSlot()
    history = HistoryEngine()
    history.run_untracked(CopyCommand(buffer, clipboard, 0, 0, 1))
    history.perform(PasteCommand(buffer, clipboard, 1, 0))
    history.undo()

    history.run_untracked(CopyCommand(buffer, clipboard, 1, 0, 3))
    history.redo()

    assert buffer.lines() == ("a", "xyzxyz")
    history.undo()
    assert buffer.lines() == ("a", "xyz")
