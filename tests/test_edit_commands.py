from __future__ import annotations

import pytest

from line_editor.buffer import (
    ClipboardSlot,
    CommandKind,
    CopyCommand,
    CutCommand,
    DeleteCommand,
    InsertCommand,
    InsertReplaceCommand,
    InvalidIndex,
    InvalidLine,
    LineBuffer,
    PasteCommand,
)


def make_buffer(*lines: str) -> LineBuffer:
    return LineBuffer.from_lines(lines)


def test_insert_command_round_trip() -> None:
    buffer = make_buffer("abc")
    command = InsertCommand(buffer, 0, 1, "XYZ")

    command.execute()
    assert buffer.get_line(0) == "aXYZbc"

    command.undo()
    assert buffer.get_line(0) == "abc"
    assert command.kind is CommandKind.INSERT


def test_delete_command_captures_text_at_execute_time() -> None:
    buffer = make_buffer("hello world")
    command = DeleteCommand(buffer, 0, 0, 6)
    buffer.insert(0, 0, ">")

    command.execute()

    assert buffer.get_line(0) == " world"
    command.undo()
    assert buffer.get_line(0) == ">hello world"


def test_delete_command_releases_snapshot_after_undo() -> None:
    buffer = make_buffer("hello")
    command = DeleteCommand(buffer, 0, 1, 3)

    command.execute()
    assert command.deleted_text == "ell"
    command.undo()

    assert command.deleted_text is None
    assert buffer.get_line(0) == "hello"


def test_delete_command_on_missing_line_leaves_buffer_unchanged() -> None:
    buffer = make_buffer("hello")
    command = DeleteCommand(buffer, 4, 0, 1)

    with pytest.raises(InvalidLine):
        command.execute()

    assert buffer.lines() == ("hello",)
    assert command.deleted_text is None


def test_cut_command_fills_clipboard_and_undo_keeps_it() -> None:
    buffer = make_buffer("hello world")
    clipboard = ClipboardSlot()
    command = CutCommand(buffer, clipboard, 0, 5, 6)

    command.execute()
    assert buffer.get_line(0) == "hello"
    assert clipboard.text == " world"

    command.undo()
    assert buffer.get_line(0) == "hello world"
    assert clipboard.text == " world"


def test_cut_command_with_bad_index_leaves_clipboard_alone() -> None:
    buffer = make_buffer("abc")
    clipboard = ClipboardSlot("kept")

    with pytest.raises(InvalidIndex):
        CutCommand(buffer, clipboard, 0, 9, 1).execute()

    assert clipboard.text == "kept"
    assert buffer.get_line(0) == "abc"


def test_copy_command_touches_only_clipboard() -> None:
    buffer = make_buffer("hello world")
    clipboard = ClipboardSlot()
    command = CopyCommand(buffer, clipboard, 0, 6, 5)

    command.execute()
    command.undo()

    assert clipboard.text == "world"
    assert buffer.get_line(0) == "hello world"


def test_paste_command_inserts_clipboard_copy() -> None:
    buffer = make_buffer("ac")
    clipboard = ClipboardSlot("b")
    command = PasteCommand(buffer, clipboard, 0, 1)

    command.execute()
    clipboard.store("something else")
    assert buffer.get_line(0) == "abc"

    command.undo()
    assert buffer.get_line(0) == "ac"


def test_paste_command_with_empty_clipboard_is_noop() -> None:
    buffer = make_buffer("abc")
    command = PasteCommand(buffer, ClipboardSlot(), 0, 1)

    command.execute()
    command.undo()

    assert buffer.get_line(0) == "abc"
    assert command.pasted_text is None


def test_insert_replace_captures_line_at_construction() -> None:
    buffer = make_buffer("abc")
    command = InsertReplaceCommand(buffer, 0, 0, "X")

    command.execute()
    assert buffer.get_line(0) == "Xabc"

    assert command.old_line == "abc"


def test_insert_replace_undo_discards_intervening_edits() -> None:
    buffer = make_buffer("abc")
    command = InsertReplaceCommand(buffer, 0, 0, "X")
    command.execute()
    unrelated = DeleteCommand(buffer, 0, 3, 1)
    unrelated.execute()
    assert buffer.get_line(0) == "Xab"

    command.undo()

    assert buffer.get_line(0) == "abc"


def test_insert_replace_on_missing_line_fails_at_construction() -> None:
    buffer = make_buffer("abc")

    with pytest.raises(InvalidLine):
        InsertReplaceCommand(buffer, 1, 0, "X")
