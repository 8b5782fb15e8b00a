"""Actions that evaluate word-style command lines against a session.

Only the verb and the numeric fields are split on whitespace. Text arguments
are taken verbatim from the rest of the line after the single separator that
follows the last field, so repeated spaces and quotes survive unchanged.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import partial
from typing import Callable, Dict, List, Optional, Tuple

from line_editor.errors import LineEditorError
from line_editor.runtime import telemetry
from line_editor.session import EditorSession

_FIELD = re.compile(r"\s*(\S+)\s?")


@dataclass(slots=True)
class CommandResult:
    """Outcome of one submitted command line."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None
    lines: Tuple[str, ...] = field(default_factory=tuple)
    quit: bool = False


CommandHandler = Callable[[EditorSession, str], CommandResult]


class UsageError(ValueError):
    def __init__(self, usage: str) -> None:
        super().__init__(usage)
        self.usage = usage


def submit_command_line(session: EditorSession, raw: str) -> CommandResult:
    text = raw.rstrip("\r\n")
    match = _FIELD.match(text)
    if match is None:
        return CommandResult(consumed=False, status="command_empty")
    command, rest = match.group(1).lower(), text[match.end():]
    handler = _COMMAND_HANDLERS.get(command)
    if handler is None:
        return _unknown_command(command)
    try:
        return handler(session, rest)
    except UsageError as exc:
        return CommandResult(consumed=True, status="usage", message=f"usage: {exc.usage}")
    except LineEditorError as exc:
        telemetry.record_event(
            "command.error",
            level="warning",
            data={"command": command, "error": type(exc).__name__},
        )
        return CommandResult(consumed=True, status="error", message=str(exc))


def _unknown_command(command: str) -> CommandResult:
    return CommandResult(
        consumed=True,
        status="command_error",
        message=f"Invalid command: {command}",
    )


def _split_fields(rest: str, count: int, usage: str) -> Tuple[List[str], str]:
    """Take ``count`` whitespace-separated fields; return them and the raw tail."""

    fields: List[str] = []
    pos = 0
    for _ in range(count):
        match = _FIELD.match(rest, pos)
        if match is None:
            raise UsageError(usage)
        fields.append(match.group(1))
        pos = match.end()
    return fields, rest[pos:]


def _ints(rest: str, count: int, usage: str) -> Tuple[List[int], str]:
    fields, tail = _split_fields(rest, count, usage)
    try:
        return [int(value) for value in fields], tail
    except ValueError as exc:
        raise UsageError(usage) from exc


def _path(rest: str, usage: str) -> str:
    path = rest.strip()
    if not path:
        raise UsageError(usage)
    return path


def _handle_append(session: EditorSession, rest: str) -> CommandResult:
    session.append(rest)
    return CommandResult(consumed=True, status="append")


def _handle_newline(session: EditorSession, rest: str) -> CommandResult:
    del rest
    session.new_line()
    return CommandResult(consumed=True, status="newline")


def _handle_insert(
    session: EditorSession, rest: str, *, replace: bool = False
) -> CommandResult:
    word = "replace" if replace else "insert"
    (line, index), text = _ints(rest, 2, f"{word} <line> <index> <text>")
    if replace:
        session.insert_replace_text(line, index, text)
    else:
        session.insert_text(line, index, text)
    return CommandResult(consumed=True, status=word)


def _handle_span(session: EditorSession, rest: str, *, verb: str) -> CommandResult:
    (line, index, length), _ = _ints(rest, 3, f"{verb} <line> <index> <length>")
    operation = {
        "delete": session.delete_text,
        "cut": session.cut_text,
        "copy": session.copy_text,
    }[verb]
    operation(line, index, length)
    return CommandResult(consumed=True, status=verb)


def _handle_paste(session: EditorSession, rest: str) -> CommandResult:
    (line, index), _ = _ints(rest, 2, "paste <line> <index>")
    session.paste_text(line, index)
    return CommandResult(consumed=True, status="paste")


def _handle_undo(session: EditorSession, rest: str) -> CommandResult:
    del rest
    if session.undo():
        return CommandResult(consumed=True, status="undo")
    return CommandResult(consumed=True, status="undo_empty", message="Nothing to undo")


def _handle_redo(session: EditorSession, rest: str) -> CommandResult:
    del rest
    if session.redo():
        return CommandResult(consumed=True, status="redo")
    return CommandResult(consumed=True, status="redo_empty", message="Nothing to redo")


def _handle_search(session: EditorSession, rest: str) -> CommandResult:
    needle = rest
    if not needle:
        raise UsageError("search <text>")
    hits = session.search_text(needle)
    lines = tuple(f"Found on {hit}" for hit in hits)
    message = None if hits else f"No match for {needle!r}"
    return CommandResult(consumed=True, status="search", message=message, lines=lines)


def _handle_print(session: EditorSession, rest: str) -> CommandResult:
    del rest
    return CommandResult(
        consumed=True, status="print", lines=tuple(session.print_text())
    )


def _handle_load(session: EditorSession, rest: str) -> CommandResult:
    path = _path(rest, "load <path>")
    count = session.load_from_file(path)
    return CommandResult(
        consumed=True, status="load", message=f"Loaded {count} lines from {path}"
    )


def _handle_save(session: EditorSession, rest: str) -> CommandResult:
    path = _path(rest, "save <path>")
    count = session.save_to_file(path)
    return CommandResult(
        consumed=True, status="save", message=f"Saved {count} lines to {path}"
    )


def _handle_transform(
    session: EditorSession, rest: str, *, decrypt: bool = False
) -> CommandResult:
    verb = "decrypt" if decrypt else "encrypt"
    usage = f"{verb} <input> <output> <key>"
    args = rest.split()
    if len(args) != 3:
        raise UsageError(usage)
    (key,), _ = _ints(args[2], 1, usage)
    operation = session.decrypt_file if decrypt else session.encrypt_file
    count = operation(args[0], args[1], key)
    return CommandResult(
        consumed=True, status=verb, message=f"Wrote {count} lines to {args[1]}"
    )


def _handle_clear(session: EditorSession, rest: str) -> CommandResult:
    del session, rest
    return CommandResult(consumed=True, status="clear")


def _handle_quit(session: EditorSession, rest: str) -> CommandResult:
    del session, rest
    return CommandResult(consumed=True, status="quit", quit=True)


def _handle_help(session: EditorSession, rest: str) -> CommandResult:
    del session, rest
    return CommandResult(consumed=True, status="help", lines=HELP_LINES)

HELP_LINES: Tuple[str, ...] = (
    "append <text>                  add a line at the end",
    "newline                        add an empty line",
    "insert <line> <index> <text>   insert text",
    "delete <line> <index> <len>    delete text",
    "cut <line> <index> <len>       cut text to the clipboard",
    "copy <line> <index> <len>      copy text to the clipboard",
    "paste <line> <index>           paste the clipboard",
    "replace <line> <index> <text>  insert with replacement",
    "undo | redo                    walk the edit history",
    "search <text>                  list every occurrence",
    "print                          show the buffer",
    "load <path> | save <path>      read or write a file",
    "encrypt <in> <out> <key>       encrypt a file",
    "decrypt <in> <out> <key>       decrypt a file",
    "clear                          clear the console",
    "quit                           leave the editor",
)


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "append": _handle_append,
    "newline": _handle_newline,
    "insert": _handle_insert,
    "replace": partial(_handle_insert, replace=True),
    "delete": partial(_handle_span, verb="delete"),
    "cut": partial(_handle_span, verb="cut"),
    "copy": partial(_handle_span, verb="copy"),
    "paste": _handle_paste,
    "undo": _handle_undo,
    "redo": _handle_redo,
    "search": _handle_search,
    "print": _handle_print,
    "load": _handle_load,
    "save": _handle_save,
    "encrypt": _handle_transform,
    "decrypt": partial(_handle_transform, decrypt=True),
    "clear": _handle_clear,
    "quit": _handle_quit,
    "exit": _handle_quit,
    "help": _handle_help,
}


__all__ = ["CommandResult", "HELP_LINES", "submit_command_line"]
