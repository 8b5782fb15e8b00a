"""Console entry point: a prompt loop, or the Textual app with ``--tui``."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence, TextIO

from line_editor.actions import CommandResult, submit_command_line
from line_editor.cipher import ModuleLoadError
from line_editor.runtime import telemetry
from line_editor.runtime.settings import load_settings
from line_editor.session import EditorSession
from line_editor.storage import FileIOError

PROMPT = "> "
CLEAR_SCREEN = "\x1b[2J\x1b[H"


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="line-editor",
        description="Line editor with undo/redo and file ciphers.",
    )
    parser.add_argument("file", nargs="?", help="File to load at startup")
    parser.add_argument(
        "--cipher",
        help="Cipher capability as module or module:attribute "
        "(default: $LINE_EDITOR_CIPHER or line_editor.cipher.rotation)",
    )
    parser.add_argument(
        "--encoding", help="Text encoding for files (default: utf-8)"
    )
    parser.add_argument(
        "--tui", action="store_true", help="Run the Textual interface"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log at DEBUG level to the console"
    )
    return parser.parse_args(argv)


def _emit(result: CommandResult, out: TextIO) -> None:
    if result.status == "clear":
        out.write(CLEAR_SCREEN)
    for line in result.lines:
        out.write(f"{line}\n")
    if result.message:
        out.write(f"{result.message}\n")
    out.flush()


def run_repl(
    session: EditorSession,
    *,
    read: Optional[Callable[[str], str]] = None,
    out: Optional[TextIO] = None,
) -> int:
    """Read command lines until ``quit`` or end of input; return commands run."""

    read = read or input
    out = out or sys.stdout
    out.write("Type 'help' for the command list.\n")
    handled = 0
    while True:
        try:
            raw = read(PROMPT)
        except EOFError:
            break
        result = submit_command_line(session, raw)
        if not result.consumed:
            continue
        handled += 1
        _emit(result, out)
        if result.quit:
            break
    return handled


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    telemetry.configure(preset="development" if args.verbose else "quiet")
    settings = load_settings().override(cipher=args.cipher, encoding=args.encoding)
    try:
        session = EditorSession(settings=settings)
    except ModuleLoadError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    with session:
        if args.file:
            try:
                session.load_from_file(args.file)
            except FileIOError as exc:
                print(f"error: {exc}", file=sys.stderr)
        if args.tui:
            from line_editor.adapters.textual.app import LineEditorApp

            LineEditorApp(session).run()
        else:
            run_repl(session)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry
    sys.exit(main())
