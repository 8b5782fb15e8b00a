from __future__ import annotations

import io
from pathlib import Path
from typing import Iterator

import pytest

from line_editor import cli
from line_editor.cipher import RotationCipher
from line_editor.runtime.settings import Settings
from line_editor.session import EditorSession


def make_reader(*lines: str):
    feed: Iterator[str] = iter(lines)

    def read(prompt: str) -> str:
        del prompt
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    return read


def test_repl_runs_until_quit() -> None:
    session = EditorSession(RotationCipher(), settings=Settings())
    out = io.StringIO()

    handled = cli.run_repl(
        session,
        read=make_reader("append one", "", "print", "quit", "append never"),
        out=out,
    )

    assert handled == 3
    assert "one\n" in out.getvalue()
    assert session.print_text() == ["one"]


def test_repl_stops_at_end_of_input() -> None:
    session = EditorSession(RotationCipher(), settings=Settings())
    out = io.StringIO()

    handled = cli.run_repl(session, read=make_reader("bogus"), out=out)

    assert handled == 1
    assert "Invalid command: bogus" in out.getvalue()


def test_main_loads_file_and_exits(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    source = tmp_path / "start.txt"
    source.write_text("alpha\nbeta\n", encoding="utf-8")
    monkeypatch.setattr("builtins.input", make_reader("print", "quit"))

    code = cli.main([str(source)])

    assert code == 0
    captured = capsys.readouterr()
    assert "alpha\nbeta\n" in captured.out


def test_main_rejects_unknown_cipher(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["--cipher", "no_such_cipher_module"])

    assert code == 2
    assert "not found" in capsys.readouterr().err
