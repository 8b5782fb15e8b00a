"""Plain line-delimited text files: one logical line per physical line."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from line_editor.errors import LineEditorError

DEFAULT_ENCODING = "utf-8"


class FileIOError(LineEditorError):
    """Open, read, or write failure on a buffer file."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


def _strip_terminator(raw: str) -> str:
    if raw.endswith("\r\n"):
        return raw[:-2]
    if raw.endswith(("\n", "\r")):
        return raw[:-1]
    return raw


def read_lines(path: Path | str, *, encoding: str = DEFAULT_ENCODING) -> Iterator[str]:
    """Yield the lines of ``path`` without their line terminators.

    The file is split on ``\\n`` bytes and each line is decoded on its own, so
    a caller that stops on ``FileIOError`` keeps every line before the first
    one that fails to decode. Encodings must therefore keep ``\\n`` as a
    single byte (UTF-8, Latin-1 and the other ASCII supersets).
    """

    target = Path(path)
    try:
        with target.open("rb") as handle:
            for number, raw in enumerate(handle):
                try:
                    text = raw.decode(encoding)
                except UnicodeDecodeError as exc:
                    raise FileIOError(
                        f"Could not decode line {number} of {target}: {exc.reason}",
                        path=target,
                    ) from exc
                yield _strip_terminator(text)
    except FileNotFoundError as exc:
        raise FileIOError(f"Error opening file for reading: {target}", path=target) from exc
    except OSError as exc:
        raise FileIOError(f"Could not read {target}: {exc}", path=target) from exc


def write_lines(
    path: Path | str, lines: Iterable[str], *, encoding: str = DEFAULT_ENCODING
) -> int:
    """Write every line followed by ``\\n``; return the number of lines written."""

    target = Path(path)
    count = 0
    try:
        with target.open("w", encoding=encoding, newline="\n") as handle:
            for line in lines:
                handle.write(line)
                handle.write("\n")
                count += 1
    except UnicodeEncodeError as exc:
        raise FileIOError(
            f"Could not encode line {count} as {encoding} for {target}: {exc.reason}",
            path=target,
        ) from exc
    except OSError as exc:
        raise FileIOError(f"Could not open file for writing: {target}", path=target) from exc
    return count


__all__ = ["FileIOError", "read_lines", "write_lines"]
