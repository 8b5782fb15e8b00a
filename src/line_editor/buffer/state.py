"""Position types shared by the buffer, commands, and hosts."""

from __future__ import annotations

from typing import NamedTuple, Tuple

Position = Tuple[int, int]  # (line, index)


class SearchHit(NamedTuple):
    """One occurrence reported by ``LineBuffer.search``."""

    line: int
    index: int

    def __str__(self) -> str:
        return f"line {self.line}, index {self.index}"
