"""Growable line store addressed by ``(line, index)`` positions."""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence

from .state import SearchHit
from .sync import AllocationFailure, InvalidIndex
from .validation import ensure_index

INITIAL_CAPACITY = 10
GROWTH_INCREMENT = 10


class LineBuffer:
    """Ordered sequence of text lines backed by a pre-allocated slot table.

    Slots ``[0, total_lines)`` hold logical lines; the remaining slots up to
    ``capacity`` are empty placeholders. When every slot is used the table
    grows by ``GROWTH_INCREMENT`` without touching existing lines.
    """

    def __init__(self, *, max_lines: Optional[int] = None) -> None:
        self._max_lines = max_lines
        self._slots: List[str] = [""] * INITIAL_CAPACITY
        self._total = 0

    @classmethod
    def from_lines(
        cls, lines: Sequence[str], *, max_lines: Optional[int] = None
    ) -> "LineBuffer":
        buffer = cls(max_lines=max_lines)
        for line in lines:
            buffer.append(line)
        return buffer

    @property
    def total_lines(self) -> int:
        return self._total

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._total

    def __iter__(self) -> Iterator[str]:
        return iter(self._slots[: self._total])

    def lines(self) -> tuple[str, ...]:
        """Return the logical lines without exposing the slot table."""

        return tuple(self._slots[: self._total])

    def _ensure_capacity(self) -> None:
        if self._max_lines is not None and self._total >= self._max_lines:
            raise AllocationFailure(
                f"Failed to allocate line {self._total}: limit is {self._max_lines}",
                capacity=len(self._slots),
            )
        if self._total < len(self._slots):
            return
        self._slots.extend([""] * GROWTH_INCREMENT)

    def append(self, text: Optional[str]) -> None:
        if text is None:
            return
        self._ensure_capacity()
        self._slots[self._total] = text
        self._total += 1

    def new_line(self) -> None:
        self.append("")

    def get_line(self, line: int) -> Optional[str]:
        if line < 0 or line >= self._total:
            return None
        return self._slots[line]

    def insert(self, line: int, index: int, text: str) -> None:
        current = ensure_index(self, line, index)
        self._slots[line] = current[:index] + text + current[index:]

    def delete(self, line: int, index: int, length: int) -> str:
        """Remove up to ``length`` characters at ``index`` and return them.

        Requests reaching past the end of the line are clamped to the line end.
        """

        current = ensure_index(self, line, index)
        if length < 0:
            raise InvalidIndex(
                f"Invalid length {length}", position=(line, index)
            )
        end = index + min(length, len(current) - index)
        self._slots[line] = current[:index] + current[end:]
        return current[index:end]

    def replace_line(self, line: int, text: str) -> None:
        """Overwrite a whole line; used to restore captured line snapshots."""

        ensure_index(self, line, 0)
        self._slots[line] = text

    def search(self, needle: str) -> List[SearchHit]:
        hits: List[SearchHit] = []
        if not needle:
            return hits
        for row in range(self._total):
            text = self._slots[row]
            position = text.find(needle)
            while position != -1:
                hits.append(SearchHit(row, position))
                position = text.find(needle, position + 1)
        return hits

    def clear(self) -> None:
        self._slots = [""] * INITIAL_CAPACITY
        self._total = 0


__all__ = ["LineBuffer", "INITIAL_CAPACITY", "GROWTH_INCREMENT"]
