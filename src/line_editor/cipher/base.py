"""Capability contract for whole-file text transforms."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from line_editor.errors import LineEditorError


@runtime_checkable
class Cipher(Protocol):
    """Anything exposing ``encrypt`` and ``decrypt`` over ``(text, key)``."""

    def encrypt(self, text: str, key: int) -> str:
        ...

    def decrypt(self, text: str, key: int) -> str:
        ...


class ModuleLoadError(LineEditorError):
    """Raised when a cipher capability cannot be imported or resolved."""

    def __init__(self, message: str, *, target: str) -> None:
        super().__init__(message)
        self.target = target


__all__ = ["Cipher", "ModuleLoadError"]
