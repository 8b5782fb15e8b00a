"""Root of the exception hierarchy raised by line_editor."""

from __future__ import annotations


class LineEditorError(RuntimeError):
    """Base class for every error the editor reports to its caller."""


__all__ = ["LineEditorError"]
