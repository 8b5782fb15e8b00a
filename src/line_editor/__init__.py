"""In-memory line editor with undo/redo history and pluggable file ciphers."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "cipher",
    "cli",
    "errors",
    "runtime",
    "session",
    "storage",
]

__version__ = "0.1.0"
