"""Reference rotation transform.

ASCII letters are shifted by ``key mod 26`` inside their own case alphabet,
wrapping at the end; every other character passes through unchanged.
"""

from __future__ import annotations

import string

ALPHABET_SIZE = 26


def _shift(text: str, offset: int) -> str:
    offset %= ALPHABET_SIZE
    if not offset:
        return text
    lower = string.ascii_lowercase
    upper = string.ascii_uppercase
    table = str.maketrans(
        lower + upper,
        lower[offset:] + lower[:offset] + upper[offset:] + upper[:offset],
    )
    return text.translate(table)


def encrypt(text: str, key: int) -> str:
    return _shift(text, key)


def decrypt(text: str, key: int) -> str:
    return _shift(text, -key)


class RotationCipher:
    """Object form of the module functions, for direct injection."""

    name = "rotation"

    def encrypt(self, text: str, key: int) -> str:
        return encrypt(text, key)

    def decrypt(self, text: str, key: int) -> str:
        return decrypt(text, key)


__all__ = ["encrypt", "decrypt", "RotationCipher", "ALPHABET_SIZE"]
