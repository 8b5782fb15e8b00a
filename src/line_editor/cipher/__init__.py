"""Pluggable character-substitution transforms."""

from .base import Cipher, ModuleLoadError
from .loader import load_cipher
from .rotation import RotationCipher

__all__ = ["Cipher", "ModuleLoadError", "RotationCipher", "load_cipher"]
