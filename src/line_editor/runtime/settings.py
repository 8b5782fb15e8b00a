"""Environment-driven settings shared by the session and its hosts."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .telemetry import ENV_PREFIX

DEFAULT_CIPHER = "line_editor.cipher.rotation"
DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True, slots=True)
class Settings:
    cipher: str = DEFAULT_CIPHER
    encoding: str = DEFAULT_ENCODING
    # None leaves buffer growth unbounded
    max_lines: Optional[int] = None

    def override(self, **changes: object) -> "Settings":
        """Return a copy with every non-``None`` change applied."""

        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def _parse_max_lines(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw == "":
        return None
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}MAX_LINES must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{ENV_PREFIX}MAX_LINES must be positive, got {value}")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        cipher=env.get(f"{ENV_PREFIX}CIPHER", DEFAULT_CIPHER),
        encoding=env.get(f"{ENV_PREFIX}ENCODING", DEFAULT_ENCODING),
        max_lines=_parse_max_lines(env.get(f"{ENV_PREFIX}MAX_LINES")),
    )


__all__ = ["Settings", "load_settings", "DEFAULT_CIPHER", "DEFAULT_ENCODING"]
