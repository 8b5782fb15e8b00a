from __future__ import annotations

import pytest

from line_editor.runtime.settings import DEFAULT_CIPHER, Settings, load_settings


def test_load_settings_defaults_without_environment() -> None:
    settings = load_settings({})

    assert settings == Settings()
    assert settings.cipher == DEFAULT_CIPHER
    assert settings.max_lines is None


def test_load_settings_reads_prefixed_variables() -> None:
    settings = load_settings(
        {
            "LINE_EDITOR_CIPHER": "my_cipher:Caesar",
            "LINE_EDITOR_ENCODING": "latin-1",
            "LINE_EDITOR_MAX_LINES": "25",
        }
    )

    assert settings.cipher == "my_cipher:Caesar"
    assert settings.encoding == "latin-1"
    assert settings.max_lines == 25


@pytest.mark.parametrize("raw", ["zero", "0", "-3"])
def test_load_settings_rejects_bad_line_limit(raw: str) -> None:
    with pytest.raises(ValueError):
        load_settings({"LINE_EDITOR_MAX_LINES": raw})


def test_override_skips_missing_values() -> None:
    settings = Settings(encoding="latin-1").override(cipher=None, encoding="utf-8")

    assert settings.cipher == DEFAULT_CIPHER
    assert settings.encoding == "utf-8"
