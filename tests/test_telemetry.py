from __future__ import annotations

import pytest

from line_editor.runtime import telemetry


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_span_yields_handle_with_metadata() -> None:
    with telemetry.span("test::ok", component="tests", metadata={"n": 3}) as handle:
        handle.add_metadata("extra", [1, 2])

    assert handle.span_name == "test::ok"
    assert handle.component_name == "tests"
    assert handle.metadata == {"n": "3", "extra": "[1, 2]"}


def test_span_reraises_failures() -> None:
    with pytest.raises(KeyError):
        with telemetry.span("test::fail", metadata={"key": "k"}):
            raise KeyError("k")
