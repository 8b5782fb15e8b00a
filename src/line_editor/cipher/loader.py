"""Resolve a cipher capability from a dotted import path."""

from __future__ import annotations

import importlib
from typing import Any

from line_editor.runtime import telemetry

from .base import Cipher, ModuleLoadError


def _require_callables(obj: Any, target: str) -> Cipher:
    missing = [
        name for name in ("encrypt", "decrypt") if not callable(getattr(obj, name, None))
    ]
    if missing:
        raise ModuleLoadError(
            f"Failed to get {' and '.join(missing)} from '{target}'", target=target
        )
    return obj


def _import(module_name: str, target: str) -> Any:
    if not module_name.strip():
        raise ModuleLoadError("Cipher module name is empty", target=target)
    try:
        return importlib.import_module(module_name)
    except ImportError as exc:
        raise ModuleLoadError(
            f"Cipher module '{module_name}' not found", target=target
        ) from exc
    except Exception as exc:
        raise ModuleLoadError(
            f"Cipher module '{module_name}' failed to import: {exc}", target=target
        ) from exc


def load_cipher(target: str) -> Cipher:
    """Import ``module`` or ``module:attribute`` and return it as a ``Cipher``.

    A module works as a capability when it defines module-level ``encrypt``
    and ``decrypt`` functions. An attribute that is a class is instantiated
    with no arguments. Every failure surfaces as ``ModuleLoadError``.
    """

    module_name, _, attribute = target.partition(":")
    with telemetry.span(
        "cipher::load", component="cipher", metadata={"target": target}
    ):
        module = _import(module_name, target)

        obj: Any = module
        if attribute:
            try:
                obj = getattr(module, attribute)
            except AttributeError as exc:
                raise ModuleLoadError(
                    f"'{module_name}' has no attribute '{attribute}'", target=target
                ) from exc
            if isinstance(obj, type):
                try:
                    obj = obj()
                except Exception as exc:
                    raise ModuleLoadError(
                        f"Could not instantiate '{target}': {exc}", target=target
                    ) from exc

        return _require_callables(obj, target)


__all__ = ["load_cipher"]
