"""Reporter registry for plugin-style reporter registration."""

from __future__ import annotations

import importlib
from typing import Any, TypeVar


T = TypeVar("T", bound=type)

_reporter_registry: dict[str, type] = {}
_builtin_registry: dict[str, type] = {}

_REPORTER_METHODS = (
    "on_no_tests_found",
    "on_collection_complete",
    "on_test_complete",
    "on_run_complete",
)


def _is_reporter_class(obj: Any) -> bool:
    return isinstance(obj, type) and all(callable(getattr(obj, m, None)) for m in _REPORTER_METHODS)


def reporter(
    cls: T | None = None,
    *,
    enabled: bool = True,
    name: str | None = None,
) -> T | Any:
    """Register a reporter class under its name (or ``name``).

    Usable bare (``@reporter``) or with arguments (``@reporter(name="dots")``).
    """

    def decorator(cls: T) -> T:
        if enabled:
            _reporter_registry[name or cls.__name__] = cls
        return cls

    if cls is not None:
        return decorator(cls)
    return decorator


def register_builtin(cls: T) -> T:
    """Register a reporter that survives :func:`clear_reporter_registry`."""
    _reporter_registry[cls.__name__] = cls
    _builtin_registry[cls.__name__] = cls
    return cls


def get_reporter_registry() -> dict[str, type]:
    return _reporter_registry


def clear_reporter_registry() -> None:
    """Drop plugin reporters, keeping built-ins."""
    _reporter_registry.clear()
    _reporter_registry.update(_builtin_registry)


def _split_import_path(import_path: str) -> tuple[str, str]:
    separator = ":" if ":" in import_path else "."
    module_path, _, attr = import_path.rpartition(separator)
    if not module_path or not attr:
        msg = f"Invalid import path: {import_path}"
        raise ValueError(msg)
    return module_path, attr


def _import_reporter_class(import_path: str) -> type:
    """Import ``module.path:ClassName`` or ``module.path.ClassName``."""
    module_path, attr = _split_import_path(import_path)
    cls = getattr(importlib.import_module(module_path), attr)
    if not _is_reporter_class(cls):
        msg = f"{import_path} does not implement the Reporter protocol"
        raise TypeError(msg)
    return cls


def resolve_reporter(name: str, **kwargs: Any) -> Any:
    """Instantiate a reporter by registry name or import string.

    Raises:
        ValueError: If the name is neither registered nor importable.
    """
    cls = _reporter_registry.get(name)
    if cls is None:
        if ":" not in name and "." not in name:
            available = ", ".join(sorted(_reporter_registry))
            msg = f"Unknown reporter: {name}. Available: {available}"
            raise ValueError(msg)
        cls = _import_reporter_class(name)
    return cls(**kwargs)


def resolve_reporters(
    names: list[str],
    options: dict[str, dict[str, Any]] | None = None,
) -> list[Any]:
    """Instantiate each named reporter with its entry from ``options``."""
    options = options or {}
    return [resolve_reporter(name, **options.get(name, {})) for name in names]


__all__ = [
    "clear_reporter_registry",
    "get_reporter_registry",
    "register_builtin",
    "reporter",
    "resolve_reporter",
    "resolve_reporters",
]
