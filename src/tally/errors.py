"""Error types raised by tally."""

from pathlib import Path


class TallyError(Exception):
    """Base class for tally errors."""


class RegistrationError(TallyError, ValueError):
    """Raised when a test class carries invalid markers (developer error)."""


class ConfigError(TallyError):
    """Raised when the ``[tool.tally]`` configuration cannot be used."""


class FixtureError(TallyError):
    """Raised when a collection's shared fixture cannot be created."""

    def __init__(self, collection: str, cause: Exception | None = None) -> None:
        self.collection = collection
        self.cause = cause
        message = f"Shared fixture for collection {collection!r} could not be created"
        if cause:
            message += f": {cause}"
        super().__init__(message)


class HookError(TallyError):
    """Raised when a lifecycle hook fails."""

    def __init__(self, owner: str, role: str, cause: Exception | None = None) -> None:
        self.owner = owner
        self.role = role
        self.cause = cause
        message = f"{role} hook of {owner} failed"
        if cause:
            message += f": {cause}"
        super().__init__(message)


class AssertionFailure(AssertionError):
    """Expectation violation raised by :mod:`tally.assertions` helpers."""


class SurfaceLoadError(TallyError):
    """Raised when the test surface cannot be loaded."""

    def __init__(self, path: Path, cause: BaseException | None = None) -> None:
        self.path = path
        self.cause = cause

        message = f"""
Could not load test surface.

Path: {path}
"""
        if cause:
            message += f"Cause: {type(cause).__name__}: {cause}\n"

        super().__init__(message)


__all__ = [
    "AssertionFailure",
    "ConfigError",
    "FixtureError",
    "HookError",
    "RegistrationError",
    "SurfaceLoadError",
    "TallyError",
]
