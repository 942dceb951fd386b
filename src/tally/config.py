"""Project configuration from ``[tool.tally]`` in pyproject.toml."""

from __future__ import annotations

import shlex
import tomllib
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from tally.errors import ConfigError


PYPROJECT = "pyproject.toml"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class TallyConfig(BaseModel):
    """Settings read from ``[tool.tally]``; CLI flags take precedence.

    Attributes
    ----------
    verbosity:
        Baseline verbosity, adjusted by ``-v`` / ``-q``.
    addopts:
        Extra CLI arguments prepended to the command line. A string is split
        the way a shell would.
    reporters:
        Reporter names or import strings. ConsoleReporter is used when empty.
    reporter_options:
        Constructor keyword arguments keyed by reporter name.
    log_level:
        Level for tally's log output on stderr.
    """

    model_config = ConfigDict(extra="forbid")

    verbosity: int = 0
    addopts: list[str] = Field(default_factory=list)
    reporters: list[str] = Field(default_factory=list)
    reporter_options: dict[str, dict[str, Any]] = Field(default_factory=dict)
    log_level: LogLevel = "WARNING"

    @field_validator("addopts", mode="before")
    @classmethod
    def _split_addopts(cls, value: Any) -> Any:
        if isinstance(value, str):
            return shlex.split(value)
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value


DEFAULT_CONFIG = TallyConfig()


def find_pyproject(start: Path | None = None) -> Path | None:
    """Nearest pyproject.toml in ``start`` or any of its parents."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> TallyConfig:
    """Load ``[tool.tally]`` from the nearest pyproject.toml.

    Raises:
        ConfigError: If the file is not valid TOML or the section is invalid.
    """
    pyproject = find_pyproject(start)
    if pyproject is None:
        return DEFAULT_CONFIG.model_copy(deep=True)

    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Could not parse {pyproject}: {exc}"
        raise ConfigError(msg) from exc

    section = data.get("tool", {}).get("tally", {})
    try:
        return TallyConfig.model_validate(section)
    except ValidationError as exc:
        msg = f"Invalid [tool.tally] section in {pyproject}:\n{exc}"
        raise ConfigError(msg) from exc


__all__ = ["DEFAULT_CONFIG", "TallyConfig", "find_pyproject", "load_config"]
