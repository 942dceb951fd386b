"""CLI module for the tally test runner."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from tally.config import TallyConfig, load_config
from tally.errors import ConfigError, SurfaceLoadError
from tally.reports import ConsoleReporter, resolve_reporter
from tally.testing import Runner, load_surface, scan


EXIT_OK = 0
EXIT_TESTS_FAILED = 1
EXIT_USAGE = 2

_HANDLER_NAME = "tally-cli"


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the tally CLI."""
    try:
        config = load_config()
    except ConfigError as exc:
        _error(str(exc))
        raise SystemExit(EXIT_USAGE)

    parser = _build_parser()
    args_in = list(sys.argv[1:] if argv is None else argv)
    args = parser.parse_args([*config.addopts, *args_in])

    _configure_logging(args.log_level or config.log_level)
    exit_code = asyncio.run(_run_tests(args, config))
    raise SystemExit(exit_code)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tally", description="Marker-driven test runner")
    parser.add_argument("path", help="Test file, or directory of tally_*.py files")
    parser.add_argument("-q", "--quiet", action="count", default=0, help="Reduce output")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase output")
    parser.add_argument(
        "--reporter",
        dest="reporters",
        action="append",
        help="Reporter name or import string (repeatable, default: ConsoleReporter)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level for diagnostics on stderr",
    )
    return parser


def _error(message: str) -> None:
    Console(stderr=True).print(f"[red]{escape(message)}[/red]")


def _configure_logging(level: str) -> None:
    logger = logging.getLogger("tally")
    logger.setLevel(level)
    if any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        return
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.set_name(_HANDLER_NAME)
    logger.addHandler(handler)
    logger.propagate = False


def _resolve_verbosity(args: argparse.Namespace, config: TallyConfig) -> int:
    return config.verbosity + args.verbose - args.quiet


def _resolve_reporters(
    args: argparse.Namespace, config: TallyConfig, verbosity: int
) -> list[Any]:
    names = args.reporters or config.reporters
    if not names:
        return [ConsoleReporter(verbosity=verbosity)]

    reporters = []
    for name in names:
        kwargs = dict(config.reporter_options.get(name, {}))
        if name == "ConsoleReporter":
            kwargs.setdefault("verbosity", verbosity)
        reporters.append(resolve_reporter(name, **kwargs))
    return reporters


async def _run_tests(args: argparse.Namespace, config: TallyConfig) -> int:
    path = Path(args.path)
    if not path.exists():
        _error(f"Path not found: {path}")
        return EXIT_USAGE

    try:
        modules = load_surface(path)
    except SurfaceLoadError as exc:
        _error(str(exc))
        return EXIT_USAGE

    try:
        reporters = _resolve_reporters(args, config, _resolve_verbosity(args, config))
    except (ValueError, TypeError, ImportError) as exc:
        _error(str(exc))
        return EXIT_USAGE

    report = await Runner(reporters=reporters).run(scan(*modules))
    return EXIT_OK if report.ok else EXIT_TESTS_FAILED


__all__ = ["main"]
