"""Reporting module for tally run output."""

from tally.reports.base import Reporter
from tally.reports.console import ConsoleReporter
from tally.reports.registry import (
    get_reporter_registry,
    register_builtin,
    reporter,
    resolve_reporter,
    resolve_reporters,
)
from tally.reports.text import render_report


register_builtin(ConsoleReporter)

__all__ = [
    "ConsoleReporter",
    "Reporter",
    "get_reporter_registry",
    "render_report",
    "reporter",
    "resolve_reporter",
    "resolve_reporters",
]
