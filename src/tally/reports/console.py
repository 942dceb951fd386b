"""Console reporter built on rich."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from tally.reports.text import format_result, format_summary, render_report
from tally.testing.models import Catalog, RunReport, TestResult, TestStatus


_STATUS_STYLES = {
    TestStatus.PASSED: "green",
    TestStatus.FAILED: "bold red",
    TestStatus.IGNORED: "yellow",
}


class ConsoleReporter:
    """Prints the text report; ``verbosity >= 1`` also streams each result.

    With negative verbosity only the summary line is printed.
    """

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        self.console = console or Console()
        self.verbosity = verbosity

    def _print(self, text: str | Text) -> None:
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def _write(self, text: str) -> None:
        # Report text is written verbatim, tabs included.
        self.console.file.write(text + "\n")
        self.console.file.flush()

    async def on_no_tests_found(self) -> None:
        if self.verbosity >= 0:
            self._print("No tests found.")

    async def on_collection_complete(self, catalog: Catalog) -> None:
        if self.verbosity >= 1:
            classes = len(catalog.descriptors)
            self._print(f"Collected {classes} test class(es) in {len(catalog.groups)} group(s)")

    async def on_test_complete(self, result: TestResult) -> None:
        if self.verbosity < 1:
            return
        line, *rest = format_result(result)
        text = Text(line)
        text.stylize(_STATUS_STYLES[result.status], len(result.identity) + 2)
        if self.verbosity >= 2 and result.duration_ms:
            text.append(f" ({result.duration_ms:.1f} ms)", style="dim")
        self._print(text)
        for extra in rest:
            self._write(extra)

    async def on_run_complete(self, report: RunReport) -> None:
        if self.verbosity < 0:
            self._print(format_summary(report))
            return
        self._write(render_report(report))


__all__ = ["ConsoleReporter"]
