"""Plain-text rendering of a run report."""

from __future__ import annotations

from tally.testing.models import RunReport, TestResult, TestStatus


HEADER = "--- Test Results ---"


def format_result(result: TestResult) -> list[str]:
    """Status line for one result, plus a tab-indented error line on failure."""
    lines = [f"{result.identity}: {result.status.name}"]
    if result.status is TestStatus.FAILED and result.message is not None:
        lines.append(f"\tError: {result.message}")
    return lines


def format_summary(report: RunReport) -> str:
    return (
        f"Total: {report.total}, Passed: {report.passed}, "
        f"Failed: {report.failed}, Ignored: {report.ignored}"
    )


def render_report(report: RunReport) -> str:
    """Render results in execution order followed by the summary counts."""
    lines = [HEADER]
    for result in report.results:
        lines.extend(format_result(result))
    lines.append("")
    lines.append(format_summary(report))
    return "\n".join(lines)


__all__ = ["HEADER", "format_result", "format_summary", "render_report"]
