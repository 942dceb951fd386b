"""Base reporter protocol for tally output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tally.testing.models import Catalog, RunReport, TestResult


class Reporter(Protocol):
    """Protocol defining the interface for run reporters.

    All methods are async so reporters can do I/O; sync reporters implement
    them as coroutines that don't await anything. The runner calls them in
    order and awaits each one before continuing.
    """

    async def on_no_tests_found(self) -> None:
        """Called when the catalog holds no test classes."""
        ...

    async def on_collection_complete(self, catalog: Catalog) -> None:
        """Called once the catalog is built, before anything runs."""
        ...

    async def on_test_complete(self, result: TestResult) -> None:
        """Called after each result is recorded."""
        ...

    async def on_run_complete(self, report: RunReport) -> None:
        """Called after every collection has finished and fixtures are released."""
        ...
