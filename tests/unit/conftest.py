"""Shared fixtures for unit tests."""

import time

import pytest


class NullReporter:
    """Silent reporter for testing."""

    async def on_no_tests_found(self) -> None:
        pass

    async def on_collection_complete(self, catalog) -> None:
        pass

    async def on_test_complete(self, result) -> None:
        pass

    async def on_run_complete(self, report) -> None:
        pass


class RecordingReporter:
    """Records every reporter callback with the time it arrived."""

    def __init__(self) -> None:
        self.events: list[tuple] = []
        self.completed_at: dict[str, float] = {}

    async def on_no_tests_found(self) -> None:
        self.events.append(("no_tests",))

    async def on_collection_complete(self, catalog) -> None:
        self.events.append(("collected", len(catalog.descriptors)))

    async def on_test_complete(self, result) -> None:
        self.completed_at[result.identity] = time.perf_counter()
        self.events.append(("result", result.identity, result.status.name))

    async def on_run_complete(self, report) -> None:
        self.events.append(("done", report.total))


@pytest.fixture
def null_reporter() -> NullReporter:
    """Provide a silent reporter for tests."""
    return NullReporter()


@pytest.fixture
def recorder() -> RecordingReporter:
    """Provide a reporter that records callbacks."""
    return RecordingReporter()
