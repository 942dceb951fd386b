"""Tally - marker-driven test runner."""

from .errors import AssertionFailure
from .testing import (
    Runner,
    RunReport,
    TestResult,
    TestStatus,
    class_cleanup,
    class_init,
    collection,
    collection_definition,
    ignore,
    method_cleanup,
    method_init,
    priority,
    run,
    scan,
    test,
    test_async,
    test_class,
    test_data,
)
from .version import __version__


__all__ = [
    # Markers
    "test_class",
    "test",
    "test_async",
    "test_data",
    "priority",
    "ignore",
    "class_init",
    "class_cleanup",
    "method_init",
    "method_cleanup",
    "collection",
    "collection_definition",
    # Running
    "scan",
    "run",
    "Runner",
    "RunReport",
    "TestResult",
    "TestStatus",
    "AssertionFailure",
]
