"""Marker-driven test discovery and execution.

Provides class-based test registration, shared collection fixtures and a
sequential runner.
"""

from .capabilities import Disposable, FixtureConsumer, Initializable, PriorityOrdered, SharedFixture
from .discovery import scan
from .fixtures import FixtureManager, FixtureRegistry
from .loader import load_surface
from .markers import (
    class_cleanup,
    class_init,
    collection,
    collection_definition,
    ignore,
    method_cleanup,
    method_init,
    priority,
    test,
    test_async,
    test_class,
    test_data,
)
from .models import (
    Catalog,
    CollectionDefinition,
    CollectionGroup,
    Failed,
    FailureKind,
    ParameterSet,
    Passed,
    RunReport,
    TestCase,
    TestClassDescriptor,
    TestMethodMarker,
    TestResult,
    TestStatus,
)
from .runner import Runner, run
from .scheduler import schedule


__all__ = [
    "Catalog",
    "CollectionDefinition",
    "CollectionGroup",
    "Disposable",
    "Failed",
    "FailureKind",
    "FixtureConsumer",
    "FixtureManager",
    "FixtureRegistry",
    "Initializable",
    "ParameterSet",
    "Passed",
    "PriorityOrdered",
    "Runner",
    "RunReport",
    "SharedFixture",
    "TestCase",
    "TestClassDescriptor",
    "TestMethodMarker",
    "TestResult",
    "TestStatus",
    "class_cleanup",
    "class_init",
    "collection",
    "collection_definition",
    "ignore",
    "load_surface",
    "method_cleanup",
    "method_init",
    "priority",
    "run",
    "scan",
    "schedule",
    "test",
    "test_async",
    "test_class",
    "test_data",
]
