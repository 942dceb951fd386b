"""Value predicates that raise :class:`~tally.errors.AssertionFailure`."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from tally.errors import AssertionFailure


def are_equal(expected: Any, actual: Any) -> None:
    if expected != actual:
        raise AssertionFailure(f"Values should be equal: expected={expected}, actual={actual}")


def are_not_equal(expected: Any, actual: Any) -> None:
    if expected == actual:
        raise AssertionFailure(f"Values should not be equal: {expected}")


def is_true(value: Any) -> None:
    if not value:
        raise AssertionFailure(f"Value should be true: {value}")


def is_false(value: Any) -> None:
    if value:
        raise AssertionFailure(f"Value should be false: {value}")


def is_none(value: Any) -> None:
    if value is not None:
        raise AssertionFailure(f"Value should be None: {value}")


def is_not_none(value: Any) -> None:
    if value is None:
        raise AssertionFailure("Value should not be None")


def are_same(expected: Any, actual: Any) -> None:
    if expected is not actual:
        raise AssertionFailure(f"Values should be the same object: {expected}")


def are_not_same(expected: Any, actual: Any) -> None:
    if expected is actual:
        raise AssertionFailure(f"Values should not be the same object: {expected}")


def is_greater_than(actual: Any, expected: Any) -> None:
    if not actual > expected:
        raise AssertionFailure(
            f"Value should be greater than: actual={actual}, expected={expected}"
        )


def is_greater_than_or_equal_to(actual: Any, expected: Any) -> None:
    if not actual >= expected:
        raise AssertionFailure(
            f"Value should be greater than or equal to: actual={actual}, expected={expected}"
        )


def is_less_than(actual: Any, expected: Any) -> None:
    if not actual < expected:
        raise AssertionFailure(f"Value should be less than: actual={actual}, expected={expected}")


def is_less_than_or_equal_to(actual: Any, expected: Any) -> None:
    if not actual <= expected:
        raise AssertionFailure(
            f"Value should be less than or equal to: actual={actual}, expected={expected}"
        )


def is_empty(value: Iterable[Any] | None) -> None:
    """Passes for None as well as for an empty iterable."""
    if value is None or not any(True for _ in value):
        return
    raise AssertionFailure("Collection should be empty")


def is_not_empty(value: Iterable[Any] | None) -> None:
    if value is not None and any(True for _ in value):
        return
    raise AssertionFailure("Collection should not be empty")


def is_positive(value: float) -> None:
    if value <= 0:
        raise AssertionFailure(f"Value should be positive: {value}")


def is_negative(value: float) -> None:
    if value >= 0:
        raise AssertionFailure(f"Value should be negative: {value}")
