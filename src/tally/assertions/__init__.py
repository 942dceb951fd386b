"""Assertion helpers for tally tests."""

from tally.errors import AssertionFailure

from .basic import (
    are_equal,
    are_not_equal,
    are_not_same,
    are_same,
    is_empty,
    is_false,
    is_greater_than,
    is_greater_than_or_equal_to,
    is_less_than,
    is_less_than_or_equal_to,
    is_negative,
    is_none,
    is_not_empty,
    is_not_none,
    is_positive,
    is_true,
)

__all__ = [
    "AssertionFailure",
    "are_equal",
    "are_not_equal",
    "are_not_same",
    "are_same",
    "is_empty",
    "is_false",
    "is_greater_than",
    "is_greater_than_or_equal_to",
    "is_less_than",
    "is_less_than_or_equal_to",
    "is_negative",
    "is_none",
    "is_not_empty",
    "is_not_none",
    "is_positive",
    "is_true",
]
