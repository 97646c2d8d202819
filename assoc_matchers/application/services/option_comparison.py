"""Comparison helpers shared by the association matcher and sub-matchers."""

from enum import Enum
from typing import Any, Callable

from assoc_matchers.shared.utils.naming import stringify

Comparison = Callable[[Any, Any], bool]


def equals(expected: Any, actual: Any) -> bool:
    """Compare by equality, falling back to text for strings and enum members.

    SQL expressions overload == to build a clause, so only a literal True
    counts as equal on the first comparison.
    """
    if (expected == actual) is True:
        return True
    if isinstance(expected, (str, Enum)) or isinstance(actual, (str, Enum)):
        return stringify(expected) == stringify(actual)
    return False


def equals_as_string(expected: Any, actual: Any) -> bool:
    """Compare the string forms of two SQL fragments (exact text match)."""
    return stringify(expected) == stringify(actual)


def flag_matches(expected: bool | None, declared: Any) -> bool:
    """Return True when expected is unset or equals the truthiness of declared."""
    if expected is None:
        return True
    return expected == bool(declared)
