"""Tests for option comparison helpers and naming utilities."""

from enum import Enum

import pytest

from assoc_matchers.application.services.option_comparison import (
    equals,
    equals_as_string,
    flag_matches,
)
from assoc_matchers.shared.utils.naming import stringify, underscore


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Customer", "customer"),
        ("LineItem", "line_item"),
        ("HTTPRequest", "http_request"),
        ("OAuth2Token", "o_auth2_token"),
    ],
)
def test_underscore(name: str, expected: str) -> None:
    """underscore converts CamelCase class names to snake_case."""
    assert underscore(name) == expected


def test_stringify_handles_none_and_sequences() -> None:
    """None renders empty; sequences join with ', '."""
    assert stringify(None) == ""
    assert stringify(["a", ("b", "c")]) == "a, b, c"
    assert stringify(3) == "3"


def test_equals_treats_strings_and_symbols_as_text() -> None:
    """equals compares text when either side is a string."""
    assert equals("delete", "delete") is True
    assert equals("delete", None) is False
    assert equals(1, 1) is True


def test_equals_as_string_is_exact() -> None:
    """String-form comparison does not normalize whitespace."""
    assert equals_as_string("a = b", "a = b") is True
    assert equals_as_string("a = b", "a=b") is False


def test_flag_matches() -> None:
    """Unset flags pass; set flags compare with truthiness."""
    assert flag_matches(None, "anything") is True
    assert flag_matches(True, 1) is True
    assert flag_matches(False, None) is True
    assert flag_matches(False, True) is False


class Policy(str, Enum):
    DELETE = "delete"
    NULLIFY = "nullify"


def test_stringify_renders_enum_value() -> None:
    """Enum members render as their value, not their qualified name."""
    assert stringify(Policy.DELETE) == "delete"
    assert stringify([Policy.DELETE, "restrict"]) == "delete, restrict"


def test_equals_accepts_enum_symbols() -> None:
    """A str-backed enum member equals its plain string value on either side."""
    assert equals(Policy.DELETE, "delete") is True
    assert equals("nullify", Policy.NULLIFY) is True
    assert equals(Policy.DELETE, "nullify") is False
    assert equals(Policy.DELETE, None) is False


def test_equals_does_not_coerce_sql_expressions() -> None:
    """An overloaded == returning a clause is not treated as equality."""

    class Clause:
        def __eq__(self, other):
            return "clause"

        __hash__ = object.__hash__

    assert equals(Clause(), 1) is False
