"""Naming helpers: model names to column names, option values to text."""

import re
from enum import Enum
from typing import Any

_ACRONYM_BOUNDARY_RE = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY_RE = re.compile(r"([a-z\d])([A-Z])")


def underscore(name: str) -> str:
    """Convert a CamelCase class name to snake_case.

    Args:
        name: Class name (e.g. 'LineItem', 'HTTPRequest').

    Returns:
        snake_case form (e.g. 'line_item', 'http_request').
    """
    name = _ACRONYM_BOUNDARY_RE.sub(r"\1_\2", name)
    name = _WORD_BOUNDARY_RE.sub(r"\1_\2", name)
    return name.replace("-", "_").lower()


def stringify(value: Any) -> str:
    """Render an option value (string, SQL expression, or sequence) as text.

    None renders as the empty string; lists and tuples render as their
    items' text joined with ', ' (e.g. an order_by tuple). Enum members
    render as their value.
    """
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple)):
        return ", ".join(stringify(item) for item in value)
    return str(value)
