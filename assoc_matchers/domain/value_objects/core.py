"""Domain value objects for association matchers.

ExpectedConstraints is filled in by the matcher's fluent setters. Each
field is optional; None means the expectation was never set, which is
distinct from an explicit False.
"""

from dataclasses import dataclass, fields
from typing import Any


@dataclass
class ExpectedConstraints:
    """Expected options for one association (last write wins)."""

    class_name: str | None = None
    foreign_key: str | None = None
    conditions: Any | None = None
    validate: bool | None = None
    touch: bool | None = None

    def is_set(self, field: str) -> bool:
        """Return True when the expectation for field was configured.

        Raises:
            ValueError: If field is not an expectation name.
        """
        if field not in _FIELD_NAMES:
            raise ValueError(f"Unknown expectation: {field!r}")
        return getattr(self, field) is not None


_FIELD_NAMES = frozenset(f.name for f in fields(ExpectedConstraints))
