"""Domain value objects."""

from assoc_matchers.domain.value_objects.core import ExpectedConstraints

__all__ = ["ExpectedConstraints"]
