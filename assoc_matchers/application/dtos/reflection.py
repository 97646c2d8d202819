"""DTOs for relationship reflection (no dependency on ORM)."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from assoc_matchers.domain.enums import RelationshipKind


@dataclass(frozen=True)
class ReflectionMetadata:
    """Introspected metadata for one declared relationship.

    options holds the declared options by name (class_name, foreign_key,
    conditions, order, dependent, through, validate, touch, join_table,
    inverse_of). Absent options are simply missing from the mapping.
    """

    name: str
    kind: RelationshipKind
    source_model: type
    target_model: type | None
    options: Mapping[str, Any] = field(default_factory=dict)
    foreign_key: str | None = None
    join_table: str | None = None
    inverse_of: str | None = None

    @property
    def target_name(self) -> str | None:
        """Class name of the target model, or None when unresolved."""
        return self.target_model.__name__ if self.target_model is not None else None

    def option(self, key: str) -> Any:
        """Return the declared option value, or None when not declared."""
        return self.options.get(key)
