"""Provider interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no SQLAlchemy imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from assoc_matchers.application.dtos.reflection import ReflectionMetadata


class IReflectionProvider(Protocol):
    """Protocol for relationship reflection and schema catalog lookups (DIP).

    Implementations raise ReflectionProviderException (or a subclass) when
    they cannot introspect at all; a relationship that simply is not declared
    is reported as None.
    """

    def reflect_on(self, model: type, name: str) -> ReflectionMetadata | None:
        """Return metadata for relationship name on model, or None if not declared."""

    def column_names(self, model: type) -> set[str]:
        """Return the column names of the table(s) backing model."""

    def table_exists(self, table_name: str) -> bool:
        """Return True when table_name is listed in the schema catalog."""
