"""Fake reflection provider and ReflectionMetadata builder for unit tests."""

from collections.abc import Iterable
from typing import Any

from assoc_matchers.application.dtos.reflection import ReflectionMetadata
from assoc_matchers.domain.enums import RelationshipKind


class FakeProvider:
    """In-memory reflection provider; counts reflect_on calls."""

    def __init__(
        self,
        reflections: Iterable[ReflectionMetadata] = (),
        columns: dict[type, Iterable[str]] | None = None,
        tables: Iterable[str] = (),
    ) -> None:
        self.reflections = {(r.source_model, r.name): r for r in reflections}
        self.columns = {model: set(names) for model, names in (columns or {}).items()}
        self.tables = set(tables)
        self.reflect_calls = 0

    def reflect_on(self, model: type, name: str) -> ReflectionMetadata | None:
        self.reflect_calls += 1
        return self.reflections.get((model, name))

    def column_names(self, model: type) -> set[str]:
        return set(self.columns.get(model, set()))

    def table_exists(self, table_name: str) -> bool:
        return table_name in self.tables


def reflection(
    source: type,
    name: str,
    kind: RelationshipKind,
    target: type | None,
    **options: Any,
) -> ReflectionMetadata:
    """Build ReflectionMetadata the way a provider would (None options dropped)."""
    declared = {k: v for k, v in options.items() if v is not None}
    if target is not None:
        declared.setdefault("class_name", target.__name__)
    return ReflectionMetadata(
        name=name,
        kind=kind,
        source_model=source,
        target_model=target,
        options=declared,
        foreign_key=declared.get("foreign_key"),
        join_table=declared.get("join_table"),
        inverse_of=declared.get("inverse_of"),
    )

