"""SQLAlchemy implementation of IReflectionProvider.

Relationship metadata comes from the ORM mapper (relationship() and
association_proxy() attributes). Column and table existence come from the
mapped MetaData, or from the live database catalog when the provider is
given a bind (engine or connection).

Declared options that SQLAlchemy has no native notion of (validate, touch,
through on a secondary-based relationship) are read from the relationship's
info dict, e.g. relationship(..., info={"touch": True}).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import lru_cache
from types import MappingProxyType
from typing import Any

from sqlalchemy import Connection, Engine, MetaData, inspect
from sqlalchemy.exc import NoInspectionAvailable, NoSuchTableError, SQLAlchemyError
from sqlalchemy.ext.associationproxy import AssociationProxyExtensionType
from sqlalchemy.orm import (
    Mapper,
    RelationshipDirection,
    RelationshipProperty,
    configure_mappers,
)

from assoc_matchers.application.dtos.reflection import ReflectionMetadata
from assoc_matchers.domain.enums import RelationshipKind
from assoc_matchers.domain.exceptions import (
    CatalogUnavailableException,
    ModelNotMappedException,
    ReflectionProviderException,
)
from assoc_matchers.infrastructure.persistence.database import (
    get_engine,
    is_engine_configured,
)

logger = logging.getLogger(__name__)


class SqlAlchemyReflectionProvider:
    """Reflects SQLAlchemy relationships and schema (implements IReflectionProvider)."""

    def __init__(
        self,
        bind: Engine | Connection | None = None,
        metadata: MetaData | Iterable[MetaData] | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            bind: Optional engine or connection; when set, columns and tables
                are looked up in the live catalog.
            metadata: Optional MetaData (or several) listing known tables when
                no bind is given. The MetaData of every reflected model is
                added automatically.
        """
        self._bind = bind
        if metadata is None:
            self._metadata: list[MetaData] = []
        elif isinstance(metadata, MetaData):
            self._metadata = [metadata]
        else:
            self._metadata = list(metadata)

    def reflect_on(self, model: type, name: str) -> ReflectionMetadata | None:
        mapper = self._mapper(model)
        if name in mapper.relationships:
            reflection = _from_relationship(model, mapper.relationships[name])
        else:
            reflection = self._from_association_proxy(model, mapper, name)
        logger.debug(
            "Reflected %s.%s: %s",
            model.__name__,
            name,
            reflection.kind.value if reflection is not None else "not declared",
        )
        return reflection

    def column_names(self, model: type) -> set[str]:
        mapper = self._mapper(model)
        if self._bind is None:
            return {column.name for table in mapper.tables for column in table.columns}
        names: set[str] = set()
        try:
            inspector = inspect(self._bind)
            for table in mapper.tables:
                try:
                    columns = inspector.get_columns(
                        table.name, schema=getattr(table, "schema", None)
                    )
                except NoSuchTableError:
                    logger.debug("Table %s not found in catalog", table.name)
                    continue
                names.update(column["name"] for column in columns)
        except SQLAlchemyError as exc:
            raise CatalogUnavailableException(str(exc)) from exc
        return names

    def table_exists(self, table_name: str) -> bool:
        if self._bind is not None:
            try:
                return inspect(self._bind).has_table(table_name)
            except SQLAlchemyError as exc:
                raise CatalogUnavailableException(str(exc)) from exc
        return any(
            table.name == table_name
            for metadata in self._metadata
            for table in metadata.tables.values()
        )

    def _mapper(self, model: type) -> Mapper[Any]:
        try:
            configure_mappers()
        except SQLAlchemyError as exc:
            raise ReflectionProviderException(
                f"Mapper configuration failed: {exc}",
                details={"model": getattr(model, "__name__", repr(model))},
            ) from exc
        try:
            mapper = inspect(model)
        except NoInspectionAvailable as exc:
            raise ModelNotMappedException(getattr(model, "__name__", repr(model))) from exc
        if not isinstance(mapper, Mapper):
            raise ModelNotMappedException(getattr(model, "__name__", repr(model)))
        self._remember(mapper)
        return mapper

    def _remember(self, mapper: Mapper[Any]) -> None:
        for table in mapper.tables:
            metadata = getattr(table, "metadata", None)
            if metadata is not None and all(metadata is not m for m in self._metadata):
                self._metadata.append(metadata)

    def _from_association_proxy(
        self, model: type, mapper: Mapper[Any], name: str
    ) -> ReflectionMetadata | None:
        """Reflect an association_proxy to a relationship as a through association."""
        descriptor = mapper.all_orm_descriptors.get(name)
        if (
            descriptor is None
            or getattr(descriptor, "extension_type", None)
            is not AssociationProxyExtensionType.ASSOCIATION_PROXY
        ):
            return None
        proxy = getattr(model, name)
        through_mapper = self._mapper(proxy.target_class)
        if proxy.value_attr not in through_mapper.relationships:
            return None
        remote = through_mapper.relationships[proxy.value_attr]
        local = mapper.relationships[proxy.target_collection]
        kind = (
            RelationshipKind.HAS_ONE
            if proxy.scalar and not remote.uselist
            else RelationshipKind.HAS_MANY
        )
        options: dict[str, Any] = {
            "class_name": remote.mapper.class_.__name__,
            "through": proxy.target_collection,
            "order": local.order_by or None,
        }
        options.update(descriptor.info)
        return _build(name, kind, model, remote.mapper.class_, options)


def _from_relationship(model: type, rel: RelationshipProperty[Any]) -> ReflectionMetadata:
    info = dict(rel.info)
    target = rel.mapper.class_
    secondary = rel.secondary
    options: dict[str, Any] = {
        "class_name": target.__name__,
        "foreign_key": _foreign_key(rel),
        "conditions": rel.primaryjoin,
        "order": rel.order_by or None,
        "dependent": _dependent(rel),
        "join_table": getattr(secondary, "name", None) if secondary is not None else None,
        "inverse_of": rel.back_populates or _backref_name(rel.backref),
    }
    options.update(info)
    return _build(rel.key, _kind(rel, options.get("through")), model, target, options)


def _build(
    name: str,
    kind: RelationshipKind,
    model: type,
    target: type,
    options: dict[str, Any],
) -> ReflectionMetadata:
    declared = {key: value for key, value in options.items() if value is not None}
    return ReflectionMetadata(
        name=name,
        kind=kind,
        source_model=model,
        target_model=target,
        options=MappingProxyType(declared),
        foreign_key=declared.get("foreign_key"),
        join_table=declared.get("join_table"),
        inverse_of=declared.get("inverse_of"),
    )


def _kind(rel: RelationshipProperty[Any], through: Any) -> RelationshipKind:
    if rel.direction is RelationshipDirection.MANYTOONE:
        return RelationshipKind.BELONGS_TO
    if rel.direction is RelationshipDirection.MANYTOMANY and not through:
        return RelationshipKind.HAS_AND_BELONGS_TO_MANY
    return RelationshipKind.HAS_MANY if rel.uselist else RelationshipKind.HAS_ONE


def _foreign_key(rel: RelationshipProperty[Any]) -> str | None:
    """Name of the first foreign key column the relationship populates."""
    pairs = rel.synchronize_pairs
    if not pairs:
        return None
    return pairs[0][1].name


def _dependent(rel: RelationshipProperty[Any]) -> str | None:
    """Deletion policy implied by cascade and passive_deletes."""
    if rel.cascade.delete_orphan:
        return "delete-orphan"
    if rel.cascade.delete:
        return "delete"
    if rel.passive_deletes == "all":
        return "restrict"
    if rel.direction is RelationshipDirection.ONETOMANY and not rel.viewonly:
        return "nullify"
    return None


def _backref_name(backref: Any) -> str | None:
    if not backref:
        return None
    if isinstance(backref, str):
        return backref
    return backref[0]


@lru_cache
def get_default_provider() -> SqlAlchemyReflectionProvider:
    """Return the shared provider (bound to the catalog engine when configured).

    In tests, call get_default_provider.cache_clear() after changing settings.
    """
    if is_engine_configured():
        return SqlAlchemyReflectionProvider(bind=get_engine())
    return SqlAlchemyReflectionProvider()
