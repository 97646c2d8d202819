"""Persistence: SQLAlchemy reflection provider and optional catalog engine."""

from assoc_matchers.infrastructure.persistence.reflection import (
    SqlAlchemyReflectionProvider,
    get_default_provider,
)

__all__ = ["SqlAlchemyReflectionProvider", "get_default_provider"]
