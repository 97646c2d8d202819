"""Declarative matchers for SQLAlchemy model associations."""

from assoc_matchers.application.dtos.reflection import ReflectionMetadata
from assoc_matchers.application.interfaces.providers import IReflectionProvider
from assoc_matchers.application.services.association_matcher import AssociationMatcher
from assoc_matchers.domain.enums import RelationshipKind
from assoc_matchers.dsl import (
    belong_to,
    have_and_belong_to_many,
    have_many,
    have_one,
)
from assoc_matchers.infrastructure.persistence.reflection import (
    SqlAlchemyReflectionProvider,
)
from assoc_matchers.testing import assert_association, assert_no_association

__all__ = [
    "AssociationMatcher",
    "IReflectionProvider",
    "ReflectionMetadata",
    "RelationshipKind",
    "SqlAlchemyReflectionProvider",
    "assert_association",
    "assert_no_association",
    "belong_to",
    "have_and_belong_to_many",
    "have_many",
    "have_one",
]
