"""Entry points that build an AssociationMatcher for one relationship kind.

Example:
    assert_association(order, belong_to("customer").with_class_name("Customer"))
    assert_association(Customer, have_many("orders").with_dependent("delete-orphan"))
    assert_association(Customer, have_many("products").with_through("orders"))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from assoc_matchers.application.services.association_matcher import AssociationMatcher
from assoc_matchers.domain.enums import RelationshipKind

if TYPE_CHECKING:
    from assoc_matchers.application.interfaces.providers import IReflectionProvider


def belong_to(name: str, provider: IReflectionProvider | None = None) -> AssociationMatcher:
    """Match a many-to-one relationship; the subject's table must hold the foreign key.

    Options: with_class_name, with_foreign_key, with_conditions, with_validate,
    with_touch.
    """
    return AssociationMatcher(RelationshipKind.BELONGS_TO, name, provider)


def have_many(name: str, provider: IReflectionProvider | None = None) -> AssociationMatcher:
    """Match a one-to-many relationship; the target table must hold the foreign key.

    Options: with_through, with_dependent, with_order, with_class_name,
    with_foreign_key, with_conditions, with_validate.
    """
    return AssociationMatcher(RelationshipKind.HAS_MANY, name, provider)


def have_one(name: str, provider: IReflectionProvider | None = None) -> AssociationMatcher:
    """Match a one-to-one relationship declared on the referenced side."""
    return AssociationMatcher(RelationshipKind.HAS_ONE, name, provider)


def have_and_belong_to_many(
    name: str, provider: IReflectionProvider | None = None
) -> AssociationMatcher:
    """Match a many-to-many relationship and require its join table to exist."""
    return AssociationMatcher(RelationshipKind.HAS_AND_BELONGS_TO_MANY, name, provider)
