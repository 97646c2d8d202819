"""Application services: association matcher and sub-matchers."""

from assoc_matchers.application.services.association_matcher import AssociationMatcher
from assoc_matchers.application.services.submatchers import (
    DeclaredOptionMatcher,
    DependentMatcher,
    OrderMatcher,
    ThroughMatcher,
)

__all__ = [
    "AssociationMatcher",
    "DeclaredOptionMatcher",
    "DependentMatcher",
    "OrderMatcher",
    "ThroughMatcher",
]
