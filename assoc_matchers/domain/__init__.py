"""Domain layer: enums, value objects, and exceptions.

No dependencies on SQLAlchemy. Used by application and infrastructure
layers.
"""

from assoc_matchers.domain.enums import RelationshipKind
from assoc_matchers.domain.exceptions import (
    AssociationMatcherException,
    CatalogUnavailableException,
    EngineNotConfiguredException,
    MatcherConfigurationException,
    MatcherNotEvaluatedException,
    ModelNotMappedException,
    ReflectionProviderException,
)
from assoc_matchers.domain.value_objects import ExpectedConstraints

__all__ = [
    # Enums
    "RelationshipKind",
    # Exceptions
    "AssociationMatcherException",
    "CatalogUnavailableException",
    "EngineNotConfiguredException",
    "MatcherConfigurationException",
    "MatcherNotEvaluatedException",
    "ModelNotMappedException",
    "ReflectionProviderException",
    # Value objects
    "ExpectedConstraints",
]
