"""Domain enumerations for association matchers.

Enums represent fixed sets of domain values (e.g. relationship kind).
"""

from enum import Enum


class RelationshipKind(str, Enum):
    """Kind of association declared between two models.

    Mirrors the classic ORM taxonomy; the SQLAlchemy provider maps
    relationship directions onto these values.
    """

    BELONGS_TO = "belongs_to"
    HAS_MANY = "has_many"
    HAS_ONE = "has_one"
    HAS_AND_BELONGS_TO_MANY = "has_and_belongs_to_many"

    @property
    def label(self) -> str:
        """Hyphenated noun form used in failure messages (e.g. 'has-many')."""
        return self.value.replace("_", "-")

    @property
    def phrase(self) -> str:
        """Verb form used in descriptions (e.g. 'have many')."""
        return _PHRASES[self]

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid kind values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [kind.value for kind in cls]


_PHRASES = {
    RelationshipKind.BELONGS_TO: "belong to",
    RelationshipKind.HAS_MANY: "have many",
    RelationshipKind.HAS_ONE: "have one",
    RelationshipKind.HAS_AND_BELONGS_TO_MANY: "have and belong to many",
}
