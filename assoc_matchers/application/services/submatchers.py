"""Sub-matchers: one declared relationship option compared with an expected value.

Attached to an AssociationMatcher via with_through / with_dependent /
with_order. The parent passes its memoized reflection to evaluate(), so every
check in one evaluation sees the same metadata. matches() lets a sub-matcher
run on its own against a subject.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from assoc_matchers.application.services.option_comparison import (
    Comparison,
    equals,
    equals_as_string,
)
from assoc_matchers.shared.utils.naming import stringify

if TYPE_CHECKING:
    from assoc_matchers.application.dtos.reflection import ReflectionMetadata
    from assoc_matchers.application.interfaces.providers import IReflectionProvider


class DeclaredOptionMatcher:
    """Passes when the reflection's declared option equals the expected value."""

    def __init__(
        self,
        option: str,
        expected: Any,
        name: str,
        compare: Comparison = equals,
        provider: IReflectionProvider | None = None,
    ) -> None:
        self.option = option
        self.expected = expected
        self.name = name
        self._compare = compare
        self.provider = provider
        self._actual: Any = None
        self._missing = ""

    def evaluate(self, reflection: ReflectionMetadata) -> bool:
        """Compare the declared option on reflection; record the detail on failure."""
        self._actual = reflection.option(self.option)
        if self._compare(self.expected, self._actual):
            self._missing = ""
            return True
        self._missing = self.missing_detail()
        return False

    def using(self, provider: IReflectionProvider) -> DeclaredOptionMatcher:
        self.provider = provider
        return self

    def matches(self, subject: Any) -> bool:
        """Resolve the reflection for subject and evaluate it."""
        from assoc_matchers.infrastructure.persistence.reflection import (
            get_default_provider,
        )

        provider = self.provider or get_default_provider()
        model = subject if isinstance(subject, type) else type(subject)
        reflection = provider.reflect_on(model, self.name)
        if reflection is None:
            self._actual = None
            self._missing = f"no association called {self.name}"
            return False
        return self.evaluate(reflection)

    def missing_detail(self) -> str:
        return f"{self.name} should have {self.option} {stringify(self.expected)}"

    def missing_option(self) -> str:
        """Detail of the last failed evaluation ('' when it passed)."""
        return self._missing

    def description(self) -> str:
        return f"{self.option} => {stringify(self.expected)}"


class ThroughMatcher(DeclaredOptionMatcher):
    """Checks the intermediate association of a through relationship."""

    def __init__(
        self, through: str, name: str, provider: IReflectionProvider | None = None
    ) -> None:
        super().__init__("through", through, name, equals, provider)

    def missing_detail(self) -> str:
        actual = stringify(self._actual) or "nothing"
        return f"{self.name} should go through {self.expected}, actual: {actual}"

    def description(self) -> str:
        return f"through {self.expected}"


class DependentMatcher(DeclaredOptionMatcher):
    """Checks the deletion policy (opaque symbol such as 'delete' or 'nullify')."""

    def __init__(
        self, dependent: Any, name: str, provider: IReflectionProvider | None = None
    ) -> None:
        super().__init__("dependent", dependent, name, equals, provider)

    def missing_detail(self) -> str:
        return f"{self.name} should have {stringify(self.expected)} dependency"


class OrderMatcher(DeclaredOptionMatcher):
    """Checks the ordering clause by its string form."""

    def __init__(
        self, order: Any, name: str, provider: IReflectionProvider | None = None
    ) -> None:
        super().__init__("order", order, name, equals_as_string, provider)

    def missing_detail(self) -> str:
        return f"{self.name} should be ordered by {stringify(self.expected)}"
