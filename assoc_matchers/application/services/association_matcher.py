"""Verifies that a model declares an association with the expected configuration.

The matcher is configured through chained with_* setters and evaluated once
with matches(subject). Checks run in a fixed order and stop at the first
failure so the message names the most specific reason. Sub-matchers (through,
dependent, order) run last and every failing one is reported.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any

from assoc_matchers.application.services.option_comparison import (
    equals_as_string,
    flag_matches,
)
from assoc_matchers.application.services.submatchers import (
    DeclaredOptionMatcher,
    DependentMatcher,
    OrderMatcher,
    ThroughMatcher,
)
from assoc_matchers.core.config import get_settings
from assoc_matchers.domain.enums import RelationshipKind
from assoc_matchers.domain.exceptions import (
    MatcherConfigurationException,
    MatcherNotEvaluatedException,
)
from assoc_matchers.domain.value_objects.core import ExpectedConstraints
from assoc_matchers.shared.telemetry.logging import get_logger
from assoc_matchers.shared.utils.naming import stringify, underscore

if TYPE_CHECKING:
    from assoc_matchers.application.dtos.reflection import ReflectionMetadata
    from assoc_matchers.application.interfaces.providers import IReflectionProvider

logger = get_logger(__name__)

_INVERSE_KINDS = (RelationshipKind.HAS_MANY, RelationshipKind.HAS_ONE)


class AssociationMatcher:
    """Matches a subject whose model declares association name of the given kind."""

    def __init__(
        self,
        kind: RelationshipKind,
        name: str,
        provider: IReflectionProvider | None = None,
    ) -> None:
        if not isinstance(name, str) or not name:
            raise MatcherConfigurationException(
                "Association name must be a non-empty string", field="name"
            )
        self.kind = RelationshipKind(kind)
        self.name = name
        self.expected = ExpectedConstraints()
        self._provider = provider
        self._submatchers: list[DeclaredOptionMatcher] = []
        self._lock = threading.RLock()
        self._subject: Any = None
        self._evaluated = False
        self._reset()

    # Configuration

    def with_through(self, through: str) -> AssociationMatcher:
        return self._add_submatcher(ThroughMatcher, through)

    def with_dependent(self, dependent: Any) -> AssociationMatcher:
        return self._add_submatcher(DependentMatcher, dependent)

    def with_order(self, order: Any) -> AssociationMatcher:
        return self._add_submatcher(OrderMatcher, order)

    def with_conditions(self, conditions: Any) -> AssociationMatcher:
        return self._expect("conditions", conditions)

    def with_class_name(self, class_name: str | type) -> AssociationMatcher:
        if isinstance(class_name, type):
            class_name = class_name.__name__
        return self._expect("class_name", class_name)

    def with_foreign_key(self, foreign_key: str) -> AssociationMatcher:
        return self._expect("foreign_key", foreign_key)

    def with_validate(self, validate: bool = True) -> AssociationMatcher:
        return self._expect("validate", _require_bool(validate, "validate"))

    def with_touch(self, touch: bool = True) -> AssociationMatcher:
        return self._expect("touch", _require_bool(touch, "touch"))

    def using(self, provider: IReflectionProvider) -> AssociationMatcher:
        """Resolve reflections through provider instead of the default one."""
        with self._lock:
            self._provider = provider
            for submatcher in self._submatchers:
                submatcher.using(provider)
            return self._reset()

    @property
    def submatchers(self) -> tuple[DeclaredOptionMatcher, ...]:
        return tuple(self._submatchers)

    # Evaluation

    def matches(self, subject: Any) -> bool:
        """Return True when subject's model declares the expected association.

        subject may be a model instance or a model class. Provider errors
        (e.g. ModelNotMappedException) propagate to the caller.
        """
        with self._lock:
            if subject is not self._subject:
                self._reset()
            self._subject = subject
            self._missing = ""
            self._failing_submatchers = None
            self._evaluated = True
            checks = (
                self._association_exists,
                self._macro_correct,
                self._foreign_key_exists,
                self._class_name_correct,
                self._conditions_correct,
                self._join_table_exists,
                self._validate_correct,
                self._touch_correct,
                self._submatchers_match,
            )
            for check in checks:
                if not check():
                    logger.debug(
                        "Association %s.%s failed %s: %s",
                        self.model_class.__name__,
                        self.name,
                        check.__name__.lstrip("_"),
                        self.missing_detail(),
                    )
                    return False
            return True

    def missing_detail(self) -> str:
        """Primary failure detail followed by every failing sub-matcher's detail."""
        parts = [self._missing]
        if self._failing_submatchers:
            parts.extend(m.missing_option() for m in self._failing_submatchers)
        return "; ".join(part for part in parts if part)

    def failure_message(self) -> str:
        return f"Expected {self.expectation()} ({self.missing_detail()})"

    def negated_failure_message(self) -> str:
        return f"Did not expect {self.expectation()}"

    def describe(self) -> str:
        description = f"{self.kind.phrase} {self.name}"
        if self.expected.is_set("class_name"):
            description += f" class_name => {self.expected.class_name}"
        return " ".join(
            [description] + [m.description() for m in self._submatchers]
        )

    def expectation(self) -> str:
        if not self._evaluated:
            raise MatcherNotEvaluatedException(self.name)
        return (
            f"{self.model_class.__name__} to have a {self.kind.label} "
            f"association called {self.name}"
        )

    @property
    def model_class(self) -> type:
        subject = self._subject
        return subject if isinstance(subject, type) else type(subject)

    @property
    def provider(self) -> IReflectionProvider:
        if self._provider is None:
            from assoc_matchers.infrastructure.persistence.reflection import (
                get_default_provider,
            )

            self._provider = get_default_provider()
        return self._provider

    @property
    def reflection(self) -> ReflectionMetadata | None:
        if not self._reflection_loaded:
            self._reflection = self.provider.reflect_on(self.model_class, self.name)
            self._reflection_loaded = True
        return self._reflection

    # Checks

    def _association_exists(self) -> bool:
        if self.reflection is None:
            self._missing = f"no association called {self.name}"
            return False
        return True

    def _macro_correct(self) -> bool:
        if self.reflection.kind == self.kind:
            return True
        self._missing = f"actual association type was {self.reflection.kind.value}"
        return False

    def _foreign_key_exists(self) -> bool:
        if self.kind == RelationshipKind.BELONGS_TO:
            return self._class_has_foreign_key(self.model_class)
        if self.kind in _INVERSE_KINDS and not self._through():
            return self._class_has_foreign_key(self.reflection.target_model)
        return True

    def _class_name_correct(self) -> bool:
        if not self.expected.is_set("class_name"):
            return True
        if self.expected.class_name == self.reflection.target_name:
            return True
        self._missing = (
            f"{self.name} should resolve to {self.expected.class_name} for class_name"
        )
        return False

    def _conditions_correct(self) -> bool:
        if not self.expected.is_set("conditions"):
            return True
        if equals_as_string(
            self.expected.conditions, self.reflection.option("conditions")
        ):
            return True
        self._missing = (
            f"{self.name} should have the following conditions: "
            f"{stringify(self.expected.conditions)}"
        )
        return False

    def _join_table_exists(self) -> bool:
        if self.kind != RelationshipKind.HAS_AND_BELONGS_TO_MANY:
            return True
        join_table = self.reflection.join_table
        if not join_table:
            self._missing = f"join table for {self.name} is not declared"
            return False
        if self.provider.table_exists(join_table):
            return True
        self._missing = f"join table {join_table} doesn't exist"
        return False

    def _validate_correct(self) -> bool:
        return self._flag_correct("validate", self.expected.validate)

    def _touch_correct(self) -> bool:
        return self._flag_correct("touch", self.expected.touch)

    def _submatchers_match(self) -> bool:
        return not self._failing()

    # Helpers

    def _flag_correct(self, key: str, expected: bool | None) -> bool:
        if flag_matches(expected, self.reflection.option(key)):
            return True
        self._missing = f"{self.name} should have {key}={expected}"
        return False

    def _class_has_foreign_key(self, model: type | None) -> bool:
        if self.expected.is_set("foreign_key"):
            if self.reflection.option("foreign_key") == self.expected.foreign_key:
                return True
            self._missing = (
                f"{self.name} should have foreign_key {self.expected.foreign_key}"
            )
            return False
        foreign_key = self._foreign_key()
        if model is not None and foreign_key in self.provider.column_names(model):
            return True
        model_name = model.__name__ if model is not None else self.name
        self._missing = f"{model_name} does not have a {foreign_key} foreign key."
        return False

    def _foreign_key(self) -> str:
        """Expected foreign key column, taken from the side that records it."""
        source = self._foreign_key_reflection()
        if source is not None and source.foreign_key:
            return source.foreign_key
        suffix = get_settings().foreign_key_suffix
        if self.kind == RelationshipKind.BELONGS_TO:
            return f"{self.name}{suffix}"
        return f"{underscore(self.model_class.__name__)}{suffix}"

    def _foreign_key_reflection(self) -> ReflectionMetadata | None:
        reflection = self.reflection
        if (
            self.kind in _INVERSE_KINDS
            and reflection.inverse_of
            and reflection.target_model is not None
        ):
            return self.provider.reflect_on(
                reflection.target_model, reflection.inverse_of
            )
        return reflection

    def _through(self) -> bool:
        return bool(self.reflection.option("through"))

    def _failing(self) -> list[DeclaredOptionMatcher]:
        if self._failing_submatchers is None:
            self._failing_submatchers = [
                m for m in self._submatchers if not m.evaluate(self.reflection)
            ]
        return self._failing_submatchers

    def _expect(self, field: str, value: Any) -> AssociationMatcher:
        with self._lock:
            setattr(self.expected, field, value)
            return self._reset()

    def _add_submatcher(
        self, matcher_class: type[DeclaredOptionMatcher], expected: Any
    ) -> AssociationMatcher:
        with self._lock:
            self._submatchers.append(
                matcher_class(expected, self.name, self._provider)
            )
            return self._reset()

    def _reset(self) -> AssociationMatcher:
        """Drop the cached reflection and failure state after reconfiguration."""
        with self._lock:
            self._reflection: ReflectionMetadata | None = None
            self._reflection_loaded = False
            self._missing = ""
            self._failing_submatchers: list[DeclaredOptionMatcher] | None = None
        return self


def _require_bool(value: Any, field: str) -> bool:
    if not isinstance(value, bool):
        raise MatcherConfigurationException(
            f"{field} expectation must be a bool, got {type(value).__name__}",
            field=field,
        )
    return value
