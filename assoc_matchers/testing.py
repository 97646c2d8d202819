"""pytest helpers: turn a failed match into an AssertionError with its message."""

from typing import Any

from assoc_matchers.application.services.association_matcher import AssociationMatcher


def assert_association(subject: Any, matcher: AssociationMatcher) -> None:
    """Assert subject declares the association described by matcher."""
    __tracebackhide__ = True
    if not matcher.matches(subject):
        raise AssertionError(matcher.failure_message())


def assert_no_association(subject: Any, matcher: AssociationMatcher) -> None:
    """Assert subject does not declare the association described by matcher."""
    __tracebackhide__ = True
    if matcher.matches(subject):
        raise AssertionError(matcher.negated_failure_message())
