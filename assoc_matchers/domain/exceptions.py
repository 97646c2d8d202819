"""Domain exceptions for association matchers.

Expected mismatches (absent relationship, wrong kind, option or schema
mismatch) are never raised; the matcher reports them as a failed match.
These exceptions cover misconfigured matchers and provider malfunctions,
which indicate a broken test rather than a relationship defect.
"""

from typing import Any


class AssociationMatcherException(Exception):
    """Base exception for all association matcher errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. model, field).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class MatcherConfigurationException(AssociationMatcherException):
    """Raised when a matcher is built with invalid expectations (e.g. empty name)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the configuration error.
            field: Optional expectation that was rejected.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "MATCHER_CONFIGURATION_ERROR", details)


class MatcherNotEvaluatedException(AssociationMatcherException):
    """Raised when a failure message is requested before matches() ran."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Matcher for association '{name}' has not been evaluated; call matches() first",
            "MATCHER_NOT_EVALUATED",
            {"name": name},
        )


class ReflectionProviderException(AssociationMatcherException):
    """Raised when the reflection provider cannot introspect models or schema."""

    def __init__(
        self,
        message: str,
        error_code: str = "REFLECTION_PROVIDER_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, error_code, details)


class ModelNotMappedException(ReflectionProviderException):
    """Raised when the subject's class is not a mapped ORM model."""

    def __init__(self, model: str) -> None:
        """Initialize with the unmapped model name.

        Args:
            model: Name of the class that has no ORM mapping.
        """
        super().__init__(
            f"Class is not a mapped model: {model}",
            "MODEL_NOT_MAPPED",
            {"model": model},
        )


class CatalogUnavailableException(ReflectionProviderException):
    """Raised when the database catalog cannot be inspected (e.g. connection refused)."""

    def __init__(self, reason: str) -> None:
        """Initialize with the underlying failure.

        Args:
            reason: Text of the driver or SQLAlchemy error.
        """
        super().__init__(
            "Database catalog is unavailable",
            "CATALOG_UNAVAILABLE",
            {"reason": reason},
        )


class EngineNotConfiguredException(ReflectionProviderException):
    """Raised when an engine is requested but no database URL is configured."""

    def __init__(self) -> None:
        super().__init__(
            "Database engine is not configured. Set ASSOC_MATCHERS_DATABASE_URL "
            "to inspect a live catalog.",
            "ENGINE_NOT_CONFIGURED",
            {},
        )
