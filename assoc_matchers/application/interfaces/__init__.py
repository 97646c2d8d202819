"""Application interfaces (ports)."""

from assoc_matchers.application.interfaces.providers import IReflectionProvider

__all__ = ["IReflectionProvider"]
