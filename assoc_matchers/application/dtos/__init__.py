"""Application DTOs: data passed between provider and matchers."""

from assoc_matchers.application.dtos.reflection import ReflectionMetadata

__all__ = ["ReflectionMetadata"]
