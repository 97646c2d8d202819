"""Utility helpers (naming conventions, option rendering)."""

from assoc_matchers.shared.utils.naming import stringify, underscore

__all__ = ["stringify", "underscore"]
