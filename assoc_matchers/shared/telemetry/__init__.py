"""Telemetry: logging configuration."""

from assoc_matchers.shared.telemetry.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
