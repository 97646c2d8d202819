"""Shared helpers: logging setup and naming utilities."""
