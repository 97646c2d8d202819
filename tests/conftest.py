"""Pytest configuration and fixtures for assoc_matchers.

Unit tests use fake_provider (tests.fixtures.providers). Integration tests
use the declarative models in tests.fixtures.models and, for live catalog
checks, an in-memory SQLite engine.
"""

from collections.abc import Iterator

import pytest
from sqlalchemy import Engine, create_engine

from assoc_matchers.core.config import get_settings
from assoc_matchers.infrastructure.persistence.database import dispose_engine
from assoc_matchers.infrastructure.persistence.reflection import get_default_provider
from tests.fixtures.providers import FakeProvider


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from ASSOC_MATCHERS_* variables and cached singletons."""
    monkeypatch.delenv("ASSOC_MATCHERS_DATABASE_URL", raising=False)
    monkeypatch.delenv("ASSOC_MATCHERS_FOREIGN_KEY_SUFFIX", raising=False)
    monkeypatch.delenv("ASSOC_MATCHERS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("ASSOC_MATCHERS_DEBUG", raising=False)
    get_settings.cache_clear()
    get_default_provider.cache_clear()
    yield
    dispose_engine()
    get_settings.cache_clear()
    get_default_provider.cache_clear()


@pytest.fixture
def fake_provider() -> type[FakeProvider]:
    """Factory for FakeProvider instances."""
    return FakeProvider


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    """Empty in-memory SQLite engine; tests create the tables they need."""
    engine = create_engine("sqlite://")
    yield engine
    engine.dispose()
