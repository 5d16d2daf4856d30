"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest

from eventgraph.config import Settings
from eventgraph.graphql.context import build_context
from eventgraph.store import EntityStore, ParticipantMatch, load_default_store


@pytest.fixture
def store() -> EntityStore:
    """A fresh store loaded with the bundled seed data."""
    return load_default_store()


@pytest.fixture
def empty_store() -> EntityStore:
    return EntityStore()


@pytest.fixture
def context(store: EntityStore) -> dict[str, Any]:
    """Resolver context over the seeded store, default participant rule."""
    return build_context(store, ParticipantMatch.USER)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, debug=False, graphiql=False)


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
