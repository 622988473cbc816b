"""Shared fixtures for classifier and API tests."""

import pytest

from classifier import CategorizationOrchestrator, build_tables


@pytest.fixture(scope="session")
def tables():
    """Compiled classifier tables, shared like in production."""
    return build_tables()


@pytest.fixture
def orchestrator(tables):
    return CategorizationOrchestrator(tables)
