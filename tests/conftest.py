"""
Pytest Configuration and Shared Test Fixtures

This module provides pytest configuration and reusable fixtures for all tests.
All fixtures defined here are automatically available to all test files.
"""

import os
import sys

import pytest

# Add project root to sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))


# ============================================================================
# Pytest Configuration
# ============================================================================

# pytest-asyncio runs in auto mode via pyproject.toml configuration


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def reset_settings():
    """
    Rebuild the settings singleton after a test that changed the environment.

    Use together with ``monkeypatch.setenv`` and call ``reload_settings()``
    inside the test; the fixture restores defaults on teardown.
    """
    from ai_search.core.config.settings import reload_settings

    yield reload_settings
    reload_settings()


# ============================================================================
# Search Collaborator Fixtures
# ============================================================================


@pytest.fixture
def query_filter():
    from ai_search.search import KeywordQueryFilter

    return KeywordQueryFilter()


@pytest.fixture
def answer_cache():
    from ai_search.search import StaticAnswerCache

    return StaticAnswerCache()


@pytest.fixture
def instant_generator():
    """Simulated generator with zero delays so tests don't sleep."""
    from tests.test_fixtures import SearchTestFactory

    return SearchTestFactory.instant_generator()


@pytest.fixture
def search_service(query_filter, answer_cache, instant_generator):
    """SearchService wired to the default collaborators without delays."""
    from ai_search.application.services.search_service import SearchService

    return SearchService(
        query_filter=query_filter,
        answer_cache=answer_cache,
        response_generator=instant_generator,
    )


# ============================================================================
# Transport Fixtures
# ============================================================================


@pytest.fixture
def recording_sink():
    """In-memory EventSink that records flushed frames."""
    from tests.test_fixtures import RecordingSink

    return RecordingSink()


@pytest.fixture
async def open_writer(recording_sink):
    """SSEWriter already initialized on ``recording_sink``."""
    from ai_search.streaming.sse_writer import SSEWriter

    writer = SSEWriter()
    await writer.initialize(recording_sink)
    yield writer
    await writer.close()


# ============================================================================
# HTTP Fixtures
# ============================================================================


@pytest.fixture
def app(search_service):
    """
    FastAPI application with the search service replaced by the
    zero-delay ``search_service`` fixture.
    """
    from ai_search.application.api.dependencies import get_search_service
    from ai_search.application.app import create_app

    application = create_app()
    application.dependency_overrides[get_search_service] = lambda: search_service
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """TestClient for ``app``. Lifespan events do not run."""
    from fastapi.testclient import TestClient

    return TestClient(app)
