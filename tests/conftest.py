"""Pytest configuration and shared fixtures.

Organization:
    - Environment: settings read from env vars, pinned for the test run
    - Data Fixtures: in-memory Star Wars data source
    - GraphQL Fixtures: request context and settings
    - Application Fixtures: FastAPI app and HTTP client
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator, Iterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from relay_service.core.settings import GraphQLSettings, clear_all_caches
from relay_service.features.graphql.context import GraphQLContext
from relay_service.features.swapi import InMemoryDataSource, get_data_source
from relay_service.infra.logging import clear_log_context

os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("LOG_JSON_LOGS", "false")
os.environ.setdefault("LOG_LEVEL", "DEBUG")


@pytest.fixture(autouse=True)
def _reset_state() -> Iterator[None]:
    """Reload settings and drop logging context around every test."""
    clear_all_caches()
    clear_log_context()
    yield
    clear_all_caches()
    clear_log_context()


# ============================================================================
# Data Fixtures
# ============================================================================


@pytest.fixture
def data_source() -> InMemoryDataSource:
    """Fresh data source over the bundled fixture records."""
    return InMemoryDataSource.from_fixtures()


# ============================================================================
# GraphQL Fixtures
# ============================================================================


@pytest.fixture
def graphql_context(data_source: InMemoryDataSource) -> GraphQLContext:
    """GraphQL context backed by the fixture data source."""
    return GraphQLContext(data_source=data_source)


@pytest.fixture
def graphql_settings() -> GraphQLSettings:
    """GraphQL settings with the defaults."""
    return GraphQLSettings()


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def app(data_source: InMemoryDataSource) -> FastAPI:
    """FastAPI application wired to the fixture data source."""
    from relay_service.app.main import create_app

    application = create_app()
    application.dependency_overrides[get_data_source] = lambda: data_source
    return application


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """HTTPX client talking to the app in-process.

    Example:
        async def test_health_check(client):
            response = await client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
