"""
Album Catalog Backend — Test Configuration (conftest.py)
=========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, fresh per test):
    ├── album_store: Seeded AlbumStore owned by a single test
    ├── app: FastAPI app built around that store
    ├── test_client: HTTPX AsyncClient routed straight into the app
    └── sample_album_payload: JSON body for create tests
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["STATIC_DIR"] = "./nonexistent-test-static-dir"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from album_catalog.main import create_app
from album_catalog.services.album_store import AlbumStore


@pytest.fixture
def album_store():
    """A freshly seeded store; albums created in one test never leak into another."""
    return AlbumStore.seeded()


@pytest.fixture
def app(album_store):
    return create_app(store=album_store)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_ping(test_client):
            response = await test_client.get("/api/")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def sample_album_payload():
    return {
        "id": "4",
        "title": "Test Album",
        "artist": "Test Artist",
        "year": "2023",
        "price": 29.99,
    }
