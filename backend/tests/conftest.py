"""
Wanderlust Backend: Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock database session (no real DB needed)
    ├── app_settings:    Settings pointing at a temporary SQLite file
    ├── app:             Application built from app_settings
    └── test_client:     HTTPX AsyncClient with the app lifespan running
"""

import os
import tempfile
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="wanderlust_test_"), "default.db"
)
os.environ["STATIC_DIR"] = tempfile.mkdtemp(prefix="wanderlust_static_")
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from wanderlust.config import Settings
from wanderlust.main import create_app


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_lookup(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = None
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_favourite_data():
    """Attribute values for a stored Favourite row."""
    return {
        "id": uuid4(),
        "name": "Paris",
        "description": "City of lights",
        "added_at": datetime.now(timezone.utc),
    }


@pytest.fixture
def app_settings(tmp_path):
    """Settings isolated to this test: fresh SQLite file and static directory."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'wanderlust.db'}",
        static_dir=str(tmp_path / "public"),
        log_level="WARNING",
    )


@pytest.fixture
def app(app_settings):
    return create_app(app_settings)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client with startup/shutdown applied.

    ASGITransport does not send lifespan events, so the lifespan context is
    entered here; it creates the tables and the static directory.

    Usage:
        async def test_root(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
