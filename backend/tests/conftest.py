"""
Pytest configuration and fixtures for page store tests.

Route tests run against MemoryPageRepo through a dependency override.
Tests of the Postgres-backed PageRepo need DATABASE_URL pointing at a
migrated database (`alembic upgrade head`) and are skipped without it.
"""

from __future__ import annotations

import httpx
import pytest

from backend import db
from backend.config import settings
from backend.main import app
from backend.repos.page_repo import MemoryPageRepo
from backend.routes.pages import get_page_repo


@pytest.fixture(autouse=True)
def memory_repo():
    """Every test starts with an empty in-memory store behind the routes."""
    repo = MemoryPageRepo()
    app.dependency_overrides[get_page_repo] = lambda: repo
    yield repo
    app.dependency_overrides.pop(get_page_repo, None)


@pytest.fixture
async def async_client():
    """Async HTTP client against the ASGI app."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
async def initialize_pool():
    """Open the pool for one test; skip when no database is configured."""
    if not settings.DATABASE_URL:
        pytest.skip("DATABASE_URL not set")
    await db.init_pool()
    yield
    await db.close_pool()
