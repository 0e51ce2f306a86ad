"""Pytest configuration and fixtures."""

import atexit
import os
import shutil
import tempfile
from collections.abc import AsyncGenerator
from datetime import datetime
from pathlib import Path

# Peka databasen till en temporär fil innan appen importeras
_TMP_DIR = Path(tempfile.mkdtemp(prefix="registro-tests-"))
atexit.register(shutil.rmtree, _TMP_DIR, ignore_errors=True)
os.environ["DATABASE_PATH"] = str(_TMP_DIR / "app.db")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app import app
from services.preferences_repository import InMemoryPreferences
from services.profile_store import ProfileStore, get_profile_store

FIXED_NOW = datetime(2024, 3, 5, 14, 7, 59)


@pytest.fixture
def preferences() -> InMemoryPreferences:
    return InMemoryPreferences()


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def store(preferences: InMemoryPreferences, fixed_now: datetime) -> ProfileStore:
    return ProfileStore(preferences, clock=lambda: fixed_now)


@pytest_asyncio.fixture
async def client(store: ProfileStore) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against the app with an in-memory profile store."""
    app.dependency_overrides[get_profile_store] = lambda: store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
