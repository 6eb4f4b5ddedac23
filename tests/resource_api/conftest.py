"""Shared fixtures for resource API tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from taskspace.resource_api.app import app
from taskspace.resource_api.deps import get_db


class UntouchableDatabase:
    """Stand-in database that fails the test on any access."""

    def __getitem__(self, name: str) -> Any:
        raise AssertionError(f"store accessed (collection {name!r})")

    def __getattr__(self, name: str) -> Any:
        raise AssertionError(f"store accessed (attribute {name!r})")


class _FailingCursor:
    def __init__(self, error: PyMongoError) -> None:
        self._error = error

    async def to_list(self, *args: Any, **kwargs: Any) -> list[Any]:
        raise self._error


class _FailingCollection:
    def __init__(self, error: PyMongoError) -> None:
        self._error = error

    def find(self, *args: Any, **kwargs: Any) -> _FailingCursor:
        return _FailingCursor(self._error)

    async def find_one(self, *args: Any, **kwargs: Any) -> Any:
        raise self._error

    async def insert_one(self, *args: Any, **kwargs: Any) -> Any:
        raise self._error

    async def find_one_and_update(self, *args: Any, **kwargs: Any) -> Any:
        raise self._error


class FailingDatabase:
    """Stand-in database whose every operation raises ``PyMongoError(message)``."""

    def __init__(self, message: str = "boom") -> None:
        self._error = PyMongoError(message)

    def __getitem__(self, name: str) -> _FailingCollection:
        return _FailingCollection(self._error)


async def _client_for(db: Any) -> AsyncIterator[AsyncClient]:
    async def _override_get_db() -> Any:
        return db

    app.dependency_overrides[get_db] = _override_get_db

    # The lifespan does not run under ASGITransport.
    app.state.mongo_client = None
    app.state.db = None

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def client(mongo_db: AsyncDatabase) -> AsyncIterator[AsyncClient]:
    """Async HTTP client wired to the app with a per-test MongoDB database."""
    async for ac in _client_for(mongo_db):
        yield ac


@pytest.fixture
async def offline_client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client whose database must never be reached.

    Used to prove that validation failures are answered before any store call.
    """
    async for ac in _client_for(UntouchableDatabase()):
        yield ac


@pytest.fixture
async def failing_client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client whose store raises on every operation."""
    async for ac in _client_for(FailingDatabase()):
        yield ac
