"""Shared test fixtures: a testcontainers MongoDB instance.

Integration tests use a real MongoDB container managed by
testcontainers-python. The container is session-scoped (started once per
test run). Each test function gets its own throwaway database, with the
production indexes applied and dropped afterwards.

Requires Docker. Tests needing the container should be marked with
``@pytest.mark.integration``; they are skipped when Docker is unreachable.
"""

from __future__ import annotations

import uuid
from collections.abc import AsyncIterator, Iterator

import pytest
from docker.errors import DockerException
from pymongo.asynchronous.database import AsyncDatabase
from testcontainers.mongodb import MongoDbContainer

from taskspace.resource_api.db.client import create_client, ensure_indexes

# ---------------------------------------------------------------------------
# Session-scoped: container (started once, shared across all tests)
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def mongo_container() -> Iterator[MongoDbContainer]:
    """Start a MongoDB 7 container for the test session."""
    try:
        container = MongoDbContainer(image="mongo:7")
        container.start()
    except DockerException as exc:
        pytest.skip(f"Docker unavailable: {exc}")
    try:
        yield container
    finally:
        container.stop()


@pytest.fixture(scope="session")
def mongo_url(mongo_container: MongoDbContainer) -> str:
    """MongoDB connection URL (no database in the path)."""
    return mongo_container.get_connection_url()


# ---------------------------------------------------------------------------
# Function-scoped: isolated database per test
# ---------------------------------------------------------------------------


@pytest.fixture
async def mongo_db(mongo_url: str) -> AsyncIterator[AsyncDatabase]:
    """Fresh database with unique code indexes; dropped after the test."""
    client = create_client(mongo_url)
    db = client[f"taskspace_test_{uuid.uuid4().hex[:12]}"]
    await ensure_indexes(db)
    yield db
    await client.drop_database(db.name)
    await client.close()
