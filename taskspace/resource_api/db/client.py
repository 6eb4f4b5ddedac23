"""Async MongoDB client, database resolution and index setup.

Uses pymongo's native asyncio API (``AsyncMongoClient``).  One client is
created per process; it pools connections internally.
"""

from __future__ import annotations

from pymongo import ASCENDING, AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

SPACES = "spaces"
PROJECTS = "projects"
TASKS = "tasks"


def create_client(mongo_uri: str, **kwargs: object) -> AsyncMongoClient:
    """Create an async MongoDB client.

    - **tz_aware=True**: stored datetimes come back as UTC-aware values.
    - **serverSelectionTimeoutMS=5000**: fail fast when the server is down
      instead of blocking a request for the driver's 30s default.

    All defaults can be overridden via *kwargs*.
    """
    defaults: dict[str, object] = {
        "tz_aware": True,
        "serverSelectionTimeoutMS": 5000,
    }
    defaults.update(kwargs)
    return AsyncMongoClient(mongo_uri, **defaults)


def resolve_database(client: AsyncMongoClient, default_name: str) -> AsyncDatabase:
    """Return the database named in the connection string, else *default_name*."""
    return client.get_default_database(default=default_name)


async def ensure_indexes(db: AsyncDatabase) -> None:
    """Create the unique code indexes and the per-workspace scan indexes.

    Code uniqueness is enforced here, by the store; the application never
    checks for duplicates itself.
    """
    await db[SPACES].create_index([("SpCode", ASCENDING)], unique=True)
    await db[PROJECTS].create_index([("projectCode", ASCENDING)], unique=True)
    await db[PROJECTS].create_index([("SpCode", ASCENDING)])
    await db[TASKS].create_index([("taskId", ASCENDING)], unique=True)
    await db[TASKS].create_index([("SpCode", ASCENDING)])
