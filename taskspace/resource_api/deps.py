"""FastAPI dependency injection for the MongoDB database handle.

Usage in route handlers::

    @router.get("/things/{code}")
    async def get_thing(code: str, db: Database) -> dict:
        ...

The dependency answers HTTP 503 if the store was not configured
(MONGO_URI unset).  Until the unique code indexes exist it retries creating
them on every request, so a store that was down at startup still ends up
enforcing code uniqueness once it is back.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request, status
from loguru import logger
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import ConnectionFailure, PyMongoError

from taskspace.resource_api.db.client import ensure_indexes
from taskspace.resource_api.errors import APIError


async def get_db(request: Request) -> AsyncDatabase:
    """Return the shared database handle.

    The client behind it is created once in the app lifespan and pools
    connections internally -- no per-request lifecycle needed.
    """
    state = request.app.state
    db: AsyncDatabase | None = getattr(state, "db", None)
    if db is None:
        raise APIError(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            "Database not configured (MONGO_URI is unset).",
        )

    if not getattr(state, "indexes_ready", False):
        try:
            await ensure_indexes(db)
        except ConnectionFailure as exc:
            # The request's own store call reports the outage with its message.
            logger.warning("MongoDB indexes not ensured (store unreachable): {}", exc)
        except PyMongoError as exc:
            logger.opt(exception=exc).error("MongoDB index creation failed: {}", exc)
            raise APIError(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Error preparing database",
                details=str(exc),
            ) from exc
        else:
            state.indexes_ready = True
            logger.info("MongoDB: indexes ensured")

    return db


Database = Annotated[AsyncDatabase, Depends(get_db)]
"""Annotated dependency: shared async MongoDB database."""
