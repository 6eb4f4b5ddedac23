"""Workspace operations: create and get by code.

Workspaces are never updated or deleted.
"""

from __future__ import annotations

from typing import Any

from pymongo.asynchronous.database import AsyncDatabase

from taskspace.resource_api.db.client import SPACES
from taskspace.resource_api.managers.base import insert_document, require_fields
from taskspace.resource_api.models.api import SpaceCreate


class SpaceNotFoundError(LookupError):
    """Raised when a workspace is not found."""


async def get_space(db: AsyncDatabase, sp_code: str) -> dict[str, Any]:
    """Get a workspace by code.  Raises ``SpaceNotFoundError`` if missing."""
    space = await db[SPACES].find_one({"SpCode": sp_code})
    if space is None:
        raise SpaceNotFoundError(sp_code)
    return space


async def create_space(db: AsyncDatabase, body: SpaceCreate) -> dict[str, Any]:
    """Create a workspace.

    Raises ``MissingFieldsError`` before touching the store, and
    ``DuplicateCodeError`` when the code is already taken.
    """
    data = body.model_dump()
    require_fields(data, ("SpCode", "name"))
    return await insert_document(db[SPACES], {"SpCode": body.SpCode, "name": body.name})
