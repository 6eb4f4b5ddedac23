"""Project operations: list, get, create, partial update and comments.

Parent workspace codes are stored as given; no check is made that the
workspace exists.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from pymongo.asynchronous.database import AsyncDatabase

from taskspace.resource_api.db.client import PROJECTS
from taskspace.resource_api.managers.base import (
    changed_fields,
    insert_document,
    require_fields,
    update_document,
)
from taskspace.resource_api.models.api import ProjectCommentCreate, ProjectCreate, ProjectUpdate

REQUIRED_FIELDS = ("SpCode", "projectCode", "name", "description", "teamLead", "members", "status")


class ProjectNotFoundError(LookupError):
    """Raised when a project is not found."""


def _query(sp_code: str, project_code: str) -> dict[str, str]:
    return {"SpCode": sp_code, "projectCode": project_code}


async def list_projects(db: AsyncDatabase, sp_code: str) -> list[dict[str, Any]]:
    """All projects of a workspace, in insertion order.  Empty if there are none."""
    return await db[PROJECTS].find({"SpCode": sp_code}).to_list()


async def get_project(db: AsyncDatabase, sp_code: str, project_code: str) -> dict[str, Any]:
    """Get a project by code.  Raises ``ProjectNotFoundError`` if missing."""
    project = await db[PROJECTS].find_one(_query(sp_code, project_code))
    if project is None:
        raise ProjectNotFoundError(project_code)
    return project


async def create_project(db: AsyncDatabase, body: ProjectCreate) -> dict[str, Any]:
    """Create a project with an empty comment thread.

    An empty ``members`` list counts as missing.
    """
    data = body.model_dump()
    require_fields(data, REQUIRED_FIELDS)
    doc = {name: data[name] for name in REQUIRED_FIELDS}
    doc["comments"] = []
    return await insert_document(db[PROJECTS], doc)


async def update_project(
    db: AsyncDatabase,
    sp_code: str,
    project_code: str,
    body: ProjectUpdate,
) -> dict[str, Any]:
    """Overwrite the fields present in *body*.

    Raises ``NoChangesError`` before touching the store if no field is truthy,
    and ``ProjectNotFoundError`` if the project does not exist.
    """
    changes = changed_fields(body)
    project = await update_document(db[PROJECTS], _query(sp_code, project_code), {"$set": changes})
    if project is None:
        raise ProjectNotFoundError(project_code)
    return project


async def add_project_comment(
    db: AsyncDatabase,
    sp_code: str,
    project_code: str,
    body: ProjectCommentCreate,
) -> dict[str, Any]:
    """Append a timestamped comment and return the updated project."""
    require_fields(body.model_dump(), ("comment",))
    comment = {"_id": ObjectId(), "comment": body.comment, "date": datetime.now(timezone.utc)}
    project = await update_document(
        db[PROJECTS],
        _query(sp_code, project_code),
        {"$push": {"comments": comment}},
    )
    if project is None:
        raise ProjectNotFoundError(project_code)
    return project
