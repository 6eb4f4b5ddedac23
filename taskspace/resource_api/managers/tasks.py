"""Task operations: list, get, create, partial update and comments."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from pymongo.asynchronous.database import AsyncDatabase

from taskspace.resource_api.db.client import TASKS
from taskspace.resource_api.managers.base import (
    changed_fields,
    insert_document,
    require_fields,
    update_document,
)
from taskspace.resource_api.models.api import TaskCommentCreate, TaskCreate, TaskUpdate

REQUIRED_FIELDS = (
    "SpCode",
    "projectId",
    "taskId",
    "title",
    "status",
    "assignedTo",
    "priority",
    "assignedBy",
    "description",
    "deadline",
)


class TaskNotFoundError(LookupError):
    """Raised when a task is not found."""


def _query(sp_code: str, task_id: str) -> dict[str, str]:
    return {"SpCode": sp_code, "taskId": task_id}


async def list_tasks(db: AsyncDatabase, sp_code: str) -> list[dict[str, Any]]:
    return await db[TASKS].find({"SpCode": sp_code}).to_list()


async def get_task(db: AsyncDatabase, sp_code: str, task_id: str) -> dict[str, Any]:
    """Get a task by id.  Raises ``TaskNotFoundError`` if missing."""
    task = await db[TASKS].find_one(_query(sp_code, task_id))
    if task is None:
        raise TaskNotFoundError(task_id)
    return task


async def create_task(db: AsyncDatabase, body: TaskCreate) -> dict[str, Any]:
    """Create a task with an empty comment thread.

    The parent project is not looked up; a task may name a project that does
    not exist.
    """
    data = body.model_dump()
    require_fields(data, REQUIRED_FIELDS)
    doc = {name: data[name] for name in REQUIRED_FIELDS}
    doc["comments"] = []
    return await insert_document(db[TASKS], doc)


async def update_task(db: AsyncDatabase, sp_code: str, task_id: str, body: TaskUpdate) -> dict[str, Any]:
    """Overwrite the fields present in *body*.

    Raises ``NoChangesError`` before touching the store if no field is truthy,
    and ``TaskNotFoundError`` if the task does not exist.
    """
    changes = changed_fields(body)
    task = await update_document(db[TASKS], _query(sp_code, task_id), {"$set": changes})
    if task is None:
        raise TaskNotFoundError(task_id)
    return task


async def add_task_comment(
    db: AsyncDatabase,
    sp_code: str,
    task_id: str,
    body: TaskCommentCreate,
) -> dict[str, Any]:
    """Append a comment with a single atomic ``$push``.

    Concurrent comments on the same task never overwrite each other.  A
    missing task is reported as ``TaskNotFoundError`` and nothing is created.
    """
    require_fields(body.model_dump(), ("author", "text"))
    comment = {
        "_id": ObjectId(),
        "author": body.author,
        "text": body.text,
        "timestamp": datetime.now(timezone.utc),
    }
    task = await update_document(db[TASKS], _query(sp_code, task_id), {"$push": {"comments": comment}})
    if task is None:
        raise TaskNotFoundError(task_id)
    return task
