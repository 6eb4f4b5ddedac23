"""Task endpoints, nested under a workspace code."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, status

from taskspace.resource_api.deps import Database
from taskspace.resource_api.errors import APIError, store_errors
from taskspace.resource_api.managers import MissingFieldsError, NoChangesError
from taskspace.resource_api.managers import tasks as manager
from taskspace.resource_api.models.api import TaskCommentCreate, TaskCreate, TaskResponse, TaskUpdate

router = APIRouter(prefix="/space/{sp_code}/tasks", tags=["tasks"])


def _not_found() -> APIError:
    return APIError(status.HTTP_404_NOT_FOUND, "Task not found")


@router.get("", response_model=list[TaskResponse])
async def list_tasks(sp_code: str, db: Database) -> list[dict[str, Any]]:
    """List every task of a workspace (possibly none)."""
    with store_errors("Failed to fetch tasks"):
        return await manager.list_tasks(db, sp_code)


@router.post("/create", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(sp_code: str, body: TaskCreate, db: Database) -> dict[str, Any]:
    """Create a task.  The stored workspace code is ``body.SpCode``."""
    with store_errors("Error creating task"):
        try:
            return await manager.create_task(db, body)
        except MissingFieldsError as exc:
            raise APIError(status.HTTP_400_BAD_REQUEST, "Missing required fields", details=str(exc)) from None


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(sp_code: str, task_id: str, db: Database) -> dict[str, Any]:
    with store_errors("Error fetching task details"):
        try:
            return await manager.get_task(db, sp_code, task_id)
        except manager.TaskNotFoundError:
            raise _not_found() from None


@router.put("/{task_id}/update", response_model=TaskResponse)
async def update_task(sp_code: str, task_id: str, body: TaskUpdate, db: Database) -> dict[str, Any]:
    """Partially update a task; only fields present in the body are written."""
    with store_errors("Error updating task"):
        try:
            return await manager.update_task(db, sp_code, task_id, body)
        except NoChangesError:
            raise APIError(status.HTTP_400_BAD_REQUEST, "No fields to update") from None
        except manager.TaskNotFoundError:
            raise _not_found() from None


@router.post("/{task_id}/comments", response_model=TaskResponse)
async def add_task_comment(sp_code: str, task_id: str, body: TaskCommentCreate, db: Database) -> dict[str, Any]:
    with store_errors("Error adding comment to task"):
        try:
            return await manager.add_task_comment(db, sp_code, task_id, body)
        except MissingFieldsError:
            raise APIError(status.HTTP_400_BAD_REQUEST, "Author, and text are required") from None
        except manager.TaskNotFoundError:
            raise _not_found() from None
