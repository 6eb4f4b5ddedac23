"""Project endpoints, nested under a workspace code.

Reads use GET, creates and comment appends use POST, partial updates PUT.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, status

from taskspace.resource_api.deps import Database
from taskspace.resource_api.errors import APIError, store_errors
from taskspace.resource_api.managers import MissingFieldsError, NoChangesError
from taskspace.resource_api.managers import projects as manager
from taskspace.resource_api.models.api import (
    ProjectCommentCreate,
    ProjectCreate,
    ProjectResponse,
    ProjectUpdate,
)

router = APIRouter(prefix="/space/{sp_code}/projects", tags=["projects"])


def _not_found() -> APIError:
    return APIError(status.HTTP_404_NOT_FOUND, "Project not found")


@router.get("", response_model=list[ProjectResponse])
async def list_projects(sp_code: str, db: Database) -> list[dict[str, Any]]:
    """List every project of a workspace (possibly none)."""
    with store_errors("Failed to fetch projects"):
        return await manager.list_projects(db, sp_code)


@router.post("/create", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(sp_code: str, body: ProjectCreate, db: Database) -> dict[str, Any]:
    """Create a project.

    The stored workspace code is ``body.SpCode``; the ``sp_code`` path
    segment only routes the request.
    """
    with store_errors("Error creating project"):
        try:
            return await manager.create_project(db, body)
        except MissingFieldsError as exc:
            raise APIError(status.HTTP_400_BAD_REQUEST, "Missing required fields", details=str(exc)) from None


@router.get("/{project_code}", response_model=ProjectResponse)
async def get_project(sp_code: str, project_code: str, db: Database) -> dict[str, Any]:
    with store_errors("Error fetching project details"):
        try:
            return await manager.get_project(db, sp_code, project_code)
        except manager.ProjectNotFoundError:
            raise _not_found() from None


@router.put("/{project_code}/update", response_model=ProjectResponse)
async def update_project(sp_code: str, project_code: str, body: ProjectUpdate, db: Database) -> dict[str, Any]:
    """Partially update a project; only fields present in the body are written."""
    with store_errors("Error updating project"):
        try:
            return await manager.update_project(db, sp_code, project_code, body)
        except NoChangesError:
            raise APIError(status.HTTP_400_BAD_REQUEST, "No fields to update") from None
        except manager.ProjectNotFoundError:
            raise _not_found() from None


@router.post("/{project_code}/comments", response_model=ProjectResponse)
async def add_project_comment(
    sp_code: str,
    project_code: str,
    body: ProjectCommentCreate,
    db: Database,
) -> dict[str, Any]:
    """Append a comment and return the whole updated project."""
    with store_errors("Error adding comment to project"):
        try:
            return await manager.add_project_comment(db, sp_code, project_code, body)
        except MissingFieldsError:
            raise APIError(status.HTTP_400_BAD_REQUEST, "Comment is required") from None
        except manager.ProjectNotFoundError:
            raise _not_found() from None
