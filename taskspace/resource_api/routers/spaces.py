"""Workspace endpoints: create and get by code."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, status

from taskspace.resource_api.deps import Database
from taskspace.resource_api.errors import APIError, store_errors
from taskspace.resource_api.managers import MissingFieldsError
from taskspace.resource_api.managers import spaces as manager
from taskspace.resource_api.models.api import SpaceCreate, SpaceResponse

router = APIRouter(prefix="/space", tags=["spaces"])


@router.post("/create", response_model=SpaceResponse, status_code=status.HTTP_201_CREATED)
async def create_space(body: SpaceCreate, db: Database) -> dict[str, Any]:
    """Create a new workspace.  A code that is already taken answers 400."""
    with store_errors("Error creating Space"):
        try:
            return await manager.create_space(db, body)
        except MissingFieldsError as exc:
            raise APIError(status.HTTP_400_BAD_REQUEST, "Missing required fields", details=str(exc)) from None


@router.get("/{sp_code}", response_model=SpaceResponse)
async def get_space(sp_code: str, db: Database) -> dict[str, Any]:
    """Get a single workspace by code."""
    with store_errors("Error fetching Space details"):
        try:
            return await manager.get_space(db, sp_code)
        except manager.SpaceNotFoundError:
            raise APIError(status.HTTP_404_NOT_FOUND, "Space not found") from None
