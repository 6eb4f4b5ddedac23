"""API request / response schemas for the resource endpoints.

Field names match the stored documents (``SpCode``, ``projectCode``,
``assignedTo``, ...), so the same names are used on the wire and in MongoDB.

- **Create** and **Update** schemas make every field optional.  Presence is
  checked by the managers with truthiness rules, which pydantic's own
  "required" cannot express.
- **Update** schemas are dumped with ``exclude_unset`` for partial updates.
- **Response** schemas validate raw documents and expose ``_id`` as a string.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

ObjectIdStr = Annotated[str, BeforeValidator(str)]
"""``bson.ObjectId`` rendered as its 24-char hex string."""


def _falsy_to_none(value: Any) -> Any:
    # 0 would otherwise parse as the 1970 epoch and pass the presence check
    return value if value else None


DeadlineInput = Annotated[datetime | None, BeforeValidator(_falsy_to_none)]
"""Request-side deadline; a falsy raw value (``""``, ``0``, ``false``) counts as not provided."""


# ---------------------------------------------------------------------------
# Workspace
# ---------------------------------------------------------------------------


class SpaceCreate(BaseModel):
    """Input for creating a new workspace."""

    SpCode: str | None = None
    name: str | None = None


class SpaceResponse(BaseModel):
    """Serialized workspace returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: ObjectIdStr = Field(alias="_id")
    SpCode: str | None = None
    name: str | None = None


# ---------------------------------------------------------------------------
# Project
# ---------------------------------------------------------------------------


class ProjectCreate(BaseModel):
    """Input for creating a project.  ``SpCode`` comes from the body, not the path."""

    SpCode: str | None = None
    projectCode: str | None = None
    name: str | None = None
    description: str | None = None
    teamLead: str | None = None
    members: list[str] | None = None
    status: str | None = None


class ProjectUpdate(BaseModel):
    """Partial project update -- only fields sent by the caller are written."""

    name: str | None = None
    description: str | None = None
    teamLead: str | None = None
    members: list[str] | None = None
    status: str | None = None


class ProjectCommentCreate(BaseModel):
    comment: str | None = None


class ProjectComment(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: ObjectIdStr = Field(alias="_id")
    comment: str | None = None
    date: datetime | None = None


class ProjectResponse(BaseModel):
    """Serialized project returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: ObjectIdStr = Field(alias="_id")
    SpCode: str | None = None
    projectCode: str | None = None
    name: str | None = None
    description: str | None = None
    status: str | None = None
    teamLead: str | None = None
    members: list[str] | None = Field(default_factory=list)
    comments: list[ProjectComment] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Task
# ---------------------------------------------------------------------------


class TaskCreate(BaseModel):
    """Input for creating a task.  ``SpCode`` comes from the body, not the path."""

    SpCode: str | None = None
    projectId: str | None = None
    taskId: str | None = None
    title: str | None = None
    status: str | None = None
    assignedTo: str | None = None
    priority: str | None = None
    assignedBy: str | None = None
    description: str | None = None
    deadline: DeadlineInput = None


class TaskUpdate(BaseModel):
    """Partial task update -- only fields sent by the caller are written."""

    title: str | None = None
    status: str | None = None
    assignedTo: str | None = None
    priority: str | None = None
    assignedBy: str | None = None
    description: str | None = None
    deadline: DeadlineInput = None


class TaskCommentCreate(BaseModel):
    author: str | None = None
    text: str | None = None


class TaskComment(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: ObjectIdStr = Field(alias="_id")
    author: str | None = None
    text: str | None = None
    timestamp: datetime | None = None


class TaskResponse(BaseModel):
    """Serialized task returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: ObjectIdStr = Field(alias="_id")
    SpCode: str | None = None
    projectId: str | None = None
    taskId: str | None = None
    title: str | None = None
    status: str | None = None
    assignedTo: str | None = None
    priority: str | None = None
    assignedBy: str | None = None
    description: str | None = None
    deadline: datetime | None = None
    comments: list[TaskComment] = Field(default_factory=list)
