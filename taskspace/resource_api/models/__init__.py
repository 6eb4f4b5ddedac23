"""Data models for the resource API."""

from taskspace.resource_api.models.api import (
    ProjectComment,
    ProjectCommentCreate,
    ProjectCreate,
    ProjectResponse,
    ProjectUpdate,
    SpaceCreate,
    SpaceResponse,
    TaskComment,
    TaskCommentCreate,
    TaskCreate,
    TaskResponse,
    TaskUpdate,
)

__all__ = [
    # Project
    "ProjectComment",
    "ProjectCommentCreate",
    "ProjectCreate",
    "ProjectResponse",
    "ProjectUpdate",
    # Workspace
    "SpaceCreate",
    "SpaceResponse",
    # Task
    "TaskComment",
    "TaskCommentCreate",
    "TaskCreate",
    "TaskResponse",
    "TaskUpdate",
]
