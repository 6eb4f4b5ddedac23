"""Validation failures are answered before the store is touched.

These tests run without MongoDB: the database dependency is replaced by an
object that fails the test on any access.
"""

from __future__ import annotations

from httpx import AsyncClient

from taskspace.resource_api.app import app

FULL_TASK = {
    "SpCode": "W1",
    "projectId": "P1",
    "taskId": "T1",
    "title": "Write copy",
    "status": "todo",
    "assignedTo": "bob",
    "priority": "high",
    "assignedBy": "alice",
    "description": "Landing page text",
    "deadline": "2026-11-01T12:00:00Z",
}


async def test_create_space_missing_name(offline_client: AsyncClient) -> None:
    resp = await offline_client.post("/api/space/create", json={"SpCode": "W1"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing required fields", "details": "name"}


async def test_create_space_empty_code_is_missing(offline_client: AsyncClient) -> None:
    resp = await offline_client.post("/api/space/create", json={"SpCode": "", "name": "Acme"})
    assert resp.status_code == 400
    assert resp.json()["details"] == "SpCode"


async def test_create_project_empty_members_rejected(offline_client: AsyncClient) -> None:
    payload = {
        "SpCode": "W1",
        "projectCode": "P1",
        "name": "Website",
        "description": "d",
        "teamLead": "alice",
        "members": [],
        "status": "active",
    }
    resp = await offline_client.post("/api/space/W1/projects/create", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing required fields", "details": "members"}


async def test_create_project_empty_body(offline_client: AsyncClient) -> None:
    resp = await offline_client.post("/api/space/W1/projects/create", json={})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Missing required fields"


async def test_update_project_empty_body(offline_client: AsyncClient) -> None:
    resp = await offline_client.put("/api/space/W1/projects/P1/update", json={})
    assert resp.status_code == 400
    assert resp.json() == {"error": "No fields to update"}


async def test_update_project_only_falsy_values(offline_client: AsyncClient) -> None:
    resp = await offline_client.put(
        "/api/space/W1/projects/P1/update",
        json={"name": "", "members": [], "status": None},
    )
    assert resp.status_code == 400
    assert resp.json() == {"error": "No fields to update"}


async def test_update_task_empty_body(offline_client: AsyncClient) -> None:
    resp = await offline_client.put("/api/space/W1/tasks/T1/update", json={})
    assert resp.status_code == 400
    assert resp.json() == {"error": "No fields to update"}


async def test_update_task_ignores_unknown_fields(offline_client: AsyncClient) -> None:
    resp = await offline_client.put("/api/space/W1/tasks/T1/update", json={"taskId": "T2"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "No fields to update"}


async def test_create_task_empty_deadline_is_missing(offline_client: AsyncClient) -> None:
    resp = await offline_client.post("/api/space/W1/tasks/create", json={**FULL_TASK, "deadline": ""})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing required fields", "details": "deadline"}


async def test_create_task_zero_deadline_is_missing(offline_client: AsyncClient) -> None:
    resp = await offline_client.post("/api/space/W1/tasks/create", json={**FULL_TASK, "deadline": 0})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing required fields", "details": "deadline"}


async def test_update_task_zero_deadline_is_no_change(offline_client: AsyncClient) -> None:
    resp = await offline_client.put("/api/space/W1/tasks/T1/update", json={"deadline": 0})
    assert resp.status_code == 400
    assert resp.json() == {"error": "No fields to update"}


async def test_create_task_bad_deadline(offline_client: AsyncClient) -> None:
    resp = await offline_client.post("/api/space/W1/tasks/create", json={**FULL_TASK, "deadline": "soon"})
    assert resp.status_code == 400
    data = resp.json()
    assert data["error"] == "Invalid request body"
    assert "deadline" in data["details"]


async def test_project_comment_required(offline_client: AsyncClient) -> None:
    resp = await offline_client.post("/api/space/W1/projects/P1/comments", json={"comment": ""})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Comment is required"}


async def test_task_comment_requires_author_and_text(offline_client: AsyncClient) -> None:
    resp = await offline_client.post("/api/space/W1/tasks/T1/comments", json={"text": "hello"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Author, and text are required"}


async def test_malformed_json(offline_client: AsyncClient) -> None:
    resp = await offline_client.post(
        "/api/space/create",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid request body"


async def test_unknown_api_path(offline_client: AsyncClient) -> None:
    resp = await offline_client.get("/api/nothing/here")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not found"}


async def test_store_not_configured(offline_client: AsyncClient) -> None:
    app.dependency_overrides.clear()
    resp = await offline_client.get("/api/space/W1")
    assert resp.status_code == 503
    assert resp.json() == {"error": "Database not configured (MONGO_URI is unset)."}
