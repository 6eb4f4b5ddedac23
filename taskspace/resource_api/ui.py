"""Static UI serving for the prebuilt frontend bundle.

Every GET outside ``/api`` returns a file from the bundle when one matches,
otherwise ``index.html`` so the client-side router can take over.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, status
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from taskspace.resource_api.errors import APIError


def mount_ui(app: FastAPI, ui_dir: Path) -> bool:
    """Register the UI routes on *app*.  Returns False when *ui_dir* is absent."""
    if not ui_dir.is_dir():
        return False

    root = ui_dir.resolve()
    if (root / "assets").is_dir():
        app.mount("/assets", StaticFiles(directory=root / "assets"), name="ui-assets")

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_spa(full_path: str) -> FileResponse:
        """Serve the SPA index.html for all unmatched routes (client-side routing)."""
        if full_path == "api" or full_path.startswith("api/"):
            raise APIError(status.HTTP_404_NOT_FOUND, "Not found")
        file_path = (root / full_path).resolve()
        if file_path.is_file() and file_path.is_relative_to(root):
            return FileResponse(file_path)
        return FileResponse(root / "index.html")

    return True
