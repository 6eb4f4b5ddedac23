from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRouter
from loguru import logger
from pymongo.errors import PyMongoError

from taskspace.resource_api.db.client import create_client, ensure_indexes, resolve_database
from taskspace.resource_api.errors import APIError, register_exception_handlers
from taskspace.resource_api.log import setup_logging
from taskspace.resource_api.settings import get_settings
from taskspace.resource_api.ui import mount_ui


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    # -- Startup ---------------------------------------------------------------
    settings = get_settings()
    setup_logging(settings.log_level)

    logger.info("Resource API starting (host={}, port={})", settings.host, settings.port)

    _app.state.mongo_client = None
    _app.state.db = None
    _app.state.indexes_ready = False

    # -- Document store --------------------------------------------------------
    if settings.mongo_uri:
        client = create_client(settings.mongo_uri, serverSelectionTimeoutMS=settings.mongo_timeout_ms)
        _app.state.mongo_client = client
        _app.state.db = resolve_database(client, settings.mongo_db)
        try:
            await ensure_indexes(_app.state.db)
            _app.state.indexes_ready = True
            logger.info("MongoDB: connected (database={})", _app.state.db.name)
        except PyMongoError as exc:
            # Keep serving; the database dependency retries the indexes per request.
            logger.error("MongoDB connection error: {}", exc)
    else:
        logger.warning("MONGO_URI not set -- store-backed endpoints disabled")

    yield

    # -- Shutdown --------------------------------------------------------------
    logger.info("Resource API shutting down")

    if _app.state.mongo_client is not None:
        await _app.state.mongo_client.close()
        logger.info("MongoDB: closed")


app = FastAPI(title="Taskspace Resource API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# ---------------------------------------------------------------------------
# API router -- all backend endpoints live under /api
# ---------------------------------------------------------------------------
api = APIRouter(prefix="/api")


@api.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


# -- Resource routers --------------------------------------------------------
from taskspace.resource_api.routers.projects import router as projects_router  # noqa: E402
from taskspace.resource_api.routers.spaces import router as spaces_router  # noqa: E402
from taskspace.resource_api.routers.tasks import router as tasks_router  # noqa: E402

api.include_router(spaces_router)
api.include_router(projects_router)
api.include_router(tasks_router)


@api.api_route(
    "/{unmatched:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def api_not_found(unmatched: str) -> None:
    """Unknown API paths are a JSON 404, never the UI fallback."""
    raise APIError(status.HTTP_404_NOT_FOUND, "Not found")


app.include_router(api)

# ---------------------------------------------------------------------------
# Static UI serving
# Resolved relative to CWD.  Override with the UI_DIR env var.
# ---------------------------------------------------------------------------
if not mount_ui(app, Path(get_settings().ui_dir)):
    logger.debug("UI bundle not found at {} -- static serving disabled", get_settings().ui_dir)
