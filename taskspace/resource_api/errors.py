"""HTTP error shape and translation of store failures.

Every error response body has the form ``{"error": str, "details"?: str}``.
Routers raise :class:`APIError`; the handlers registered by
:func:`register_exception_handlers` render it.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskspace.resource_api.managers import DuplicateCodeError


class APIError(Exception):
    """An error that maps directly onto an HTTP response."""

    def __init__(self, status_code: int, error: str, details: str | None = None) -> None:
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details


def error_body(error: str, details: str | None = None) -> dict[str, str]:
    body = {"error": error}
    if details:
        body["details"] = details
    return body


@contextmanager
def store_errors(message: str) -> Iterator[None]:
    """Translate store failures raised inside the block into ``APIError``.

    Duplicate codes are the caller's fault (400); anything else the driver
    raises is a server error (500).  Both carry the store message as details.
    """
    try:
        yield
    except DuplicateCodeError as exc:
        raise APIError(status.HTTP_400_BAD_REQUEST, message, details=str(exc)) from exc
    except PyMongoError as exc:
        logger.opt(exception=exc).error("{}: {}", message, exc)
        raise APIError(status.HTTP_500_INTERNAL_SERVER_ERROR, message, details=str(exc)) from exc


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(APIError)
    async def handle_api_error(_request: Request, exc: APIError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.error, exc.details))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Routing errors (unknown path, wrong method) in the same body shape."""
        error = "Not found" if exc.status_code == status.HTTP_404_NOT_FOUND else str(exc.detail)
        return JSONResponse(status_code=exc.status_code, content=error_body(error), headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def handle_invalid_body(_request: Request, exc: RequestValidationError) -> JSONResponse:
        """Malformed JSON or wrongly-typed fields are client errors (400, not 422)."""
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body("Invalid request body", _format_validation_errors(exc)),
        )
