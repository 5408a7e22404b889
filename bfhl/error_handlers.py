"""Centralized exception handlers.

Every error is returned in the same envelope with ``is_success=false``, so
clients can parse failures without branching on the status code. The status
comes from the exception class; nothing else in the app decides it.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from structlog import get_logger

from bfhl.config import get_settings
from bfhl.exceptions import (
    BfhlError,
    InternalError,
    MethodNotAllowedError,
    NotFoundError,
)
from bfhl.operations.schemas import ProcessResponse
from bfhl.ratelimit import RateLimitExceededError


logger = get_logger(__name__)


def error_response(exc: BfhlError, headers: dict[str, str] | None = None) -> JSONResponse:
    """Render a BfhlError as an envelope with the error's status code."""
    body = ProcessResponse.failure(get_settings().OFFICIAL_EMAIL, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(),
        headers=headers,
    )


async def bfhl_exception_handler(request: Request, exc: BfhlError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("request_failed", path=request.url.path, code=exc.code, status=exc.status_code)
    else:
        logger.warning("request_rejected", path=request.url.path, code=exc.code, detail=exc.message)

    headers = None
    if isinstance(exc, RateLimitExceededError):
        headers = {"Retry-After": str(int(exc.retry_after) + 1)}
    return error_response(exc, headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Map Starlette routing errors (404/405) onto the envelope."""
    if exc.status_code == 404:
        return error_response(NotFoundError(), exc.headers)
    if exc.status_code == 405:
        return error_response(MethodNotAllowedError(request.method), exc.headers)

    error = BfhlError(message=str(exc.detail), code="HTTP_ERROR")
    error.status_code = exc.status_code
    return error_response(error, exc.headers)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """500 catch-all. The cause is logged, never returned."""
    logger.exception("unexpected_error", path=request.url.path)
    return error_response(InternalError())


def register_exception_handlers(app: FastAPI) -> None:
    """Install every handler on ``app``."""
    app.add_exception_handler(BfhlError, bfhl_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
