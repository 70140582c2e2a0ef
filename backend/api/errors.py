"""
Exception handlers.

Maps the shared exception bases to HTTP responses with the body
{"error", "message", "details"}. Anything unrecognised becomes an
opaque 500 and is logged with its stack trace.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    InternalError,
    LessonsError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Most specific first; the first matching base wins
STATUS_CODES: list[tuple[type[LessonsError], int]] = [
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ValidationError, 400),
    (ExternalServiceError, 500),
    (InternalError, 500),
]


def status_for(exc: LessonsError) -> int:
    """HTTP status for a domain exception."""
    for base, status_code in STATUS_CODES:
        if isinstance(exc, base):
            return status_code
    return 500


async def handle_lessons_error(request: Request, exc: LessonsError) -> JSONResponse:
    status_code = status_for(exc)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None

    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.code}: {exc.message}")
    else:
        logger.debug(f"{request.method} {request.url.path} -> {status_code} {exc.code}")

    return JSONResponse(status_code=status_code, content=exc.to_dict(), headers=headers)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "INTERNAL_ERROR",
            "message": "Internal server error",
            "details": {},
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain and fallback exception handlers on app."""
    app.add_exception_handler(LessonsError, handle_lessons_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
