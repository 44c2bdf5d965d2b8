"""
Global exception handlers.

Every error response has the same shape: `{"error": "<message>"}`.
Internal details never reach the caller; they go to the log.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .errors import SchoolApiError, StorageError

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Request body must be a JSON object"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(SchoolApiError)
    async def school_api_error_handler(request: Request, exc: SchoolApiError) -> JSONResponse:
        if isinstance(exc, StorageError):
            # Cause was already logged with traceback where it was raised.
            logger.error("storage_error path=%s message=%s", request.url.path, exc.message)
        else:
            logger.info("client_error path=%s message=%s", request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        logger.info("invalid_request path=%s errors=%s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": INVALID_BODY_MESSAGE},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("unhandled_error path=%s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )
