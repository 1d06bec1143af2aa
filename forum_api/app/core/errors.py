"""
Exception handlers that render service errors as ``{"message": ...}``.

``ForumError`` subclasses carry their own HTTP status.  Request shape
errors detected by FastAPI (unparseable JSON, wrong field types) are
reported as 400 with the generic invalid-data message, matching what
the service layer reports for missing fields.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .exceptions import ForumError, ValidationError

logger = logging.getLogger(__name__)


async def handle_forum_error(request: Request, exc: ForumError) -> JSONResponse:
    if exc.status_code >= 500:
        # The cause was logged where it was caught; record which request failed.
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse({"message": exc.message}, status_code=exc.status_code)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        {"message": ValidationError.default_message},
        status_code=ValidationError.status_code,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ForumError, handle_forum_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
