"""
Application-level exception handlers.

Every failure that escapes a route is rendered with error_response(),
so clients always receive {"success": false, "error": {...}}.

Example:
    from fastapi import FastAPI
    from common.utils import register_exception_handlers

    app = FastAPI()
    register_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from common.utils.exceptions import APIException
from common.utils.responses import error_response

logger = logging.getLogger(__name__)


async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
    """Render an APIException with its own status code."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(error_response(exc.message, code=exc.code, details=exc.details)),
        headers=exc.headers,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request body/query validation errors."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=jsonable_encoder(error_response(
            "Validation error",
            code="VALIDATION_ERROR",
            errors=exc.errors(),
        )),
    )


async def database_exception_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    """Storage failures surface as a generic 500."""
    logger.exception(f"{request.method} {request.url.path} database error: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response("Database error", code="DATABASE_ERROR"),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"{request.method} {request.url.path} unhandled error: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response("Internal server error", code="INTERNAL_ERROR"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the standard handlers to a FastAPI application."""
    app.add_exception_handler(APIException, api_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(PyMongoError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
