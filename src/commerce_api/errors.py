"""
Domain errors and their HTTP mapping.

Every store failure surfaces as one of two kinds:

    StoreConnectionError -> 503 Service Unavailable
    QueryError           -> 500 Internal Server Error

Both render as ``{"code": <status>, "message": <description>}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError

from commerce_api.dto import ErrorResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors that end a request with an error envelope."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(code=self.status_code, message=self.message)


class StoreConnectionError(AppError):
    """A usable store connection could not be obtained."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class QueryError(AppError):
    """A statement failed, including a point lookup that matched no row."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def describe(exc: BaseException) -> str:
    """Return the driver-level description of a store exception.

    SQLAlchemy wraps driver errors and appends the SQL text and a help
    link; only the driver's message is kept.
    """
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc) or type(exc).__name__


def register_error_handlers(app: FastAPI) -> None:
    """Register the domain error handler on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
        if isinstance(exc, StoreConnectionError):
            logger.error("%s %s: connection error: %s", request.method, request.url.path, exc.message)
        else:
            logger.warning("%s %s: query error: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_response().model_dump(),
        )
