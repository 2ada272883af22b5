"""
Global error handler for the FastAPI application.
Catches and formats all exceptions consistently.
"""

import logging
import traceback
from typing import Any, Dict
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from fastapi import status

from opsdesk.config import get_settings
from opsdesk.domain.models.base import (
    DomainException,
    EntityNotFoundError,
    StorageError,
    SyncError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def format_error_response(exc: Exception) -> Dict[str, Any]:
    """
    Format exception into a consistent error response structure.
    """
    error_response: Dict[str, Any] = {
        "error": "Internal Server Error",
        "message": "An unexpected error occurred",
        "code": None,
        "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR
    }

    if isinstance(exc, ValidationError):
        error_response.update({
            "error": "Validation Error",
            "message": exc.message,
            "code": exc.code,
            "status_code": status.HTTP_422_UNPROCESSABLE_ENTITY
        })
        if exc.field:
            error_response["details"] = {"field": exc.field}
    elif isinstance(exc, EntityNotFoundError):
        error_response.update({
            "error": "Not Found",
            "message": exc.message,
            "code": exc.code,
            "status_code": status.HTTP_404_NOT_FOUND
        })
    elif isinstance(exc, StorageError):
        error_response.update({
            "error": "Storage Error",
            "message": exc.message,
            "code": exc.code,
            "status_code": status.HTTP_502_BAD_GATEWAY
        })
        if exc.details:
            error_response["details"] = exc.details
    elif isinstance(exc, (SyncError, DomainException)):
        error_response.update({
            "message": exc.message,
            "code": exc.code,
        })

    return error_response


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Exception handler for errors raised by repositories and domain code."""
    error_response = format_error_response(exc)
    level = logging.ERROR if error_response["status_code"] >= 500 else logging.WARNING
    logger.log(
        level,
        f"{request.method} {request.url.path} failed: {type(exc).__name__}: {exc.message}"
    )
    return JSONResponse(
        status_code=error_response["status_code"],
        content=error_response
    )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle all uncaught exceptions and format error responses.
    """

    async def dispatch(self, request: Request, call_next):
        """
        Process the request and handle any exceptions.
        """
        try:
            response = await call_next(request)
            return response
        except Exception as exc:
            return await self.handle_exception(request, exc)

    async def handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """
        Log the exception and return the formatted response.
        """
        logger.error(
            f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
            exc_info=True,
            extra={
                "request_path": request.url.path,
                "request_method": request.method,
                "client_host": request.client.host if request.client else None
            }
        )

        error_response = format_error_response(exc)

        # In development, add more debug information
        if get_settings().debug:
            error_response["debug"] = {
                "exception_type": type(exc).__name__,
                "traceback": traceback.format_exc().split("\n")
            }

        return JSONResponse(
            status_code=error_response["status_code"],
            content=error_response
        )
