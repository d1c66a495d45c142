"""
Global error handling for the FastAPI application.
Domain exceptions map to HTTP statuses by their code; anything else becomes a 500.
"""

import logging
import traceback
from typing import Any, Dict
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError

from timetrack.config import settings
from timetrack.domain.models.base import DomainException

logger = logging.getLogger(__name__)


STATUS_BY_CODE = {
    "VALIDATION_ERROR": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "CONFLICT_ERROR": status.HTTP_409_CONFLICT,
    "PERMISSION_ERROR": status.HTTP_403_FORBIDDEN,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "STATE_ERROR": status.HTTP_409_CONFLICT,
    "SERVICE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_body(error: str, message: str, status_code: int, **extra: Any) -> Dict[str, Any]:
    body = {"error": error, "message": message, "status_code": status_code}
    body.update({key: value for key, value in extra.items() if value is not None})
    return body


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
        # Log the full exception with traceback
        logger.error(
            f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
            exc_info=True,
            extra={
                "request_path": request.url.path,
                "request_method": request.method,
                "client_host": request.client.host if request.client else None
            }
        )

        error_response = self.format_error_response(exc)

        # In development, add more debug information
        if settings.debug:
            error_response["debug"] = {
                "exception_type": type(exc).__name__,
                "traceback": traceback.format_exc().split("\n")
            }

        return JSONResponse(
            status_code=error_response["status_code"],
            content=error_response
        )

    def format_error_response(self, exc: Exception) -> Dict[str, Any]:
        if isinstance(exc, DomainException):
            return domain_error_body(exc)
        if isinstance(exc, TimeoutError):
            return error_body(
                "REQUEST_TIMEOUT",
                "The request took too long to process",
                status.HTTP_408_REQUEST_TIMEOUT,
            )
        return error_body(
            "INTERNAL_ERROR",
            "An unexpected error occurred",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def domain_error_body(exc: DomainException) -> Dict[str, Any]:
    return error_body(
        exc.code,
        exc.message,
        STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST),
        field=getattr(exc, "field", None),
    )


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    body = domain_error_body(exc)
    if body["status_code"] >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.info(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=body["status_code"], content=body)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    errors = {
        status.HTTP_401_UNAUTHORIZED: "UNAUTHORIZED",
        status.HTTP_403_FORBIDDEN: "PERMISSION_ERROR",
        status.HTTP_404_NOT_FOUND: "NOT_FOUND",
        status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
    }
    body = error_body(errors.get(exc.status_code, "HTTP_ERROR"), str(exc.detail), exc.status_code)
    return JSONResponse(
        status_code=exc.status_code,
        content=body,
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    body = error_body(
        "VALIDATION_ERROR",
        first.get("msg", "Invalid request"),
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        field=".".join(location) or None,
    )
    return JSONResponse(status_code=body["status_code"], content=body)


def register_exception_handlers(app: FastAPI) -> None:
    """Render every expected failure with the common error envelope."""
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
