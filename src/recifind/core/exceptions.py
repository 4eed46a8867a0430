"""Application exceptions and FastAPI exception handlers.

Every error leaves the service with the same body shape::

    {"error": "BAD_REQUEST", "message": "...", "details": [...], "requestId": "..."}

Request validation failures are reported as 400 rather than FastAPI's
default 422, so that a missing required field and a malformed body are the
same client-error kind.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from recifind.observability.logging import get_logger
from recifind.schemas.base import APIResponse


if TYPE_CHECKING:
    from fastapi import Request


logger = get_logger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields"
INVALID_BODY_MESSAGE = "Invalid request body"
GENERIC_ERROR_MESSAGE = "Something went wrong"


class ErrorDetail(APIResponse):
    """Structured error detail for validation errors."""

    code: str
    message: str
    field: str | None = None


class ErrorResponse(APIResponse):
    """Structured error response."""

    error: str
    message: str
    details: list[ErrorDetail] | None = None
    request_id: str | None = None


class AppException(Exception):
    """Base application exception.

    Raised from route handlers; rendered by ``app_exception_handler``.
    """

    def __init__(
        self,
        status_code: int,
        error: str,
        message: str,
        details: list[ErrorDetail] | None = None,
    ) -> None:
        self.status_code = status_code
        self.error = error
        self.message = message
        self.details = details
        super().__init__(message)


class BadRequestException(AppException):
    """Bad request exception."""

    def __init__(
        self, message: str, details: list[ErrorDetail] | None = None
    ) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            error="BAD_REQUEST",
            message=message,
            details=details,
        )


class InternalServerException(AppException):
    """A collaborator failed; the caller only sees a generic message."""

    def __init__(self, message: str = GENERIC_ERROR_MESSAGE) -> None:
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error="INTERNAL_SERVER_ERROR",
            message=message,
        )


class ServiceUnavailableException(AppException):
    """Service unavailable exception."""

    def __init__(self, message: str = "Service temporarily unavailable") -> None:
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            error="SERVICE_UNAVAILABLE",
            message=message,
        )


def _get_request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    details: list[ErrorDetail] | None = None,
    headers: dict[str, str] | None = None,
) -> ORJSONResponse:
    body = ErrorResponse(
        error=error,
        message=message,
        details=details,
        request_id=_get_request_id(request),
    )
    return ORJSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
        headers=headers,
    )


def _validation_details(exc: RequestValidationError) -> list[ErrorDetail]:
    return [
        ErrorDetail(
            code=str(error.get("type", "VALIDATION_ERROR")).upper(),
            message=error["msg"],
            field=".".join(str(loc) for loc in error["loc"] if loc != "body")
            or None,
        )
        for error in exc.errors()
    ]


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the FastAPI application."""

    @app.exception_handler(AppException)
    async def app_exception_handler(
        request: Request,
        exc: AppException,
    ) -> ORJSONResponse:
        return _error_response(
            request, exc.status_code, exc.error, exc.message, exc.details
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> ORJSONResponse:
        return _error_response(
            request, exc.status_code, "HTTP_ERROR", str(exc.detail)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> ORJSONResponse:
        """Map body validation failures to a 400 client error."""
        details = _validation_details(exc)
        missing = any(error.get("type") == "missing" for error in exc.errors())
        message = MISSING_FIELDS_MESSAGE if missing else INVALID_BODY_MESSAGE
        logger.info(
            "Rejected invalid request",
            path=request.url.path,
            errors=len(details),
        )
        return _error_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            "BAD_REQUEST",
            message,
            details,
        )

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_exception_handler(
        request: Request,
        exc: RateLimitExceeded,
    ) -> ORJSONResponse:
        logger.warning(
            "Rate limit exceeded",
            path=request.url.path,
            limit=str(exc.detail),
        )
        return _error_response(
            request,
            status.HTTP_429_TOO_MANY_REQUESTS,
            "RATE_LIMIT_EXCEEDED",
            "Too many requests. Please try again later.",
            headers={"Retry-After": "60"},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> ORJSONResponse:
        logger.opt(exception=exc).error(
            "Unhandled exception", path=request.url.path
        )
        return _error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "INTERNAL_SERVER_ERROR",
            GENERIC_ERROR_MESSAGE,
        )
