"""
Error taxonomy for the API.

Every class is an ``HTTPException`` so services can raise them directly,
the same way FastAPI code raises ``HTTPException``. The handlers installed by
``register_exception_handlers`` render all of them, plus request validation
failures and unexpected exceptions, as ``{"error": "<message>"}``.
"""
import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


class ApiError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = INTERNAL_ERROR_MESSAGE

    def __init__(self, message: str = None, headers: dict = None):
        super().__init__(
            status_code=self.status_code,
            detail=message or self.default_message,
            headers=headers,
        )

    @property
    def message(self) -> str:
        return self.detail


class ValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class AuthError(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Could not validate credentials"

    def __init__(self, message: str = None):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class ForbiddenError(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not enough permissions"


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(ApiError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class InternalError(ApiError):
    pass


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return ValidationError.default_message
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
    message = first.get("msg", ValidationError.default_message)
    return f"{location}: {message}" if location else message


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": _describe_validation_error(exc)},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
