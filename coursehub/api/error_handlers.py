"""
One error-to-response mapping for the whole API.

Controllers and use cases raise; nothing else builds an error body. Every
error response is JSON with a `message` and a machine-readable `code`.
"""

# Standard library imports
import logging
from typing import Any, Dict, List, Tuple, Type

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from ..core.exceptions import (
    CourseHubError,
    DuplicateEmail,
    Forbidden,
    InternalError,
    InvalidCredentials,
    Unauthenticated,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Most specific first; the first isinstance match wins.
_ERROR_STATUS: List[Tuple[Type[CourseHubError], int, str]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR"),
    (Unauthenticated, status.HTTP_401_UNAUTHORIZED, "UNAUTHENTICATED"),
    (InvalidCredentials, status.HTTP_401_UNAUTHORIZED, "INVALID_CREDENTIALS"),
    (Forbidden, status.HTTP_403_FORBIDDEN, "FORBIDDEN"),
    (DuplicateEmail, status.HTTP_409_CONFLICT, "DUPLICATE_EMAIL"),
    (InternalError, status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR"),
]

_INTERNAL_MESSAGE = InternalError.default_message


def error_response(error: Exception) -> JSONResponse:
    """
    Map any exception to its JSON response

    Args:
        error: Domain error or unexpected exception

    Returns:
        JSONResponse with status code, message and code. Server errors get
        a generic message only.
    """
    if isinstance(error, CourseHubError):
        for error_type, status_code, code in _ERROR_STATUS:
            if isinstance(error, error_type):
                message = error.message if status_code < 500 else _INTERNAL_MESSAGE
                return JSONResponse(status_code=status_code, content={"message": message, "code": code})

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": _INTERNAL_MESSAGE, "code": "INTERNAL_ERROR"},
    )


def _validation_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    errors = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.append({"field": ".".join(location), "message": error.get("msg", "Invalid value")})
    return errors


async def _handle_course_hub_error(request: Request, exc: CourseHubError) -> JSONResponse:
    if isinstance(exc, InternalError):
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
    return error_response(exc)


async def _handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": "Invalid request",
            "code": "VALIDATION_ERROR",
            "errors": _validation_errors(exc),
        },
    )


async def _handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail), "code": "HTTP_ERROR"},
        headers=getattr(exc, "headers", None),
    )


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return error_response(exc)


def register_exception_handlers(application: FastAPI) -> None:
    """Install the mapping on the application"""
    application.add_exception_handler(CourseHubError, _handle_course_hub_error)
    application.add_exception_handler(RequestValidationError, _handle_request_validation_error)
    application.add_exception_handler(StarletteHTTPException, _handle_http_exception)
    application.add_exception_handler(Exception, _handle_unexpected_error)
