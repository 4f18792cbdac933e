"""Global exception handlers that map domain and framework errors to ``{"error": ...}`` responses."""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from realestate.errors import (
    DomainValidationError,
    DuplicateResourceError,
    MissingTableError,
    NotFoundError,
    UnauthorizedError,
)
from realestate.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

MISSING_FIELDS = "Missing required fields"
METHOD_NOT_ALLOWED = "Method not allowed"


def _error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Return a standardized error response."""
    body = ErrorResponse(error=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if any(err["type"] == "missing" or err.get("input") is None for err in errors):
        return MISSING_FIELDS
    field = next(
        (str(part) for err in errors for part in reversed(err["loc"]) if isinstance(part, str)),
        "request",
    )
    return f"Invalid value for {field}"


def request_validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _error_response(status.HTTP_400_BAD_REQUEST, _validation_message(exc))


def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = str(exc.detail)
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        message = METHOD_NOT_ALLOWED
    return _error_response(exc.status_code, message, getattr(exc, "headers", None))


def domain_validation_error_handler(
    _request: Request, exc: DomainValidationError
) -> JSONResponse:
    return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))


def duplicate_resource_error_handler(
    _request: Request, exc: DuplicateResourceError
) -> JSONResponse:
    return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))


def not_found_error_handler(_request: Request, exc: NotFoundError) -> JSONResponse:
    return _error_response(status.HTTP_404_NOT_FOUND, str(exc))


def unauthorized_error_handler(_request: Request, exc: UnauthorizedError) -> JSONResponse:
    return _error_response(status.HTTP_401_UNAUTHORIZED, str(exc))


def missing_table_error_handler(_request: Request, exc: MissingTableError) -> JSONResponse:
    return _error_response(status.HTTP_503_SERVICE_UNAVAILABLE, str(exc))


def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app):
    """Register exception handlers on the FastAPI app."""
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(DomainValidationError, domain_validation_error_handler)
    app.add_exception_handler(DuplicateResourceError, duplicate_resource_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(UnauthorizedError, unauthorized_error_handler)
    app.add_exception_handler(MissingTableError, missing_table_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
