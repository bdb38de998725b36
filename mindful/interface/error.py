"""HTTP rendering of application errors.

Every failure leaves the API as ``{"message": str}``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from mindful.domain.error import (
    BusinessRuleViolationError,
    ContentFlaggedError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    PersistenceConflictError,
    PersistenceError,
    PersistenceUnavailableError,
    UnauthenticatedError,
    ValidationError,
)

# Most specific first; the first matching class wins
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (UnauthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ContentFlaggedError, status.HTTP_400_BAD_REQUEST),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolationError, status.HTTP_409_CONFLICT),
    (PersistenceConflictError, status.HTTP_409_CONFLICT),
    (PersistenceUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (PersistenceError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the JSON error body."""
    return JSONResponse(status_code=status_code, content={"message": message})


def status_for(error: DomainError) -> int:
    """Map a domain error to its HTTP status code."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def message_for(error: DomainError) -> str:
    """Message shown to the client for a domain error."""
    if isinstance(error, NotFoundError):
        return f"{error.resource} not found"
    if isinstance(error, PersistenceUnavailableError):
        return "Service temporarily unavailable"
    if isinstance(error, PersistenceConflictError):
        return "Conflicting update, please retry"
    if isinstance(error, PersistenceError):
        return "Internal server error"
    return str(error)


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
    else:
        logfire.info(
            "Request rejected",
            path=request.url.path,
            status_code=status_code,
            error=str(exc),
        )
    return error_response(status_code, message_for(exc))


async def handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, message)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(HTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected_error)
