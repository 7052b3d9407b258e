"""Exception handlers.

Routes raise; these handlers translate exceptions into the error envelope
with the matching status code.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException

from qanda.domain.error import (
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from qanda.interface.api.envelope import ErrorResponse

STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (UnauthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
]


def error_response(status_code: int, error: str, details=None) -> JSONResponse:
    """Build an error envelope response."""
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude_none=True),
    )


def status_for(exc: DomainError) -> int:
    """HTTP status for a domain error."""
    for error_class, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _field_errors(errors) -> list[dict]:
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
        }
        for error in errors
    ]


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    logfire.warn(
        "Request failed",
        path=request.url.path,
        status_code=status_code,
        error=exc.message,
    )
    return error_response(status_code, exc.message, exc.details)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logfire.warn("Invalid request", path=request.url.path, errors=len(exc.errors()))
    return error_response(
        status.HTTP_400_BAD_REQUEST, "Invalid request data", _field_errors(exc.errors())
    )


async def handle_pydantic_validation_error(
    request: Request, exc: PydanticValidationError
) -> JSONResponse:
    logfire.warn("Invalid input", path=request.url.path, errors=exc.error_count())
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Invalid request data",
        _field_errors(exc.errors(include_url=False)),
    )


async def handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def handle_integrity_error(request: Request, exc: IntegrityError) -> JSONResponse:
    logfire.warn("Uniqueness violation", path=request.url.path, error=str(exc.orig))
    return error_response(status.HTTP_409_CONFLICT, "Resource already exists")


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.exception("Unhandled error", path=request.url.path)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error envelope handlers on an application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(PydanticValidationError, handle_pydantic_validation_error)
    app.add_exception_handler(HTTPException, handle_http_exception)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
