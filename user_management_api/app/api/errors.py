"""
Mapping of service errors to HTTP responses.

The service layer raises ``UserManagementError`` subclasses and knows
nothing about status codes.  ``register_exception_handlers`` installs
handlers that pick the status for each error kind and render the
``ErrorResponse`` / ``ValidationErrorResponse`` bodies.  Unexpected
exceptions are logged with their traceback and answered with a
generic message so that no internal detail reaches the client.
"""

import logging
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Dict, List, Type

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.exceptions import (
    InvalidArgumentError,
    InvalidSortPropertyError,
    UserAlreadyExistsError,
    UserManagementError,
    UserNotFoundError,
    ValidationFailedError,
)
from ..schemas.error import ErrorResponse, FieldError, ValidationErrorResponse

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: Dict[Type[UserManagementError], int] = {
    UserNotFoundError: status.HTTP_404_NOT_FOUND,
    UserAlreadyExistsError: status.HTTP_409_CONFLICT,
    ValidationFailedError: status.HTTP_400_BAD_REQUEST,
    InvalidSortPropertyError: status.HTTP_400_BAD_REQUEST,
    InvalidArgumentError: status.HTTP_400_BAD_REQUEST,
}

# Request parts whose validation failures are malformed arguments rather
# than rejected body fields.
ARGUMENT_LOCATIONS = {"path", "query", "header", "cookie"}


def _now() -> datetime:
    return datetime.now(timezone.utc)


def status_for(exc: UserManagementError) -> int:
    for error_type, code in STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, code: str, message: str, request: Request) -> JSONResponse:
    body = ErrorResponse(code=code, message=message, timestamp=_now(), path=request.url.path)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json", by_alias=True))


def validation_response(exc: ValidationFailedError, request: Request) -> JSONResponse:
    body = ValidationErrorResponse(
        code=exc.code,
        message=exc.message,
        timestamp=_now(),
        path=request.url.path,
        field_errors=exc.field_errors,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(mode="json", by_alias=True),
    )


async def handle_service_error(request: Request, exc: UserManagementError) -> JSONResponse:
    if isinstance(exc, ValidationFailedError):
        return validation_response(exc, request)
    return error_response(status_for(exc), exc.code, exc.message, request)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Translate FastAPI's own parsing failures.

    A bad path or query parameter (e.g. a non-numeric id) is an
    INVALID_ARGUMENT; a malformed JSON body becomes a VALIDATION_ERROR
    listing each offending field.
    """
    errors = exc.errors()
    argument_errors = [err for err in errors if err.get("loc") and err["loc"][0] in ARGUMENT_LOCATIONS]
    if argument_errors:
        err = argument_errors[0]
        name = ".".join(str(part) for part in err["loc"][1:])
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            InvalidArgumentError.code,
            f"Invalid value for '{name}': {err.get('msg', 'invalid value')}",
            request,
        )
    field_errors: List[FieldError] = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())[1:]]
        field_errors.append(
            FieldError(
                field=".".join(loc) or "body",
                rejected_value=err.get("input"),
                message=err.get("msg", "Invalid value"),
            )
        )
    return validation_response(ValidationFailedError(field_errors), request)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    try:
        code = HTTPStatus(exc.status_code).name
    except ValueError:
        code = "HTTP_ERROR"
    return error_response(exc.status_code, code, str(exc.detail), request)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error occurred at %s", request.url.path)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred",
        request,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UserManagementError, handle_service_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
