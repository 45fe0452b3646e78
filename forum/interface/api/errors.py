"""Exception handlers translating errors into the response envelope.

Business rule violations and missing resources are client errors (400)
carrying their domain code. Authentication failures are 401, anything
unexpected is 500.
"""

import sys

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from forum.domain.error import DomainError
from forum.interface.api.response import ErrorResponse
from forum.interface.error import AuthenticationRequiredError

VALIDATION_ERROR_CODE = "VALIDATION ERROR"
UNAUTHORIZED_CODE = "UNAUTHORIZED"
INTERNAL_ERROR_CODE = "INTERNAL_SERVER_ERROR"

_HTTP_STATUS_CODES = {
    status.HTTP_400_BAD_REQUEST: "BAD_REQUEST",
    status.HTTP_401_UNAUTHORIZED: UNAUTHORIZED_CODE,
    status.HTTP_403_FORBIDDEN: "FORBIDDEN",
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
}


def _envelope(
    status_code: int, code: str, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    body = ErrorResponse(code=code, message=message)
    return JSONResponse(
        status_code=status_code, content=body.model_dump(), headers=headers
    )


def _first_error_message(errors) -> str:
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    field = ".".join(loc)
    return f"{field}: {first['msg']}" if field else first["msg"]


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Domain rule violations and missing resources."""
    logfire.warn(
        "Domain error",
        code=exc.code,
        kind=exc.error_code.kind.value,
        path=request.url.path,
    )
    return _envelope(status.HTTP_400_BAD_REQUEST, exc.code, exc.message)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request body, query or path parameters."""
    return _envelope(
        status.HTTP_400_BAD_REQUEST,
        VALIDATION_ERROR_CODE,
        _first_error_message(exc.errors()),
    )


async def model_validation_error_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    """Value objects rejecting input after the request was parsed."""
    return _envelope(
        status.HTTP_400_BAD_REQUEST,
        VALIDATION_ERROR_CODE,
        _first_error_message(exc.errors()),
    )


async def authentication_error_handler(
    request: Request, exc: AuthenticationRequiredError
) -> JSONResponse:
    """Missing or invalid access token."""
    return _envelope(
        status.HTTP_401_UNAUTHORIZED,
        UNAUTHORIZED_CODE,
        exc.message,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Framework HTTP errors (unknown route, wrong method)."""
    code = _HTTP_STATUS_CODES.get(exc.status_code, INTERNAL_ERROR_CODE)
    return _envelope(exc.status_code, code, str(exc.detail), headers=exc.headers)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything else."""
    logfire.error(
        "Unhandled error",
        method=request.method,
        path=request.url.path,
        error_type=type(exc).__name__,
        _exc_info=sys.exc_info(),
    )
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        INTERNAL_ERROR_CODE,
        "Internal server error",
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the envelope exception handlers."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(ValidationError, model_validation_error_handler)
    app.add_exception_handler(AuthenticationRequiredError, authentication_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
