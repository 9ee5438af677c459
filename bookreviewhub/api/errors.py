"""Translate exceptions raised while handling a request into structured HTTP error bodies."""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookreviewhub.api.middleware import unauthorized_response
from bookreviewhub.core.exceptions import (
    AccessDeniedError,
    AuthenticationRequiredError,
    BadCredentialsError,
    InvalidArgumentError,
)
from bookreviewhub.schemas.response import ErrorResponse

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


def error_response(status_code: int, message: str, path: str, headers: dict[str, str] | None = None) -> JSONResponse:
    body = ErrorResponse(
        status=status_code,
        error=HTTPStatus(status_code).phrase,
        message=message,
        path=path,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json"),
        headers=headers,
    )


def validation_errors_by_field(exc: RequestValidationError) -> dict[str, str]:
    """Map each invalid field (by its JSON name) to the first violation message."""
    errors: dict[str, str] = {}
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        field = ".".join(loc) or "body"
        errors.setdefault(field, err.get("msg", "Invalid value"))
    return errors


async def handle_invalid_argument(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    return error_response(400, str(exc), request.url.path)


async def handle_bad_credentials(request: Request, exc: BadCredentialsError) -> JSONResponse:
    return error_response(401, str(exc), request.url.path)


async def handle_authentication_required(
    request: Request, exc: AuthenticationRequiredError
) -> JSONResponse:
    return unauthorized_response(str(exc))


async def handle_access_denied(request: Request, exc: AccessDeniedError) -> JSONResponse:
    return error_response(403, "Access denied", request.url.path)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 405:
        message = "Method not allowed"
    else:
        message = exc.detail if isinstance(exc.detail, str) else HTTPStatus(exc.status_code).phrase
    return error_response(exc.status_code, message, request.url.path, headers=exc.headers)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content=validation_errors_by_field(exc))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = UNEXPECTED_ERROR_MESSAGE
    if request.app.state.settings.EXPOSE_ERROR_DETAILS:
        message = f"{UNEXPECTED_ERROR_MESSAGE}: {exc}"
    return error_response(500, message, request.url.path)


def register_exception_handlers(app: FastAPI) -> None:
    """Install every handler on app; one place decides the status code of each failure."""
    app.add_exception_handler(InvalidArgumentError, handle_invalid_argument)
    app.add_exception_handler(BadCredentialsError, handle_bad_credentials)
    app.add_exception_handler(AuthenticationRequiredError, handle_authentication_required)
    app.add_exception_handler(AccessDeniedError, handle_access_denied)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected)
