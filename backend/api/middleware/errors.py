"""
Error translation for the API boundary.

Domain exceptions carry no HTTP knowledge; this module maps each base
class to a status code and renders the JSON body.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import (
    DevhubError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ConcurrentUpdateError,
    ExternalServiceError,
    InternalError,
)

logger = logging.getLogger(__name__)

# Checked in order; the first matching base wins
STATUS_BY_ERROR: list[tuple[type[DevhubError], int]] = [
    (ConcurrentUpdateError, 409),
    (NotFoundError, 404),
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 401),
    (ConflictError, 400),
    (ExternalServiceError, 400),
    (InternalError, 500),
]


def status_for(error: DevhubError) -> int:
    """HTTP status for a domain error."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return 500


async def handle_devhub_error(request: Request, exc: DevhubError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.details}")
        return JSONResponse(status_code=status_code, content={"msg": "Server error"})
    return JSONResponse(status_code=status_code, content=exc.to_dict())


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report body/path validation failures as 400 with one entry per field."""
    errors = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        message = error.get("msg", "Invalid value")
        # pydantic prefixes messages from custom validators
        message = message.removeprefix("Value error, ")
        errors.append({"msg": message, "param": ".".join(location)})
    return JSONResponse(status_code=400, content={"errors": errors})


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"msg": "Server error"})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the DevHub error handlers on app."""
    app.add_exception_handler(DevhubError, handle_devhub_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected_error)
