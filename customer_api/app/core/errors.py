"""
Error kinds, their HTTP status codes and the exception handlers.

Handlers and services raise ``CustomerAPIError`` with an ``ErrorKind``;
the status code comes from ``STATUS_BY_KIND`` rather than being chosen
at each raise site.  ``install_error_handlers`` registers the handlers
that turn these errors, request validation failures and any other
uncaught exception into a JSON body of the form ``{"detail": "..."}``.
"""

import logging
from enum import Enum
from typing import Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    NOT_ACKNOWLEDGED = "not_acknowledged"
    STORE_FAILURE = "store_failure"
    UNEXPECTED = "unexpected"


STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.NOT_ACKNOWLEDGED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.STORE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class CustomerAPIError(Exception):
    """An error with a known kind and a message shown to the caller."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


class StoreError(CustomerAPIError):
    """Raised when the database driver fails."""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorKind.STORE_FAILURE, message)


def error_response(kind: ErrorKind, message: str) -> JSONResponse:
    return JSONResponse(status_code=STATUS_BY_KIND[kind], content={"detail": message})


def format_validation_errors(exc: RequestValidationError) -> str:
    """Render pydantic errors as ``"body.name: Field required; ..."``."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "Invalid request: " + "; ".join(parts) if parts else "Invalid request."


async def customer_api_error_handler(request: Request, exc: CustomerAPIError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.warning("%s %s failed (%s): %s", request.method, request.url.path, exc.kind.value, exc.message)
    return error_response(exc.kind, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(ErrorKind.BAD_REQUEST, format_validation_errors(exc))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s %s: %s", request.method, request.url.path, exc)
    return error_response(ErrorKind.UNEXPECTED, str(exc))


def install_error_handlers(app: FastAPI) -> None:
    """Register the error handlers on ``app``."""
    app.add_exception_handler(CustomerAPIError, customer_api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
