"""
Custom exception handlers for FastAPI.
Every error leaves the API as ``{"message": "..."}`` so clients only have
one shape to read.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from starlette.exceptions import HTTPException
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from receipt_api.core.observability import capture_exception
from receipt_api.services.store import DuplicateEmailError, ReceiptNotFoundError, StoreError
from receipt_api.utils.helpers import format_validation_error

logger = logging.getLogger(__name__)

_STORE_ERROR_STATUS = {
    DuplicateEmailError: HTTP_409_CONFLICT,
    ReceiptNotFoundError: HTTP_404_NOT_FOUND,
}


def _message(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


def validation_exception_handler(request: Request, exc: RequestValidationError | ValidationError):
    """Map request and in-handler validation failures to 400."""
    message = format_validation_error(exc.errors())
    logger.info("[validation] %s %s: %s", request.method, request.url.path, message)
    return _message(HTTP_400_BAD_REQUEST, message)


def http_exception_handler(request: Request, exc: HTTPException):
    return _message(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


def store_exception_handler(request: Request, exc: StoreError):
    status_code = _STORE_ERROR_STATUS.get(type(exc), HTTP_400_BAD_REQUEST)
    logger.info("[store] %s %s rejected: %s", request.method, request.url.path, exc)
    return _message(status_code, str(exc))


def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("[error] unhandled exception on %s %s", request.method, request.url.path)
    capture_exception(exc)
    return _message(HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, validation_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(StoreError, store_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
