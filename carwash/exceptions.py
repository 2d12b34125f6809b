"""
Error taxonomy and FastAPI exception handlers.

Every failure leaves the API in the same envelope:
``{"success": false, "message": ..., "error_type": ..., "errors": [...]}``.
"""
import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class CarWashError(Exception):
    """Base class for errors reported to API clients."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_type = "error"
    default_message = "Request failed"

    def __init__(self, message: Optional[str] = None, errors: Optional[list[dict]] = None):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)


class ValidationFailed(CarWashError):
    error_type = "validation_failed"
    default_message = "Validation failed"


class Unauthorized(CarWashError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error_type = "unauthorized"
    default_message = "Authentication required"


class InvalidCredentials(CarWashError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error_type = "invalid_credentials"
    default_message = "Invalid username or password"


class NotFound(CarWashError):
    status_code = status.HTTP_404_NOT_FOUND
    error_type = "not_found"
    default_message = "Resource not found"


class Conflict(CarWashError):
    error_type = "conflict"
    default_message = "Resource conflicts with existing data"


class ReferenceNotFound(CarWashError):
    error_type = "reference_not_found"
    default_message = "Referenced resource not found"


class InternalStoreError(CarWashError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_type = "internal_store_error"
    default_message = "Internal server error"


def error_body(exc: CarWashError) -> dict[str, Any]:
    body: dict[str, Any] = {
        "success": False,
        "message": exc.message,
        "error_type": exc.error_type,
    }
    if exc.errors is not None:
        body["errors"] = exc.errors
    return body


def _render(exc: CarWashError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=error_body(exc))


def _field_name(loc: tuple) -> str:
    # Drop the "body"/"path"/"query" source marker
    parts = [str(part) for part in loc[1:]] if len(loc) > 1 else [str(part) for part in loc]
    return ".".join(parts)


def validation_errors(exc: RequestValidationError) -> list[dict]:
    """Flatten pydantic errors to one entry per violated field."""
    return [
        {
            "field": _field_name(tuple(error.get("loc", ()))),
            "message": error.get("msg", ""),
            "type": error.get("type", "value_error"),
        }
        for error in exc.errors()
    ]


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(CarWashError)
    async def carwash_error_handler(request: Request, exc: CarWashError) -> JSONResponse:
        if isinstance(exc, InternalStoreError):
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        else:
            logger.info(
                "%s %s rejected (%s): %s",
                request.method, request.url.path, exc.error_type, exc.message,
            )
        return _render(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = validation_errors(exc)
        logger.info("%s %s validation failed: %s", request.method, request.url.path, errors)
        return _render(ValidationFailed(errors=errors))

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        logger.warning(
            "%s %s violated a store constraint: %s", request.method, request.url.path, exc.orig
        )
        return _render(Conflict("Request conflicts with existing records"))

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.exception("%s %s store error", request.method, request.url.path, exc_info=exc)
        return _render(InternalStoreError())

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("%s %s unhandled error", request.method, request.url.path, exc_info=exc)
        return _render(InternalStoreError())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": str(exc.detail), "error_type": "http_error"},
            headers=getattr(exc, "headers", None),
        )
