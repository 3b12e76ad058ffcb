"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to HTTP responses. Internal error text (store or cache failures)
is logged, never returned to the client.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.exceptions import AdminException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status; anything else is a 500
_ERROR_CODE_STATUS: dict[str, int] = {
    "RECORD_NOT_FOUND": 404,
    "RECORD_ALREADY_EXISTS": 409,
    "VALIDATION_ERROR": 400,
    "QUERY_PARAMS_ERROR": 400,
}

_INTERNAL_ERROR = {"error": "INTERNAL_ERROR", "message": "Internal server error"}


def _admin_exception_handler(request: Request, exc: AdminException) -> JSONResponse:
    """Return JSON from AdminException.to_dict() for mapped codes, else a generic 500."""
    status = _ERROR_CODE_STATUS.get(exc.error_code)
    if status is None:
        logger.error(
            "%s %s failed: %s (%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.error_code,
            extra={"details": exc.details},
        )
        return JSONResponse(status_code=500, content=_INTERNAL_ERROR)
    return JSONResponse(status_code=status, content=exc.to_dict())


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": jsonable_errors(exc),
        },
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Validation errors without the raw input context (may hold non-JSON values)."""
    return [
        {k: v for k, v in err.items() if k in ("type", "loc", "msg")}
        for err in exc.errors()
    ]


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500 with a generic message; the exception is logged."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=_INTERNAL_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: AdminException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(AdminException, _admin_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
