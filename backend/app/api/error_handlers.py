"""Error Handlers — global exception handlers for the DDate profiles API.

Invariants:
    - Every error body has the DDateError envelope: code, message, category, severity,
      timestamp, context
    - RequestValidationError → 400 VALIDATION_ERROR naming the first offending field,
      same shape as ProfileValidationError raised from core, plus per-field details
    - Exception (catch-all) → 500 INTERNAL_ERROR, never leaks internal details
    - Client errors (4xx) log at warning, server errors at error

Design Decisions:
    - Three-layer handler: domain (DDateError), validation (Pydantic), catch-all (Exception)
    - Boundary failures are converted into DDateError instances, so one to_response()
      owns the wire format
    - Extracted from main.py: keeps the entry point to wiring only
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import (
    DDateError, ErrorCategory, ErrorSeverity, ProfileValidationError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _log_error(exc: DDateError, path: str) -> None:
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        f"{exc.code}: {exc.message}",
        extra={
            "error_code": exc.code, "path": path,
            "user_id": exc.context.user_id,
        },
    )


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(DDateError)
    async def domain_error_handler(request: Request, exc: DDateError):
        _log_error(exc, request.url.path)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Pydantic rejections reported like core validation failures."""
        details = _validation_details(exc)
        field = details[0]["field"] if details else "request"
        error = ProfileValidationError("Invalid request data", field=field)
        _log_error(error, request.url.path)
        body = error.to_response()
        body["error"]["details"] = details
        return JSONResponse(status_code=error.http_status, content=body)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        error = DDateError(
            "An unexpected error occurred", "INTERNAL_ERROR",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        )
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _validation_details(exc: RequestValidationError) -> list[dict]:
    """Per-field errors; `field` drops the body/query/path location prefix."""
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"][1:]) or str(e["loc"][0]),
            "location": str(e["loc"][0]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
