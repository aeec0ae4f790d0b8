"""Error Handlers: global exception handlers for the Publish API.

Invariants:
    - PublishError → {"ok": false, "msg": ..., "error": {...}} with the error's http_status
    - StorageFault is logged with traceback; domain errors are logged at INFO (not faults)
    - RequestValidationError → 400 with field-level details
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (PublishError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py (import fan-out < 10)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import (
    INTERNAL_ERROR_MESSAGE, ErrorSeverity, PublishError, StorageFault,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_publish_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_publish_error_handler(app: FastAPI) -> None:
    """Register Publish domain/infrastructure error handler."""

    @app.exception_handler(PublishError)
    async def publish_error_handler(request: Request, exc: PublishError):
        """Handle all Publish domain/infrastructure errors."""
        extra = {"error_code": exc.code, "path": request.url.path}
        if isinstance(exc, StorageFault):
            logger.error(
                f"StorageFault: {exc.message}",
                extra={**extra, "operation": exc.operation},
                exc_info=exc,
            )
        else:
            logger.info(f"{type(exc).__name__}: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "ok": False,
                "msg": INTERNAL_ERROR_MESSAGE,
                "error": {
                    "code": "INTERNAL_ERROR",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "ok": False,
        "msg": "Invalid request data",
        "error": {
            "code": "VALIDATION_ERROR",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
