"""Error Handlers — global exception handlers shared by both services.

Invariants:
    - ServiceError → Error JSON {"code", "message"} with the error's HTTP status
    - RequestValidationError → 400 Error JSON with field-level details
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (ServiceError), validation (Pydantic), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from accounts.core.errors import ErrorSeverity, RequestDecodeError, ServiceError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_service_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_service_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        """Handle all domain/infrastructure errors."""
        log = (
            logger.warning
            if exc.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)
            else logger.error
        )
        log(
            f"ServiceError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle undecodable bodies and path parameters."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "code": status.HTTP_500_INTERNAL_SERVER_ERROR,
                "message": "An unexpected error occurred",
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build the Error body, naming the part of the request that failed."""
    errors = exc.errors()
    in_path = any(e["loc"] and e["loc"][0] == "path" for e in errors)
    message = (
        "Unable to convert the string into int."
        if in_path else "Unable to decode the request body."
    )
    return {
        **RequestDecodeError(message).to_response(),
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in errors
        ],
    }
