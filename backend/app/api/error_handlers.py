"""Error Handlers — global exception handlers for the Tienda API.

Invariants:
    - TiendaError → its http_status with {"error": <message>}
    - RequestValidationError → 400 {"error": "Solicitud incorrecta"}
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (TiendaError), validation (Pydantic), catch-all (Exception)
    - Domain errors logged at the level their severity names: a 404 is INFO,
      a 400 is WARNING; neither is a fault
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import (
    INTERNAL_ERROR_MESSAGE, ErrorSeverity, SolicitudIncorrectaError, TiendaError,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_tienda_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_tienda_error_handler(app: FastAPI) -> None:

    @app.exception_handler(TiendaError)
    async def tienda_error_handler(request: Request, exc: TiendaError):
        """Handle all Tienda domain errors."""
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"TiendaError: {exc.message}",
            extra={
                "error_code": exc.code,
                "error_category": exc.category.value,
                "severity": exc.severity.value,
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Malformed request data is reported like a missing body."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        error = SolicitudIncorrectaError()
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
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
            content={"error": INTERNAL_ERROR_MESSAGE},
        )
