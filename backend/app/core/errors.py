"""Error Hierarchy — typed, categorized exceptions for all Tienda API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the public envelope {"error": <message>}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TiendaError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Public envelope stays a single "error" string: clients already depend on that shape
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity — selects the log level in the global handler."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"


class TiendaError(Exception):
    """Base exception for all Tienda API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the public REST error body."""
        return {"error": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class ProductoNoEncontradoError(TiendaError):
    """Lookup did not match any reachable product."""
    def __init__(self, producto_id: str):
        super().__init__(
            "Producto no encontrado",
            "PRODUCTO_NO_ENCONTRADO", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )
        self.producto_id = producto_id


class SolicitudIncorrectaError(TiendaError):
    """Request body missing, empty, or not decodable."""
    def __init__(self):
        super().__init__(
            "Solicitud incorrecta",
            "SOLICITUD_INCORRECTA", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )


INTERNAL_ERROR_MESSAGE = "Error interno del servidor"
