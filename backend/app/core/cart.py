"""Cart — stateless acknowledgement of cart submissions.

Invariants:
    - Nothing is stored: identical or different payloads all get the same answer
    - A payload is accepted iff it is truthy (absent, null, {}, [], "" are rejected)
"""

from typing import Any

from app.core.errors import SolicitudIncorrectaError

MENSAJE_AGREGADO = "Producto agregado al carrito"


def add_to_cart(payload: Any) -> str:
    """Acknowledge a cart submission or raise SolicitudIncorrectaError."""
    if not payload:
        raise SolicitudIncorrectaError()
    return MENSAJE_AGREGADO
