"""Product Catalog — the fixed, in-memory product set and its lookup rule.

Invariants:
    - PRODUCTOS is a tuple of frozen models, built once at import, never mutated
    - list_productos() always returns the same two products in the same order
    - find_producto() matches ONLY the exact string "1"

Design Decisions:
    - Lookup is an exact string match, not a search over PRODUCTOS.
      Product 2 is listed but unreachable by id; clients may depend on the
      404 for any other id, so the quirk is kept rather than fixed silently.
"""

from app.core.errors import ProductoNoEncontradoError
from app.schemas.producto import Producto

PRODUCTOS: tuple[Producto, ...] = (
    Producto(id=1, nombre="Producto 1"),
    Producto(id=2, nombre="Producto 2"),
)

_LOOKUP_ID = "1"


def list_productos() -> tuple[Producto, ...]:
    return PRODUCTOS


def find_producto(producto_id: str) -> Producto:
    """Return the product for producto_id, or raise ProductoNoEncontradoError.

    No numeric parsing: "01", " 1" and "2" all miss.
    """
    if producto_id == _LOOKUP_ID:
        return PRODUCTOS[0]
    raise ProductoNoEncontradoError(producto_id)
