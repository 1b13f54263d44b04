"""Productos Routes — catalog listing and lookup.

Invariants:
    - GET /productos returns the full catalog in catalog order, every time
    - GET /productos/{id} returns product 1 only for the exact id "1", else 404
    - Trailing-slash forms answer directly (no 307 redirect)
"""

from fastapi import APIRouter

from app.core.catalog import find_producto, list_productos
from app.schemas.producto import Producto

router = APIRouter(prefix="/productos", tags=["productos"])


@router.get("", response_model=list[Producto])
@router.get("/", response_model=list[Producto], include_in_schema=False)
async def listar_productos():
    """List every product in the catalog."""
    return list(list_productos())


@router.get("/{producto_id}", response_model=Producto)
@router.get("/{producto_id}/", response_model=Producto, include_in_schema=False)
async def obtener_producto(producto_id: str):
    """Fetch one product. ProductoNoEncontradoError maps to 404 globally."""
    return find_producto(producto_id)
