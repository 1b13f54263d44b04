"""Carrito Routes — stateless cart submission.

Invariants:
    - Any truthy JSON body → 200 acknowledgement; nothing is stored
    - Missing/empty body → SolicitudIncorrectaError (400)
    - Malformed JSON → RequestValidationError, also mapped to 400 globally
    - POST /carrito/ answers directly (no 307 redirect)
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body

from app.core.cart import add_to_cart
from app.schemas.producto import MensajeResponse

router = APIRouter(prefix="/carrito", tags=["carrito"])


@router.post("", response_model=MensajeResponse)
@router.post("/", response_model=MensajeResponse, include_in_schema=False)
async def agregar_al_carrito(producto: Annotated[Any, Body()] = None):
    return MensajeResponse(message=add_to_cart(producto))
