"""Producto Schemas — Pydantic models for catalog and cart payloads.

Invariants:
    - Producto is frozen: catalog constants can't be mutated by a handler
    - Field order (id, nombre) is the JSON key order clients see

Design Decisions:
    - Cart submissions are NOT validated against Producto: any non-empty body is accepted
"""

from pydantic import BaseModel, ConfigDict


class Producto(BaseModel):
    """A catalog product."""
    model_config = ConfigDict(frozen=True)

    id: int
    nombre: str


class MensajeResponse(BaseModel):
    message: str

