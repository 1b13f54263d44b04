"""Component Schemas — OpenAPI 3.0 component definitions for the API document.

Invariants:
    - Producto mirrors app.schemas.producto.Producto (id integer, nombre string)
    - Error and Mensaje mirror the JSON bodies the handlers actually send
"""

SCHEMA_PRODUCTO = {
    "type": "object",
    "properties": {
        "id": {
            "type": "integer",
            "format": "int64",
            "example": 1,
        },
        "nombre": {
            "type": "string",
            "example": "Producto 1",
        },
    },
}

SCHEMA_ERROR = {
    "type": "object",
    "properties": {
        "error": {"type": "string", "example": "Producto no encontrado"},
    },
}

SCHEMA_MENSAJE = {
    "type": "object",
    "properties": {
        "message": {
            "type": "string",
            "example": "Producto agregado al carrito",
        },
    },
}

COMPONENT_SCHEMAS = {
    "Producto": SCHEMA_PRODUCTO,
    "Error": SCHEMA_ERROR,
    "Mensaje": SCHEMA_MENSAJE,
}
