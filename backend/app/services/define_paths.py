"""Path Definitions — OpenAPI 3.0 operations for the documented routes.

Invariants:
    - One entry per route registered in app.api.routes.productos / carrito
    - Every $ref points at a key of define_schemas.COMPONENT_SCHEMAS

Design Decisions:
    - /productos/{id} documents id as integer/int64 even though the handler
      matches the raw string; the document describes the intended contract
"""


def _ref(name: str) -> dict:
    return {"$ref": f"#/components/schemas/{name}"}


def _json(schema: dict) -> dict:
    return {"application/json": {"schema": schema}}


PATH_PRODUCTOS = {
    "get": {
        "summary": "Obtiene todos los productos",
        "description": "Obtén una lista de todos los productos disponibles.",
        "tags": ["productos"],
        "responses": {
            "200": {
                "description": "OK",
                "content": _json({"type": "array", "items": _ref("Producto")}),
            },
        },
    },
}

PATH_PRODUCTO_POR_ID = {
    "get": {
        "summary": "Obtiene un producto por ID",
        "description": "Obtén un producto específico utilizando su ID.",
        "tags": ["productos"],
        "parameters": [
            {
                "in": "path",
                "name": "id",
                "required": True,
                "description": "ID del producto a obtener.",
                "schema": {"type": "integer", "format": "int64"},
            },
        ],
        "responses": {
            "200": {
                "description": "OK",
                "content": _json(_ref("Producto")),
            },
            "404": {
                "description": "Producto no encontrado.",
                "content": _json(_ref("Error")),
            },
        },
    },
}

PATH_CARRITO = {
    "post": {
        "summary": "Agrega un producto al carrito",
        "description": "Agrega un producto al carrito de compras.",
        "tags": ["carrito"],
        "requestBody": {
            "required": True,
            "content": _json(_ref("Producto")),
        },
        "responses": {
            "200": {
                "description": "OK",
                "content": _json(_ref("Mensaje")),
            },
            "400": {
                "description": "Solicitud incorrecta.",
                "content": _json(_ref("Error")),
            },
        },
    },
}

PATHS = {
    "/productos": PATH_PRODUCTOS,
    "/productos/{id}": PATH_PRODUCTO_POR_ID,
    "/carrito": PATH_CARRITO,
}
