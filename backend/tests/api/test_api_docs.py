"""API docs — Swagger UI page and the static OpenAPI document it loads.

Tests cover:
    - GET /api-docs (and /api-docs/) serves Swagger UI pointing at /api-docs/openapi.json
    - The served document is the static one (3.0.0, servers, {id} path, int64 id)
    - The three documented routes are present; FastAPI defaults are disabled
    - Routes added after construction do not change the document
"""

from app.config import Settings
from app.services.openapi_registry import build_openapi_document


async def test_api_docs_serves_swagger_ui(client):
    res = await client.get("/api-docs")
    assert res.status_code == 200
    assert "text/html" in res.headers["content-type"]
    assert "swagger-ui" in res.text
    assert "/api-docs/openapi.json" in res.text


async def test_api_docs_trailing_slash_served_directly(client):
    res = await client.get("/api-docs/", follow_redirects=False)
    assert res.status_code == 200
    assert "swagger-ui" in res.text


async def test_served_document_is_the_static_document(client, settings):
    res = await client.get("/api-docs/openapi.json")
    assert res.status_code == 200
    assert res.json() == build_openapi_document(settings)


async def test_openapi_document_has_producto_schema(client):
    res = await client.get("/api-docs/openapi.json")
    producto = res.json()["components"]["schemas"]["Producto"]
    assert producto["type"] == "object"
    assert producto["properties"]["id"] == {
        "type": "integer", "format": "int64", "example": 1,
    }
    assert producto["properties"]["nombre"]["type"] == "string"


async def test_openapi_document_lists_public_routes(client):
    doc = (await client.get("/api-docs/openapi.json")).json()
    assert doc["openapi"] == "3.0.0"
    assert set(doc["paths"]) == {"/productos", "/productos/{id}", "/carrito"}
    assert doc["servers"] == [{"url": "http://localhost:3000"}]
    (param,) = doc["paths"]["/productos/{id}"]["get"]["parameters"]
    assert param["name"] == "id"
    assert param["schema"] == {"type": "integer", "format": "int64"}
    assert set(doc["components"]["schemas"]) == {"Producto", "Error", "Mensaje"}
    assert doc["components"]["schemas"]["Error"]["properties"]["error"]["type"] == "string"


async def test_document_not_regenerated_after_new_routes(app, client):
    """Routes added after construction never leak into the document."""
    @app.get("/extra")
    async def extra():
        return {}

    doc = (await client.get("/api-docs/openapi.json")).json()
    assert "/extra" not in doc["paths"]
    assert doc == build_openapi_document(Settings())


async def test_fastapi_default_docs_disabled(client):
    for path in ("/docs", "/redoc", "/openapi.json"):
        res = await client.get(path)
        assert res.status_code == 404
