"""Docs Route — Swagger UI over the static OpenAPI document.

Invariants:
    - UI served at settings.docs_url, document at settings.openapi_url
    - Excluded from the document itself (include_in_schema=False)
    - docs_url and docs_url + "/" both serve the page

Design Decisions:
    - Router factory instead of module-level router: the path comes from Settings
"""

from fastapi import APIRouter
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse

from app.config import Settings


def create_docs_router(settings: Settings) -> APIRouter:
    router = APIRouter(tags=["docs"])

    @router.get(settings.docs_url, include_in_schema=False)
    @router.get(f"{settings.docs_url}/", include_in_schema=False)
    async def swagger_ui() -> HTMLResponse:
        return get_swagger_ui_html(
            openapi_url=settings.openapi_url,
            title=f"{settings.app_title} - Swagger UI",
        )

    return router
