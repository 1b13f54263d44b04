"""Tienda API — FastAPI application factory and server entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TiendaError → {"error": <message>} JSON responses
    - OpenAPI document assembled once in create_app() from static definitions
      and served through the app.openapi override (never regenerated from routes)
    - Settings built once in main() and passed to create_app() and uvicorn.run()

Design Decisions:
    - Application factory over a module-level app: tests and the server each
      build their own instance from an explicit Settings object
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - FastAPI's built-in /docs, /redoc, /openapi.json disabled; the docs
      router serves Swagger UI at settings.docs_url instead
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import carrito, productos
from app.api.routes.docs import create_docs_router
from app.config import Settings, get_settings
from app.infrastructure.observability import setup_logging
from app.services.openapi_registry import build_openapi_document

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Servidor iniciado en el puerto {settings.port}")
    yield
    logger.info("Servidor detenido")


def create_app(settings: Settings) -> FastAPI:
    """Build a fully wired application for the given settings."""
    app = FastAPI(
        title=settings.app_title,
        description=settings.app_description,
        version=settings.app_version,
        openapi_url=settings.openapi_url,
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    document = build_openapi_document(settings)
    app.openapi = lambda: document

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(productos.router)
    app.include_router(carrito.router)
    app.include_router(create_docs_router(settings))

    register_error_handlers(app)
    return app


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
