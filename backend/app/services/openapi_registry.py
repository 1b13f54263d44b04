"""OpenAPI Registry — assembles the static API document served under /api-docs.

Invariants:
    - build_openapi_document() never mutates PATHS or COMPONENT_SCHEMAS (deep copies)
    - Same settings → equal documents (no timestamps, no reflection)
    - Built once per application in create_app(); read-only afterwards

Design Decisions:
    - Explicit dicts over FastAPI route introspection: the document lists
      exactly the public routes, with the Producto request body that the
      handler itself does not enforce
"""

import copy
from typing import Any

from app.config import Settings
from app.services.define_paths import PATHS
from app.services.define_schemas import COMPONENT_SCHEMAS

OPENAPI_VERSION = "3.0.0"


def build_openapi_document(settings: Settings) -> dict[str, Any]:
    """Return a fresh OpenAPI document for the given settings."""
    return {
        "openapi": OPENAPI_VERSION,
        "info": {
            "title": settings.app_title,
            "version": settings.app_version,
            "description": settings.app_description,
        },
        "servers": [{"url": settings.server_url}],
        "paths": copy.deepcopy(PATHS),
        "components": {"schemas": copy.deepcopy(COMPONENT_SCHEMAS)},
    }
