"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the service starts with no environment at all
    - get_settings() is cached (lru_cache) — single instance per process
    - server_url never ends with "/" (joined with paths in the OpenAPI document)
    - log_level is DEBUG or INFO, never stricter (startup message always printed)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Settings passed explicitly to create_app() and uvicorn.run() — no global app instance
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # API metadata
    app_title: str = "API de Ejemplo"
    app_description: str = "Documentación de la API de Ejemplo"
    app_version: str = "1.0.0"

    # Server
    host: str = "0.0.0.0"
    port: int = Field(3000, ge=1, le=65535)
    server_url: str = "http://localhost:3000"

    @field_validator("server_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # Documentation
    docs_url: str = "/api-docs"
    openapi_url: str = "/api-docs/openapi.json"

    # API
    cors_origins: list[str] = []

    # Observability
    # Bounded at INFO: the startup message is logged at INFO and must reach stdout
    log_level: Literal["DEBUG", "INFO"] = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    return Settings()
