"""Lifespan — startup message printed to stdout on the configured port.

Tests cover:
    - Startup and shutdown messages logged by app.main
    - The startup line reaches stdout at every accepted log level
"""

import logging

import pytest

from app.config import Settings
from app.main import create_app


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


async def test_startup_logs_port(caplog, monkeypatch):
    monkeypatch.setattr("app.main.setup_logging", lambda *args, **kwargs: None)
    app = create_app(Settings(port=4321))
    with caplog.at_level(logging.INFO, logger="app.main"):
        async with app.router.lifespan_context(app):
            pass
    messages = [r.getMessage() for r in caplog.records]
    assert "Servidor iniciado en el puerto 4321" in messages
    assert "Servidor detenido" in messages


@pytest.mark.parametrize("level", ["DEBUG", "INFO"])
@pytest.mark.parametrize("fmt", ["json", "text"])
async def test_startup_line_reaches_stdout(capsys, restore_root_logger, level, fmt):
    app = create_app(Settings(port=4321, log_level=level, log_format=fmt))
    async with app.router.lifespan_context(app):
        pass
    assert "Servidor iniciado en el puerto 4321" in capsys.readouterr().out
