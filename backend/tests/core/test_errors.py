"""Error hierarchy tests — codes, statuses, and public envelope."""

from app.core.errors import (
    ErrorCategory, ErrorSeverity, ProductoNoEncontradoError,
    SolicitudIncorrectaError, TiendaError,
)


def test_not_found_error_fields():
    err = ProductoNoEncontradoError("7")
    assert isinstance(err, TiendaError)
    assert err.code == "PRODUCTO_NO_ENCONTRADO"
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND
    assert err.http_status == 404
    assert err.to_response() == {"error": "Producto no encontrado"}


def test_bad_request_error_fields():
    err = SolicitudIncorrectaError()
    assert err.code == "SOLICITUD_INCORRECTA"
    assert err.category is ErrorCategory.VALIDATION
    assert err.severity is ErrorSeverity.WARNING
    assert err.http_status == 400
    assert err.to_response() == {"error": "Solicitud incorrecta"}


def test_str_is_message():
    assert str(SolicitudIncorrectaError()) == "Solicitud incorrecta"
