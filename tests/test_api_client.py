from __future__ import annotations

import io
import json
import socket
from http.client import IncompleteRead
from urllib.error import HTTPError, URLError

import pytest
from conftest import FakeResponse, patch_urlopen

from mvvm_app.core.errors import FetchError
from mvvm_app.infrastructure.api_client import APIClient


def test_get_decodes_json_with_given_decoder(monkeypatch) -> None:
    llamadas: list = []
    patch_urlopen(monkeypatch, json.dumps([{"n": 1}, {"n": 2}]).encode("utf-8"), llamadas)

    resultado = APIClient(timeout=3).obtener(
        "https://api.test/items", lambda datos: [item["n"] for item in datos]
    )

    assert resultado == [1, 2]
    request, timeout = llamadas[0]
    assert request.full_url == "https://api.test/items"
    assert request.get_method() == "GET"
    assert request.get_header("Accept") == "application/json"
    assert timeout == 3


def test_http_error_status_becomes_fetch_error(monkeypatch) -> None:
    error = HTTPError("https://api.test/items", 503, "Service Unavailable", {}, io.BytesIO(b""))
    patch_urlopen(monkeypatch, error)

    with pytest.raises(FetchError) as info:
        APIClient().obtener("https://api.test/items", lambda datos: datos)

    assert "503" in str(info.value)
    assert info.value.cause is error


def test_transport_error_becomes_fetch_error(monkeypatch) -> None:
    patch_urlopen(monkeypatch, URLError("connection refused"))

    with pytest.raises(FetchError, match="No se pudo conectar"):
        APIClient().obtener("https://api.test/items", lambda datos: datos)


def test_timeout_becomes_fetch_error(monkeypatch) -> None:
    patch_urlopen(monkeypatch, URLError(socket.timeout("timed out")))

    with pytest.raises(FetchError, match="timeout"):
        APIClient().obtener("https://api.test/items", lambda datos: datos)


def test_invalid_json_becomes_fetch_error(monkeypatch) -> None:
    patch_urlopen(monkeypatch, b"<html>no es json</html>")

    with pytest.raises(FetchError, match="JSON"):
        APIClient().obtener("https://api.test/items", lambda datos: datos)


def test_decoder_mismatch_becomes_fetch_error(monkeypatch) -> None:
    patch_urlopen(monkeypatch, b'{"sin": "lista"}')

    with pytest.raises(FetchError, match="Formato inesperado"):
        APIClient().obtener("https://api.test/items", lambda datos: datos["items"])


@pytest.mark.parametrize(
    "respuesta",
    [
        FakeResponse(b"\xff\xfe\xfa no es utf-8"),
        FakeResponse(IncompleteRead(b'[{"id": 1', 40)),
        FakeResponse(socket.timeout("timed out")),
        FakeResponse(ConnectionResetError("connection reset by peer")),
    ],
    ids=["cuerpo-no-utf8", "lectura-incompleta", "timeout-al-leer", "conexion-cortada"],
)
def test_failures_while_reading_the_body_become_fetch_error(monkeypatch, respuesta) -> None:
    patch_urlopen(monkeypatch, respuesta)

    with pytest.raises(FetchError):
        APIClient().obtener("https://api.test/items", lambda datos: datos)


def test_malformed_url_becomes_fetch_error() -> None:
    with pytest.raises(FetchError):
        APIClient().obtener("no-es-una-url", lambda datos: datos)
