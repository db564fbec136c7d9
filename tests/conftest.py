from __future__ import annotations

from typing import Iterable

import pytest

from mvvm_app.core.errors import FetchError
from mvvm_app.models.user import User


def make_user(user_id: int) -> User:
    return User(id=user_id, nombre=f"Usuario {user_id}", email=f"user{user_id}@example.com")


class ScriptedFetchUsers:
    """Caso de uso falso que responde en orden con listas o errores."""

    def __init__(self, respuestas: Iterable[list[User] | Exception] = ()) -> None:
        self.respuestas = list(respuestas)
        self.paginas: list[int] = []

    def ejecutar(self, pagina: int) -> list[User]:
        self.paginas.append(pagina)
        respuesta = self.respuestas.pop(0)
        if isinstance(respuesta, Exception):
            raise respuesta
        return respuesta


@pytest.fixture
def fetch_error() -> FetchError:
    return FetchError("No se pudo conectar al servicio: timed out")


class FakeResponse:
    """Respuesta de ``urlopen``: devuelve ``body`` o lo lanza al leer."""

    def __init__(self, body: bytes | Exception) -> None:
        self._body = body

    def read(self) -> bytes:
        if isinstance(self._body, Exception):
            raise self._body
        return self._body

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *exc_info) -> None:
        return None


def patch_urlopen(monkeypatch, resultado, llamadas: list | None = None) -> None:
    """Reemplaza ``urlopen`` del cliente: una excepción se lanza al abrir,
    una :class:`FakeResponse` se devuelve tal cual y los bytes se envuelven."""

    from mvvm_app.infrastructure import api_client as api_client_module

    def _fake_urlopen(request, timeout):
        if llamadas is not None:
            llamadas.append((request, timeout))
        if isinstance(resultado, Exception):
            raise resultado
        if isinstance(resultado, FakeResponse):
            return resultado
        return FakeResponse(resultado)

    monkeypatch.setattr(api_client_module, "urlopen", _fake_urlopen)
