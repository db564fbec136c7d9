"""Implementaciones de repositorios para acceso a datos."""

from __future__ import annotations

from typing import Any

from mvvm_app.infrastructure.api_client import APIClient
from mvvm_app.infrastructure.endpoints import APIEndpoints, UsersPage
from mvvm_app.models.user import User


def _decodificar_usuarios(payload: Any) -> list[User]:
    if not isinstance(payload, list):
        raise TypeError(f"Se esperaba una lista de usuarios, llegó {type(payload).__name__}")

    usuarios: list[User] = []
    for datos in payload:
        if not isinstance(datos, dict):
            raise TypeError(f"Registro de usuario inválido: {datos!r}")
        identificador = datos["id"]
        nombre = datos["name"]
        email = datos["email"]
        if isinstance(identificador, bool) or not isinstance(identificador, int):
            raise TypeError(f"Identificador de usuario inválido: {identificador!r}")
        if not isinstance(nombre, str) or not isinstance(email, str):
            raise TypeError(f"Nombre o email inválidos en el usuario {identificador}")
        usuarios.append(User(id=identificador, nombre=nombre, email=email))
    return usuarios


class UserRepository:
    """Repositorio de usuarios basado en un cliente API."""

    def __init__(self, api_client: APIClient, endpoints: APIEndpoints) -> None:
        self._api_client = api_client
        self._endpoints = endpoints

    def obtener_usuarios(self, pagina: int) -> list[User]:
        """Devuelve los usuarios de la página indicada, en el orden recibido."""

        url = self._endpoints.url_para(UsersPage(pagina))
        return self._api_client.obtener(url, _decodificar_usuarios)


__all__ = ["UserRepository"]
