"""Casos de uso: una acción del usuario por clase."""

from __future__ import annotations

from typing import Protocol

from mvvm_app.core.validation import email_valido, password_valido
from mvvm_app.models.user import User


class UserSource(Protocol):
    def obtener_usuarios(self, pagina: int) -> list[User]: ...


class FetchUsersUseCase:
    """Obtiene una página de usuarios desde el repositorio."""

    def __init__(self, repository: UserSource) -> None:
        self._repository = repository

    def ejecutar(self, pagina: int) -> list[User]:
        return self._repository.obtener_usuarios(pagina)


class LoginUseCase:
    """Comprueba localmente que las credenciales tengan un formato aceptable.

    No contacta ningún servicio de autenticación.
    """

    def ejecutar(self, email: str, password: str) -> bool:
        return email_valido(email) and password_valido(password)


__all__ = ["FetchUsersUseCase", "LoginUseCase", "UserSource"]
