"""Estados observables de las pantallas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from mvvm_app.models.user import User


@dataclass(frozen=True, slots=True)
class Idle:
    """Todavía no se intentó ninguna carga."""


@dataclass(frozen=True, slots=True)
class Loading:
    """Hay una carga completa (página 1) en curso."""


@dataclass(frozen=True, slots=True)
class Success:
    """La última carga completa terminó bien; la lista puede estar vacía."""


@dataclass(frozen=True, slots=True)
class Error:
    """La última carga completa falló."""

    mensaje: str

    def __post_init__(self) -> None:
        if not self.mensaje:
            raise ValueError("El estado de error necesita un mensaje")


LoadState = Union[Idle, Loading, Success, Error]


@dataclass(frozen=True, slots=True)
class UserDetailRoute:
    """Destino de navegación hacia el detalle de un usuario."""

    usuario: User


__all__ = ["Error", "Idle", "LoadState", "Loading", "Success", "UserDetailRoute"]
